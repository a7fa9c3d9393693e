"""Session endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ..models import CreateSessionRequest, SessionResponse
from ..state import AppState, get_state
from ..utils import to_session_response

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=SessionResponse, status_code=201)
def create_session(
    request: Optional[CreateSessionRequest] = None,
    state: AppState = Depends(get_state),
):
    user_id = request.user_id if request else None
    session = state.create_session(user_id)
    logger.info("[sessions] created %s for user_id=%r", session.session_id, user_id)
    return to_session_response(session)


@router.get("/{session_id}", response_model=SessionResponse)
def get_session(session_id: str, state: AppState = Depends(get_state)):
    session = state.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return to_session_response(session)
