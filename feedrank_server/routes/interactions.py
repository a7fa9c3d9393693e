"""Interaction endpoint: record one viewer action without waiting for the writes."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from feedrank import InteractionKind

from ..models import InteractionAccepted, InteractionRequest
from ..state import AppState, get_state

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=InteractionAccepted, status_code=202)
def record_interaction(request: InteractionRequest, state: AppState = Depends(get_state)):
    if request.session_id and state.get_session(request.session_id) is None:
        raise HTTPException(status_code=404, detail=f"Session not found: {request.session_id}")

    item = state.engine.resolve_item(request.content_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"Content not found: {request.content_id}")

    state.engine.record_interaction(request.user_id, item, request.kind)

    hidden = False
    if request.kind is InteractionKind.HIDE and request.session_id:
        hidden = state.hide(request.session_id, item.id)
    logger.debug("[interactions] %s on %s by %r accepted", request.kind.value, item.id, request.user_id)
    return InteractionAccepted(content_id=item.id, kind=request.kind, hidden=hidden)
