"""Poster clickbait analysis endpoint."""

from fastapi import APIRouter, Depends

from feedrank import ClickbaitAnalysis

from ..models import ClickbaitRequest
from ..state import AppState, get_state

router = APIRouter()


@router.post("/clickbait", response_model=ClickbaitAnalysis)
def analyze_clickbait(request: ClickbaitRequest, state: AppState = Depends(get_state)):
    return state.engine.analyze(request.image_url)
