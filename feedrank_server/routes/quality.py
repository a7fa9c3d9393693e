"""Quality refresh endpoint."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from ..models import QualityRefreshRequest, QualityRefreshResponse
from ..state import AppState, get_state

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/refresh", response_model=QualityRefreshResponse)
def refresh_quality(
    request: Optional[QualityRefreshRequest] = None,
    state: AppState = Depends(get_state),
):
    content_ids = request.content_ids if request else None
    updated = state.engine.refresh_quality(content_ids)
    logger.info("[quality] refreshed %d items", updated)
    return QualityRefreshResponse(updated=updated)
