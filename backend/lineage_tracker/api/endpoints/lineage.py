"""
Lineage verification endpoints.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from lineage_tracker.api.deps import get_lineage_verifier, require_configured
from lineage_tracker.schemas import LineageVerifyRequest, LineageVerifyResponse
from lineage_tracker.services.lineage_service import LineageVerifier

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/verify", response_model=LineageVerifyResponse)
async def verify_lineage(
    request: LineageVerifyRequest,
    verifier: LineageVerifier = Depends(get_lineage_verifier),
) -> LineageVerifyResponse:
    """
    Check that the dataset, model and optional processing CIDs are pinned.

    This confirms presence only; it does not prove the model derives from
    the dataset.
    """
    require_configured(verifier.pinning)
    try:
        verified = await verifier.verify_lineage(
            request.dataset_cid,
            request.processing_cid,
            request.model_cid,
        )
    except Exception:
        logger.exception("Failed to verify lineage")
        raise HTTPException(status_code=500, detail="Failed to verify lineage")
    return LineageVerifyResponse(verified=verified)
