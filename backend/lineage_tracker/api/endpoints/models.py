"""
Model API endpoints.

Handles listing, retrieval and registration of trained models.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from lineage_tracker.api.deps import get_store
from lineage_tracker.schemas import ModelCreate, ModelResponse
from lineage_tracker.storage import LineageStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[ModelResponse])
async def list_models(
    store: LineageStore = Depends(get_store),
) -> list[ModelResponse]:
    """
    List all models in registration order.
    """
    try:
        return list(store.list_models())
    except Exception:
        logger.exception("Failed to fetch models")
        raise HTTPException(status_code=500, detail="Failed to fetch models")


@router.get("/{model_id}", response_model=ModelResponse)
async def get_model(
    model_id: int,
    store: LineageStore = Depends(get_store),
) -> ModelResponse:
    """
    Get a specific model by ID.
    """
    try:
        model = store.get_model(model_id)
    except Exception:
        logger.exception(f"Failed to fetch model {model_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch model")
    if not model:
        raise HTTPException(status_code=404, detail="Model not found")
    return model


@router.post("", response_model=ModelResponse, status_code=201)
async def create_model(
    payload: ModelCreate,
    store: LineageStore = Depends(get_store),
) -> ModelResponse:
    """
    Register a trained model.
    """
    try:
        model = store.create_model(payload)
    except Exception:
        logger.exception("Failed to create model")
        raise HTTPException(status_code=500, detail="Failed to create model")
    logger.info(f"Registered model {model.id} ({model.content_id})")
    return model
