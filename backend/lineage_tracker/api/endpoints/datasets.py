"""
Dataset API endpoints.

Handles dataset listing, retrieval, registration and status updates.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from lineage_tracker.api.deps import get_store
from lineage_tracker.schemas import DatasetCreate, DatasetResponse, StatusUpdate
from lineage_tracker.storage import LineageStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[DatasetResponse])
async def list_datasets(
    store: LineageStore = Depends(get_store),
) -> list[DatasetResponse]:
    """
    List all datasets in registration order.
    """
    try:
        return list(store.list_datasets())
    except Exception:
        logger.exception("Failed to fetch datasets")
        raise HTTPException(status_code=500, detail="Failed to fetch datasets")


@router.get("/{dataset_id}", response_model=DatasetResponse)
async def get_dataset(
    dataset_id: int,
    store: LineageStore = Depends(get_store),
) -> DatasetResponse:
    """
    Get a specific dataset by ID.
    """
    try:
        dataset = store.get_dataset(dataset_id)
    except Exception:
        logger.exception(f"Failed to fetch dataset {dataset_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch dataset")
    if not dataset:
        raise HTTPException(status_code=404, detail="Dataset not found")
    return dataset


@router.post("", response_model=DatasetResponse, status_code=201)
async def create_dataset(
    payload: DatasetCreate,
    store: LineageStore = Depends(get_store),
) -> DatasetResponse:
    """
    Register a dataset that has already been pinned.

    ``status`` defaults to "pending"; ``uploadedAt`` is set by the server.
    """
    try:
        dataset = store.create_dataset(payload)
    except Exception:
        logger.exception("Failed to create dataset")
        raise HTTPException(status_code=500, detail="Failed to create dataset")
    logger.info(f"Registered dataset {dataset.id} ({dataset.content_id})")
    return dataset


@router.patch("/{dataset_id}/status", response_model=DatasetResponse)
async def update_dataset_status(
    dataset_id: int,
    update: StatusUpdate,
    store: LineageStore = Depends(get_store),
) -> DatasetResponse:
    """
    Update a dataset's status. No other field is mutable.
    """
    try:
        dataset = store.update_dataset_status(dataset_id, update.status)
    except Exception:
        logger.exception(f"Failed to update status of dataset {dataset_id}")
        raise HTTPException(status_code=500, detail="Failed to update dataset status")
    if not dataset:
        raise HTTPException(status_code=404, detail="Dataset not found")
    return dataset
