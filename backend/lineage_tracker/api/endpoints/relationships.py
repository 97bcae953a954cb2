"""
Relationship API endpoints.

Handles dataset-to-model lineage links: listing, filtering, creation,
status updates and verification against the pinning service.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from lineage_tracker.api.deps import get_lineage_verifier, get_store, require_configured
from lineage_tracker.schemas import (
    RelationshipCreate,
    RelationshipResponse,
    RelationshipVerificationResponse,
    StatusUpdate,
)
from lineage_tracker.services.lineage_service import LineageVerifier, RelationshipNotFoundError
from lineage_tracker.storage import LineageStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[RelationshipResponse])
async def list_relationships(
    store: LineageStore = Depends(get_store),
) -> list[RelationshipResponse]:
    """
    List all relationships.
    """
    try:
        return list(store.list_relationships())
    except Exception:
        logger.exception("Failed to fetch relationships")
        raise HTTPException(status_code=500, detail="Failed to fetch relationships")


@router.get("/dataset/{dataset_id}", response_model=list[RelationshipResponse])
async def list_relationships_by_dataset(
    dataset_id: int,
    store: LineageStore = Depends(get_store),
) -> list[RelationshipResponse]:
    """
    List the relationships of one dataset.

    An unknown dataset yields an empty list.
    """
    try:
        return list(store.list_relationships_by_dataset(dataset_id))
    except Exception:
        logger.exception(f"Failed to fetch relationships for dataset {dataset_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch relationships by dataset")


@router.get("/model/{model_id}", response_model=list[RelationshipResponse])
async def list_relationships_by_model(
    model_id: int,
    store: LineageStore = Depends(get_store),
) -> list[RelationshipResponse]:
    """
    List the relationships of one model.

    An unknown model yields an empty list.
    """
    try:
        return list(store.list_relationships_by_model(model_id))
    except Exception:
        logger.exception(f"Failed to fetch relationships for model {model_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch relationships by model")


@router.post("", response_model=RelationshipResponse, status_code=201)
async def create_relationship(
    payload: RelationshipCreate,
    store: LineageStore = Depends(get_store),
) -> RelationshipResponse:
    """
    Record that a model was trained on a dataset.

    The dataset is checked before the model; the first missing one is
    reported with a 400.
    """
    try:
        if not store.get_dataset(payload.dataset_id):
            raise HTTPException(status_code=400, detail="Dataset not found")
        if not store.get_model(payload.model_id):
            raise HTTPException(status_code=400, detail="Model not found")
        relationship = store.create_relationship(payload)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to create relationship")
        raise HTTPException(status_code=500, detail="Failed to create relationship")
    logger.info(
        f"Linked dataset {relationship.dataset_id} to model {relationship.model_id} "
        f"(relationship {relationship.id})"
    )
    return relationship


@router.patch("/{relationship_id}/status", response_model=RelationshipResponse)
async def update_relationship_status(
    relationship_id: int,
    update: StatusUpdate,
    store: LineageStore = Depends(get_store),
) -> RelationshipResponse:
    """
    Update a relationship's status. No other field is mutable.
    """
    try:
        relationship = store.update_relationship_status(relationship_id, update.status)
    except Exception:
        logger.exception(f"Failed to update status of relationship {relationship_id}")
        raise HTTPException(status_code=500, detail="Failed to update relationship status")
    if not relationship:
        raise HTTPException(status_code=404, detail="Relationship not found")
    return relationship


@router.post("/{relationship_id}/verify", response_model=RelationshipVerificationResponse)
async def verify_relationship(
    relationship_id: int,
    store: LineageStore = Depends(get_store),
    verifier: LineageVerifier = Depends(get_lineage_verifier),
) -> RelationshipVerificationResponse:
    """
    Check that the dataset and model CIDs of a relationship are pinned.

    On success the relationship's status becomes "verified"; otherwise it
    is left unchanged.
    """
    require_configured(verifier.pinning)
    try:
        verified, relationship = await verifier.verify_relationship(store, relationship_id)
    except RelationshipNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception(f"Failed to verify relationship {relationship_id}")
        raise HTTPException(status_code=500, detail="Failed to verify relationship")
    return RelationshipVerificationResponse(verified=verified, relationship=relationship)
