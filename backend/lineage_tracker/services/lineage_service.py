"""
Lineage verification service.

Confirms that the content identifiers making up a dataset-to-model
lineage are all pinned. This is an existence check only: it does not
prove that the model's artifact was derived from the dataset's content.
"""

import logging
from typing import Optional

from lineage_tracker.schemas import RelationshipResponse
from lineage_tracker.services.lighthouse_service import LighthouseService, LighthouseServiceError
from lineage_tracker.storage import LineageStore

logger = logging.getLogger(__name__)

VERIFIED_STATUS = "verified"


class RelationshipNotFoundError(Exception):
    """Raised when verifying a relationship id that does not exist."""
    pass


class LineageVerifier:
    """
    Checks lineage identifiers against the pinning service.

    Attributes:
        pinning: Client used for existence checks.
    """

    def __init__(self, pinning: LighthouseService):
        self.pinning = pinning

    async def verify_lineage(
        self,
        dataset_cid: str,
        processing_cid: Optional[str],
        model_cid: str,
    ) -> bool:
        """
        Return True only if every given identifier is pinned.

        Identifiers are checked in the order dataset, model, processing
        step, stopping at the first one that does not resolve. A pinning
        service failure counts as not verified.

        Args:
            dataset_cid: Dataset content identifier.
            processing_cid: Optional processing step identifier.
            model_cid: Model content identifier.

        Returns:
            True if all present identifiers exist.
        """
        cids = [dataset_cid, model_cid]
        if processing_cid:
            cids.append(processing_cid)

        try:
            for cid in cids:
                if not await self.pinning.exists(cid):
                    logger.info(f"Lineage check failed: {cid} not found")
                    return False
        except LighthouseServiceError as e:
            logger.error(f"Failed to verify lineage: {e}")
            return False

        return True

    async def verify_relationship(
        self,
        store: LineageStore,
        relationship_id: int,
    ) -> tuple[bool, RelationshipResponse]:
        """
        Verify a stored relationship and mark it verified on success.

        Args:
            store: Store holding the relationship and its endpoints.
            relationship_id: Relationship to verify.

        Returns:
            Tuple of (verified, relationship after any status change).

        Raises:
            RelationshipNotFoundError: If the relationship, its dataset or
                its model does not exist.
        """
        relationship = store.get_relationship(relationship_id)
        if not relationship:
            raise RelationshipNotFoundError("Relationship not found")

        dataset = store.get_dataset(relationship.dataset_id)
        model = store.get_model(relationship.model_id)
        if not dataset or not model:
            raise RelationshipNotFoundError("Relationship references a missing dataset or model")

        verified = await self.verify_lineage(dataset.content_id, None, model.content_id)
        if verified and relationship.status != VERIFIED_STATUS:
            relationship = store.update_relationship_status(relationship_id, VERIFIED_STATUS) or relationship
        return verified, relationship
