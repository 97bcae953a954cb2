"""
Dashboard aggregates.

Computes the counts shown on the dashboard from the three collections.
"""

from lineage_tracker.schemas import DashboardStats
from lineage_tracker.services.lineage_service import VERIFIED_STATUS
from lineage_tracker.storage import LineageStore
from lineage_tracker.utils.file_size import parse_file_size

GIGABYTE = 1024 ** 3


def format_storage_used(sizes: list[str]) -> str:
    """
    Sum human-readable sizes and express the total in GB.

    Unparseable sizes are skipped.
    """
    if not sizes:
        return "0 GB"
    total = sum(parse_file_size(size) or 0 for size in sizes)
    return f"{total / GIGABYTE:.1f} GB"


def compute_dashboard_stats(store: LineageStore) -> DashboardStats:
    """Build dashboard aggregates from the store."""
    datasets = store.list_datasets()
    models = store.list_models()
    relationships = store.list_relationships()

    return DashboardStats(
        total_datasets=len(datasets),
        linked_models=len(models),
        verified_lineages=sum(1 for r in relationships if r.status == VERIFIED_STATUS),
        storage_used=format_storage_used([d.size for d in datasets]),
    )
