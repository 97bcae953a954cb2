"""
Shared helpers.
"""

from lineage_tracker.utils.file_size import format_file_size, parse_file_size

__all__ = ["format_file_size", "parse_file_size"]
