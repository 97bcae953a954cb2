"""
Dataset Lineage Tracker backend.

This package provides the FastAPI backend for recording lineage between
AI training datasets and models whose payloads are pinned on IPFS/Filecoin.
"""

__version__ = "1.0.0"
