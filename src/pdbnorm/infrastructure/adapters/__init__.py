"""Adapters for external structure sources."""

from .rcsb_adapter import RCSBAdapter, StructureFetchError, fetch_structure

__all__ = ["RCSBAdapter", "StructureFetchError", "fetch_structure"]
