"""Extraction and normalization of PDB atom coordinates for rendering."""

from .core.domain.models import AtomRecord, BoundingBox, ParsedStructure
from .core.services import (
    TARGET_SIZE,
    GeometryNormalizer,
    RecordExtractor,
    StructureService,
    extract_records,
    normalize_records,
    parse_structure,
)
from .infrastructure.adapters.rcsb_adapter import (
    RCSBAdapter,
    StructureFetchError,
    fetch_structure,
)

__version__ = "0.1.0"

__all__ = [
    "AtomRecord",
    "BoundingBox",
    "ParsedStructure",
    "TARGET_SIZE",
    "GeometryNormalizer",
    "RecordExtractor",
    "StructureService",
    "extract_records",
    "normalize_records",
    "parse_structure",
    "RCSBAdapter",
    "StructureFetchError",
    "fetch_structure",
]
