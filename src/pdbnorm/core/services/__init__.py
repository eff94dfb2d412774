"""Core business logic services."""

from .geometry_normalizer import TARGET_SIZE, GeometryNormalizer, normalize_records
from .record_extractor import RecordExtractor, extract_records
from .structure_service import StructureService, parse_structure

__all__ = [
    "TARGET_SIZE",
    "GeometryNormalizer",
    "normalize_records",
    "RecordExtractor",
    "extract_records",
    "StructureService",
    "parse_structure",
]
