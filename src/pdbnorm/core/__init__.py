"""Core domain models, interfaces and services for structure normalization."""

from .domain.models import AtomRecord, BoundingBox, ParsedStructure
from .interfaces.repository import Repository
from .services import (
    GeometryNormalizer,
    RecordExtractor,
    StructureService,
    extract_records,
    normalize_records,
    parse_structure,
)

__all__ = [
    "AtomRecord",
    "BoundingBox",
    "ParsedStructure",
    "Repository",
    "GeometryNormalizer",
    "RecordExtractor",
    "StructureService",
    "extract_records",
    "normalize_records",
    "parse_structure",
]
