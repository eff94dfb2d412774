"""Domain model classes."""

from .atom_record import AtomRecord
from .bounding_box import BoundingBox
from .parsed_structure import ParsedStructure

__all__ = [
    "AtomRecord",
    "BoundingBox",
    "ParsedStructure",
]
