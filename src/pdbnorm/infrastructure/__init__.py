"""Infrastructure implementations of core interfaces and adapters."""

from .adapters.rcsb_adapter import RCSBAdapter, StructureFetchError
from .repositories.structure_repository import (
    LocalStructureRepository,
    RemoteStructureRepository,
)

__all__ = [
    "RCSBAdapter",
    "StructureFetchError",
    "LocalStructureRepository",
    "RemoteStructureRepository",
]
