from .structure_repository import LocalStructureRepository, RemoteStructureRepository

__all__ = ["LocalStructureRepository", "RemoteStructureRepository"]
