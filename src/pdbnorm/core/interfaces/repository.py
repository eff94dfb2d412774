"""Abstract base class for repositories following the Repository Pattern."""

from abc import ABC, abstractmethod
from typing import Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    Generic repository interface for structure sources.

    Structure sources are read-only; write operations raise
    NotImplementedError unless a subclass supports them.
    """

    @abstractmethod
    def get(self, id: str) -> Optional[T]:
        """Retrieve an entity by ID, or None if it does not exist."""
        pass

    @abstractmethod
    def list(self) -> Dict[str, T]:
        """List all entities keyed by ID."""
        pass

    def create(self, entity: T) -> T:
        """Create a new entity."""
        raise NotImplementedError("Creation not supported")

    def update(self, entity: T) -> T:
        """Update an existing entity."""
        raise NotImplementedError("Updates not supported")

    def delete(self, id: str) -> None:
        """Delete an entity by ID."""
        raise NotImplementedError("Deletion not supported")
