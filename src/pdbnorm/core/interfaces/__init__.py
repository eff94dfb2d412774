"""Abstract interfaces implemented by the infrastructure layer."""

from .repository import Repository

__all__ = ["Repository"]
