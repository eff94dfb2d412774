# src/pdbnorm/infrastructure/repositories/structure_repository.py
"""Repository implementations serving raw PDB text."""

from typing import Dict, Optional
import os

from ...core.interfaces.repository import Repository
from ..adapters.rcsb_adapter import RCSBAdapter


class LocalStructureRepository(Repository[str]):
    """Repository for PDB files stored in a directory."""

    def __init__(self, data_dir: str):
        """
        Initialize repository with data directory.

        Args:
            data_dir: Directory containing <id>.pdb files
        """
        self._data_dir = data_dir
        self._cache: Dict[str, str] = {}

    def get(self, id: str) -> Optional[str]:
        """
        Read the text of <data_dir>/<id>.pdb.

        Args:
            id: Structure identifier (file stem)

        Returns:
            File contents, or None if the file does not exist
        """
        if id in self._cache:
            return self._cache[id]

        file_path = os.path.join(self._data_dir, f"{id}.pdb")
        if not os.path.exists(file_path):
            return None

        with open(file_path, "r") as f:
            text = f.read()
        self._cache[id] = text
        return text

    def list(self) -> Dict[str, str]:
        """
        Read every PDB file in the data directory.

        Returns:
            Dictionary mapping structure IDs to file contents
        """
        structures = {}
        for file_name in sorted(os.listdir(self._data_dir)):
            if file_name.endswith(".pdb"):
                id = os.path.splitext(file_name)[0]
                if (text := self.get(id)) is not None:
                    structures[id] = text
        return structures


class RemoteStructureRepository(Repository[str]):
    """Repository resolving identifiers against the RCSB archive."""

    def __init__(self, adapter: Optional[RCSBAdapter] = None):
        self._adapter = adapter or RCSBAdapter()

    def get(self, id: str) -> Optional[str]:
        """Download the PDB text for an identifier; fetch errors propagate."""
        return self._adapter.fetch(id)

    def list(self) -> Dict[str, str]:
        """The archive cannot be enumerated."""
        raise NotImplementedError("Listing the remote archive is not supported")
