# src/pdbnorm/core/services/structure_service.py
"""Service composing record extraction and geometry normalization."""

from typing import Optional

from ..domain.models.parsed_structure import ParsedStructure
from ..interfaces.repository import Repository
from .geometry_normalizer import GeometryNormalizer
from .record_extractor import RecordExtractor


class StructureService:
    """
    Turns raw PDB text into normalized, render-ready record groups.

    Primary atoms and heteroatoms are normalized independently, each against
    its own bounding box.
    """

    def __init__(
        self,
        repository: Optional[Repository[str]] = None,
        extractor: Optional[RecordExtractor] = None,
        normalizer: Optional[GeometryNormalizer] = None,
    ):
        """
        Initialize service.

        Args:
            repository: Source of raw PDB text, required for get_by_id
            extractor: Record extractor, default instance if omitted
            normalizer: Geometry normalizer, default target size if omitted
        """
        self._repository = repository
        self._extractor = extractor or RecordExtractor()
        self._normalizer = normalizer or GeometryNormalizer()

    def parse(self, text: str, identifier: Optional[str] = None) -> ParsedStructure:
        """
        Extract and normalize both record groups of a structure file.

        Args:
            text: Raw PDB file contents
            identifier: Optional name carried on the result

        Returns:
            ParsedStructure with normalized atoms and hetatms
        """
        atoms, hetatms = self._extractor.extract(text)
        return ParsedStructure(
            atoms=self._normalizer.normalize(atoms),
            hetatms=self._normalizer.normalize(hetatms),
            identifier=identifier,
        )

    def get_by_id(self, id: str) -> ParsedStructure:
        """
        Load a structure's text from the repository and parse it.

        Args:
            id: Structure identifier

        Returns:
            Normalized structure

        Raises:
            ValueError: If no repository is configured or the ID is unknown
        """
        if self._repository is None:
            raise ValueError("No structure repository configured")
        text = self._repository.get(id)
        if text is None:
            raise ValueError(f"Structure with id {id} not found")
        return self.parse(text, identifier=id)


def parse_structure(text: str) -> ParsedStructure:
    """Extract and normalize the ATOM and HETATM groups of PDB text."""
    return StructureService().parse(text)
