"""Model representing the two record groups of a parsed structure file."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .atom_record import AtomRecord


@dataclass
class ParsedStructure:
    """Primary atoms and heteroatoms of one structure, in file order."""

    atoms: List[AtomRecord] = field(default_factory=list)
    hetatms: List[AtomRecord] = field(default_factory=list)
    identifier: Optional[str] = None

    def to_dict(self) -> Dict[str, List[Dict]]:
        """Serialize both groups to the render-ready output shape."""
        return {
            "atoms": [atom.to_dict() for atom in self.atoms],
            "hetatms": [atom.to_dict() for atom in self.hetatms],
        }
