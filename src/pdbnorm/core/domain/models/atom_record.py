#!/usr/bin/env python3
# src/pdbnorm/core/domain/models/atom_record.py

"""
Domain model representing one ATOM or HETATM record of a structure file.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class AtomRecord:
    """Represents a parsed atom with its position and residue context."""

    x: float
    y: float
    z: float
    element: str = ""
    atom_name: str = ""
    residue_name: str = ""
    chain_id: str = ""
    residue_seq: Optional[int] = None

    @property
    def position(self) -> Tuple[float, float, float]:
        """Cartesian coordinates as an (x, y, z) tuple."""
        return (self.x, self.y, self.z)

    def to_dict(self) -> Dict[str, Union[float, str, int, None]]:
        """
        Convert the record to the render-ready output shape.

        Returns:
            Dictionary with camelCase keys; residueSeq is None when the
            residue sequence columns did not hold an integer
        """
        return {
            "x": self.x,
            "y": self.y,
            "z": self.z,
            "element": self.element,
            "atomName": self.atom_name,
            "residueName": self.residue_name,
            "chainId": self.chain_id,
            "residueSeq": self.residue_seq,
        }
