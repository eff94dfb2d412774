"""Axis-aligned bounding box over a group of atom records."""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .atom_record import AtomRecord


@dataclass(frozen=True)
class BoundingBox:
    """Minimal axis-aligned box containing a set of points."""

    minimum: np.ndarray
    maximum: np.ndarray

    @classmethod
    def from_records(cls, records: Sequence[AtomRecord]) -> "BoundingBox":
        """
        Compute the per-axis minimum and maximum of a non-empty record group.

        Args:
            records: Atom records to enclose

        Returns:
            BoundingBox of the record positions

        Raises:
            ValueError: If records is empty
        """
        if not records:
            raise ValueError("Cannot compute a bounding box of an empty group")
        positions = np.array([r.position for r in records], dtype=np.float64)
        return cls(minimum=positions.min(axis=0), maximum=positions.max(axis=0))

    @property
    def size(self) -> np.ndarray:
        """Extent along x, y and z."""
        return self.maximum - self.minimum

    @property
    def center(self) -> np.ndarray:
        """Midpoint of the box."""
        return (self.minimum + self.maximum) / 2

    @property
    def max_extent(self) -> float:
        """Largest of the three axis extents; 0.0 for a degenerate box."""
        return float(self.size.max())
