# src/pdbnorm/core/services/geometry_normalizer.py
"""Service for centering and scaling atom coordinates before rendering."""

from dataclasses import replace
from typing import List

import numpy as np

from ..domain.models.atom_record import AtomRecord
from ..domain.models.bounding_box import BoundingBox

TARGET_SIZE = 8.0


class GeometryNormalizer:
    """
    Maps a record group into a canonical coordinate space.

    The group is centered on its bounding-box midpoint and scaled uniformly
    so that its largest bounding-box extent equals ``target_size``.
    """

    def __init__(self, target_size: float = TARGET_SIZE):
        """
        Initialize normalizer.

        Args:
            target_size: Length of the largest axis extent after scaling
        """
        self.target_size = target_size

    def scale_for(self, box: BoundingBox) -> float:
        """Uniform scale factor for a box; 1.0 when the box has no extent."""
        max_extent = box.max_extent
        if max_extent > 0:
            return self.target_size / max_extent
        return 1.0

    def normalize(self, records: List[AtomRecord]) -> List[AtomRecord]:
        """
        Center and scale a record group.

        Args:
            records: Atom records of a single group

        Returns:
            New records in the same order with transformed coordinates and
            unchanged non-geometric fields. An empty group is returned as is.
        """
        if not records:
            return records

        box = BoundingBox.from_records(records)
        center = box.center
        scale = self.scale_for(box)

        positions = np.array([r.position for r in records], dtype=np.float64)
        transformed = (positions - center) * scale

        return [
            replace(record, x=float(x), y=float(y), z=float(z))
            for record, (x, y, z) in zip(records, transformed)
        ]


def normalize_records(records: List[AtomRecord]) -> List[AtomRecord]:
    """Normalize a record group to the default target size."""
    return GeometryNormalizer().normalize(records)
