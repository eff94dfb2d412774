# src/pdbnorm/core/services/record_extractor.py
"""Service for extracting ATOM and HETATM records from PDB text."""

import math
import re
from typing import List, Optional, Tuple

from ..domain.models.atom_record import AtomRecord

ATOM_TAG = "ATOM"
HETATM_TAG = "HETATM"

# (start, end) column spans, 0-indexed and end exclusive
RECORD_TYPE_COLUMNS = (0, 6)
ATOM_NAME_COLUMNS = (12, 16)
RESIDUE_NAME_COLUMNS = (17, 20)
CHAIN_ID_COLUMNS = (21, 22)
RESIDUE_SEQ_COLUMNS = (22, 26)
X_COLUMNS = (30, 38)
Y_COLUMNS = (38, 46)
Z_COLUMNS = (46, 54)
ELEMENT_COLUMNS = (76, 78)


def _column(line: str, span: Tuple[int, int]) -> str:
    """Return the trimmed text of a column span, or "" past the line end."""
    start, end = span
    if start >= len(line):
        return ""
    return line[start:end].strip()


_FLOAT_PREFIX = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"[+-]?\d+")


def _parse_float(text: str) -> float:
    """Parse the leading numeric prefix of text; NaN if there is none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return math.nan
    return float(match.group(0))


def _parse_int(text: str) -> Optional[int]:
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    return int(match.group(0))


class RecordExtractor:
    """Splits PDB text into primary atom and heteroatom record groups."""

    def extract(self, text: str) -> Tuple[List[AtomRecord], List[AtomRecord]]:
        """
        Extract ATOM and HETATM records from raw structure file text.

        Lines with any other record type are ignored. A record is kept only
        if its three coordinate fields hold finite numbers; lines failing
        that check are dropped without notice.

        Args:
            text: Complete contents of a PDB file

        Returns:
            Tuple of (atoms, hetatms), each in input line order
        """
        atoms: List[AtomRecord] = []
        hetatms: List[AtomRecord] = []

        for line in text.split("\n"):
            record_type = _column(line, RECORD_TYPE_COLUMNS)
            if record_type == ATOM_TAG:
                group = atoms
            elif record_type == HETATM_TAG:
                group = hetatms
            else:
                continue

            record = self.parse_line(line)
            if record is not None:
                group.append(record)

        return atoms, hetatms

    @staticmethod
    def parse_line(line: str) -> Optional[AtomRecord]:
        """
        Parse the fixed columns of a single ATOM/HETATM line.

        Returns:
            AtomRecord, or None if any coordinate is missing or not finite
        """
        x = _parse_float(_column(line, X_COLUMNS))
        y = _parse_float(_column(line, Y_COLUMNS))
        z = _parse_float(_column(line, Z_COLUMNS))
        if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(z)):
            return None

        return AtomRecord(
            x=x,
            y=y,
            z=z,
            element=_column(line, ELEMENT_COLUMNS),
            atom_name="".join(_column(line, ATOM_NAME_COLUMNS).split()),
            residue_name=_column(line, RESIDUE_NAME_COLUMNS),
            chain_id=_column(line, CHAIN_ID_COLUMNS),
            residue_seq=_parse_int(_column(line, RESIDUE_SEQ_COLUMNS)),
        )


def extract_records(text: str) -> Tuple[List[AtomRecord], List[AtomRecord]]:
    """Extract (atoms, hetatms) from PDB text with a default extractor."""
    return RecordExtractor().extract(text)
