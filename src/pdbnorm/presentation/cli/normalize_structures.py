"""Command-line interface for normalizing PDB structures to JSON."""

import argparse
import json
import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple

import requests
from tqdm import tqdm

from ...core.domain.models.parsed_structure import ParsedStructure
from ...core.services.geometry_normalizer import TARGET_SIZE, GeometryNormalizer
from ...core.services.structure_service import StructureService
from ...infrastructure.adapters.rcsb_adapter import StructureFetchError
from ...infrastructure.repositories.structure_repository import (
    RemoteStructureRepository,
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Extract ATOM/HETATM records and normalize their coordinates"
    )
    parser.add_argument("pdb_files", nargs="*", help="Local PDB files to process")
    parser.add_argument(
        "--pdb-id",
        dest="pdb_ids",
        action="append",
        default=[],
        help="Archive identifier to download (repeatable)",
    )
    parser.add_argument(
        "--output-dir",
        help="Directory for <name>.json outputs (default: print JSON to stdout)",
    )
    parser.add_argument(
        "--target-size",
        type=float,
        default=TARGET_SIZE,
        help="Largest bounding-box extent after scaling",
    )
    parser.add_argument("--indent", type=int, default=None, help="JSON indentation")
    parser.add_argument("--verbose", action="store_true", help="Show detailed output")
    return parser


def load_inputs(
    pdb_files: List[str], pdb_ids: List[str]
) -> List[Tuple[str, Optional[str], Optional[str]]]:
    """
    Pair every requested input as (name, local path, archive identifier).

    Names are file stems or identifiers; a repeated name gets a numeric
    suffix (x, x_2, x_3, ...) so every input keeps its own output.
    """
    requested = [(Path(path).stem, path, None) for path in pdb_files]
    requested.extend((pdb_id, None, pdb_id) for pdb_id in pdb_ids)

    inputs = []
    seen = set()
    for name, path, pdb_id in requested:
        unique = name
        suffix = 2
        while unique in seen:
            unique = f"{name}_{suffix}"
            suffix += 1
        seen.add(unique)
        inputs.append((unique, path, pdb_id))
    return inputs


def write_structure(
    structure: ParsedStructure, name: str, output_dir: str, indent: Optional[int]
) -> Path:
    """Write a normalized structure to <output_dir>/<name>.json."""
    output_path = Path(output_dir) / f"{name}.json"
    with open(output_path, "w") as f:
        json.dump(structure.to_dict(), f, indent=indent)
    return output_path


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for structure normalization CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    inputs = load_inputs(args.pdb_files, args.pdb_ids)
    if not inputs:
        parser.error("provide at least one PDB file or --pdb-id")

    service = StructureService(
        repository=RemoteStructureRepository(),
        normalizer=GeometryNormalizer(target_size=args.target_size),
    )

    if args.output_dir:
        os.makedirs(args.output_dir, exist_ok=True)

    results = {}
    failures = 0
    for name, path, pdb_id in tqdm(
        inputs, desc="Normalizing structures", disable=len(inputs) < 2
    ):
        if pdb_id is not None:
            try:
                structure = service.get_by_id(pdb_id)
            except (StructureFetchError, requests.RequestException):
                failures += 1
                continue
        else:
            try:
                with open(path, "r") as f:
                    text = f.read()
            except OSError as e:
                logger.error(f"Failed to read {path}: {e}")
                failures += 1
                continue
            structure = service.parse(text, identifier=name)

        logger.info(
            f"{name}: {len(structure.atoms)} atoms, {len(structure.hetatms)} hetatms"
        )
        if args.output_dir:
            output_path = write_structure(
                structure, name, args.output_dir, args.indent
            )
            logger.info(f"Wrote {output_path}")
        else:
            results[name] = structure.to_dict()

    if not args.output_dir:
        print(json.dumps(results, indent=args.indent))

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
