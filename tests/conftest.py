from pathlib import Path

import pytest

TEST_DATA = Path(__file__).parent / "test_data" / "input"


def pdb_line(
    tag="ATOM",
    serial=1,
    name="CA",
    residue="ALA",
    chain="A",
    seq=1,
    x=0.0,
    y=0.0,
    z=0.0,
    element="C",
):
    """Format a fixed-column ATOM/HETATM line."""
    return (
        f"{tag:<6}{serial:>5} {name:<4} {residue:>3} {chain:1}{seq:>4}    "
        f"{x:>8.3f}{y:>8.3f}{z:>8.3f}{1.0:>6.2f}{0.0:>6.2f}          {element:>2}"
    )


@pytest.fixture
def fragment_path():
    return TEST_DATA / "1abc.pdb"


@pytest.fixture
def fragment_text(fragment_path):
    return fragment_path.read_text()
