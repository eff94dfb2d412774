import json

import pytest

from pdbnorm.core.services.structure_service import StructureService, parse_structure
from pdbnorm.core.services.geometry_normalizer import GeometryNormalizer
from pdbnorm.infrastructure.repositories.structure_repository import (
    LocalStructureRepository,
)

from conftest import TEST_DATA, pdb_line


class TestParseStructure:
    """Tests for the extract-then-normalize pipeline."""

    def test_fixture_groups_normalized_independently(self, fragment_text):
        structure = parse_structure(fragment_text)

        assert structure.atoms[0].position == pytest.approx((-4.0, -2.0, 0.5))
        assert structure.atoms[1].position == pytest.approx((0.0, -2.0, 0.5))
        expected_hetatms = [(-4.0, -4.0, 0.0), (4.0, -4.0, 0.0), (0.0, 4.0, 0.0)]
        for hetatm, expected in zip(structure.hetatms, expected_hetatms):
            assert hetatm.position == pytest.approx(expected)

    def test_primary_group_unaffected_by_heteroatoms(self):
        atoms = [pdb_line(serial=1, x=10.0), pdb_line(serial=2, x=12.0)]
        ligand = [
            pdb_line(tag="HETATM", serial=3, x=-100.0, y=50.0),
            pdb_line(tag="HETATM", serial=4, x=300.0, z=-7.0),
        ]

        alone = parse_structure("\n".join(atoms))
        mixed = parse_structure("\n".join(ligand[:1] + atoms + ligand[1:]))

        assert mixed.atoms == alone.atoms
        assert len(mixed.hetatms) == 2

    def test_heteroatoms_unaffected_by_primary_group(self):
        ligand = [pdb_line(tag="HETATM", serial=1, y=1.0)]
        protein = [pdb_line(serial=i, x=float(i) * 3.0) for i in range(2, 40)]

        alone = parse_structure("\n".join(ligand))
        mixed = parse_structure("\n".join(protein + ligand))

        assert mixed.hetatms == alone.hetatms
        assert mixed.hetatms[0].position == (0.0, 0.0, 0.0)

    def test_empty_text(self):
        structure = parse_structure("")
        assert structure.atoms == []
        assert structure.hetatms == []
        assert structure.to_dict() == {"atoms": [], "hetatms": []}

    def test_output_shape(self):
        line = pdb_line(name="OXT", residue="GLY", chain="B", seq=7, element="O")
        payload = json.loads(json.dumps(parse_structure(line).to_dict()))

        assert payload["hetatms"] == []
        assert payload["atoms"] == [
            {
                "x": 0.0,
                "y": 0.0,
                "z": 0.0,
                "element": "O",
                "atomName": "OXT",
                "residueName": "GLY",
                "chainId": "B",
                "residueSeq": 7,
            }
        ]

    def test_invalid_residue_seq_serialized_as_null(self):
        line = pdb_line()
        payload = parse_structure(line[:22] + "    " + line[26:]).to_dict()
        assert payload["atoms"][0]["residueSeq"] is None

    def test_custom_normalizer(self):
        service = StructureService(normalizer=GeometryNormalizer(target_size=2.0))
        text = "\n".join([pdb_line(serial=1, x=0.0), pdb_line(serial=2, x=10.0)])
        structure = service.parse(text, identifier="tiny")

        assert [a.x for a in structure.atoms] == [-1.0, 1.0]
        assert structure.identifier == "tiny"


class TestGetById:
    """Tests for repository-backed lookups."""

    def test_loads_from_local_repository(self):
        service = StructureService(repository=LocalStructureRepository(str(TEST_DATA)))
        structure = service.get_by_id("1abc")

        assert structure.identifier == "1abc"
        assert len(structure.atoms) == 6
        assert len(structure.hetatms) == 3

    def test_unknown_id_raises(self):
        service = StructureService(repository=LocalStructureRepository(str(TEST_DATA)))
        with pytest.raises(ValueError, match="not found"):
            service.get_by_id("9zzz")

    def test_no_repository_raises(self):
        with pytest.raises(ValueError):
            StructureService().get_by_id("1abc")
