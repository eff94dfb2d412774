import pytest

from pdbnorm.infrastructure.adapters.rcsb_adapter import RCSBAdapter, StructureFetchError
from pdbnorm.infrastructure.repositories.structure_repository import (
    LocalStructureRepository,
    RemoteStructureRepository,
)

from conftest import pdb_line


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "2abc.pdb").write_text(pdb_line(x=1.0) + "\n")
    (tmp_path / "1abc.pdb").write_text(pdb_line(tag="HETATM") + "\n")
    (tmp_path / "notes.txt").write_text("not a structure")
    return tmp_path


class TestLocalStructureRepository:
    def test_get_reads_file(self, data_dir):
        repository = LocalStructureRepository(str(data_dir))
        assert repository.get("2abc").startswith("ATOM")

    def test_get_missing_returns_none(self, data_dir):
        assert LocalStructureRepository(str(data_dir)).get("3abc") is None

    def test_get_is_cached(self, data_dir):
        repository = LocalStructureRepository(str(data_dir))
        first = repository.get("1abc")
        (data_dir / "1abc.pdb").unlink()
        assert repository.get("1abc") == first

    def test_list_only_pdb_files(self, data_dir):
        structures = LocalStructureRepository(str(data_dir)).list()
        assert list(structures) == ["1abc", "2abc"]

    def test_writes_not_supported(self, data_dir):
        repository = LocalStructureRepository(str(data_dir))
        with pytest.raises(NotImplementedError):
            repository.create("ATOM")
        with pytest.raises(NotImplementedError):
            repository.update("ATOM")
        with pytest.raises(NotImplementedError):
            repository.delete("1abc")


class TestRemoteStructureRepository:
    def test_get_delegates_to_adapter(self, monkeypatch):
        monkeypatch.setattr(RCSBAdapter, "fetch", lambda self, id: f"text for {id}")
        assert RemoteStructureRepository().get("1CRN") == "text for 1CRN"

    def test_fetch_errors_propagate(self, monkeypatch):
        def fail(self, id):
            raise StructureFetchError(id, 404)

        monkeypatch.setattr(RCSBAdapter, "fetch", fail)
        with pytest.raises(StructureFetchError):
            RemoteStructureRepository().get("0XXX")

    def test_list_not_supported(self):
        with pytest.raises(NotImplementedError):
            RemoteStructureRepository().list()
