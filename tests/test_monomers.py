from helmkit.data.monomers import MonomerStore
from helmkit.data.types import Monomer, MonomerLibrary


def test_default_store(store) -> None:
    assert store.has_monomer("RNA", "dR")
    assert store.get("RNA", "P").alternate_id == "P"
    assert store.get("PEPTIDE", "W").natural_analog == "W"
    assert store.get("PEPTIDE", "dR") is None
    assert len(store.monomers("PEPTIDE")) == 20


def test_load_library(tmp_path) -> None:
    path = tmp_path / "monomers.json"
    MonomerLibrary([Monomer("Aha", "PEPTIDE", "Backbone", natural_analog="M")]).dump(path)
    store = MonomerStore.load(path)
    assert len(store) == 1
    assert store.get("PEPTIDE", "Aha").natural_analog == "M"


def test_add_monomer_overwrites() -> None:
    store = MonomerStore()
    store.add_monomer(Monomer("X1", "CHEM", "Undefined"))
    store.add_monomer(Monomer("X1", "CHEM", "Undefined", smiles="CC"))
    assert len(store) == 1
    assert store.get("CHEM", "X1").smiles == "CC"
