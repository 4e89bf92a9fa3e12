import pytest

from helmkit.data import edit
from helmkit.data.errors import StructuralError
from helmkit.data.notation import Notation
from helmkit.data.types import MonomerUnit, Polymer, PolymerID, RNAUnit


def test_delete_sole_reference_fails() -> None:
    polymer = Polymer(PolymerID.from_string("PEPTIDE1"), (MonomerUnit("A"),))
    with pytest.raises(StructuralError, match="minimum one monomer"):
        edit.delete_monomer_reference(polymer, 0)
    assert polymer.elements == (MonomerUnit("A"),)


def test_delete_reduces_count_by_one(three_units) -> None:
    edited = edit.delete_monomer_reference(three_units, 1)
    assert edited.elements == (RNAUnit("R(A)P"), RNAUnit("R(G)"))
    assert len(three_units.elements) == 3


def test_delete_removes_first_equal_reference() -> None:
    a, b = MonomerUnit("A"), MonomerUnit("G", annotation="kept")
    polymer = Polymer(PolymerID.from_string("PEPTIDE1"), (a, b, a))
    edited = edit.delete_monomer_reference(polymer, 2)
    assert edited.elements == (b, a)


def test_delete_out_of_range(three_units) -> None:
    with pytest.raises(StructuralError):
        edit.delete_monomer_reference(three_units, 3)


def test_add_and_replace_reference(three_units) -> None:
    edited = edit.add_monomer_reference(three_units, 3, RNAUnit("R(C)"))
    assert len(edited.elements) == 4
    edited = edit.replace_monomer_reference(edited, 0, RNAUnit("[dR](A)P"))
    assert edited.elements[0] == RNAUnit("[dR](A)P")
    with pytest.raises(StructuralError):
        edit.add_monomer_reference(three_units, 5, RNAUnit("R(C)"))


def test_counts_and_reference_annotations(three_units) -> None:
    edited = edit.set_count(three_units, 0, "3")
    assert edited.elements[0].count == "3"
    assert isinstance(edited.elements[0], RNAUnit)
    edited = edit.reset_count(edited, 0)
    assert edited.elements[0].count == "1"
    edited = edit.set_reference_annotation(edited, 1, "modified")
    assert edited.elements[1].annotation == "modified"
    edited = edit.clear_reference_annotation(edited, 1)
    assert edited.elements[1].annotation is None


def test_polymer_annotation_concatenates(three_units) -> None:
    annotated = edit.add_polymer_annotation(three_units, "first")
    assert annotated.annotation == "first"
    annotated = edit.add_polymer_annotation(annotated, "second")
    assert annotated.annotation == "first | second"
    assert annotated.polymer_id == three_units.polymer_id
    assert annotated.elements == three_units.elements
    assert edit.remove_polymer_annotation(annotated).annotation is None


def test_commit_through_replace_polymer(three_units) -> None:
    notation = Notation(polymers=[three_units])
    idx = notation.index_of_polymer("RNA1")
    notation.replace_polymer(idx, edit.set_count(notation.get_polymer(idx), 2, "2"))
    assert notation.get_polymer(0).elements[2].count == "2"
