import pytest

from helmkit.data.errors import AmbiguousNotationError, NotationLookupError, StructuralError
from helmkit.data.resolve import (
    filter_by_type,
    is_monomer_specific,
    list_monomer_references,
    total_monomer_count,
)
from helmkit.data.types import (
    MonomerGroup,
    MonomerList,
    MonomerUnit,
    Polymer,
    PolymerID,
    RNAUnit,
)


def test_resolve_rna_unit_into_fragments(resolver) -> None:
    monomers = resolver.resolve_concrete([RNAUnit("R(A)P")], "RNA")
    assert [m.monomer_id for m in monomers] == ["R", "A", "P"]


def test_counts_repeat_in_order(resolver) -> None:
    references = [MonomerUnit("A", count="2"), MonomerUnit("G")]
    monomers = resolver.resolve_concrete(references, "PEPTIDE")
    assert [m.monomer_id for m in monomers] == ["A", "A", "G"]


def test_list_resolves_to_repeated_block(resolver) -> None:
    block = MonomerList((MonomerUnit("A"), MonomerUnit("G", count="2")), count="2")
    monomers = resolver.resolve_concrete([block, MonomerUnit("C")], "PEPTIDE")
    assert "".join(m.monomer_id for m in monomers) == "AGGAGGC"


@pytest.mark.parametrize(
    "reference",
    [
        MonomerGroup(("A", "G")),
        MonomerUnit("A", count="0"),
        MonomerUnit("A", count="n"),
        MonomerUnit("A", count="1-5"),
        MonomerList((MonomerGroup(("A", "G")),)),
    ],
)
def test_extended_notation_is_rejected(resolver, reference) -> None:
    with pytest.raises(AmbiguousNotationError):
        resolver.resolve_concrete([MonomerUnit("G"), reference], "PEPTIDE")


def test_unknown_monomer_with_valid_smiles_is_ad_hoc(resolver) -> None:
    monomer = resolver.resolve_monomer("CHEM", "OCC")
    assert monomer.ad_hoc
    assert monomer.monomer_type == "Undefined"
    assert monomer.smiles == "CCO"


def test_unknown_monomer_with_invalid_structure_fails(resolver) -> None:
    with pytest.raises(NotationLookupError, match="not a valid structure"):
        resolver.resolve_monomer("PEPTIDE", "not-a-monomer(")


def test_list_monomers_ignores_counts(resolver) -> None:
    references = [MonomerUnit("A", count="n"), MonomerGroup(("G", "C"))]
    monomers = resolver.list_monomers(references, "PEPTIDE")
    assert [m.monomer_id for m in monomers] == ["A", "G", "C"]


def test_filter_by_type(rna, peptide) -> None:
    polymers = [rna("AU"), peptide, rna("G", polymer_id="RNA2")]
    assert [p.id for p in filter_by_type("RNA", polymers)] == ["RNA1", "RNA2"]
    assert filter_by_type("CHEM", polymers) == []
    assert len(list_monomer_references(polymers)) == 6


def test_total_monomer_count_and_specific_positions() -> None:
    polymer = Polymer(
        PolymerID.from_string("PEPTIDE1"),
        (MonomerUnit("A", count="3"), MonomerList((MonomerUnit("G"),))),
    )
    assert total_monomer_count(polymer) == 4
    assert is_monomer_specific(polymer, 0)
    assert not is_monomer_specific(polymer, 1)
    with pytest.raises(AmbiguousNotationError):
        total_monomer_count(polymer.with_elements((MonomerGroup(("A", "G")),)))


def test_total_monomer_count_expands_list_blocks() -> None:
    polymer = Polymer(
        PolymerID.from_string("RNA1"),
        (
            MonomerList((RNAUnit("R(A)P"), RNAUnit("R(U)P", count="2")), count="3"),
            RNAUnit("R(C)"),
        ),
    )
    assert total_monomer_count(polymer) == 10


@pytest.mark.parametrize("position", [-1, 2])
def test_is_monomer_specific_checks_position(position) -> None:
    polymer = Polymer(
        PolymerID.from_string("PEPTIDE1"),
        (MonomerUnit("A"), MonomerUnit("G")),
    )
    with pytest.raises(StructuralError):
        is_monomer_specific(polymer, position)
