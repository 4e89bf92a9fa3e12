import pytest

from helmkit.data.errors import SequenceFormatError
from helmkit.data.types import MonomerUnit, RNAUnit
from helmkit.data.write.fasta import format_fasta, generate_fasta_from_peptide, generate_fasta_from_rna


def test_read_rna(reader) -> None:
    polymer = reader.read_rna(" augc ").get_polymer(0)
    assert polymer.id == "RNA1"
    assert polymer.elements == (
        RNAUnit("R(A)P"),
        RNAUnit("R(U)P"),
        RNAUnit("R(G)P"),
        RNAUnit("R(C)"),
    )


def test_read_dna_uses_deoxyribose(reader) -> None:
    polymer = reader.read_rna("AT").get_polymer(0)
    assert polymer.elements == (RNAUnit("[dR](A)P"), RNAUnit("[dR](T)"))


@pytest.mark.parametrize("sequence", ["", "   ", "AUGZ", "AUT"])
def test_read_rna_rejects_bad_input(reader, sequence) -> None:
    with pytest.raises(SequenceFormatError):
        reader.read_rna(sequence)


def test_read_peptide(reader) -> None:
    polymer = reader.read_peptide("MKV").get_polymer(0)
    assert polymer.id == "PEPTIDE1"
    assert polymer.elements == (MonomerUnit("M"), MonomerUnit("K"), MonomerUnit("V"))
    with pytest.raises(SequenceFormatError):
        reader.read_peptide("MK1")


def test_render_rna_only_uses_bases(resolver, rna) -> None:
    monomers = resolver.polymer_monomers(rna("GAUC"))
    assert len(monomers) == 11
    assert generate_fasta_from_rna(monomers) == "GAUC"


def test_render_peptide(resolver, peptide) -> None:
    assert generate_fasta_from_peptide(resolver.polymer_monomers(peptide)) == "MKV"


def test_format_fasta_wraps_lines() -> None:
    assert format_fasta("RNA1", "AUGCA", width=2) == ">RNA1\nAU\nGC\nA\n"
