"""Read plain one-letter sequences into notations.

The reader converts a raw sequence into a ``Notation`` holding a single
polymer:

- ``read_rna``     -- ``"AUGC"`` -> ``RNA1{R(A)P.R(U)P.R(G)P.R(C)}``.  A
  sequence containing ``T`` is read as DNA and uses the deoxyribose sugar.
  The 3' terminal nucleotide carries no linker.
- ``read_peptide`` -- ``"MKV"`` -> ``PEPTIDE1{M.K.V}``.

Whitespace is removed and letters are upper-cased before reading.
"""

from helmkit.data import const
from helmkit.data.errors import SequenceFormatError
from helmkit.data.notation import Notation
from helmkit.data.types import MonomerUnit, Polymer, PolymerID, RNAUnit, format_monomer_id


def _clean(sequence: str) -> str:
    clean = "".join(str(sequence).split()).upper()
    if not clean:
        msg = "Sequence is empty"
        raise SequenceFormatError(msg)
    return clean


class SequenceReader:
    """Build single-polymer notations from one-letter sequences."""

    def read_rna(self, sequence: str, polymer_id: str = "RNA1") -> Notation:
        """Read an RNA or DNA sequence.

        Parameters
        ----------
        sequence : str
            One-letter nucleotide sequence.
        polymer_id : str
            ID of the created polymer.

        Returns
        -------
        Notation
            A notation holding the strand.

        Raises
        ------
        SequenceFormatError
            If the sequence is empty, mixes U and T, or holds other letters.

        """
        seq = _clean(sequence)
        is_dna = "T" in seq
        alphabet = const.dna_letters if is_dna else const.rna_letters
        invalid = sorted(set(seq) - alphabet)
        if invalid:
            msg = f"Invalid nucleotide(s) {', '.join(invalid)} in sequence {sequence}"
            raise SequenceFormatError(msg)

        sugar = format_monomer_id(const.dna_sugar if is_dna else const.rna_sugar)
        elements = []
        for idx, base in enumerate(seq):
            linker = const.linker if idx < len(seq) - 1 else ""
            elements.append(RNAUnit(f"{sugar}({base}){linker}"))

        polymer = Polymer(PolymerID.from_string(polymer_id), tuple(elements))
        return Notation(polymers=[polymer])

    def read_peptide(self, sequence: str, polymer_id: str = "PEPTIDE1") -> Notation:
        """Read a one-letter amino acid sequence."""
        seq = _clean(sequence)
        invalid = sorted(set(seq) - const.prot_letters)
        if invalid:
            msg = f"Invalid amino acid(s) {', '.join(invalid)} in sequence {sequence}"
            raise SequenceFormatError(msg)

        elements = tuple(MonomerUnit(letter) for letter in seq)
        return Notation(polymers=[Polymer(PolymerID.from_string(polymer_id), elements)])
