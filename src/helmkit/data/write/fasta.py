"""Render resolved monomer lists as one-letter sequences.

RNA/DNA polymers resolve to sugar, base and linker monomers; only the bases
(``Branch`` monomers) contribute a letter.  Peptides contribute one letter
per monomer.  Monomers without a natural analog render as ``X``.
"""

from collections.abc import Iterable

from helmkit.data.types import Monomer

UNKNOWN_LETTER = "X"


def _letter(monomer: Monomer) -> str:
    return monomer.natural_analog or UNKNOWN_LETTER


def generate_fasta_from_rna(monomers: Iterable[Monomer]) -> str:
    return "".join(_letter(m) for m in monomers if m.monomer_type == "Branch")


def generate_fasta_from_peptide(monomers: Iterable[Monomer]) -> str:
    return "".join(_letter(m) for m in monomers)


def format_fasta(header: str, sequence: str, width: int = 60) -> str:
    """Format a sequence as a FASTA record with wrapped lines."""
    lines = [f">{header}"]
    lines.extend(sequence[i : i + width] for i in range(0, len(sequence), width))
    return "\n".join(lines) + "\n"
