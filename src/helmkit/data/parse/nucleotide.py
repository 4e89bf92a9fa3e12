"""Nucleotide string parsing and nucleotide templates.

An RNA unit ID packs one or more nucleotides into a string such as
``R(A)P``, ``[dR](T)P`` or ``P``.  Single character monomer IDs are written
bare, longer ones inside square brackets, and a base is enclosed in
parentheses directly after its sugar.

``NucleotideParser`` splits such strings into ``Nucleotide`` objects:

1. **Tokenize** -- the string becomes a list of ``(monomer_id, is_branch)``
   fragments, e.g. ``R(A)P`` -> ``[("R", False), ("A", True), ("P", False)]``.
2. **Group** -- a backbone fragment followed by a branch is a sugar with its
   base; the next backbone fragment that is not itself followed by a base is
   the linker.  A lone fragment that the store knows as a phosphate is a
   linker-only nucleotide (a 5' terminal phosphate).

``NucleotideFactory`` holds the symbol -> notation templates and exposes the
reverse map used to render nucleotide sequences.
"""

from typing import Optional

from helmkit.data import const
from helmkit.data.errors import NotationLookupError
from helmkit.data.monomers import MonomerStore
from helmkit.data.types import Nucleotide


def _strip_brackets(monomer_id: str) -> str:
    if monomer_id.startswith("[") and monomer_id.endswith("]"):
        return monomer_id[1:-1]
    return monomer_id


def split_fragments(monomer_id: str) -> list[tuple[str, bool]]:  # noqa: C901
    """Tokenize a nucleotide string.

    Parameters
    ----------
    monomer_id : str
        The nucleotide string, e.g. ``"[dR](T)P"``.

    Returns
    -------
    list[tuple[str, bool]]
        ``(monomer_id, is_branch)`` pairs in written order.

    Raises
    ------
    NotationLookupError
        If the string is malformed.

    """
    fragments = []
    pos = 0
    while pos < len(monomer_id):
        char = monomer_id[pos]
        if char == "(":
            end = monomer_id.find(")", pos)
            if end == -1 or not fragments or fragments[-1][1]:
                msg = f"Malformed nucleotide {monomer_id}: misplaced base at {pos}"
                raise NotationLookupError(msg)
            base = _strip_brackets(monomer_id[pos + 1 : end])
            if not base:
                msg = f"Malformed nucleotide {monomer_id}: empty base"
                raise NotationLookupError(msg)
            fragments.append((base, True))
            pos = end + 1
        elif char == "[":
            end = monomer_id.find("]", pos)
            if end == -1 or end == pos + 1:
                msg = f"Malformed nucleotide {monomer_id}: unclosed bracket at {pos}"
                raise NotationLookupError(msg)
            fragments.append((monomer_id[pos + 1 : end], False))
            pos = end + 1
        elif char.isalnum():
            fragments.append((char, False))
            pos += 1
        else:
            msg = f"Malformed nucleotide {monomer_id}: unexpected '{char}' at {pos}"
            raise NotationLookupError(msg)
    return fragments


class NucleotideParser:
    """Split RNA unit IDs into nucleotides."""

    def __init__(self, store: MonomerStore) -> None:
        self.store = store

    def _is_linker(self, monomer_id: str) -> bool:
        monomer = self.store.get("RNA", monomer_id)
        return monomer is not None and monomer.natural_analog == const.linker

    def _build(self, sugar: Optional[str], base: Optional[str], linker: Optional[str]) -> Nucleotide:
        phosphate = self.store.get("RNA", linker) if linker is not None else None
        return Nucleotide(sugar=sugar, base=base, linker=linker, phosphate=phosphate)

    def fragments(self, monomer_id: str) -> list[str]:
        """Return the monomer IDs of a nucleotide string in written order."""
        return [fragment for fragment, _ in split_fragments(monomer_id)]

    def parse(self, monomer_id: str) -> list[Nucleotide]:
        """Parse a nucleotide string into its nucleotides.

        Parameters
        ----------
        monomer_id : str
            The RNA unit ID, e.g. ``"R(A)PR(C)P"``.

        Returns
        -------
        list[Nucleotide]
            The nucleotides in written order.

        Raises
        ------
        NotationLookupError
            If the string is malformed or empty.

        """
        fragments = split_fragments(monomer_id)
        if not fragments:
            msg = "Nucleotide can not be read from an empty string"
            raise NotationLookupError(msg)

        def followed_by_base(idx: int) -> bool:
            return idx + 1 < len(fragments) and fragments[idx + 1][1]

        nucleotides = []
        idx = 0
        while idx < len(fragments):
            fragment, _ = fragments[idx]
            if followed_by_base(idx):
                sugar, base = fragment, fragments[idx + 1][0]
                idx += 2
            elif self._is_linker(fragment):
                nucleotides.append(self._build(None, None, fragment))
                idx += 1
                continue
            else:
                sugar, base = fragment, None
                idx += 1

            linker = None
            if idx < len(fragments) and not followed_by_base(idx):
                linker = fragments[idx][0]
                idx += 1
            nucleotides.append(self._build(sugar, base, linker))
        return nucleotides


class NucleotideFactory:
    """Nucleotide templates keyed by symbol."""

    def __init__(self, templates: Optional[dict[str, str]] = None) -> None:
        self._templates = dict(const.nucleotide_templates if templates is None else templates)

    def templates(self) -> dict[str, str]:
        return dict(self._templates)

    def reverse_template_map(self) -> dict[str, str]:
        """Return the notation -> symbol map.  The first symbol wins on duplicates."""
        reverse: dict[str, str] = {}
        for symbol, notation in self._templates.items():
            reverse.setdefault(notation, symbol)
        return reverse
