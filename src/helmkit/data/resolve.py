"""Resolve monomer references into concrete monomers.

Monomer references may describe more than one concrete structure: a group
lists alternatives, and a count may be ``0``, a range or a variable.  Such
HELM2-extended content has no single monomer list and every operation that
needs concrete chemistry rejects it with ``AmbiguousNotationError``.

The resolution pipeline for ``MonomerResolver.resolve_concrete`` is, per
reference and in order:

1. **Reject groups** -- a ``MonomerGroup`` is never concrete.
2. **Parse the count** -- it must be a positive integer.
3. **Resolve** -- a unit resolves to one monomer, an RNA unit to its sugar,
   base and linker monomers, a list to the concatenated resolutions of its
   elements (each honoring its own count).
4. **Repeat** -- the resolved monomers are appended ``count`` times.

Monomers unknown to the store may be given as SMILES; these become ad hoc
monomers once the chemistry toolkit has validated them.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from helmkit.data.chem import RDKitChemistry
from helmkit.data.errors import (
    AmbiguousNotationError,
    InvalidStructureError,
    NotationLookupError,
)
from helmkit.data.monomers import MonomerStore
from helmkit.data.notation import check_position
from helmkit.data.parse.nucleotide import NucleotideParser
from helmkit.data.types import (
    Monomer,
    MonomerReference,
    Polymer,
)

logger = logging.getLogger(__name__)

HELM2_MESSAGE = "Functions can't be called for HELM2 objects"


def parse_count(reference: MonomerReference) -> int:
    """Return the repeat count of a reference as a positive integer.

    Raises
    ------
    AmbiguousNotationError
        If the count is zero or not an integer.

    """
    try:
        count = int(reference.count)
    except (TypeError, ValueError) as exc:
        msg = f"{HELM2_MESSAGE}: count '{reference.count}' of {reference}"
        raise AmbiguousNotationError(msg) from exc
    if count <= 0:
        msg = f"{HELM2_MESSAGE}: count '{reference.count}' of {reference}"
        raise AmbiguousNotationError(msg)
    return count


def filter_by_type(polymer_type: str, polymers: Iterable[Polymer]) -> list[Polymer]:
    return [polymer for polymer in polymers if polymer.polymer_type == polymer_type]


def list_monomer_references(polymers: Iterable[Polymer]) -> list[MonomerReference]:
    items = []
    for polymer in polymers:
        items.extend(polymer.elements)
    return items


def is_monomer_specific(polymer: Polymer, position: int) -> bool:
    """Return True if the reference at ``position`` names a single monomer."""
    check_position(position, len(polymer.elements), f"elements of {polymer.id}", inclusive=False)
    return polymer.elements[position].kind in ("unit", "rna")


def _count_units(references: Sequence[MonomerReference]) -> int:
    total = 0
    for reference in references:
        if reference.kind == "group":
            msg = f"{HELM2_MESSAGE}: group {reference}"
            raise AmbiguousNotationError(msg)
        units = _count_units(reference.elements) if reference.kind == "list" else 1
        total += parse_count(reference) * units
    return total


def total_monomer_count(polymer: Polymer) -> int:
    """Return the number of monomer units of a polymer, counts expanded.

    List blocks count every unit they hold, repeated by the block count.

    Raises
    ------
    AmbiguousNotationError
        If the polymer holds a group or a non-concrete count.

    """
    return _count_units(polymer.elements)


class MonomerResolver:
    """Turn monomer references into monomers using a store and a chemistry toolkit.

    Parameters
    ----------
    store : MonomerStore
        The monomer database.
    chemistry : RDKitChemistry, optional
        Validator for monomers given as SMILES.

    """

    def __init__(self, store: MonomerStore, chemistry: Optional[RDKitChemistry] = None) -> None:
        self.store = store
        self.chemistry = chemistry if chemistry is not None else RDKitChemistry()
        self.nucleotides = NucleotideParser(store)

    def resolve_monomer(self, polymer_type: str, monomer_id: str) -> Monomer:
        """Look up a monomer, falling back to an ad hoc monomer for SMILES.

        Parameters
        ----------
        polymer_type : str
            Polymer kind of the monomer.
        monomer_id : str
            Monomer ID, or a SMILES string.

        Returns
        -------
        Monomer
            The stored monomer, or an ad hoc monomer with canonical SMILES.

        Raises
        ------
        NotationLookupError
            If the monomer is not in the store and is not a valid structure.

        """
        monomer = self.store.get(polymer_type, monomer_id)
        if monomer is not None:
            return monomer

        try:
            self.chemistry.validate(monomer_id)
            smiles = self.chemistry.canonicalize(monomer_id)
        except InvalidStructureError as exc:
            msg = f"Monomer {monomer_id} is not in the database and also not a valid structure"
            raise NotationLookupError(msg) from exc

        logger.debug("Using ad hoc %s monomer %s", polymer_type, smiles)
        return Monomer(
            monomer_id="Undefined",
            polymer_type=polymer_type,
            monomer_type="Undefined",
            smiles=smiles,
            ad_hoc=True,
        )

    def _resolve_once(self, reference: MonomerReference, polymer_type: str) -> list[Monomer]:
        if reference.kind == "unit":
            return [self.resolve_monomer(polymer_type, reference.monomer_id)]
        if reference.kind == "rna":
            return [
                self.resolve_monomer(polymer_type, fragment)
                for fragment in self.nucleotides.fragments(reference.monomer_id)
            ]
        if reference.kind == "list":
            return self.resolve_concrete(reference.elements, polymer_type)
        msg = f"{HELM2_MESSAGE}: {reference}"
        raise AmbiguousNotationError(msg)

    def resolve_concrete(
        self, references: Sequence[MonomerReference], polymer_type: str
    ) -> list[Monomer]:
        """Expand references into the concrete monomer sequence.

        Parameters
        ----------
        references : Sequence[MonomerReference]
            The references to expand, in order.
        polymer_type : str
            Polymer kind used for store lookups.

        Returns
        -------
        list[Monomer]
            Concatenation of every reference's monomers repeated by its count.

        Raises
        ------
        AmbiguousNotationError
            For groups, zero counts and non-numeric counts.
        NotationLookupError
            If a monomer can not be resolved.

        """
        items = []
        for reference in references:
            if reference.kind == "group":
                msg = f"{HELM2_MESSAGE}: group {reference}"
                raise AmbiguousNotationError(msg)
            count = parse_count(reference)
            monomers = self._resolve_once(reference, polymer_type)
            for _ in range(count):
                items.extend(monomers)
        return items

    def list_monomers(
        self, references: Sequence[MonomerReference], polymer_type: str
    ) -> list[Monomer]:
        """Resolve every reference once, ignoring counts.

        Groups contribute all of their members, so this also works on
        HELM2-extended content.
        """
        items = []
        for reference in references:
            if reference.kind == "list":
                items.extend(self.list_monomers(reference.elements, polymer_type))
            elif reference.kind == "group":
                items.extend(self.resolve_monomer(polymer_type, m) for m in reference.members)
            else:
                items.extend(self._resolve_once(reference, polymer_type))
        return items

    def polymer_monomers(self, polymer: Polymer) -> list[Monomer]:
        return self.resolve_concrete(polymer.elements, polymer.polymer_type)
