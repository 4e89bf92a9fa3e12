"""Data type definitions for the helmkit notation core.

This module defines the value types shared by every other module, organized
into several categories:

Serialization base classes
--------------------------
- ``JSONSerializable`` : Base class (via mashumaro) for dataclasses that
  serialize to/from JSON files.

Monomer references
------------------
A polymer is an ordered sequence of monomer references.  The reference types
form a closed tagged union; each carries a class-level ``kind`` tag that the
resolution code dispatches on:

- ``MonomerUnit``  : one monomer ID with a repeat count ("unit").
- ``RNAUnit``      : a nucleotide string such as ``R(A)P`` ("rna").
- ``MonomerGroup`` : alternatives or a mixture of monomers ("group").
- ``MonomerList``  : an ordered sub-sequence of references ("list").

Counts are kept as strings because HELM2 allows ranges and variables
(``"1-5"``, ``"n"``).  Only positive integer counts are concrete.

Notation entries
----------------
- ``PolymerID``  : Kind tag plus string ID (e.g. RNA / "RNA1").
- ``Polymer``    : Immutable polymer, never empty.
- ``Connection`` : Residue pairing between two polymers.
- ``Grouping``   : Named grouping of polymers with an amount expression.
- ``Annotation`` : Free text.

Chemistry
---------
- ``Monomer``       : A resolved monomer, either from the store or ad hoc.
- ``MonomerLibrary``: JSON-serializable list of monomers.
- ``Nucleotide``    : Sugar, base and linker of one nucleotide.
"""

import json
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import ClassVar, Optional, Union

from mashumaro.mixins.dict import DataClassDictMixin

from helmkit.data import const
from helmkit.data.errors import StructuralError

####################################################################################################
# SERIALIZABLE
####################################################################################################


class JSONSerializable(DataClassDictMixin):
    """Serializable datatype."""

    @classmethod
    def load(cls: "JSONSerializable", path: Path) -> "JSONSerializable":
        """Load the object from a JSON file.

        Parameters
        ----------
        path : Path
            The path to the file.

        Returns
        -------
        Serializable
            The loaded object.

        """
        with path.open("r") as f:
            return cls.from_dict(json.load(f))

    def dump(self, path: Path) -> None:
        """Dump the object to a JSON file.

        Parameters
        ----------
        path : Path
            The path to the file.

        """
        with path.open("w") as f:
            json.dump(self.to_dict(), f)


####################################################################################################
# MONOMER REFERENCES
####################################################################################################


@dataclass(frozen=True)
class MonomerUnit:
    """A single monomer with a repeat count.

    Attributes
    ----------
    monomer_id : str
        Monomer ID, or a SMILES string for an ad hoc monomer.
    count : str
        Repeat count as written in the notation.
    annotation : str, optional
        Free-text annotation of the element.

    """

    kind: ClassVar[str] = "unit"

    monomer_id: str
    count: str = const.default_count
    annotation: Optional[str] = None


@dataclass(frozen=True)
class RNAUnit(MonomerUnit):
    """A nucleotide element, e.g. ``R(A)P`` or ``[dR](T)P``."""

    kind: ClassVar[str] = "rna"


@dataclass(frozen=True)
class MonomerGroup:
    """An ambiguous set of monomers.

    A group never resolves to a concrete monomer list.  ``ambiguity`` is
    ``"or"`` for alternatives and ``"and"`` for a mixture.
    """

    kind: ClassVar[str] = "group"

    members: tuple[str, ...]
    ambiguity: str = "or"
    count: str = const.default_count
    annotation: Optional[str] = None


@dataclass(frozen=True)
class MonomerList:
    """An ordered sub-sequence of monomer references, repeated as a block."""

    kind: ClassVar[str] = "list"

    elements: tuple["MonomerReference", ...]
    count: str = const.default_count
    annotation: Optional[str] = None


MonomerReference = Union[MonomerUnit, RNAUnit, MonomerGroup, MonomerList]


####################################################################################################
# NOTATION ENTRIES
####################################################################################################

_POLYMER_ID = re.compile(r"^([A-Z]+)(\d+)$")


@dataclass(frozen=True)
class PolymerID:
    """Identity of a polymer: a kind tag and a string ID."""

    polymer_type: str
    id: str

    @classmethod
    def from_string(cls, polymer_id: str) -> "PolymerID":
        """Build an identity from an ID such as ``RNA1``.

        Parameters
        ----------
        polymer_id : str
            The polymer ID, a kind prefix followed by a number.

        Returns
        -------
        PolymerID
            The parsed identity.

        Raises
        ------
        ValueError
            If the prefix is not a known polymer kind.

        """
        match = _POLYMER_ID.match(polymer_id)
        if match is None or match.group(1) not in const.polymer_type_ids:
            msg = f"Invalid polymer ID: {polymer_id}"
            raise ValueError(msg)
        return cls(polymer_type=match.group(1), id=polymer_id)

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True)
class Polymer:
    """An immutable polymer.

    Mutations never touch a ``Polymer`` in place: the functions in
    ``helmkit.data.edit`` return a new value which is then swapped into the
    notation by index.

    Attributes
    ----------
    polymer_id : PolymerID
        The polymer identity.
    elements : tuple[MonomerReference, ...]
        Ordered monomer references, at least one.
    annotation : str, optional
        Free-text annotation of the polymer.

    """

    polymer_id: PolymerID
    elements: tuple[MonomerReference, ...]
    annotation: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))
        if not self.elements:
            msg = f"Polymer {self.polymer_id} must contain at least one monomer reference"
            raise StructuralError(msg)

    @property
    def id(self) -> str:
        return self.polymer_id.id

    @property
    def polymer_type(self) -> str:
        return self.polymer_id.polymer_type

    def with_elements(self, elements: tuple[MonomerReference, ...]) -> "Polymer":
        return replace(self, elements=tuple(elements))

    def with_annotation(self, annotation: Optional[str]) -> "Polymer":
        return replace(self, annotation=annotation)

    def renamed(self, polymer_id: str) -> "Polymer":
        return replace(self, polymer_id=PolymerID.from_string(polymer_id))


@dataclass(frozen=True)
class Connection:
    """A residue pairing between two polymers.

    ``details`` holds the residue positions and attachment points, e.g.
    ``"3:pair-9:pair"``.
    """

    source: str
    target: str
    details: str
    annotation: Optional[str] = None

    @property
    def fingerprint(self) -> str:
        return f"{self.source},{self.target},{self.details}"


@dataclass(frozen=True)
class Grouping:
    """A named grouping of polymers.

    ``ambiguity`` is ``"+"`` for a mixture of all members and ``","`` for
    alternatives; ``amount`` is the amount expression of the grouping.
    """

    group_id: str
    members: tuple[str, ...]
    amount: str = const.default_count
    ambiguity: str = "+"


@dataclass(frozen=True)
class Annotation:
    """A free-text annotation of the whole notation."""

    text: str


####################################################################################################
# CHEMISTRY
####################################################################################################


@dataclass(frozen=True)
class Monomer:
    """A concrete monomer.

    Attributes
    ----------
    monomer_id : str
        Monomer ID in the store, or ``"Undefined"`` for an ad hoc monomer.
    polymer_type : str
        Polymer kind the monomer belongs to.
    monomer_type : str
        Role of the monomer, one of ``const.monomer_types``.
    natural_analog : str, optional
        One letter natural analog used when rendering sequences.
    smiles : str, optional
        Structure of the monomer.  Canonical for ad hoc monomers.
    alternate_id : str, optional
        Short code, used for terminal phosphates.
    ad_hoc : bool
        True if the monomer is not backed by the store.

    """

    monomer_id: str
    polymer_type: str
    monomer_type: str
    natural_analog: Optional[str] = None
    smiles: Optional[str] = None
    alternate_id: Optional[str] = None
    ad_hoc: bool = False


@dataclass
class MonomerLibrary(JSONSerializable):
    """A list of monomers, loadable from JSON."""

    monomers: list[Monomer] = field(default_factory=list)


def format_monomer_id(monomer_id: str) -> str:
    """Write a monomer ID as it appears in a nucleotide string."""
    if len(monomer_id) > 1:
        return f"[{monomer_id}]"
    return monomer_id


@dataclass(frozen=True)
class Nucleotide:
    """One nucleotide split into its fragments.

    Attributes
    ----------
    sugar : str, optional
        Sugar monomer ID.  Missing for a lone terminal phosphate.
    base : str, optional
        Base monomer ID.
    linker : str, optional
        Linker monomer ID.  Missing for a 3' terminal nucleotide.
    phosphate : Monomer, optional
        The resolved linker monomer.

    """

    sugar: Optional[str]
    base: Optional[str]
    linker: Optional[str]
    phosphate: Optional[Monomer] = None

    @property
    def nucleoside_notation(self) -> str:
        if self.sugar is None:
            return ""
        notation = format_monomer_id(self.sugar)
        if self.base is not None:
            notation += f"({format_monomer_id(self.base)})"
        return notation

    @property
    def linker_notation(self) -> str:
        if self.linker is None:
            return ""
        return format_monomer_id(self.linker)

    @property
    def notation(self) -> str:
        return self.nucleoside_notation + self.linker_notation
