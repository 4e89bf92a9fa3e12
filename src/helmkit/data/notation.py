"""The notation aggregate and its container-level mutation API.

A ``Notation`` owns four ordered sections: polymers, connections, groupings
and annotations.  Positions inside a section are addressable indices.  The
section lists are private; read access returns tuple snapshots so that every
structural change goes through the index-checked methods below:

- ``add_<section>(position, item)``     -- position in ``[0, len]``
- ``append_<section>(item)``            -- same as ``add`` at ``len``
- ``replace_<section>(position, item)`` -- position in ``[0, len)``
- ``delete_<section>(position)``        -- position in ``[0, len)``
- ``clear_<section>s()``

Any other position raises ``StructuralError``.  Element-level changes to a
polymer are made with the pure functions in ``helmkit.data.edit`` and
committed with ``replace_polymer``.

A ``Notation`` has a single owner per editing session and no internal
locking; callers serialize access.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Optional, TypeVar

from helmkit.data.errors import StructuralError
from helmkit.data.interconnections import InterConnections
from helmkit.data.types import (
    Annotation,
    Connection,
    Grouping,
    MonomerReference,
    Polymer,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def check_position(position: int, size: int, section: str, inclusive: bool) -> None:
    """Raise ``StructuralError`` if ``position`` is outside the section."""
    upper = size if inclusive else size - 1
    if not isinstance(position, int) or position < 0 or position > upper:
        bound = f"[0, {size}]" if inclusive else f"[0, {size})"
        msg = f"Position {position} is out of range {bound} for {section}"
        raise StructuralError(msg)


class Notation:
    """Ordered polymers, connections, groupings and annotations."""

    def __init__(
        self,
        polymers: Iterable[Polymer] = (),
        connections: Iterable[Connection] = (),
        groupings: Iterable[Grouping] = (),
        annotations: Iterable[Annotation] = (),
    ) -> None:
        self._polymers: list[Polymer] = list(polymers)
        self._connections: list[Connection] = list(connections)
        self._groupings: list[Grouping] = list(groupings)
        self._annotations: list[Annotation] = list(annotations)

    def __repr__(self) -> str:
        return (
            f"Notation(polymers={self._polymers!r}, connections={self._connections!r}, "
            f"groupings={self._groupings!r}, annotations={self._annotations!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Notation):
            return NotImplemented
        return (
            self._polymers == other._polymers
            and self._connections == other._connections
            and self._groupings == other._groupings
            and self._annotations == other._annotations
        )

    def copy(self) -> "Notation":
        """Return a notation with the same entries and independent sections."""
        return Notation(self._polymers, self._connections, self._groupings, self._annotations)

    ################################################################################################
    # GENERIC SECTION OPERATIONS
    ################################################################################################

    @staticmethod
    def _add(items: list[T], position: int, item: T, section: str) -> None:
        check_position(position, len(items), section, inclusive=True)
        items.insert(position, item)
        logger.debug("Added %s at %d: %r", section, position, item)

    @staticmethod
    def _replace(items: list[T], position: int, item: T, section: str) -> None:
        check_position(position, len(items), section, inclusive=False)
        items[position] = item
        logger.debug("Replaced %s at %d: %r", section, position, item)

    @staticmethod
    def _delete(items: list[T], position: int, section: str) -> T:
        check_position(position, len(items), section, inclusive=False)
        item = items.pop(position)
        logger.debug("Deleted %s at %d: %r", section, position, item)
        return item

    @staticmethod
    def _get(items: list[T], position: int, section: str) -> T:
        check_position(position, len(items), section, inclusive=False)
        return items[position]

    ################################################################################################
    # POLYMERS
    ################################################################################################

    @property
    def polymers(self) -> tuple[Polymer, ...]:
        return tuple(self._polymers)

    def get_polymer(self, position: int) -> Polymer:
        return self._get(self._polymers, position, "polymers")

    def index_of_polymer(self, polymer_id: str) -> int:
        """Return the position of the polymer with the given ID.

        Raises
        ------
        StructuralError
            If no polymer has this ID.

        """
        for idx, polymer in enumerate(self._polymers):
            if polymer.id == polymer_id:
                return idx
        msg = f"No polymer with ID {polymer_id}"
        raise StructuralError(msg)

    def add_polymer(self, position: int, polymer: Polymer) -> None:
        self._add(self._polymers, position, polymer, "polymers")

    def append_polymer(self, polymer: Polymer) -> None:
        self.add_polymer(len(self._polymers), polymer)

    def replace_polymer(self, position: int, polymer: Polymer) -> None:
        self._replace(self._polymers, position, polymer, "polymers")

    def delete_polymer(self, position: int) -> Polymer:
        return self._delete(self._polymers, position, "polymers")

    def clear_polymers(self) -> None:
        self._polymers.clear()

    ################################################################################################
    # CONNECTIONS
    ################################################################################################

    @property
    def connections(self) -> tuple[Connection, ...]:
        return tuple(self._connections)

    def get_connection(self, position: int) -> Connection:
        return self._get(self._connections, position, "connections")

    def add_connection(self, position: int, connection: Connection) -> None:
        self._add(self._connections, position, connection, "connections")

    def append_connection(self, connection: Connection) -> None:
        self.add_connection(len(self._connections), connection)

    def replace_connection(self, position: int, connection: Connection) -> None:
        self._replace(self._connections, position, connection, "connections")

    def delete_connection(self, position: int) -> Connection:
        return self._delete(self._connections, position, "connections")

    def clear_connections(self) -> None:
        self._connections.clear()

    def add_annotation_to_connection(self, position: int, annotation: Optional[str]) -> None:
        """Replace the connection at ``position`` with an annotated copy."""
        connection = self.get_connection(position)
        self.replace_connection(position, replace(connection, annotation=annotation))

    ################################################################################################
    # GROUPINGS
    ################################################################################################

    @property
    def groupings(self) -> tuple[Grouping, ...]:
        return tuple(self._groupings)

    def get_grouping(self, position: int) -> Grouping:
        return self._get(self._groupings, position, "groupings")

    def add_grouping(self, position: int, grouping: Grouping) -> None:
        self._add(self._groupings, position, grouping, "groupings")

    def append_grouping(self, grouping: Grouping) -> None:
        self.add_grouping(len(self._groupings), grouping)

    def replace_grouping(self, position: int, grouping: Grouping) -> None:
        self._replace(self._groupings, position, grouping, "groupings")

    def delete_grouping(self, position: int) -> Grouping:
        return self._delete(self._groupings, position, "groupings")

    def clear_groupings(self) -> None:
        self._groupings.clear()

    ################################################################################################
    # ANNOTATIONS
    ################################################################################################

    @property
    def annotations(self) -> tuple[Annotation, ...]:
        return tuple(self._annotations)

    def get_annotation(self, position: int) -> Annotation:
        return self._get(self._annotations, position, "annotations")

    def add_annotation(self, position: int, annotation: Annotation) -> None:
        self._add(self._annotations, position, annotation, "annotations")

    def append_annotation(self, annotation: Annotation) -> None:
        self.add_annotation(len(self._annotations), annotation)

    def replace_annotation(self, position: int, annotation: Annotation) -> None:
        self._replace(self._annotations, position, annotation, "annotations")

    def delete_annotation(self, position: int) -> Annotation:
        return self._delete(self._annotations, position, "annotations")

    def clear_annotations(self) -> None:
        self._annotations.clear()


@dataclass
class NotationContainer:
    """A notation together with its interconnection registry.

    This is the aggregate owned by one editing session.
    """

    notation: Notation = field(default_factory=Notation)
    interconnections: InterConnections = field(default_factory=InterConnections)

    def monomer_references(self) -> list[MonomerReference]:
        """Return the monomer references of all polymers, in polymer order."""
        items = []
        for polymer in self.notation.polymers:
            items.extend(polymer.elements)
        return items
