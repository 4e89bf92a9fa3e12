"""Element-level mutations of a polymer.

Polymers are immutable: every function here returns a new ``Polymer`` and
leaves its argument untouched.  Commit the result with
``Notation.replace_polymer``::

    idx = notation.index_of_polymer("RNA1")
    polymer = edit.set_count(notation.get_polymer(idx), 0, "3")
    notation.replace_polymer(idx, polymer)

Positions follow the same rules as the container API: inserting accepts
``[0, len]``, everything else requires ``[0, len)``.
"""

import logging
from dataclasses import replace
from typing import Optional

from helmkit.data import const
from helmkit.data.errors import StructuralError
from helmkit.data.notation import check_position
from helmkit.data.types import MonomerReference, Polymer

logger = logging.getLogger(__name__)


####################################################################################################
# POLYMER ANNOTATION
####################################################################################################


def add_polymer_annotation(polymer: Polymer, annotation: str) -> Polymer:
    """Annotate a polymer, appending to an existing annotation.

    Parameters
    ----------
    polymer : Polymer
        The polymer to annotate.
    annotation : str
        The new annotation text.

    Returns
    -------
    Polymer
        A polymer with the same identity and elements.  An existing
        annotation is kept and joined to the new one with ``" | "``.

    """
    if polymer.annotation is not None:
        annotation = polymer.annotation + const.annotation_separator + annotation
    return polymer.with_annotation(annotation)


def remove_polymer_annotation(polymer: Polymer) -> Polymer:
    return polymer.with_annotation(None)


####################################################################################################
# MONOMER REFERENCES
####################################################################################################


def add_monomer_reference(polymer: Polymer, position: int, reference: MonomerReference) -> Polymer:
    elements = list(polymer.elements)
    check_position(position, len(elements), f"elements of {polymer.id}", inclusive=True)
    elements.insert(position, reference)
    return polymer.with_elements(tuple(elements))


def replace_monomer_reference(polymer: Polymer, position: int, reference: MonomerReference) -> Polymer:
    elements = list(polymer.elements)
    check_position(position, len(elements), f"elements of {polymer.id}", inclusive=False)
    elements[position] = reference
    return polymer.with_elements(tuple(elements))


def delete_monomer_reference(polymer: Polymer, position: int) -> Polymer:
    """Delete the monomer reference at ``position``.

    The reference is looked up by position and then removed by value: the
    first element equal to it goes.  When equal references occur earlier in
    the polymer, the earliest one is removed instead of the one at
    ``position``.  The resulting sequence is the same either way.

    Parameters
    ----------
    polymer : Polymer
        The polymer to edit.
    position : int
        Position of the reference to delete.

    Returns
    -------
    Polymer
        The polymer without the reference.

    Raises
    ------
    StructuralError
        If ``position`` is out of range or the polymer has a single reference.

    """
    elements = list(polymer.elements)
    check_position(position, len(elements), f"elements of {polymer.id}", inclusive=False)
    reference = elements[position]
    if len(elements) == 1:
        msg = (
            f"{reference} can't be removed: polymer {polymer.id} has to have "
            "at least one monomer reference (minimum one monomer)"
        )
        raise StructuralError(msg)
    elements.remove(reference)
    logger.debug("Deleted %r from %s", reference, polymer.id)
    return polymer.with_elements(tuple(elements))


def _update_reference(polymer: Polymer, position: int, **changes) -> Polymer:
    check_position(position, len(polymer.elements), f"elements of {polymer.id}", inclusive=False)
    reference = replace(polymer.elements[position], **changes)
    return replace_monomer_reference(polymer, position, reference)


def set_count(polymer: Polymer, position: int, count: str) -> Polymer:
    return _update_reference(polymer, position, count=count)


def reset_count(polymer: Polymer, position: int) -> Polymer:
    return _update_reference(polymer, position, count=const.default_count)


def set_reference_annotation(polymer: Polymer, position: int, annotation: Optional[str]) -> Polymer:
    return _update_reference(polymer, position, annotation=annotation)


def clear_reference_annotation(polymer: Polymer, position: int) -> Polymer:
    return _update_reference(polymer, position, annotation=None)
