"""Exception hierarchy for the notation core.

Every failure raised by this package derives from ``NotationError`` so that
callers can catch the whole family at once.  Where a failure has a natural
built-in counterpart (bad index, wrong polymer kind, failed lookup) the
exception also derives from that built-in.
"""


class NotationError(Exception):
    """Base class for all notation errors."""


class StructuralError(NotationError, IndexError):
    """A mutation would break the notation structure.

    Raised for out-of-range positions and for deleting the last monomer
    reference of a polymer.
    """


class AmbiguousNotationError(NotationError):
    """The notation holds HELM2-extended content.

    Groups, zero counts and non-numeric counts describe more than one concrete
    structure and cannot be resolved to a monomer list.
    """


class DomainTypeError(NotationError, TypeError):
    """An RNA/DNA-only operation was applied to another polymer kind."""


class SequenceConstructionError(NotationError):
    """A derived sequence could not be read back into a polymer."""


class DuplexError(NotationError):
    """Two strands cannot be hybridized."""


class NotationLookupError(NotationError, LookupError):
    """A base, monomer or nucleotide token could not be resolved."""


class SequenceFormatError(NotationError, ValueError):
    """The sequence reader rejected its input."""


class InvalidStructureError(NotationError, ValueError):
    """The chemistry toolkit rejected a structure string."""
