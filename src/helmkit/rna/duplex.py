"""Sequence derivation and duplex construction for RNA/DNA polymers.

Every operation in this module applies to RNA/DNA polymers only and raises
``DomainTypeError`` for any other kind.  The derivations build on each other:

- **Natural analog sequence** -- the polymer's references are resolved to
  concrete monomers and the bases are rendered as one letter each.
- **Reverse / inverse** -- the natural analog sequence read backwards.
- **Complement** -- every base mapped through ``const.complement_map``.  The
  table is not an involution (T -> A -> U), and unmapped letters raise
  ``NotationLookupError``.
- **Antiparallel** -- the complement read backwards, i.e. the partner strand
  written 5' -> 3'.
- **Hybridization** -- for two antiparallel strands of N units, N pairing
  connections ``"i:pair-(N+1-i):pair"``.

Derived sequences are turned back into polymers through the sequence
reader; a failure there is reported as ``SequenceConstructionError``.

``build_duplex`` assembles a sense strand, its antiparallel strand and all
hybridization connections before touching any notation, so a failure
leaves the target container unchanged.
"""

import logging
from typing import Optional

from helmkit.data import const
from helmkit.data.errors import (
    AmbiguousNotationError,
    DomainTypeError,
    DuplexError,
    NotationError,
    NotationLookupError,
    SequenceConstructionError,
)
from helmkit.data.notation import NotationContainer
from helmkit.data.parse.nucleotide import NucleotideFactory, NucleotideParser
from helmkit.data.parse.sequence import SequenceReader
from helmkit.data.resolve import MonomerResolver
from helmkit.data.types import Connection, Polymer
from helmkit.data.write.fasta import generate_fasta_from_rna

logger = logging.getLogger(__name__)


def complement(sequence: str) -> str:
    """Return the base-by-base complement of a sequence.

    Parameters
    ----------
    sequence : str
        One-letter nucleotide sequence.

    Returns
    -------
    str
        The complement, same order and length.

    Raises
    ------
    NotationLookupError
        If a letter has no complement.

    """
    letters = []
    for idx, base in enumerate(sequence):
        partner = const.complement_map.get(base)
        if partner is None:
            msg = f"No complement for '{base}' at position {idx + 1} of {sequence}"
            raise NotationLookupError(msg)
        letters.append(partner)
    return "".join(letters)


def check_rna(polymer: Polymer) -> None:
    if polymer.polymer_type != "RNA":
        msg = f"Functions can only be called for RNA/DNA, got {polymer.id}"
        raise DomainTypeError(msg)


class RNADuplexEngine:
    """RNA/DNA sequence derivations over resolved polymers.

    Parameters
    ----------
    resolver : MonomerResolver
        Resolves monomer references to monomers.
    reader : SequenceReader, optional
        Builds polymers from derived sequences.
    nucleotide_parser : NucleotideParser, optional
        Splits RNA units into nucleotides.  Defaults to one over the
        resolver's store.
    nucleotide_factory : NucleotideFactory, optional
        Provides the reverse nucleotide template map.

    """

    def __init__(
        self,
        resolver: MonomerResolver,
        reader: Optional[SequenceReader] = None,
        nucleotide_parser: Optional[NucleotideParser] = None,
        nucleotide_factory: Optional[NucleotideFactory] = None,
    ) -> None:
        self.resolver = resolver
        self.reader = reader if reader is not None else SequenceReader()
        self.nucleotide_parser = (
            nucleotide_parser if nucleotide_parser is not None else NucleotideParser(resolver.store)
        )
        self.nucleotide_factory = (
            nucleotide_factory if nucleotide_factory is not None else NucleotideFactory()
        )

    ################################################################################################
    # SEQUENCES
    ################################################################################################

    def natural_analog_sequence(self, polymer: Polymer) -> str:
        check_rna(polymer)
        return generate_fasta_from_rna(self.resolver.polymer_monomers(polymer))

    def reverse_sequence(self, polymer: Polymer) -> str:
        return self.natural_analog_sequence(polymer)[::-1]

    def complement_sequence(self, polymer: Polymer) -> str:
        return complement(self.natural_analog_sequence(polymer))

    def antiparallel_sequence(self, polymer: Polymer) -> str:
        return self.complement_sequence(polymer)[::-1]

    ################################################################################################
    # DERIVED POLYMERS
    ################################################################################################

    def _read_polymer(self, sequence: str, annotation: str, what: str) -> Polymer:
        try:
            notation = self.reader.read_rna(sequence)
        except NotationError as exc:
            msg = f"The {what} can not be built from {sequence!r}"
            raise SequenceConstructionError(msg) from exc
        return notation.get_polymer(0).with_annotation(annotation)

    def get_antiparallel(self, polymer: Polymer) -> Polymer:
        check_rna(polymer)
        sequence = self.antiparallel_sequence(polymer)
        return self._read_polymer(sequence, f"Antiparallel to {polymer.id}", "reverse polymer")

    def get_inverse(self, polymer: Polymer) -> Polymer:
        check_rna(polymer)
        sequence = self.reverse_sequence(polymer)
        return self._read_polymer(sequence, f"Inverse to {polymer.id}", "inverse strand")

    def get_complement(self, polymer: Polymer) -> Polymer:
        check_rna(polymer)
        sequence = self.complement_sequence(polymer)
        return self._read_polymer(sequence, f"NormalComplement to {polymer.id}", "complement polymer")

    ################################################################################################
    # DUPLEX
    ################################################################################################

    def are_antiparallel(self, polymer_one: Polymer, polymer_two: Polymer) -> bool:
        """Return True if ``polymer_two`` is the antiparallel strand of ``polymer_one``."""
        check_rna(polymer_one)
        check_rna(polymer_two)
        return self.antiparallel_sequence(polymer_one) == self.natural_analog_sequence(polymer_two)

    def hybridize(self, polymer_one: Polymer, polymer_two: Polymer) -> list[Connection]:
        """Build the pairing connections between two antiparallel strands.

        Parameters
        ----------
        polymer_one : Polymer
            The first strand.
        polymer_two : Polymer
            The strand antiparallel to the first.

        Returns
        -------
        list[Connection]
            One connection per unit of ``polymer_one``: position ``i`` pairs
            with position ``N + 1 - i`` of ``polymer_two``, in increasing ``i``.

        Raises
        ------
        DuplexError
            If the strands are not antiparallel.

        """
        if not self.are_antiparallel(polymer_one, polymer_two):
            msg = f"{polymer_one.id} and {polymer_two.id} are not antiparallel to each other"
            raise DuplexError(msg)

        num_units = len(self.natural_analog_sequence(polymer_one))
        return [
            Connection(polymer_one.id, polymer_two.id, f"{pos}:pair-{num_units + 1 - pos}:pair")
            for pos in range(1, num_units + 1)
        ]

    def build_duplex(
        self, sequence: str, container: Optional[NotationContainer] = None
    ) -> NotationContainer:
        """Build a double strand from a sense sequence.

        The sense strand, its antiparallel strand (ID ``RNA2``) and the
        hybridization connections are all computed first.  They are committed
        only once every step has succeeded.

        Parameters
        ----------
        sequence : str
            One-letter sense sequence.
        container : NotationContainer, optional
            Container to add the duplex to.  A new one is created if omitted.

        Returns
        -------
        NotationContainer
            The container holding both strands and the connections.  Every
            connection is also recorded in its interconnection registry.

        Raises
        ------
        SequenceConstructionError
            If either strand can not be built.

        """
        try:
            sense = self.reader.read_rna(sequence).get_polymer(0)
        except NotationError as exc:
            msg = f"Sense strand can not be built from {sequence!r}"
            raise SequenceConstructionError(msg) from exc

        try:
            antisense = self.get_antiparallel(sense).renamed(const.antisense_id)
            connections = self.hybridize(sense, antisense)
        except NotationError as exc:
            msg = f"Antisense strand can not be built for {sense.id}"
            raise SequenceConstructionError(msg) from exc

        if container is None:
            container = NotationContainer()
        notation = container.notation
        notation.append_polymer(sense)
        notation.append_polymer(antisense)
        for connection in connections:
            notation.append_connection(connection)
            container.interconnections.add_connection(connection.fingerprint, const.pair_descriptor)
        logger.debug("Built duplex %s/%s with %d pairs", sense.id, antisense.id, len(connections))
        return container

    ################################################################################################
    # NUCLEOTIDES
    ################################################################################################

    def nucleotide_sequence(self, polymer: Polymer) -> str:  # noqa: C901
        """Render a polymer as a nucleotide symbol sequence, e.g. ``"AdTsG"``.

        Every reference must be a single nucleotide with count ``"1"``.  The
        first nucleotide may be a lone phosphate (rendered by its short code)
        and the last may lack its linker.

        Raises
        ------
        AmbiguousNotationError
            If a reference is not a single-count RNA unit.
        NotationLookupError
            If a nucleotide has no template.

        """
        check_rna(polymer)
        nucleotides = []
        for reference in polymer.elements:
            if reference.kind != "rna" or reference.count != const.default_count:
                logger.info("Monomer reference contains HELM2 elements: %s", reference)
                msg = f"HELM2 elements involved: {reference}"
                raise AmbiguousNotationError(msg)
            nucleotides.append(self.nucleotide_parser.parse(reference.monomer_id)[0])

        reverse_map = self.nucleotide_factory.reverse_template_map()
        symbols = []
        last = len(nucleotides) - 1
        for idx, nucleotide in enumerate(nucleotides):
            notation = nucleotide.notation

            # the first nucleotide may be a lone phosphate
            if idx == 0 and not nucleotide.nucleoside_notation:
                if nucleotide.phosphate is None or nucleotide.phosphate.alternate_id is None:
                    msg = f"Unknown phosphate found for {notation}"
                    raise NotationLookupError(msg)
                symbols.append(nucleotide.phosphate.alternate_id)
                continue

            # the last nucleotide may have no linker
            if idx == last and not nucleotide.linker_notation:
                notation = notation + const.linker

            if notation not in reverse_map:
                msg = f"Unknown nucleotide found for {notation}: missing nucleotide template"
                raise NotationLookupError(msg)
            symbols.append(reverse_map[notation])
        return "".join(symbols)
