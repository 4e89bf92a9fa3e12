"""Command line interface for RNA/DNA sequence derivations.

Each command reads a one-letter sequence, builds the strand with the
default sequence reader and prints the derived result::

    helmkit complement AUGC       # UACG
    helmkit antiparallel AUGC     # GCAU
    helmkit duplex AUGC           # both strands and the pairing connections
"""

import logging
from pathlib import Path
from typing import Optional

import click

from helmkit.data.errors import NotationError
from helmkit.data.monomers import MonomerStore
from helmkit.data.resolve import MonomerResolver
from helmkit.data.types import Polymer
from helmkit.data.write.fasta import format_fasta
from helmkit.rna.duplex import RNADuplexEngine


def _read(engine: RNADuplexEngine, sequence: str) -> Polymer:
    try:
        return engine.reader.read_rna(sequence).get_polymer(0)
    except NotationError as exc:
        raise click.ClickException(str(exc)) from exc


def _echo_polymer(engine: RNADuplexEngine, polymer: Polymer, fasta: bool) -> None:
    sequence = engine.natural_analog_sequence(polymer)
    if fasta:
        header = polymer.id if polymer.annotation is None else f"{polymer.id} {polymer.annotation}"
        click.echo(format_fasta(header, sequence), nl=False)
    else:
        click.echo(sequence)


@click.group()
@click.option(
    "--monomers",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON monomer library to use instead of the bundled one.",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, monomers: Optional[Path], verbose: bool) -> None:
    """Derive and pair RNA/DNA strands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    store = MonomerStore.load(monomers) if monomers is not None else MonomerStore.default()
    ctx.obj = RNADuplexEngine(MonomerResolver(store))


@cli.command()
@click.argument("sequence")
@click.pass_obj
def natural(engine: RNADuplexEngine, sequence: str) -> None:
    """Print the natural analog sequence."""
    try:
        click.echo(engine.natural_analog_sequence(_read(engine, sequence)))
    except NotationError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@click.argument("sequence")
@click.option("--fasta", is_flag=True, help="Print a FASTA record.")
@click.pass_obj
def complement(engine: RNADuplexEngine, sequence: str, fasta: bool) -> None:
    """Print the normal complement, 3' -> 5'."""
    try:
        _echo_polymer(engine, engine.get_complement(_read(engine, sequence)), fasta)
    except NotationError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@click.argument("sequence")
@click.option("--fasta", is_flag=True, help="Print a FASTA record.")
@click.pass_obj
def antiparallel(engine: RNADuplexEngine, sequence: str, fasta: bool) -> None:
    """Print the antiparallel strand, 5' -> 3'."""
    try:
        _echo_polymer(engine, engine.get_antiparallel(_read(engine, sequence)), fasta)
    except NotationError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@click.argument("sequence")
@click.option("--fasta", is_flag=True, help="Print a FASTA record.")
@click.pass_obj
def inverse(engine: RNADuplexEngine, sequence: str, fasta: bool) -> None:
    """Print the sequence read backwards."""
    try:
        _echo_polymer(engine, engine.get_inverse(_read(engine, sequence)), fasta)
    except NotationError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@click.argument("sequence")
@click.pass_obj
def duplex(engine: RNADuplexEngine, sequence: str) -> None:
    """Print both strands of a duplex and their pairing connections."""
    try:
        container = engine.build_duplex(sequence)
        for polymer in container.notation.polymers:
            click.echo(f"{polymer.id}\t{engine.natural_analog_sequence(polymer)}")
    except NotationError as exc:
        raise click.ClickException(str(exc)) from exc
    for connection in container.notation.connections:
        click.echo(connection.fingerprint)


if __name__ == "__main__":
    cli()
