import pytest

from helmkit.data.errors import StructuralError
from helmkit.data.notation import Notation, NotationContainer
from helmkit.data.types import Annotation, Connection, Grouping


def test_add_accepts_append_position() -> None:
    notation = Notation()
    notation.add_annotation(0, Annotation("first"))
    notation.add_annotation(1, Annotation("third"))
    notation.add_annotation(1, Annotation("second"))
    assert [a.text for a in notation.annotations] == ["first", "second", "third"]


@pytest.mark.parametrize("position", [-1, 2])
def test_add_rejects_out_of_range(position) -> None:
    notation = Notation(annotations=[Annotation("only")])
    with pytest.raises(StructuralError):
        notation.add_annotation(position, Annotation("bad"))


def test_replace_and_delete_require_existing_position() -> None:
    notation = Notation(connections=[Connection("RNA1", "RNA2", "1:pair-1:pair")])
    with pytest.raises(StructuralError):
        notation.replace_connection(1, Connection("RNA1", "RNA2", "2:pair-2:pair"))
    with pytest.raises(StructuralError):
        notation.delete_connection(1)
    with pytest.raises(StructuralError):
        Notation().delete_grouping(0)


def test_replace_and_delete_connections() -> None:
    first = Connection("RNA1", "RNA2", "1:pair-2:pair")
    second = Connection("RNA1", "RNA2", "2:pair-1:pair")
    notation = Notation(connections=[first])
    notation.append_connection(second)
    notation.replace_connection(0, second)
    assert notation.connections == (second, second)
    assert notation.delete_connection(1) == second
    assert len(notation.connections) == 1


def test_add_annotation_to_connection_replaces_entry() -> None:
    notation = Notation(connections=[Connection("RNA1", "RNA2", "1:pair-1:pair")])
    notation.add_annotation_to_connection(0, "hydrogen bond")
    assert notation.get_connection(0).annotation == "hydrogen bond"


def test_groupings_and_clear() -> None:
    notation = Notation()
    notation.append_grouping(Grouping("G1", ("PEPTIDE1", "PEPTIDE2"), amount="2.5"))
    notation.add_grouping(0, Grouping("G2", ("RNA1",)))
    assert [g.group_id for g in notation.groupings] == ["G2", "G1"]
    notation.clear_groupings()
    assert notation.groupings == ()


def test_polymer_section(rna) -> None:
    notation = Notation()
    notation.append_polymer(rna("AUG"))
    notation.add_polymer(0, rna("CC", polymer_id="RNA2"))
    assert notation.index_of_polymer("RNA1") == 1
    notation.replace_polymer(1, rna("GG"))
    assert notation.get_polymer(1) == rna("GG")
    notation.delete_polymer(0)
    assert [p.id for p in notation.polymers] == ["RNA1"]
    with pytest.raises(StructuralError):
        notation.index_of_polymer("RNA2")


def test_snapshots_do_not_alias_sections(rna) -> None:
    notation = Notation(polymers=[rna("AU")])
    polymers = notation.polymers
    notation.clear_polymers()
    assert len(polymers) == 1
    assert notation.polymers == ()


def test_copy_is_independent(rna) -> None:
    notation = Notation(polymers=[rna("AU")])
    copied = notation.copy()
    assert copied == notation
    copied.delete_polymer(0)
    assert len(notation.polymers) == 1


def test_container_lists_all_monomer_references(rna) -> None:
    container = NotationContainer(Notation(polymers=[rna("AU"), rna("G", polymer_id="RNA2")]))
    assert len(container.monomer_references()) == 3
    assert len(container.interconnections) == 0
