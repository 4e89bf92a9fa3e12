import pytest

from helmkit.data.monomers import MonomerStore
from helmkit.data.parse.sequence import SequenceReader
from helmkit.data.resolve import MonomerResolver
from helmkit.data.types import MonomerUnit, Polymer, PolymerID, RNAUnit
from helmkit.rna.duplex import RNADuplexEngine


@pytest.fixture
def store() -> MonomerStore:
    return MonomerStore.default()


@pytest.fixture
def resolver(store) -> MonomerResolver:
    return MonomerResolver(store)


@pytest.fixture
def engine(resolver) -> RNADuplexEngine:
    return RNADuplexEngine(resolver)


@pytest.fixture
def reader() -> SequenceReader:
    return SequenceReader()


@pytest.fixture
def rna(reader):
    def build(sequence: str, polymer_id: str = "RNA1") -> Polymer:
        return reader.read_rna(sequence, polymer_id=polymer_id).get_polymer(0)

    return build


@pytest.fixture
def peptide() -> Polymer:
    return Polymer(
        PolymerID.from_string("PEPTIDE1"),
        (MonomerUnit("M"), MonomerUnit("K"), MonomerUnit("V")),
    )


@pytest.fixture
def three_units() -> Polymer:
    return Polymer(
        PolymerID.from_string("RNA1"),
        (RNAUnit("R(A)P"), RNAUnit("R(U)P"), RNAUnit("R(G)")),
    )
