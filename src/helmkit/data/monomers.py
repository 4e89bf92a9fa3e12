"""In-memory monomer store.

Monomers are keyed by ``(polymer_type, monomer_id)``.  The default store is
built from the bundled library in ``helmkit.data.const``; a JSON library
with the same layout can be loaded with ``MonomerStore.load``.
"""

from pathlib import Path
from typing import Optional

from helmkit.data import const
from helmkit.data.types import Monomer, MonomerLibrary


class MonomerStore:
    """Lookup table of known monomers."""

    def __init__(self, monomers: Optional[list[Monomer]] = None) -> None:
        self._monomers: dict[tuple[str, str], Monomer] = {}
        for monomer in monomers or []:
            self.add_monomer(monomer)

    def __len__(self) -> int:
        return len(self._monomers)

    @classmethod
    def from_library(cls, library: MonomerLibrary) -> "MonomerStore":
        return cls(library.monomers)

    @classmethod
    def load(cls, path: Path) -> "MonomerStore":
        """Load a store from a JSON monomer library.

        Parameters
        ----------
        path : Path
            Path to a JSON file of the form ``{"monomers": [...]}``.

        Returns
        -------
        MonomerStore
            The loaded store.

        """
        return cls.from_library(MonomerLibrary.load(path))

    @classmethod
    def default(cls) -> "MonomerStore":
        return cls.from_library(MonomerLibrary.from_dict(const.monomer_library))

    def add_monomer(self, monomer: Monomer) -> None:
        self._monomers[(monomer.polymer_type, monomer.monomer_id)] = monomer

    def has_monomer(self, polymer_type: str, monomer_id: str) -> bool:
        return (polymer_type, monomer_id) in self._monomers

    def get(self, polymer_type: str, monomer_id: str) -> Optional[Monomer]:
        return self._monomers.get((polymer_type, monomer_id))

    def monomers(self, polymer_type: Optional[str] = None) -> list[Monomer]:
        return [
            monomer
            for (kind, _), monomer in self._monomers.items()
            if polymer_type is None or kind == polymer_type
        ]
