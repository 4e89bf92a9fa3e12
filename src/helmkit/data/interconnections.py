"""Registry of known polymer-pair relationships.

The registry maps a connection fingerprint (see ``Connection.fingerprint``)
to a descriptor string.  It is kept next to the notation but is independent
of the notation's own connection section: hybridization records its pairs
here as a side effect.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional


class InterConnections:
    """Key to descriptor map.  Last write wins, deleting an absent key is a no-op."""

    def __init__(self, connections: Optional[Mapping[str, str]] = None) -> None:
        self._connections: dict[str, str] = dict(connections or {})

    def __len__(self) -> int:
        return len(self._connections)

    def __contains__(self, key: object) -> bool:
        return key in self._connections

    def __repr__(self) -> str:
        return f"InterConnections({self._connections!r})"

    def add_connection(self, key: str, value: str) -> None:
        self._connections[key] = value

    def delete_connection(self, key: str) -> None:
        self._connections.pop(key, None)

    def has_key(self, key: str) -> bool:
        return key in self._connections

    def get(self, key: str) -> Optional[str]:
        return self._connections.get(key)

    @property
    def interconnections(self) -> Mapping[str, str]:
        """Read-only view of the registry."""
        return MappingProxyType(self._connections)
