"""Immutable composite-key store produced by the parser."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

__all__ = ["Store", "make_key"]


def make_key(section: str, field: str) -> str:
    """Build the composite ``section.field`` key; the unsectioned scope is ``""``."""
    return f"{section}.{field}"


class Store(Mapping[str, str]):
    """Read-only mapping of ``"section.field"`` to raw (unresolved) values.

    Section names are kept separately because both section and field may
    themselves contain dots, which makes the composite key ambiguous.
    """

    __slots__ = ("_entries", "_sections")

    def __init__(
        self,
        entries: Mapping[str, str] | None = None,
        sections: Iterable[str] | None = None,
    ) -> None:
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries or {}))
        if sections is None:
            sections = (key.partition(".")[0] for key in self._entries)
        self._sections: tuple[str, ...] = tuple(dict.fromkeys(sections))

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Store({dict(self._entries)!r})"

    def as_dict(self) -> Mapping[str, str]:
        """Return a read-only view of the entries."""
        return self._entries

    def sections(self) -> list[str]:
        """Distinct section names that hold at least one key, in first-appearance order."""
        return list(self._sections)
