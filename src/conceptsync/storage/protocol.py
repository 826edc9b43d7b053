"""Entity store protocol for swappable backends.

The store is the only place a concept keeps its records. Concepts own their
store exclusively; nothing else writes to it.

Usage:
    store: EntityStore[PokemonEntry] = LocalStore()
    store.set(entry.id, entry)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, TypeVar

from conceptsync.core.records import Record

RecordT = TypeVar("RecordT", bound=Record)


class EntityStore(Protocol[RecordT]):
    """Abstract store interface keyed by integer identifier."""

    def get(self, record_id: int, copy: bool = True) -> RecordT | None:
        """Get record by id, None if absent. No side effects."""
        ...

    def has(self, record_id: int) -> bool:
        """Check if id is present."""
        ...

    def set(self, record_id: int, record: RecordT) -> None:
        """Store record under id, overwriting unconditionally."""
        ...

    def all_values(self, copy: bool = True) -> list[RecordT]:
        """All records in first-insertion order."""
        ...

    def ids(self) -> Iterator[int]:
        """Iterate ids in first-insertion order."""
        ...

    def __len__(self) -> int: ...

    def __contains__(self, record_id: object) -> bool: ...
