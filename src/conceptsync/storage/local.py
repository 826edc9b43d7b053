"""Local in-memory entity store.

Simple dict-based storage suitable for single-process use and testing.
Records are deep-copied on the way in and on the way out, so no caller ever
holds a reference into the store.

Usage:
    store = LocalStore[PokemonTypeRecord]()
    concept = TypeConcept(trigger, store=store)
"""

from __future__ import annotations

import copy as cp
from collections.abc import Iterator
from typing import Generic, TypeVar

from conceptsync.core.records import Record
from conceptsync.core.types import Copy

RecordT = TypeVar("RecordT", bound=Record)


class LocalStore(Generic[RecordT]):
    """In-memory store using a single dict.

    Structure:
        _records[record_id] = record

    Python dicts keep first-insertion order and overwriting an existing key
    does not move it, which gives `all_values` its ordering.
    """

    def __init__(self) -> None:
        self._records: dict[int, RecordT] = {}

    def get(self, record_id: int, copy: bool = True) -> Copy[RecordT] | RecordT | None:
        """Get a record by id.

        Args:
            record_id: Identifier to look up.
            copy: Whether to return a deep copy (default True).

        Returns:
            The record, or None if not present.
        """
        record = self._records.get(record_id)
        if record is None:
            return None
        return cp.deepcopy(record) if copy else record

    def has(self, record_id: int) -> bool:
        return record_id in self._records

    def set(self, record_id: int, record: RecordT) -> None:
        """Store a deep copy of record under record_id.

        Overwrites unconditionally; existence checks are the caller's job.

        Raises:
            ValueError: If record_id does not match record.id.
        """
        if record.id != record_id:
            raise ValueError(f"Record ID {record.id} does not match key {record_id}")
        self._records[record_id] = cp.deepcopy(record)

    def all_values(self, copy: bool = True) -> list[RecordT]:
        """All records in first-insertion order.

        Args:
            copy: Whether to return deep copies (default True).
        """
        if copy:
            return [cp.deepcopy(record) for record in self._records.values()]
        return list(self._records.values())

    def ids(self) -> Iterator[int]:
        yield from list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records
