"""Concept: generic view/create/update service over one entity store.

A concept owns its store exclusively and announces every successful mutation
through the sync trigger it was constructed with. It never learns who is
listening.

Usage:
    class MoveConcept(Concept[MoveRecord, MoveUpdate]):
        name = "Move"
        update_model = MoveUpdate

        def create(self, record_id: int | None, title: str) -> MoveRecord:
            return self._insert(record_id, lambda rid: MoveRecord(rid, title))

Gotcha: records returned from any action are clones. Mutating them changes
nothing; write back with `update`.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any, ClassVar, Generic, TypeVar

from conceptsync.config import ConceptSettings
from conceptsync.core.errors import DuplicateIdentifierError
from conceptsync.core.records import Record, RecordUpdate, validate_record_id
from conceptsync.core.types import Copy
from conceptsync.storage.allocator import IdAllocator
from conceptsync.storage.local import LocalStore
from conceptsync.storage.protocol import EntityStore
from conceptsync.sync.protocol import SyncTrigger

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)
UpdateT = TypeVar("UpdateT", bound=RecordUpdate[Any])


class Concept(Generic[RecordT, UpdateT]):
    """Base class for concept services.

    Subclasses set `name` (the literal passed to the trigger) and
    `update_model`, and implement `create` with their own field list on top
    of `_insert`.

    Args:
        sync_trigger: Called as `sync_trigger(name, record_id)` after each
            successful create/update.
        store: Backing store (default: fresh LocalStore).
        settings: Concept settings (defaults loaded from CONCEPTS_* env vars).
    """

    name: ClassVar[str]
    update_model: ClassVar[type[Any]]

    def __init__(
        self,
        sync_trigger: SyncTrigger,
        store: EntityStore[RecordT] | None = None,
        settings: ConceptSettings | None = None,
    ):
        self._sync_trigger = sync_trigger
        self._store: EntityStore[RecordT] = store if store is not None else LocalStore()
        self._settings = settings or ConceptSettings()
        self._allocator = IdAllocator(
            is_taken=self._store.has if self._settings.reconcile_auto_ids else None
        )
        # Guards check-then-insert and read-modify-write
        self._lock = threading.RLock()

    def view(self, record_id: int) -> Copy[RecordT] | None:
        """Retrieve a record by id.

        Returns:
            A deep copy of the record, or None if no such id exists.
        """
        logger.info("%s.view: request for ID %s", self.name, record_id)
        record = self._store.get(record_id)
        if record is None:
            logger.warning("%s.view: ID %s not found", self.name, record_id)
        return record

    def _insert(self, record_id: int | None, build: Callable[[int], RecordT]) -> Copy[RecordT]:
        """Store a new record and fire the trigger.

        Args:
            record_id: Explicit id, or None to auto-assign the next sequential id.
            build: Constructs the record for the final id.

        Returns:
            Deep copy of the stored record.

        Raises:
            DuplicateIdentifierError: If the id is already in the store.
            ValueError: If the id or any field fails validation.
        """
        with self._lock:
            auto_assigned = record_id is None
            if record_id is None:
                record_id = self._allocator.peek()
            else:
                record_id = validate_record_id(record_id)
            if self._store.has(record_id):
                if auto_assigned:
                    # Blind counter: the colliding value is consumed
                    self._allocator.allocate()
                raise DuplicateIdentifierError(self.name, record_id)
            record = build(record_id)
            if auto_assigned:
                self._allocator.allocate()
            self._store.set(record_id, record)
            created = record.clone()
        logger.info("%s.create: created ID %s", self.name, record_id)
        self.data_updated(record_id)
        return created

    def update(
        self, record_id: int, changes: UpdateT | None = None, **fields: Any
    ) -> Copy[RecordT] | None:
        """Apply a partial update to an existing record.

        Changes come either as an update model or as keyword fields, not both.
        The trigger fires on every successful update, even if nothing changed.

        Returns:
            Deep copy of the updated record, or None if no such id exists
            (in which case the trigger is not fired).

        Raises:
            TypeError: If both `changes` and keyword fields are given, or a
                keyword is not an updatable field.
            ValueError: If the resulting record fails validation.
        """
        if changes is not None and fields:
            raise TypeError("Pass either an update model or keyword fields, not both")
        if changes is None:
            changes = self.update_model(**fields)

        with self._lock:
            current = self._store.get(record_id, copy=False)
            if current is None:
                logger.warning("%s.update: ID %s not found", self.name, record_id)
                return None
            updated = changes.apply_to(current)
            self._store.set(record_id, updated)
            result = updated.clone()
        logger.info("%s.update: updated ID %s", self.name, record_id)
        self.data_updated(record_id)
        return result

    def data_updated(self, record_id: int) -> None:
        """Output action: announce that record_id was created or modified."""
        logger.debug("%s.data_updated: data for ID %s has been updated", self.name, record_id)
        self._sync_trigger(self.name, record_id)

    def all_records(self) -> list[Copy[RecordT]]:
        """Deep copies of every record, in first-insertion order."""
        return self._store.all_values(copy=True)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._store
