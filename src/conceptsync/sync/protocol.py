"""Protocols for the synchronization boundary.

Concepts depend only on `SyncTrigger`; whatever implements it decides what a
change means for the rest of the system.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from conceptsync.sync.models import SyncEvent


@runtime_checkable
class SyncTrigger(Protocol):
    """Callable a concept invokes once after every successful create/update.

    Any plain function with this shape qualifies:

        def trigger(concept_name: str, record_id: int | str) -> None: ...

    The return value is ignored and exceptions are not caught by the concept.
    """

    def __call__(self, concept_name: str, record_id: int | str, /) -> None: ...


@runtime_checkable
class SyncHandler(Protocol):
    """Reaction registered with SyncEngine for one concept (or all of them)."""

    def __call__(self, event: SyncEvent, /) -> None: ...
