"""SyncEngine: reference coordinator for concept notifications.

Concepts are constructed with the engine as their trigger. The engine keeps a
bounded history of events and dispatches each one to the handlers registered
for that concept, so cross-concept reactions live here instead of inside the
concepts.

Usage:
    engine = SyncEngine()
    types = TypeConcept(engine)
    entries = PokemonEntryConcept(engine)

    @engine.on("Type")
    def refresh_type_badges(event: SyncEvent) -> None:
        ...

    types.update(2, PokemonTypeUpdate(color_hex="#EE8130"))
    engine.events("Type")[-1].record_id  # 2
"""

from __future__ import annotations

import logging
import threading
import time
from collections import deque
from collections.abc import Callable

from conceptsync.config import SyncSettings
from conceptsync.sync.models import SyncEvent
from conceptsync.sync.protocol import SyncHandler

logger = logging.getLogger(__name__)

WILDCARD = "*"
"""Concept name that subscribes a handler to every event."""


class SyncEngine:
    """Receives `(concept_name, record_id)` notifications and fans them out.

    Handlers run synchronously, in registration order, with concept-specific
    handlers before wildcard ones. Whether a failing handler aborts the
    originating create/update is decided by `propagate_handler_errors`.

    Args:
        settings: Engine settings (defaults loaded from SYNC_* env vars).
    """

    def __init__(self, settings: SyncSettings | None = None):
        self._settings = settings or SyncSettings()
        self._handlers: dict[str, list[SyncHandler]] = {}
        self._history: deque[SyncEvent] = deque(maxlen=self._settings.history_limit)
        self._sequence = 0
        self._lock = threading.RLock()

    @property
    def settings(self) -> SyncSettings:
        return self._settings

    def __call__(self, concept_name: str, record_id: int | str) -> None:
        """Trigger entry point handed to concepts."""
        with self._lock:
            event = SyncEvent(
                concept=concept_name,
                record_id=record_id,
                sequence=self._sequence,
                timestamp=time.time(),
            )
            self._sequence += 1
            self._history.append(event)
            handlers = [*self._handlers.get(concept_name, ()), *self._handlers.get(WILDCARD, ())]

        logger.debug(
            "Sync event #%d: %s %s -> %d handler(s)",
            event.sequence,
            concept_name,
            record_id,
            len(handlers),
        )
        for handler in handlers:
            self._dispatch(handler, event)

    def _dispatch(self, handler: SyncHandler, event: SyncEvent) -> None:
        if self._settings.propagate_handler_errors:
            handler(event)
            return
        try:
            handler(event)
        except Exception:
            logger.exception(
                "Sync handler %s failed for %s %s",
                getattr(handler, "__name__", repr(handler)),
                event.concept,
                event.record_id,
            )

    def register(self, concept_name: str, handler: SyncHandler) -> None:
        """Register handler for events from concept_name ("*" for all concepts)."""
        with self._lock:
            self._handlers.setdefault(concept_name, []).append(handler)

    def unregister(self, concept_name: str, handler: SyncHandler) -> bool:
        """Remove a previously registered handler.

        Returns:
            True if the handler was registered, False otherwise.
        """
        with self._lock:
            handlers = self._handlers.get(concept_name, [])
            if handler not in handlers:
                return False
            handlers.remove(handler)
            return True

    def on(self, concept_name: str) -> Callable[[SyncHandler], SyncHandler]:
        """Decorator form of `register`."""

        def decorator(handler: SyncHandler) -> SyncHandler:
            self.register(concept_name, handler)
            return handler

        return decorator

    def events(self, concept: str | None = None) -> list[SyncEvent]:
        """Recorded events, oldest first, optionally filtered by concept name."""
        with self._lock:
            if concept is None:
                return list(self._history)
            return [event for event in self._history if event.concept == concept]

    def clear(self) -> None:
        """Clear recorded history. Sequence numbers keep counting."""
        with self._lock:
            self._history.clear()
