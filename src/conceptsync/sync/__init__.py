"""Synchronization boundary between concepts and their coordinator.

Usage:
    from conceptsync.sync import SyncEngine, SyncEvent

    engine = SyncEngine()
    concept = TypeConcept(engine)

    # Or any callable with the trigger shape
    concept = TypeConcept(lambda name, record_id: None)
"""

from conceptsync.sync.engine import WILDCARD, SyncEngine
from conceptsync.sync.models import SyncEvent
from conceptsync.sync.protocol import SyncHandler, SyncTrigger

__all__ = [
    "SyncTrigger",
    "SyncHandler",
    "SyncEvent",
    "SyncEngine",
    "WILDCARD",
]
