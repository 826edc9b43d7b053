"""Storage backends."""

from conceptsync.storage.allocator import IdAllocator
from conceptsync.storage.local import LocalStore
from conceptsync.storage.protocol import EntityStore

__all__ = [
    "EntityStore",
    "LocalStore",
    "IdAllocator",
]
