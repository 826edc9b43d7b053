"""Core type definitions for conceptsync."""

type Copy[T] = T
"""Type alias indicating a value is a copy detached from concept state.

When you see `Copy[T]` in a return type, the returned value is a deep copy.
Mutations to this copy do NOT affect the store. To persist changes,
explicitly write back via `concept.update(record_id, changes)`.
"""

type RecordId = int
"""Identifier of a record within a single concept's store."""
