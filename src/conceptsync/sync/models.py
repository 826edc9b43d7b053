"""Data models for synchronization events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class SyncEvent:
    """One `data_updated` notification as seen by the coordinator.

    Attributes:
        concept: Name of the concept that fired (e.g. "PokemonEntry").
        record_id: Identifier of the created or updated record.
        sequence: Position of the event in the engine's lifetime, from 0.
        timestamp: Unix timestamp when the engine received the event.
    """

    concept: str
    record_id: int | str
    sequence: int
    timestamp: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "concept": self.concept,
            "record_id": self.record_id,
            "sequence": self.sequence,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SyncEvent:
        """Create from dictionary (for deserialization)."""
        return cls(
            concept=data["concept"],
            record_id=data["record_id"],
            sequence=data["sequence"],
            timestamp=data["timestamp"],
        )
