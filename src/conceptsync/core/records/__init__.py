"""Record types stored by concepts and their partial-update models."""

from conceptsync.core.records.models import (
    PokemonEntry,
    PokemonEntryUpdate,
    PokemonTypeRecord,
    PokemonTypeUpdate,
    Record,
    RecordUpdate,
    validate_record_id,
)

__all__ = [
    "Record",
    "RecordUpdate",
    "PokemonEntry",
    "PokemonEntryUpdate",
    "PokemonTypeRecord",
    "PokemonTypeUpdate",
    "validate_record_id",
]
