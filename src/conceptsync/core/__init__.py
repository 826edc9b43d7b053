"""Core functionalities: stateless types, records and errors.

Architecture Note:
    core/ holds pure building blocks with no runtime state.
    For stateful services, see storage/, concepts/ and sync/.
"""

from conceptsync.core.errors import ConceptError, DuplicateIdentifierError
from conceptsync.core.pokemon_types import (
    ALL_TYPE_IDS,
    TYPE_ID_TO_NAME,
    TYPE_NAME_TO_ID,
    PokemonType,
    type_name,
)
from conceptsync.core.records import (
    PokemonEntry,
    PokemonEntryUpdate,
    PokemonTypeRecord,
    PokemonTypeUpdate,
    Record,
    RecordUpdate,
    validate_record_id,
)
from conceptsync.core.types import Copy, RecordId

__all__ = [
    # Types
    "Copy",
    "RecordId",
    # Errors
    "ConceptError",
    "DuplicateIdentifierError",
    # Pokémon types
    "PokemonType",
    "TYPE_NAME_TO_ID",
    "TYPE_ID_TO_NAME",
    "ALL_TYPE_IDS",
    "type_name",
    # Records
    "Record",
    "RecordUpdate",
    "PokemonEntry",
    "PokemonEntryUpdate",
    "PokemonTypeRecord",
    "PokemonTypeUpdate",
    "validate_record_id",
]
