"""conceptsync: independent concept state modules with change notifications.

Usage:
    from conceptsync import SyncEngine, TypeConcept, PokemonTypeUpdate

    engine = SyncEngine()
    types = TypeConcept(engine)

    fire = types.create(2, "Fire", "#F08030", {3: 2.0})
    types.update(2, PokemonTypeUpdate(damage_relations={4: 0.5}))
    types.view(2).damage_relations  # {3: 2.0, 4: 0.5}
    engine.events()                 # two SyncEvents for ("Type", 2)
"""

__version__ = "0.1.0"

# Concepts
from conceptsync.concepts import (
    Concept,
    PokemonEntryConcept,
    TypeConcept,
    build_concepts,
    seed_pokemon_entries,
    seed_types,
)

# Configuration
from conceptsync.config import ConceptSettings, SyncSettings, configure_logging

# Core primitives
from conceptsync.core import (
    ConceptError,
    Copy,
    DuplicateIdentifierError,
    PokemonEntry,
    PokemonEntryUpdate,
    PokemonType,
    PokemonTypeRecord,
    PokemonTypeUpdate,
    Record,
    RecordId,
)

# Storage
from conceptsync.storage import EntityStore, IdAllocator, LocalStore

# Synchronization
from conceptsync.sync import SyncEngine, SyncEvent, SyncHandler, SyncTrigger

__all__ = [
    # Version
    "__version__",
    # Core
    "Copy",
    "RecordId",
    "Record",
    "PokemonType",
    "PokemonEntry",
    "PokemonEntryUpdate",
    "PokemonTypeRecord",
    "PokemonTypeUpdate",
    "ConceptError",
    "DuplicateIdentifierError",
    # Storage
    "EntityStore",
    "LocalStore",
    "IdAllocator",
    # Concepts
    "Concept",
    "PokemonEntryConcept",
    "TypeConcept",
    "build_concepts",
    "seed_types",
    "seed_pokemon_entries",
    # Sync
    "SyncTrigger",
    "SyncHandler",
    "SyncEvent",
    "SyncEngine",
    # Config
    "ConceptSettings",
    "SyncSettings",
    "configure_logging",
]
