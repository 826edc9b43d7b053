"""Concept services: independent state modules with a view/create/update surface."""

from conceptsync.concepts.base import Concept
from conceptsync.concepts.pokemon_entry import PokemonEntryConcept
from conceptsync.concepts.seed import build_concepts, seed_pokemon_entries, seed_types
from conceptsync.concepts.type import TypeConcept

__all__ = [
    "Concept",
    "PokemonEntryConcept",
    "TypeConcept",
    "build_concepts",
    "seed_types",
    "seed_pokemon_entries",
]
