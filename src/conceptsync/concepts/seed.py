"""Demo records for the built-in concepts.

Seeding goes through `create`, so every seeded record fires the trigger.

Usage:
    types, entries = build_concepts(engine, ConceptSettings(seed_demo_data=True))
"""

from __future__ import annotations

import logging

from conceptsync.concepts.pokemon_entry import PokemonEntryConcept
from conceptsync.concepts.type import TypeConcept
from conceptsync.config import ConceptSettings
from conceptsync.core.pokemon_types import PokemonType as T
from conceptsync.sync.protocol import SyncTrigger

logger = logging.getLogger(__name__)

# (type, color, {defending type: multiplier})
DEMO_TYPES: list[tuple[T, str, dict[int, float]]] = [
    (T.NORMAL, "#A8A878", {T.GHOST: 0}),
    (T.FIRE, "#F08030", {T.GRASS: 2, T.WATER: 0.5}),
    (T.GRASS, "#78C850", {T.FIRE: 0.5, T.WATER: 2}),
    (T.WATER, "#6890F0", {T.FIRE: 2, T.GRASS: 0.5}),
    (T.ELECTRIC, "#F8D030", {T.WATER: 2}),
    (T.FLYING, "#A890F0", {T.GRASS: 2, T.ELECTRIC: 0.5, T.ROCK: 0.5, T.FIGHTING: 2}),
    (T.GHOST, "#705898", {T.NORMAL: 0}),
    (T.POISON, "#A040A0", {T.GRASS: 2, T.POISON: 0.5, T.GROUND: 0.5, T.ROCK: 0.5, T.GHOST: 0.5}),
]

# Moves: 101 Thunderbolt, 102 Quick Attack, 103 Tackle, 104 Growl,
# 105 Flamethrower, 106 Vine Whip. Games: 1001 Red, 1004 Sword.
DEMO_POKEMON: list[tuple[int, str, str, list[int], list[int], int]] = [
    (
        25,
        "Pikachu",
        "It stores electricity in its cheeks. When it's angry, it discharges "
        "electricity from the sacs.",
        [T.ELECTRIC],
        [101, 102, 103, 104],
        1001,
    ),
    (
        6,
        "Charizard",
        "It spits fire that is hot enough to melt boulders. It may cause forest "
        "fires if it's not careful.",
        [T.FIRE, T.FLYING],
        [105, 102, 103, 104],
        1001,
    ),
    (
        1,
        "Bulbasaur",
        "A strange seed was planted on its back at birth. The plant sprouts and "
        "grows larger as it grows.",
        [T.GRASS, T.POISON],
        [106, 103, 104],
        1001,
    ),
    (
        493,
        "Arceus",
        "It is said to have emerged from an egg in a vortex of nothingness, then "
        "shaped the world with its 1,000 arms.",
        [T.NORMAL],
        [102, 103, 104],
        1004,
    ),
]


def seed_types(concept: TypeConcept) -> None:
    """Create the demo types."""
    for type_, color, relations in DEMO_TYPES:
        concept.create(
            int(type_),
            type_.display_name,
            color,
            {int(defending): multiplier for defending, multiplier in relations.items()},
        )
    logger.info("Seeded %d types", len(DEMO_TYPES))


def seed_pokemon_entries(concept: PokemonEntryConcept) -> None:
    """Create the demo species."""
    for pokedex_id, name, description, type_ids, moveset_ids, game_id in DEMO_POKEMON:
        concept.create(
            pokedex_id,
            name,
            description,
            [int(type_id) for type_id in type_ids],
            moveset_ids,
            game_id,
        )
    logger.info("Seeded %d Pokémon entries", len(DEMO_POKEMON))


def build_concepts(
    sync_trigger: SyncTrigger, settings: ConceptSettings | None = None
) -> tuple[TypeConcept, PokemonEntryConcept]:
    """Construct both built-in concepts on one trigger, seeding them if configured."""
    settings = settings or ConceptSettings()
    types = TypeConcept(sync_trigger, settings=settings)
    entries = PokemonEntryConcept(sync_trigger, settings=settings)
    if settings.seed_demo_data:
        seed_types(types)
        seed_pokemon_entries(entries)
    return types, entries
