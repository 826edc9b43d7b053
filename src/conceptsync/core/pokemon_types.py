"""Pokémon type identifiers and name lookups.

Usage:
    PokemonType.FIRE            # 2
    TYPE_ID_TO_NAME[2]          # "Fire"
    TYPE_NAME_TO_ID["Ghost"]    # 8
"""

from __future__ import annotations

from enum import IntEnum


class PokemonType(IntEnum):
    """Stable type identifiers. 5 is unassigned."""

    NORMAL = 1
    FIRE = 2
    GRASS = 3
    WATER = 4
    ELECTRIC = 6
    FLYING = 7
    GHOST = 8
    POISON = 9
    PSYCHIC = 10
    BUG = 11
    ROCK = 12
    GROUND = 13
    FIGHTING = 14
    ICE = 15
    DRAGON = 16
    DARK = 17
    STEEL = 18
    FAIRY = 19

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


TYPE_NAME_TO_ID: dict[str, int] = {t.display_name: int(t) for t in PokemonType}
TYPE_ID_TO_NAME: dict[int, str] = {type_id: name for name, type_id in TYPE_NAME_TO_ID.items()}
ALL_TYPE_IDS: frozenset[int] = frozenset(TYPE_ID_TO_NAME)


def type_name(type_id: int) -> str:
    """Display name for a type id.

    Raises:
        KeyError: If the id is not a known type.
    """
    return TYPE_ID_TO_NAME[type_id]
