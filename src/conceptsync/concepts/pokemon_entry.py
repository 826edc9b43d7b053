"""PokemonEntry concept: static per-species Pokédex data."""

from __future__ import annotations

from collections.abc import Sequence

from conceptsync.concepts.base import Concept
from conceptsync.core.records import PokemonEntry, PokemonEntryUpdate
from conceptsync.core.types import Copy


class PokemonEntryConcept(Concept[PokemonEntry, PokemonEntryUpdate]):
    """Registry of Pokémon species keyed by National Pokédex number.

    Type, move and game ids are foreign keys into other concepts and are
    not checked here.
    """

    name = "PokemonEntry"
    update_model = PokemonEntryUpdate

    def create(
        self,
        record_id: int | None,
        name: str,
        description: str,
        type_ids: Sequence[int],
        moveset_ids: Sequence[int],
        origin_game_id: int,
    ) -> Copy[PokemonEntry]:
        """Create a species entry.

        Args:
            record_id: Pokédex number, or None to auto-assign.

        Raises:
            DuplicateIdentifierError: If the Pokédex number is taken.
        """
        return self._insert(
            record_id,
            lambda rid: PokemonEntry(
                id=rid,
                name=name,
                description=description,
                type_ids=list(type_ids),
                moveset_ids=list(moveset_ids),
                origin_game_id=origin_game_id,
            ),
        )
