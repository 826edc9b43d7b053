"""Type concept: Pokémon types and their damage relations."""

from __future__ import annotations

from collections.abc import Mapping

from conceptsync.concepts.base import Concept
from conceptsync.core.records import PokemonTypeRecord, PokemonTypeUpdate
from conceptsync.core.types import Copy


class TypeConcept(Concept[PokemonTypeRecord, PokemonTypeUpdate]):
    """Registry of Pokémon types.

    Updates merge damage relations into the existing mapping rather than
    replacing it; see PokemonTypeUpdate.
    """

    name = "Type"
    update_model = PokemonTypeUpdate

    def create(
        self,
        record_id: int | None,
        name: str,
        color_hex: str,
        damage_relations: Mapping[int, float] | None = None,
    ) -> Copy[PokemonTypeRecord]:
        """Create a type.

        Args:
            record_id: Type id (see PokemonType), or None to auto-assign.
            name: Display name.
            color_hex: Presentation color, e.g. "#F08030".
            damage_relations: Defending type id -> multiplier.

        Raises:
            DuplicateIdentifierError: If the type id is taken.
        """
        return self._insert(
            record_id,
            lambda rid: PokemonTypeRecord(
                id=rid,
                name=name,
                color_hex=color_hex,
                damage_relations=dict(damage_relations or {}),
            ),
        )
