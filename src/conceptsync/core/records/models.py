"""Record and partial-update models for the built-in concepts.

Records are plain dataclasses owned by a concept's store. Callers only ever
hold clones, so mutating a record obtained from a concept is harmless.

Update models are explicit optional-field structures: a field left as None
was not supplied and keeps its current value. Neither update model has an
`id` field, so identifiers cannot change after creation.

Usage:
    entry = PokemonEntry(25, "Pikachu", "Mouse Pokémon", [6], [101, 102], 1001)
    renamed = PokemonEntryUpdate(name="Raichu").apply_to(entry)

    fire = PokemonTypeRecord(2, "Fire", "#F08030", {3: 2.0})
    merged = PokemonTypeUpdate(damage_relations={4: 0.5}).apply_to(fire)
    # merged.damage_relations == {3: 2.0, 4: 0.5}
"""

from __future__ import annotations

import copy as cp
import dataclasses
import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Protocol, Self, TypeVar, runtime_checkable

RecordT = TypeVar("RecordT", bound="Record")


def validate_record_id(record_id: Any) -> int:
    """Check that an identifier is a positive integer.

    Raises:
        ValueError: If the identifier is not a positive int (bools rejected).
    """
    if isinstance(record_id, bool) or not isinstance(record_id, int) or record_id < 1:
        raise ValueError(f"Record ID must be a positive integer, got {record_id!r}")
    return int(record_id)


def _validate_damage_relations(relations: Any) -> dict[int, float]:
    result: dict[int, float] = {}
    for defending_id, multiplier in dict(relations).items():
        try:
            defending_id = validate_record_id(defending_id)
        except ValueError as e:
            raise ValueError(f"Invalid defending type id in damage relations: {e}") from e
        if isinstance(multiplier, bool) or not isinstance(multiplier, Real):
            raise ValueError(
                f"Damage multiplier against type {defending_id} must be a number, "
                f"got {multiplier!r}"
            )
        if not math.isfinite(multiplier) or multiplier < 0:
            raise ValueError(
                f"Damage multiplier against type {defending_id} must be a finite "
                f"non-negative number, got {multiplier}"
            )
        result[defending_id] = multiplier
    return result


@runtime_checkable
class Record(Protocol):
    """Anything a concept can store: an integer id plus a deep-clone operation."""

    id: int

    def clone(self) -> Self:
        """Return a structurally independent copy."""
        ...


class RecordUpdate(Protocol[RecordT]):
    """Partial update that produces a new record from the current one."""

    def apply_to(self, record: RecordT) -> RecordT:
        """Return a new record with the supplied fields applied.

        Must not mutate `record`.
        """
        ...


@dataclass(slots=True)
class PokemonEntry:
    """Static information about one Pokémon species.

    Attributes:
        id: National Pokédex number.
        name: Display name.
        description: Free-text Pokédex description.
        type_ids: Ordered references to type records.
        moveset_ids: Ordered references to move records.
        origin_game_id: Reference to the game the species debuted in.
    """

    id: int
    name: str
    description: str
    type_ids: list[int] = field(default_factory=list)
    moveset_ids: list[int] = field(default_factory=list)
    origin_game_id: int = 0

    def __post_init__(self) -> None:
        self.id = validate_record_id(self.id)
        # Own the sequences instead of aliasing the caller's
        self.type_ids = list(self.type_ids)
        self.moveset_ids = list(self.moveset_ids)

    def clone(self) -> PokemonEntry:
        return cp.deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass(slots=True)
class PokemonTypeRecord:
    """A Pokémon type and its offensive damage relations.

    Attributes:
        id: Type identifier (see PokemonType).
        name: Display name.
        color_hex: Color used when presenting the type.
        damage_relations: Defending type id -> damage multiplier (0, 0.5, 1, 2...).
    """

    id: int
    name: str
    color_hex: str
    damage_relations: dict[int, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.id = validate_record_id(self.id)
        self.damage_relations = _validate_damage_relations(self.damage_relations)

    def clone(self) -> PokemonTypeRecord:
        return cp.deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


def _supplied(update: Any) -> dict[str, Any]:
    """Fields explicitly set on an update model, deep-copied."""
    return {
        f.name: cp.deepcopy(getattr(update, f.name))
        for f in dataclasses.fields(update)
        if getattr(update, f.name) is not None
    }


@dataclass(frozen=True, slots=True)
class PokemonEntryUpdate:
    """Optional-field update for PokemonEntry. Sequences are replaced wholesale."""

    name: str | None = None
    description: str | None = None
    type_ids: list[int] | None = None
    moveset_ids: list[int] | None = None
    origin_game_id: int | None = None

    def supplied(self) -> dict[str, Any]:
        return _supplied(self)

    def apply_to(self, record: PokemonEntry) -> PokemonEntry:
        return dataclasses.replace(record.clone(), **self.supplied())


@dataclass(frozen=True, slots=True)
class PokemonTypeUpdate:
    """Optional-field update for PokemonTypeRecord.

    damage_relations is merged into the existing mapping: supplied keys
    overwrite, untouched keys persist.
    """

    name: str | None = None
    color_hex: str | None = None
    damage_relations: dict[int, float] | None = None

    def supplied(self) -> dict[str, Any]:
        return _supplied(self)

    def apply_to(self, record: PokemonTypeRecord) -> PokemonTypeRecord:
        changes = self.supplied()
        if "damage_relations" in changes:
            changes["damage_relations"] = {
                **record.damage_relations,
                **changes["damage_relations"],
            }
        return dataclasses.replace(record.clone(), **changes)
