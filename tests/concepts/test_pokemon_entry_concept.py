"""Tests for PokemonEntryConcept actions and notifications."""

import pytest

from conceptsync import (
    ConceptSettings,
    DuplicateIdentifierError,
    PokemonEntry,
    PokemonEntryConcept,
    PokemonEntryUpdate,
)


def create_pikachu(entries):
    return entries.create(25, "Pikachu", "Mouse", [6], [101, 102, 103, 104], 1001)


def test_create_and_view_round_trip(entries):
    created = entries.create(None, "X", "Unknown", [1], [103], 1001)

    viewed = entries.view(created.id)

    assert viewed == created
    assert viewed is not created


def test_create_does_not_alias_caller_lists(entries):
    type_ids = [2, 7]
    entries.create(6, "Charizard", "Flame", type_ids, [105], 1001)

    type_ids.append(3)

    assert entries.view(6).type_ids == [2, 7]


def test_returned_sequences_are_independent(entries):
    created = create_pikachu(entries)
    created.moveset_ids.append(999)
    viewed = entries.view(25)
    viewed.type_ids.clear()

    assert entries.view(25).moveset_ids == [101, 102, 103, 104]
    assert entries.view(25).type_ids == [6]


def test_record_returned_by_update_is_independent(entries):
    create_pikachu(entries)
    updated = entries.update(25, PokemonEntryUpdate(type_ids=[6, 7]))

    updated.type_ids.append(99)
    updated.moveset_ids.clear()
    updated.name = "Mutated"

    stored = entries.view(25)
    assert stored.type_ids == [6, 7]
    assert stored.moveset_ids == [101, 102, 103, 104]
    assert stored.name == "Pikachu"


def test_records_from_all_records_are_independent(entries):
    create_pikachu(entries)
    entries.all_records()[0].type_ids.append(99)

    assert entries.view(25).type_ids == [6]


def test_notifications(entries, trigger):
    create_pikachu(entries)
    entries.view(25)
    entries.update(25, PokemonEntryUpdate(description="Electric mouse"))

    assert trigger.calls == [("PokemonEntry", 25), ("PokemonEntry", 25)]


def test_duplicate_pokedex_number(entries, trigger):
    create_pikachu(entries)
    with pytest.raises(DuplicateIdentifierError):
        entries.create(25, "Raichu", "Evolved", [6], [], 1001)
    assert entries.view(25).name == "Pikachu"
    assert len(trigger.calls) == 1


def test_update_replaces_sequences_wholesale(entries):
    create_pikachu(entries)

    updated = entries.update(25, PokemonEntryUpdate(moveset_ids=[101]))

    assert updated.moveset_ids == [101]
    assert updated.type_ids == [6]
    assert updated.name == "Pikachu"


def test_update_cannot_change_id(entries):
    create_pikachu(entries)
    with pytest.raises(TypeError):
        entries.update(25, id=26)
    assert 26 not in entries


def test_update_supplied_list_not_aliased(entries):
    create_pikachu(entries)
    moves = [101]
    entries.update(25, PokemonEntryUpdate(moveset_ids=moves))

    moves.append(102)

    assert entries.view(25).moveset_ids == [101]


def test_update_missing(entries, trigger):
    assert entries.update(999, PokemonEntryUpdate(name="Missingno")) is None
    assert trigger.calls == []


def test_auto_id_skips_explicit_ids_by_default(entries):
    entries.create(1, "Bulbasaur", "Seed", [3, 9], [106], 1001)

    mew = entries.create(None, "Mew", "Genes", [10], [], 1001)

    assert mew.id == 2


def test_blind_auto_id_collides_with_explicit_id(trigger):
    entries = PokemonEntryConcept(trigger, settings=ConceptSettings(reconcile_auto_ids=False))
    entries.create(1, "Bulbasaur", "Seed", [3, 9], [106], 1001)

    with pytest.raises(DuplicateIdentifierError):
        entries.create(None, "Mew", "Genes", [10], [], 1001)

    # The consumed counter value is not handed out again
    assert entries.create(None, "Mew", "Genes", [10], [], 1001).id == 2


def test_auto_id_unaffected_by_high_explicit_ids(entries):
    entries.create(493, "Arceus", "Alpha", [1], [], 1004)
    assert entries.create(None, "A", "", [], [], 1).id == 1


def test_all_records(entries):
    create_pikachu(entries)
    entries.create(1, "Bulbasaur", "Seed", [3, 9], [106], 1001)

    records = entries.all_records()

    assert [r.id for r in records] == [25, 1]
    assert all(isinstance(r, PokemonEntry) for r in records)
