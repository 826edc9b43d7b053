"""Tests for TypeConcept actions and notifications."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from conceptsync import (
    DuplicateIdentifierError,
    PokemonTypeRecord,
    PokemonTypeUpdate,
    TypeConcept,
)

multipliers = st.sampled_from([0, 0.5, 1, 2])
relations = st.dictionaries(st.integers(min_value=1, max_value=19), multipliers, max_size=6)


def test_create_returns_copy_and_fires_trigger(types, trigger):
    fire = types.create(2, "Fire", "#F08030", {3: 2, 4: 0.5})

    assert fire == PokemonTypeRecord(2, "Fire", "#F08030", {3: 2, 4: 0.5})
    assert trigger.calls == [("Type", 2)]


def test_create_without_relations(types):
    assert types.create(1, "Normal", "#A8A878").damage_relations == {}


def test_create_duplicate_fails_and_keeps_first(types, trigger):
    types.create(5, "First", "#000000")

    with pytest.raises(DuplicateIdentifierError) as exc_info:
        types.create(5, "Second", "#FFFFFF")

    assert exc_info.value.concept == "Type"
    assert exc_info.value.record_id == 5
    assert types.view(5).name == "First"
    assert len(types) == 1
    assert trigger.calls == [("Type", 5)]


def test_duplicate_error_is_a_value_error(types):
    types.create(5, "First", "#000000")
    with pytest.raises(ValueError, match="already exists"):
        types.create(5, "Second", "#FFFFFF")


def test_auto_increment_on_empty_store(types):
    a = types.create(None, "A", "#000000")
    b = types.create(None, "B", "#000000")
    assert (a.id, b.id) == (1, 2)


def test_invalid_explicit_id_fails_without_side_effects(types, trigger):
    with pytest.raises(ValueError):
        types.create(0, "Zero", "#000000")
    assert len(types) == 0
    assert trigger.calls == []


def test_invalid_fields_leave_store_unchanged(types, trigger):
    with pytest.raises(ValueError):
        types.create(2, "Fire", "#F08030", {3: -2})
    assert 2 not in types
    assert trigger.calls == []


def test_failed_auto_create_does_not_consume_an_id(types, trigger):
    with pytest.raises(ValueError):
        types.create(None, "Bad", "#000000", {3: -1})

    assert types.create(None, "Good", "#000000").id == 1
    assert trigger.calls == [("Type", 1)]


def test_view_missing_returns_none_without_trigger(types, trigger, caplog):
    with caplog.at_level("WARNING"):
        assert types.view(999) is None
    assert trigger.calls == []
    assert "not found" in caplog.text


def test_view_never_fires_trigger(types, trigger):
    types.create(2, "Fire", "#F08030")
    trigger.calls.clear()

    types.view(2)
    types.all_records()

    assert trigger.calls == []


def test_update_merges_damage_relations(types):
    types.create(1, "Normal", "#A8A878", {8: 0})

    updated = types.update(1, PokemonTypeUpdate(damage_relations={9: 2}))

    assert updated.damage_relations == {8: 0, 9: 2}
    assert types.view(1).damage_relations == {8: 0, 9: 2}


def test_update_missing_returns_none_without_trigger(types, trigger):
    assert types.update(999, PokemonTypeUpdate(name="Nothing")) is None
    assert trigger.calls == []


def test_update_fires_trigger_once_even_without_changes(types, trigger):
    types.create(2, "Fire", "#F08030")
    trigger.calls.clear()

    types.update(2, PokemonTypeUpdate(name="Fire"))
    types.update(2)

    assert trigger.calls == [("Type", 2), ("Type", 2)]


def test_update_with_keyword_fields(types):
    types.create(2, "Fire", "#F08030", {3: 2})

    updated = types.update(2, color_hex="#EE8130", damage_relations={18: 2})

    assert updated.color_hex == "#EE8130"
    assert updated.damage_relations == {3: 2, 18: 2}


def test_update_rejects_model_and_keywords_together(types):
    types.create(2, "Fire", "#F08030")
    with pytest.raises(TypeError):
        types.update(2, PokemonTypeUpdate(name="A"), color_hex="#000000")


def test_update_rejects_unknown_keyword(types, trigger):
    types.create(2, "Fire", "#F08030")
    trigger.calls.clear()
    with pytest.raises(TypeError):
        types.update(2, id=3)
    assert trigger.calls == []


def test_failed_update_is_atomic(types, trigger):
    types.create(2, "Fire", "#F08030", {3: 2})
    trigger.calls.clear()

    with pytest.raises(ValueError):
        types.update(2, name="Blaze", damage_relations={4: -1})

    assert types.view(2) == PokemonTypeRecord(2, "Fire", "#F08030", {3: 2})
    assert trigger.calls == []


def test_all_records_in_insertion_order(types):
    types.create(4, "Water", "#6890F0")
    types.create(2, "Fire", "#F08030")
    types.update(4, name="Aqua")

    assert [t.name for t in types.all_records()] == ["Aqua", "Fire"]


def test_trigger_failure_propagates_after_store_write():
    def failing(concept_name, record_id):
        raise RuntimeError("coordinator down")

    concept = TypeConcept(failing)
    with pytest.raises(RuntimeError, match="coordinator down"):
        concept.create(2, "Fire", "#F08030")
    assert 2 in concept


@given(initial=relations, extra=relations)
def test_update_merge_property(initial, extra):
    """Existing keys survive unless overwritten; supplied keys always win."""
    concept = TypeConcept(lambda name, record_id: None)
    concept.create(1, "T", "#000000", initial)

    updated = concept.update(1, PokemonTypeUpdate(damage_relations=extra))

    assert updated.damage_relations == {**initial, **extra}
    assert set(initial) <= set(updated.damage_relations)


@given(initial=relations, mutation=relations)
def test_isolation_property(initial, mutation):
    """Mutating any returned record never changes a later view."""
    concept = TypeConcept(lambda name, record_id: None)
    returned = [
        concept.create(1, "T", "#000000", initial),
        concept.view(1),
        concept.update(1, PokemonTypeUpdate(name="T")),
        concept.all_records()[0],
    ]
    snapshot = concept.view(1)

    for record in returned:
        record.damage_relations.update(mutation)
        record.damage_relations[99] = 42
        record.name = "mutated"

    assert concept.view(1) == snapshot
