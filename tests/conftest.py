"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from conceptsync import ConceptSettings, PokemonEntryConcept, TypeConcept


class TriggerRecorder:
    """Stub sync trigger capturing every call."""

    def __init__(self):
        self.calls: list[tuple[str, int | str]] = []

    def __call__(self, concept_name: str, record_id: int | str) -> None:
        self.calls.append((concept_name, record_id))


@pytest.fixture
def trigger():
    """Fresh recording trigger."""
    return TriggerRecorder()


@pytest.fixture
def settings():
    """Settings independent of CONCEPTS_* environment variables."""
    return ConceptSettings(reconcile_auto_ids=True, seed_demo_data=False)


@pytest.fixture
def types(trigger, settings):
    """Empty TypeConcept wired to the recording trigger."""
    return TypeConcept(trigger, settings=settings)


@pytest.fixture
def entries(trigger, settings):
    """Empty PokemonEntryConcept wired to the recording trigger."""
    return PokemonEntryConcept(trigger, settings=settings)
