from conceptsync import (
    ConceptSettings,
    PokemonEntryUpdate,
    PokemonTypeUpdate,
    SyncEngine,
    SyncEvent,
    build_concepts,
    configure_logging,
)
from conceptsync.core.pokemon_types import PokemonType, type_name


def main() -> None:
    settings = ConceptSettings(seed_demo_data=True)
    configure_logging(settings)

    engine = SyncEngine()
    types, entries = build_concepts(engine, settings)

    # Cross-concept reaction lives in the coordinator, not in either concept
    @engine.on("Type")
    def report_type_change(event: SyncEvent) -> None:
        changed = types.view(int(event.record_id))
        holders = [e.name for e in entries.all_records() if event.record_id in e.type_ids]
        print(f"Type {changed.name} changed; affects {', '.join(holders) or 'no species'}.")

    print(f"Seeded {len(types)} types and {len(entries)} species ({len(engine.events())} events).")

    types.update(PokemonType.FIRE, PokemonTypeUpdate(damage_relations={PokemonType.STEEL: 2}))
    fire = types.view(PokemonType.FIRE)
    print(
        "Fire vs: "
        + ", ".join(f"{type_name(t)} x{m}" for t, m in sorted(fire.damage_relations.items()))
    )

    pikachu = entries.view(25)
    pikachu.name = "Not Pikachu"  # a copy; the store is untouched
    print(f"Stored name is still {entries.view(25).name}.")

    entries.update(25, PokemonEntryUpdate(moveset_ids=[101, 102]))
    mew = entries.create(None, "Mew", "Said to contain the genes of all Pokémon.", [10], [], 1001)
    print(f"Auto-assigned Mew ID {mew.id}; last event: {engine.events()[-1]}")


if __name__ == "__main__":
    main()
