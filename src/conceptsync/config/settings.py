"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for concepts
and the synchronization engine.

Usage:
    from conceptsync.config import ConceptSettings, SyncSettings

    # Load from environment variables (CONCEPTS_*, SYNC_*)
    concept_settings = ConceptSettings()
    sync_settings = SyncSettings()

    # Or override with explicit values
    concept_settings = ConceptSettings(seed_demo_data=True)
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConceptSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for concept services.

    Attributes:
        reconcile_auto_ids: Skip ids already in the store when auto-assigning.
            When False the counter advances blindly and a collision with an
            explicitly created id raises DuplicateIdentifierError.
        seed_demo_data: Populate concepts with demo records in build_concepts().
        log_level: Level applied by configure_logging().

    Environment Variables:
        CONCEPTS_RECONCILE_AUTO_IDS
        CONCEPTS_SEED_DEMO_DATA
        CONCEPTS_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="CONCEPTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    reconcile_auto_ids: bool = True
    seed_demo_data: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class SyncSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for SyncEngine.

    Attributes:
        history_limit: Maximum number of events kept in memory.
        propagate_handler_errors: Re-raise handler failures to the concept's
            caller. When False they are logged and dispatch continues.

    Environment Variables:
        SYNC_HISTORY_LIMIT
        SYNC_PROPAGATE_HANDLER_ERRORS
    """

    model_config = SettingsConfigDict(
        env_prefix="SYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    history_limit: int = Field(default=1000, ge=0)
    propagate_handler_errors: bool = True


def configure_logging(settings: ConceptSettings | None = None) -> None:
    """Attach a basic stderr handler at the configured level. For scripts."""
    settings = settings or ConceptSettings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
