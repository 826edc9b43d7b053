"""Configuration module using Pydantic Settings.

Usage:
    from conceptsync.config import ConceptSettings, SyncSettings

    settings = ConceptSettings(reconcile_auto_ids=False)
    sync = SyncSettings(history_limit=50)
"""

from conceptsync.config.settings import ConceptSettings, SyncSettings, configure_logging

__all__ = [
    "ConceptSettings",
    "SyncSettings",
    "configure_logging",
]
