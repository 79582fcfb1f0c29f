"""
SQLite infrastructure package.

Provides SQLite storage for translations.
"""

from translationloader.infrastructure.sqlite.schema import (
    SCHEMA_SQL,
    initialize_schema,
)
from translationloader.infrastructure.sqlite.store import (
    TranslationStore,
    format_timestamp,
)

__all__ = [
    "SCHEMA_SQL",
    "TranslationStore",
    "format_timestamp",
    "initialize_schema",
]
