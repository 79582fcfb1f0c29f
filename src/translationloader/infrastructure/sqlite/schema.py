"""
SQLite schema for the translations table.

The table normally pre-exists (it is owned by the application that reads
the translations). initialize_schema() exists for local databases and tests;
there are no migrations.

Schema Version: 1
"""

from __future__ import annotations

import logging
import sqlite3

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

TRANSLATIONS_TABLE = "translations"

SCHEMA_SQL = """
-- ============================================================================
-- Translations (natural key: trans_key + trans_locale + message_domain)
-- ============================================================================

CREATE TABLE IF NOT EXISTS translations (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    trans_key TEXT NOT NULL,
    trans_locale TEXT NOT NULL,
    message_domain TEXT NOT NULL,
    translation TEXT NOT NULL DEFAULT '',
    date_updated TEXT NOT NULL,
    UNIQUE(trans_key, trans_locale, message_domain)
);

CREATE INDEX IF NOT EXISTS idx_translations_date_updated
    ON translations(date_updated);

-- ============================================================================
-- Schema metadata
-- ============================================================================

CREATE TABLE IF NOT EXISTS schema_meta (
    key TEXT PRIMARY KEY,
    value TEXT
);
"""


def initialize_schema(connection: sqlite3.Connection) -> None:
    """
    Create the translations table if it doesn't exist.

    Safe to call multiple times - uses CREATE TABLE IF NOT EXISTS.
    """
    connection.executescript(SCHEMA_SQL)
    connection.execute(
        "INSERT OR REPLACE INTO schema_meta (key, value) VALUES ('version', ?)",
        (str(SCHEMA_VERSION),),
    )
    connection.commit()
    logger.info("Database schema initialized (version %d)", SCHEMA_VERSION)
