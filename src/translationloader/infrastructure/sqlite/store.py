"""
SQLite-backed translation store.

Provides the persistence operations the sync engine and cache layers need:
- Lookup by natural key (key, locale, domain)
- Insert / update of single rows
- Bulk clear
- Freshness counts

Uses stdlib sqlite3 with no ORM. Every sqlite3 error is surfaced as
PersistenceError.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path

from translationloader.domain.errors import PersistenceError
from translationloader.domain.models import Translation
from translationloader.infrastructure.sqlite.schema import initialize_schema

logger = logging.getLogger(__name__)

# Fixed precision so that lexical order of stored values is chronological.
# The year is padded separately: %Y is not zero-padded below 1000 on glibc.
_TIMESTAMP_SUFFIX_FORMAT = "-%m-%dT%H:%M:%S.%f+00:00"

_COLUMNS = "id, trans_key, trans_locale, message_domain, translation, date_updated"


def format_timestamp(value: datetime | int | float) -> str:
    """
    Normalize a timestamp to the stored text form.

    Args:
        value: datetime (naive values are taken as UTC) or POSIX timestamp

    Returns:
        UTC ISO-8601 string with microseconds
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = datetime.fromtimestamp(value, tz=timezone.utc)
    elif not isinstance(value, datetime):
        raise TypeError(f"Expected datetime or POSIX timestamp, got {type(value).__name__}")
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return f"{value.year:04d}" + value.strftime(_TIMESTAMP_SUFFIX_FORMAT)


def _row_to_translation(row: sqlite3.Row) -> Translation:
    return Translation(
        id=row["id"],
        trans_key=row["trans_key"],
        trans_locale=row["trans_locale"],
        message_domain=row["message_domain"],
        translation=row["translation"],
        date_updated=(
            datetime.fromisoformat(row["date_updated"]) if row["date_updated"] else None
        ),
    )


class TranslationStore:
    """
    SQLite storage for translations.

    Usage:
        store = TranslationStore(Path("output/translations.db"))
        store.initialize_schema()

        row = store.find_by_natural_key("greeting", "en", "messages")
        if row is None:
            row = Translation("greeting", "en", "messages")
        row.translation = "Hello"
        row.date_updated = datetime.now(timezone.utc)
        store.save(row)
    """

    def __init__(self, db_path: Path | str) -> None:
        """
        Initialize translation store.

        Args:
            db_path: Path to SQLite database file (created if not exists),
                     or ":memory:"
        """
        self.db_path = db_path if str(db_path) == ":memory:" else Path(db_path)
        self._connection: sqlite3.Connection | None = None
        self._in_transaction = False
        logger.info("TranslationStore initialized: %s", self.db_path)

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._connection is None:
            if isinstance(self.db_path, Path):
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
            try:
                self._connection = sqlite3.connect(str(self.db_path))
            except sqlite3.Error as e:
                raise PersistenceError("connect", e) from e
            self._connection.row_factory = sqlite3.Row
            logger.debug("Database connection established")
        return self._connection

    def close(self) -> None:
        """Close database connection."""
        if self._connection:
            self._connection.close()
            self._connection = None
            logger.debug("Database connection closed")

    def __enter__(self) -> TranslationStore:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def initialize_schema(self) -> None:
        """Create the translations table if it doesn't exist."""
        try:
            initialize_schema(self._get_connection())
        except sqlite3.Error as e:
            raise PersistenceError("initialize_schema", e) from e

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """
        Group writes into one transaction.

        Commits when the block succeeds, rolls back when it raises.
        save() calls inside the block do not commit on their own.
        """
        conn = self._get_connection()
        self._in_transaction = True
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise PersistenceError("transaction", e) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            self._in_transaction = False

    # ========================================================================
    # Reads
    # ========================================================================

    def find_by_natural_key(
        self, trans_key: str, trans_locale: str, message_domain: str
    ) -> Translation | None:
        """Get a translation by (key, locale, domain)."""
        try:
            row = self._get_connection().execute(
                f"""
                SELECT {_COLUMNS} FROM translations
                WHERE trans_key = ? AND trans_locale = ? AND message_domain = ?
            """,
                (trans_key, trans_locale, message_domain),
            ).fetchone()
        except sqlite3.Error as e:
            raise PersistenceError("find_by_natural_key", e) from e

        return _row_to_translation(row) if row else None

    def count_updated_since(self, timestamp: datetime | int | float) -> int:
        """
        Count translations updated strictly after a timestamp.

        Args:
            timestamp: datetime (naive = UTC) or POSIX timestamp

        Returns:
            Number of rows with date_updated > timestamp
        """
        try:
            row = self._get_connection().execute(
                "SELECT COUNT(*) FROM translations WHERE date_updated > ?",
                (format_timestamp(timestamp),),
            ).fetchone()
        except sqlite3.Error as e:
            raise PersistenceError("count_updated_since", e) from e
        return int(row[0])

    def count(self) -> int:
        """Total number of translations."""
        try:
            row = self._get_connection().execute(
                "SELECT COUNT(*) FROM translations"
            ).fetchone()
        except sqlite3.Error as e:
            raise PersistenceError("count", e) from e
        return int(row[0])

    def all(self) -> list[Translation]:
        """All translations, ordered by locale, domain and key."""
        try:
            rows = self._get_connection().execute(
                f"""
                SELECT {_COLUMNS} FROM translations
                ORDER BY trans_locale, message_domain, trans_key
            """
            ).fetchall()
        except sqlite3.Error as e:
            raise PersistenceError("all", e) from e
        return [_row_to_translation(row) for row in rows]

    # ========================================================================
    # Writes
    # ========================================================================

    def save(self, translation: Translation, commit: bool = True) -> Translation:
        """
        Insert or update a translation.

        Rows without an id are inserted, others updated by id. The write is
        committed immediately unless commit=False or a transaction() block
        is open.

        Args:
            translation: Translation to persist (id is set on insert)
            commit: Whether to commit after the write

        Returns:
            The same Translation with id populated
        """
        if translation.date_updated is None:
            translation.date_updated = datetime.now(timezone.utc)
        date_updated = format_timestamp(translation.date_updated)

        conn = self._get_connection()
        try:
            if translation.id is None:
                cursor = conn.execute(
                    """
                    INSERT INTO translations
                        (trans_key, trans_locale, message_domain, translation, date_updated)
                    VALUES (?, ?, ?, ?, ?)
                """,
                    (
                        translation.trans_key,
                        translation.trans_locale,
                        translation.message_domain,
                        translation.translation,
                        date_updated,
                    ),
                )
                translation.id = cursor.lastrowid
            else:
                conn.execute(
                    """
                    UPDATE translations
                    SET translation = ?, date_updated = ?
                    WHERE id = ?
                """,
                    (translation.translation, date_updated, translation.id),
                )
            if commit and not self._in_transaction:
                conn.commit()
        except sqlite3.Error as e:
            if not self._in_transaction:
                conn.rollback()
            raise PersistenceError("save", e) from e

        return translation

    def delete_all(self) -> int:
        """
        Delete every translation in one transaction.

        Returns:
            Number of rows deleted
        """
        conn = self._get_connection()
        try:
            cursor = conn.execute("DELETE FROM translations")
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise PersistenceError("delete_all", e) from e

        deleted = cursor.rowcount
        logger.info("Deleted %d translations", deleted)
        return deleted
