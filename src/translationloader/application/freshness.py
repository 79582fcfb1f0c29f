"""
Freshness query.

Lets cache layers ask whether translations changed since they were built.
"""

from __future__ import annotations

from datetime import datetime

from translationloader.infrastructure.sqlite.store import TranslationStore


class FreshnessService:
    """Read-only freshness checks against the translation store."""

    def __init__(self, store: TranslationStore) -> None:
        self.store = store

    def count_updated_since(self, timestamp: datetime | int | float) -> int:
        """
        Count translations updated strictly after a timestamp.

        Args:
            timestamp: datetime (naive = UTC) or POSIX timestamp

        Returns:
            Number of translations with date_updated > timestamp
        """
        return self.store.count_updated_since(timestamp)

    def is_stale(self, timestamp: datetime | int | float) -> bool:
        """True if anything changed after a cache built at `timestamp`."""
        return self.count_updated_since(timestamp) > 0
