"""
Domain models for translationloader.

This module contains the entities that flow through an import run:
- Translation rows persisted by the sync engine
- File candidates produced by discovery

These models are pure data structures with no I/O dependencies.
They are serialized to/from SQLite via the infrastructure layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


DEFAULT_DOMAIN = "messages"


@dataclass
class Translation:
    """
    A single persisted message.

    Attributes:
        id: Row identifier (None until first saved)
        trans_key: Message key, e.g. "form.submit"
        trans_locale: Locale code, e.g. "en" or "de_CH"
        message_domain: Message domain, e.g. "messages" or "validators"
        translation: Message text
        date_updated: UTC timestamp of the last write
    """
    trans_key: str
    trans_locale: str
    message_domain: str
    translation: str = ""
    date_updated: datetime | None = None
    id: int | None = None

    @property
    def natural_key(self) -> tuple[str, str, str]:
        """(key, locale, domain) - unique across the translations table."""
        return (self.trans_key, self.trans_locale, self.message_domain)


@dataclass(frozen=True)
class FileCandidate:
    """A translation file named <domain>.<locale>.<extension>."""
    path: Path
    root: Path
    domain: str
    locale: str
    extension: str

    @property
    def filename(self) -> str:
        return self.path.name
