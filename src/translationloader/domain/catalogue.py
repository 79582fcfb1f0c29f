"""
Message catalogue.

A catalogue holds the messages of one locale, grouped by domain:

    catalogue = MessageCatalogue("en")
    catalogue.add({"greeting": "Hi"}, domain="messages")
    catalogue.entries("messages")   # {"greeting": "Hi"}

Catalogues live only for the duration of an import run. The sync engine
persists their flattened (key, locale, domain, message) tuples.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from translationloader.domain.errors import LocaleMismatchError
from translationloader.domain.models import DEFAULT_DOMAIN


class MessageCatalogue:
    """Per-locale mapping of domain -> (key -> message)."""

    def __init__(
        self,
        locale: str,
        messages: Mapping[str, Mapping[str, str]] | None = None,
    ) -> None:
        self.locale = locale
        self._messages: dict[str, dict[str, str]] = {}
        for domain, entries in (messages or {}).items():
            self.add(entries, domain)

    def add(self, messages: Mapping[str, str], domain: str = DEFAULT_DOMAIN) -> None:
        """Add messages to a domain, replacing existing keys."""
        self._messages.setdefault(domain, {}).update(messages)

    def set(self, key: str, message: str, domain: str = DEFAULT_DOMAIN) -> None:
        self._messages.setdefault(domain, {})[key] = message

    def get(self, key: str, domain: str = DEFAULT_DOMAIN) -> str | None:
        return self._messages.get(domain, {}).get(key)

    def has(self, key: str, domain: str = DEFAULT_DOMAIN) -> bool:
        return key in self._messages.get(domain, {})

    def merge(self, other: MessageCatalogue) -> None:
        """
        Merge another catalogue into this one.

        On keys present in both, the incoming message wins.

        Raises:
            LocaleMismatchError: If the catalogues are for different locales
        """
        if other.locale != self.locale:
            raise LocaleMismatchError(self.locale, other.locale)
        for domain in other.domains():
            self.add(other.entries(domain), domain)

    def domains(self) -> list[str]:
        return list(self._messages)

    def entries(self, domain: str) -> dict[str, str]:
        return dict(self._messages.get(domain, {}))

    def all(self) -> dict[str, dict[str, str]]:
        return {domain: dict(entries) for domain, entries in self._messages.items()}

    def __iter__(self) -> Iterator[tuple[str, str, str]]:
        """Yield (domain, key, message) tuples."""
        for domain, entries in self._messages.items():
            for key, message in entries.items():
                yield domain, key, message

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._messages.values())

    def __repr__(self) -> str:
        return (
            f"MessageCatalogue(locale={self.locale!r}, "
            f"domains={self.domains()!r}, messages={len(self)})"
        )
