"""
Translation sync engine.

Persists built catalogues into the translation store, upserting every
(key, locale, domain) triple:

    for locale -> for domain -> for (key, message):
        find by natural key; insert if absent, else overwrite message
        refresh date_updated, commit

Each write commits before the next pair is processed, so a failure leaves
every earlier pair persisted and a rerun picks up where it stopped.
With batch_per_domain the unit of commit is one (locale, domain) group.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone

from translationloader.application.reporting import ImportReporter
from translationloader.domain.catalogue import MessageCatalogue
from translationloader.domain.models import Translation
from translationloader.infrastructure.sqlite.store import TranslationStore

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SyncResult:
    """Counters for one sync run."""
    created: int = 0
    updated: int = 0
    deleted: int = 0
    locales: int = 0
    domains: int = 0

    @property
    def total(self) -> int:
        """Messages written (created + updated)."""
        return self.created + self.updated


class TranslationSyncService:
    """Upserts catalogue messages into the translation store."""

    def __init__(
        self,
        store: TranslationStore,
        reporter: ImportReporter | None = None,
        clock: Callable[[], datetime] = utc_now,
        batch_per_domain: bool = False,
    ) -> None:
        self.store = store
        self.reporter = reporter or ImportReporter()
        self.clock = clock
        self.batch_per_domain = batch_per_domain

    def sync(
        self,
        catalogues: Mapping[str, MessageCatalogue],
        clear_first: bool = False,
    ) -> SyncResult:
        """
        Persist catalogues.

        Args:
            catalogues: Dict of {locale: MessageCatalogue}
            clear_first: Delete every stored translation before writing

        Returns:
            SyncResult with created/updated/deleted counts

        Raises:
            PersistenceError: On the first failing store operation
        """
        result = SyncResult()

        if clear_first:
            logger.warning("Deleting all translations before import")
            result.deleted = self.store.delete_all()
            self.reporter.cleared(result.deleted)

        self.reporter.sync_started()
        for locale, catalogue in catalogues.items():
            self.reporter.locale_started(locale)
            for domain in catalogue.domains():
                entries = catalogue.entries(domain)
                if self.batch_per_domain:
                    with self.store.transaction():
                        created, updated = self._sync_domain(locale, domain, entries)
                else:
                    created, updated = self._sync_domain(locale, domain, entries)

                result.created += created
                result.updated += updated
                result.domains += 1
                self.reporter.domain_synced(locale, domain, len(entries))
                logger.debug(
                    "Synced %s.%s: %d created, %d updated", domain, locale, created, updated
                )

            result.locales += 1
            self.reporter.locale_finished(locale)

        logger.info(
            "Sync finished: %d created, %d updated, %d deleted",
            result.created, result.updated, result.deleted,
        )
        return result

    def _sync_domain(
        self, locale: str, domain: str, entries: Mapping[str, str]
    ) -> tuple[int, int]:
        created = updated = 0
        for key, message in entries.items():
            if self._upsert(key, locale, domain, message):
                created += 1
            else:
                updated += 1
        return created, updated

    def _upsert(self, key: str, locale: str, domain: str, message: str) -> bool:
        """Write one message. Returns True if a new row was created."""
        translation = self.store.find_by_natural_key(key, locale, domain)
        is_new = translation is None
        if is_new:
            translation = Translation(
                trans_key=key,
                trans_locale=locale,
                message_domain=domain,
            )

        translation.translation = message
        translation.date_updated = self.clock()
        self.store.save(translation)
        return is_new
