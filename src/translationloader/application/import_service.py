"""
Import orchestration.

Runs the whole pipeline for a set of component roots:
build catalogues, optionally clear the store, sync.

Catalogues are built before the store is touched, so a missing loader or
a broken file aborts the run before the irreversible clear.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from translationloader.application.catalogue_builder import CatalogueBuilder
from translationloader.application.reporting import ImportReporter
from translationloader.application.sync_service import SyncResult, TranslationSyncService

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Outcome of one import run."""
    messages: dict[str, int] = field(default_factory=dict)
    files_loaded: int = 0
    files_skipped: int = 0
    sync: SyncResult = field(default_factory=SyncResult)

    @property
    def locales(self) -> list[str]:
        return sorted(self.messages)


class ImportService:
    """Build + sync for one run."""

    def __init__(
        self,
        builder: CatalogueBuilder,
        sync_service: TranslationSyncService,
        reporter: ImportReporter | None = None,
    ) -> None:
        self.builder = builder
        self.sync_service = sync_service
        self.reporter = reporter or ImportReporter()

    def run(self, roots: Sequence[Path | str], clear: bool = False) -> ImportResult:
        """
        Import all translation files below the given roots.

        Args:
            roots: Component roots, in traversal order
            clear: Delete all stored translations before writing

        Returns:
            ImportResult with per-locale message counts and sync counters
        """
        logger.info("Importing translations from %d components (clear=%s)", len(roots), clear)
        self.reporter.import_started(roots, clear)

        catalogues = self.builder.build(roots)
        sync_result = self.sync_service.sync(catalogues, clear_first=clear)

        result = ImportResult(
            messages={locale: len(catalogue) for locale, catalogue in catalogues.items()},
            files_loaded=len(self.builder.loaded_files),
            files_skipped=len(self.builder.skipped_files),
            sync=sync_result,
        )
        self.reporter.import_finished(result)
        return result
