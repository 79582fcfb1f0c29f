"""
Catalogue builder.

Turns discovered translation files into one merged catalogue per locale:

    discovery -> loader registry -> single-file catalogue -> merge into
    the accumulator for the file's locale

Files are processed strictly in discovery order, so a later file for the
same domain/locale overrides messages loaded earlier.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from translationloader.application.discovery import DiscoveryScanner
from translationloader.application.reporting import ImportReporter
from translationloader.domain.catalogue import MessageCatalogue
from translationloader.domain.errors import LoadError
from translationloader.domain.models import FileCandidate
from translationloader.infrastructure.loaders.registry import LoaderRegistry

logger = logging.getLogger(__name__)


class CatalogueBuilder:
    """
    Builds per-locale message catalogues across component roots.

    A file whose extension has no loader aborts the build
    (UnsupportedFormatError). A file that fails to parse aborts it too
    (LoadError) unless skip_invalid is set.
    """

    def __init__(
        self,
        registry: LoaderRegistry,
        scanner: DiscoveryScanner | None = None,
        reporter: ImportReporter | None = None,
        skip_invalid: bool = False,
    ) -> None:
        self.registry = registry
        self.scanner = scanner or DiscoveryScanner(registry.formats())
        self.reporter = reporter or ImportReporter()
        self.skip_invalid = skip_invalid
        self.loaded_files: list[FileCandidate] = []
        self.skipped_files: list[FileCandidate] = []

    def build(self, roots: Iterable[Path | str]) -> dict[str, MessageCatalogue]:
        """
        Build one catalogue per locale.

        Args:
            roots: Component roots, in traversal order

        Returns:
            Dict of {locale: MessageCatalogue}

        Raises:
            UnsupportedFormatError: If a qualifying file has no loader
            LoadError: If a file cannot be parsed and skip_invalid is off
        """
        catalogues: dict[str, MessageCatalogue] = {}
        self.loaded_files = []
        self.skipped_files = []

        for candidate in self.scanner.scan(roots, on_root=self.reporter.root_found):
            loader = self.registry.resolve(candidate.extension)

            try:
                loaded = loader.load(candidate.path, candidate.locale, candidate.domain)
            except LoadError as e:
                if not self.skip_invalid:
                    raise
                logger.warning("Skipping %s: %s", candidate.path, e.reason)
                self.skipped_files.append(candidate)
                self.reporter.file_skipped(candidate, e)
                continue

            if candidate.locale not in catalogues:
                catalogues[candidate.locale] = MessageCatalogue(candidate.locale)
            catalogues[candidate.locale].merge(loaded)

            self.loaded_files.append(candidate)
            self.reporter.file_loaded(candidate)
            logger.debug(
                "Merged %d messages from %s into %s catalogue",
                len(loaded), candidate.path, candidate.locale,
            )

        logger.info(
            "Built %d catalogues from %d files (%d skipped)",
            len(catalogues), len(self.loaded_files), len(self.skipped_files),
        )
        return catalogues
