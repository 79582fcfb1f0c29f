"""
Dependency injection container for the application.

This module provides a centralized way to create and manage application dependencies.
Components are created lazily on first access and shared afterwards.
"""

import logging
from pathlib import Path
from typing import Optional

from translationloader.application.catalogue_builder import CatalogueBuilder
from translationloader.application.discovery import DiscoveryScanner
from translationloader.application.freshness import FreshnessService
from translationloader.application.import_service import ImportService
from translationloader.application.reporting import ImportReporter
from translationloader.application.sync_service import TranslationSyncService
from translationloader.domain.config import ImportSettings
from translationloader.infrastructure.loaders.registry import LoaderRegistry
from translationloader.infrastructure.sqlite.store import TranslationStore

logger = logging.getLogger(__name__)


class Container:
    """
    Dependency injection container.

    Manages the creation and lifecycle of application services and infrastructure components.
    """

    def __init__(
        self,
        settings: Optional[ImportSettings] = None,
        reporter: Optional[ImportReporter] = None,
    ):
        """
        Initialize the container.

        Args:
            settings: Import settings (defaults if omitted)
            reporter: Progress listener shared by builder, sync and import services
        """
        self.settings = settings or ImportSettings()
        self.reporter = reporter or ImportReporter()

        self._registry: Optional[LoaderRegistry] = None
        self._scanner: Optional[DiscoveryScanner] = None
        self._builder: Optional[CatalogueBuilder] = None
        self._store: Optional[TranslationStore] = None
        self._sync_service: Optional[TranslationSyncService] = None
        self._freshness_service: Optional[FreshnessService] = None
        self._import_service: Optional[ImportService] = None

    @property
    def registry(self) -> LoaderRegistry:
        """Get the loader registry."""
        if self._registry is None:
            self._registry = LoaderRegistry(self.settings.loaders)
        return self._registry

    @property
    def scanner(self) -> DiscoveryScanner:
        """Get the discovery scanner."""
        if self._scanner is None:
            self._scanner = DiscoveryScanner(
                self.settings.accepted_formats,
                subdirectory=self.settings.translation_subdir,
            )
        return self._scanner

    @property
    def builder(self) -> CatalogueBuilder:
        """Get the catalogue builder."""
        if self._builder is None:
            self._builder = CatalogueBuilder(
                self.registry,
                scanner=self.scanner,
                reporter=self.reporter,
                skip_invalid=self.settings.skip_invalid_files,
            )
        return self._builder

    @property
    def store(self) -> TranslationStore:
        """Get the translation store (schema created on first access if enabled)."""
        if self._store is None:
            self._store = TranslationStore(Path(self.settings.database_path))
            if self.settings.initialize_schema:
                self._store.initialize_schema()
        return self._store

    @property
    def sync_service(self) -> TranslationSyncService:
        """Get the sync engine."""
        if self._sync_service is None:
            self._sync_service = TranslationSyncService(
                self.store,
                reporter=self.reporter,
                batch_per_domain=self.settings.batch_per_domain,
            )
        return self._sync_service

    @property
    def freshness_service(self) -> FreshnessService:
        """Get the freshness query service."""
        if self._freshness_service is None:
            self._freshness_service = FreshnessService(self.store)
        return self._freshness_service

    @property
    def import_service(self) -> ImportService:
        """Get the import orchestrator."""
        if self._import_service is None:
            self._import_service = ImportService(
                self.builder,
                self.sync_service,
                reporter=self.reporter,
            )
        return self._import_service

    def close(self) -> None:
        """Release the database connection."""
        if self._store is not None:
            self._store.close()
            logger.debug("Container closed")
