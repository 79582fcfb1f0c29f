"""
Import progress reporting.

The pipeline calls these hooks as it goes so a front end can stream
progress. The base class ignores every event; the CLI subclasses it.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from translationloader.application.import_service import ImportResult
    from translationloader.domain.errors import LoadError
    from translationloader.domain.models import FileCandidate


class ImportReporter:
    """No-op progress listener."""

    def import_started(self, roots: Sequence[Path | str], clear: bool) -> None:
        pass

    def root_found(self, root: Path, directory: Path) -> None:
        pass

    def file_loaded(self, candidate: FileCandidate) -> None:
        pass

    def file_skipped(self, candidate: FileCandidate, error: LoadError) -> None:
        pass

    def cleared(self, deleted: int) -> None:
        pass

    def sync_started(self) -> None:
        pass

    def locale_started(self, locale: str) -> None:
        pass

    def domain_synced(self, locale: str, domain: str, count: int) -> None:
        pass

    def locale_finished(self, locale: str) -> None:
        pass

    def import_finished(self, result: ImportResult) -> None:
        pass
