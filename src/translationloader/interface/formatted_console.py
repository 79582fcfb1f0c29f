"""
Formatted Console Output - Rich progress renderer for the import CLI.

Streams one line per pipeline step so the user can see exactly how far an
import got before a failure.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from translationloader.application.import_service import ImportResult
from translationloader.application.reporting import ImportReporter
from translationloader.domain.errors import LoadError
from translationloader.domain.models import FileCandidate

RULE = "-" * 80


class ConsoleReporter(ImportReporter):
    """Renders import progress to the console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def _rule(self) -> None:
        self.console.print(f"[green]{RULE}[/green]")

    def import_started(self, roots: Sequence[Path | str], clear: bool) -> None:
        self._rule()
        self.console.print("[green]Translation file importer[/green]")
        self._rule()
        self.console.print(
            f"[green]importing all available translation files "
            f"from {len(roots)} components ...[/green]"
        )
        if clear:
            self.console.print(
                "[yellow]all translations will be deleted from the database "
                "before inserting[/yellow]"
            )

    def root_found(self, root: Path, directory: Path) -> None:
        self.console.print()
        self.console.print(f"[green]searching {escape(str(root))} translations[/green]")
        self._rule()

    def file_loaded(self, candidate: FileCandidate) -> None:
        self.console.print(
            f"[yellow]loading {escape(candidate.filename)} with locale "
            f"{escape(candidate.locale)} and domain {escape(candidate.domain)}[/yellow]"
        )

    def file_skipped(self, candidate: FileCandidate, error: LoadError) -> None:
        self.console.print(
            f"[red]skipping {escape(candidate.filename)}: {escape(error.reason)}[/red]"
        )

    def cleared(self, deleted: int) -> None:
        self.console.print()
        self.console.print(
            f"[yellow]deleting all translations from database... "
            f"{deleted} removed[/yellow]"
        )

    def sync_started(self) -> None:
        self.console.print()
        self.console.print("[green]inserting all translations[/green]")
        self._rule()

    def locale_started(self, locale: str) -> None:
        self.console.print(f"[yellow]{escape(locale)}: [/yellow]", end="")

    def domain_synced(self, locale: str, domain: str, count: int) -> None:
        self.console.print(
            f"[green] ... {escape(domain)}.{escape(locale)}[/green]", end=""
        )

    def locale_finished(self, locale: str) -> None:
        self.console.print()

    def import_finished(self, result: ImportResult) -> None:
        self._rule()
        sync = result.sync
        self.console.print(
            f"[dim]{result.files_loaded} files, {len(result.messages)} locales: "
            f"{sync.created} created, {sync.updated} updated"
            + (f", {sync.deleted} deleted" if sync.deleted else "")
            + (f", {result.files_skipped} files skipped" if result.files_skipped else "")
            + "[/dim]"
        )
        self.console.print("[yellow]finished![/yellow]")
