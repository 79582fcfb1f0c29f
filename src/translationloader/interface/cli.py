"""
translationloader CLI entry point.

Commands:
    import      Import translation files from all components into the database
    freshness   Count translations updated after a point in time
    formats     List the registered file formats

Imports are sequential and must not run concurrently against the same
database: two runs can race on the same (key, locale, domain) row.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from translationloader.application.container import Container
from translationloader.domain.config import ImportSettings
from translationloader.domain.errors import TranslationLoaderError
from translationloader.infrastructure.config.repository import ConfigRepository
from translationloader.infrastructure.logging_config import setup_logging
from translationloader.interface.formatted_console import ConsoleReporter

logger = logging.getLogger(__name__)

# Default paths
DEFAULT_CONFIG_DIR = Path("config")

console = Console(highlight=False)

app = typer.Typer(
    name="translationloader",
    help="Import translation files from component directories into the database.",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _configure(
    config_dir: Path,
    verbose: bool,
    log_file: Optional[Path],
    **overrides,
) -> ImportSettings:
    """Set up logging and load settings; CLI overrides win over the config file."""
    level = logging.DEBUG if verbose else logging.WARNING
    setup_logging(level=level, log_file=str(log_file) if log_file else None)

    settings = ConfigRepository(config_dir).load_settings()
    updates = {key: value for key, value in overrides.items() if value}
    if updates:
        settings = settings.model_copy(update=updates)

    if settings.log_file and not log_file:
        setup_logging(level=level, log_file=settings.log_file)
    return settings


def _fail(error: Exception) -> None:
    logger.error("%s", error)
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(1)


def parse_since(value: str) -> datetime | float:
    """Parse a POSIX timestamp or an ISO-8601 datetime."""
    try:
        timestamp = float(value)
    except ValueError:
        pass
    else:
        try:
            datetime.fromtimestamp(timestamp, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise typer.BadParameter(f"'{value}' is not a representable POSIX timestamp") from e
        return timestamp
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise typer.BadParameter(
            f"'{value}' is neither a POSIX timestamp nor an ISO-8601 datetime"
        ) from e


@app.command("import")
def import_command(
    clear: bool = typer.Option(
        False, "--clear", "-c", help="Clear database before import"
    ),
    config_dir: Path = typer.Option(
        DEFAULT_CONFIG_DIR, "--config", help="Directory containing translation_loader.json"
    ),
    components: Optional[List[Path]] = typer.Option(
        None, "--component", help="Component root (repeatable, overrides config)"
    ),
    database: Optional[Path] = typer.Option(
        None, "--database", "-d", help="SQLite database path (overrides config)"
    ),
    skip_invalid: bool = typer.Option(
        False, "--skip-invalid", help="Skip files that fail to parse instead of aborting"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write logs to file"),
):
    """
    Import translations from all components.

    Files named <domain>.<locale>.<extension> below each component's
    translations directory are merged per locale and upserted by
    (key, locale, domain).
    """
    try:
        settings = _configure(
            config_dir,
            verbose,
            log_file,
            components=[str(path) for path in components or []],
            database_path=str(database) if database else None,
            skip_invalid_files=skip_invalid,
        )
    except TranslationLoaderError as e:
        _fail(e)

    if not settings.components and not clear:
        console.print("[yellow]No components configured, nothing to import.[/yellow]")
        return

    container = Container(settings, reporter=ConsoleReporter(console))
    try:
        container.import_service.run(settings.components, clear=clear)
    except TranslationLoaderError as e:
        _fail(e)
    finally:
        container.close()


@app.command("freshness")
def freshness_command(
    since: str = typer.Option(
        ..., "--since", help="POSIX timestamp or ISO-8601 datetime (naive = UTC)"
    ),
    config_dir: Path = typer.Option(DEFAULT_CONFIG_DIR, "--config"),
    database: Optional[Path] = typer.Option(None, "--database", "-d"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Print how many translations were updated after --since."""
    timestamp = parse_since(since)
    try:
        settings = _configure(
            config_dir, verbose, None, database_path=str(database) if database else None
        )
    except TranslationLoaderError as e:
        _fail(e)

    container = Container(settings)
    try:
        count = container.freshness_service.count_updated_since(timestamp)
    except TranslationLoaderError as e:
        _fail(e)
    finally:
        container.close()

    typer.echo(count)


@app.command("formats")
def formats_command(
    config_dir: Path = typer.Option(DEFAULT_CONFIG_DIR, "--config"),
):
    """List the file extensions with a registered loader."""
    try:
        settings = _configure(config_dir, False, None)
    except TranslationLoaderError as e:
        _fail(e)

    container = Container(settings)
    accepted = set(settings.accepted_formats)

    table = Table(title="Translation formats")
    table.add_column("Extension")
    table.add_column("Loader")
    table.add_column("Discovered", justify="center")
    described = container.registry.describe()
    for extension in sorted(set(described) | accepted):
        table.add_row(
            extension,
            described.get(extension, "[red]missing[/red]"),
            "yes" if extension in accepted else "no",
        )
    console.print(table)


def main() -> int:
    """
    Main entry point for translationloader CLI.

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    try:
        app()
        return 0
    except Exception as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1
