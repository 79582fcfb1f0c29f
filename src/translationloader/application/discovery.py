"""
Translation file discovery.

Walks component roots and yields files named <domain>.<locale>.<extension>
whose extension has a known format. Roots without a translations directory
are skipped silently; a component without translations is normal.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from translationloader.domain.models import FileCandidate

logger = logging.getLogger(__name__)

DEFAULT_SUBDIRECTORY = "Resources/translations"


def parse_filename(filename: str) -> tuple[str, str, str] | None:
    """
    Split a filename into (domain, locale, extension).

    Returns None unless the name has exactly three non-empty dot-separated
    segments: "messages.en.yml" qualifies, "foo.bar.baz.yml" does not.
    """
    parts = filename.split(".")
    if len(parts) != 3 or not all(parts):
        return None
    domain, locale, extension = parts
    return domain, locale, extension


class DiscoveryScanner:
    """Finds translation file candidates below a list of component roots."""

    def __init__(
        self,
        known_formats: Iterable[str],
        subdirectory: str | None = DEFAULT_SUBDIRECTORY,
    ) -> None:
        """
        Args:
            known_formats: Accepted extension tokens (case-sensitive)
            subdirectory: Translations directory below each root; empty or
                          None scans the root itself
        """
        self.known_formats = frozenset(known_formats)
        self.subdirectory = subdirectory or ""

    def translation_directory(self, root: Path | str) -> Path:
        root = Path(root)
        return root / self.subdirectory if self.subdirectory else root

    def scan(
        self,
        roots: Iterable[Path | str],
        on_root: Callable[[Path, Path], None] | None = None,
    ) -> Iterator[FileCandidate]:
        """
        Lazily yield candidates, root by root in the given order.

        Files inside a root are yielded in lexicographic order of their
        path relative to the translations directory.

        Args:
            roots: Component root directories
            on_root: Called with (root, directory) for every root whose
                     translations directory exists
        """
        for root in roots:
            root = Path(root)
            directory = self.translation_directory(root)
            if not directory.is_dir():
                logger.debug("No translations directory at %s, skipping", directory)
                continue

            logger.debug("Scanning %s", directory)
            if on_root is not None:
                on_root(root, directory)
            yield from self._scan_directory(root, directory)

    def match(self, path: Path, root: Path) -> FileCandidate | None:
        """Build a candidate for a file, or None if it does not qualify."""
        parsed = parse_filename(path.name)
        if parsed is None:
            return None
        domain, locale, extension = parsed
        if extension not in self.known_formats:
            return None
        return FileCandidate(
            path=path,
            root=root,
            domain=domain,
            locale=locale,
            extension=extension,
        )

    def _scan_directory(self, root: Path, directory: Path) -> Iterator[FileCandidate]:
        paths = sorted(directory.rglob("*"), key=lambda p: p.relative_to(directory).parts)
        for path in paths:
            relative = path.relative_to(directory)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if not path.is_file():
                continue

            candidate = self.match(path, root)
            if candidate is None:
                logger.debug("Ignoring %s", relative)
                continue
            yield candidate
