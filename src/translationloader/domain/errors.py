"""
Error taxonomy for the translation import pipeline.

Discovery problems (missing directories, unrelated files) are never errors.
Everything below is raised when a run has to stop.
"""

from __future__ import annotations

from pathlib import Path


class TranslationLoaderError(Exception):
    """Base class for all translationloader failures."""


class ConfigError(TranslationLoaderError):
    """Raised when the import configuration cannot be read or validated."""


class UnsupportedFormatError(TranslationLoaderError):
    """
    Raised when a qualifying file has no loader registered for its extension.

    Indicates a configuration gap, so the whole run is aborted.

    Attributes:
        extension: The file extension token that could not be resolved
    """

    def __init__(self, extension: str, reason: str | None = None):
        message = f"could not find loader for {extension} files!"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.extension = extension


class LoadError(TranslationLoaderError):
    """
    Raised when a translation file matched a loader but could not be parsed.

    Attributes:
        path: The offending file
        reason: Parser error description
    """

    def __init__(self, path: Path | str, reason: str):
        super().__init__(f"failed to load translation file {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class LocaleMismatchError(TranslationLoaderError):
    """Raised when merging catalogues of two different locales."""

    def __init__(self, expected: str, actual: str):
        super().__init__(
            f"cannot merge a catalogue for locale '{actual}' into a catalogue "
            f"for locale '{expected}'"
        )
        self.expected = expected
        self.actual = actual


class PersistenceError(TranslationLoaderError):
    """
    Raised when reading or writing the translation store fails.

    Never retried. The sync stops at the failing pair.

    Attributes:
        operation: Store operation that failed (e.g. "save", "delete_all")
        cause: Underlying database exception
    """

    def __init__(self, operation: str, cause: Exception):
        super().__init__(f"translation store {operation} failed: {cause}")
        self.operation = operation
        self.cause = cause
