"""
Domain layer package.

Contains pure data models with no I/O dependencies.
Models can be serialized to/from SQLite via the infrastructure layer.
"""

from translationloader.domain.catalogue import MessageCatalogue
from translationloader.domain.errors import (
    ConfigError,
    LoadError,
    LocaleMismatchError,
    PersistenceError,
    TranslationLoaderError,
    UnsupportedFormatError,
)
from translationloader.domain.models import DEFAULT_DOMAIN, FileCandidate, Translation

__all__ = [
    "DEFAULT_DOMAIN",
    "ConfigError",
    "FileCandidate",
    "LoadError",
    "LocaleMismatchError",
    "MessageCatalogue",
    "PersistenceError",
    "Translation",
    "TranslationLoaderError",
    "UnsupportedFormatError",
]
