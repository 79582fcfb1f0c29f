"""
Translation file loaders.

One loader per file format, looked up by extension through LoaderRegistry.
"""

from translationloader.infrastructure.loaders.base import FileLoader, flatten_messages
from translationloader.infrastructure.loaders.registry import (
    BUILTIN_LOADERS,
    LoaderRegistry,
)

__all__ = [
    "BUILTIN_LOADERS",
    "FileLoader",
    "LoaderRegistry",
    "flatten_messages",
]
