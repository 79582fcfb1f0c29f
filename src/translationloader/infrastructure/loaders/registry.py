"""
Loader registry.

Maps file extension tokens to loader capabilities. The registry is wired
from a plain configuration map at startup:

    registry = LoaderRegistry({"yml": "yaml", "xlf": "xliff"})
    loader = registry.resolve("yml")        # YamlFileLoader, cached
    catalogue = loader.load(path, "en", "messages")

A loader spec is a built-in loader name, a FileLoader subclass or
instance, or a "package.module:ClassName" import path. Loaders are
instantiated on first use and cached for the lifetime of the registry.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Mapping
from typing import Union

from translationloader.domain.config import DEFAULT_LOADER_MAP
from translationloader.domain.errors import UnsupportedFormatError
from translationloader.infrastructure.loaders.base import FileLoader
from translationloader.infrastructure.loaders.csv_loader import CsvFileLoader
from translationloader.infrastructure.loaders.ini_loader import IniFileLoader
from translationloader.infrastructure.loaders.json_loader import JsonFileLoader
from translationloader.infrastructure.loaders.php_loader import PhpFileLoader
from translationloader.infrastructure.loaders.po_loader import PoFileLoader
from translationloader.infrastructure.loaders.xliff_loader import XliffFileLoader
from translationloader.infrastructure.loaders.xlsx_loader import XlsxFileLoader
from translationloader.infrastructure.loaders.yaml_loader import YamlFileLoader

logger = logging.getLogger(__name__)

LoaderSpec = Union[str, type[FileLoader], FileLoader]

BUILTIN_LOADERS: dict[str, type[FileLoader]] = {
    loader.name: loader
    for loader in (
        YamlFileLoader,
        XliffFileLoader,
        PhpFileLoader,
        IniFileLoader,
        JsonFileLoader,
        CsvFileLoader,
        PoFileLoader,
        XlsxFileLoader,
    )
}


class LoaderRegistry:
    """Extension -> FileLoader lookup with lazy instantiation."""

    def __init__(self, loaders: Mapping[str, LoaderSpec] | None = None) -> None:
        self._specs: dict[str, LoaderSpec] = dict(loaders or {})
        self._cache: dict[str, FileLoader] = {}

    @classmethod
    def default(cls) -> LoaderRegistry:
        """Registry wired with every built-in loader."""
        return cls(DEFAULT_LOADER_MAP)

    def formats(self) -> list[str]:
        """Registered extension tokens, sorted."""
        return sorted(self._specs)

    def register(self, extension: str, spec: LoaderSpec) -> None:
        """Register or replace the loader for an extension."""
        if extension in self._specs:
            logger.debug("Replacing loader for .%s files", extension)
        self._specs[extension] = spec
        self._cache.pop(extension, None)

    def resolve(self, extension: str) -> FileLoader:
        """
        Get the loader for an extension.

        Args:
            extension: File extension token, matched case-sensitively

        Returns:
            Cached FileLoader instance

        Raises:
            UnsupportedFormatError: If no usable loader is registered
        """
        loader = self._cache.get(extension)
        if loader is not None:
            return loader

        if extension not in self._specs:
            raise UnsupportedFormatError(extension)

        loader = self._instantiate(extension, self._specs[extension])
        self._cache[extension] = loader
        logger.debug("Resolved loader for .%s files: %s", extension, type(loader).__name__)
        return loader

    def describe(self) -> dict[str, str]:
        """Extension -> loader description, for display."""
        described = {}
        for extension, spec in sorted(self._specs.items()):
            if isinstance(spec, str):
                described[extension] = spec
            elif isinstance(spec, FileLoader):
                described[extension] = type(spec).__name__
            else:
                described[extension] = spec.__name__
        return described

    def __contains__(self, extension: object) -> bool:
        return extension in self._specs

    @staticmethod
    def _instantiate(extension: str, spec: LoaderSpec) -> FileLoader:
        if isinstance(spec, FileLoader):
            return spec

        if isinstance(spec, str):
            if spec in BUILTIN_LOADERS:
                return BUILTIN_LOADERS[spec]()
            if ":" not in spec:
                raise UnsupportedFormatError(extension, f"unknown loader '{spec}'")
            module_name, _, class_name = spec.partition(":")
            try:
                spec = getattr(importlib.import_module(module_name), class_name)
            except (ImportError, AttributeError) as e:
                raise UnsupportedFormatError(extension, f"cannot import '{module_name}:{class_name}': {e}") from e

        if isinstance(spec, type) and issubclass(spec, FileLoader):
            return spec()
        raise UnsupportedFormatError(extension, f"{spec!r} is not a FileLoader")
