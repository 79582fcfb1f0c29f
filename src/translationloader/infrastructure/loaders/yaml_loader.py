"""YAML translation loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from translationloader.domain.errors import LoadError
from translationloader.infrastructure.loaders.base import FileLoader


class YamlFileLoader(FileLoader):
    """Loads `.yml` / `.yaml` files. Nested mappings become dotted keys."""

    name = "yaml"

    def _read(self, path: Path) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise LoadError(path, f"invalid YAML: {e}") from e
