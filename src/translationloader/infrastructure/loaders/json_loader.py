"""JSON translation loader."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from translationloader.domain.errors import LoadError
from translationloader.infrastructure.loaders.base import FileLoader


class JsonFileLoader(FileLoader):
    name = "json"

    def _read(self, path: Path) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
        if not content.strip():
            return None
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise LoadError(path, f"invalid JSON: {e}") from e
