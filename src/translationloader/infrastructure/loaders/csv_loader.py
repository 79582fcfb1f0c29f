"""CSV translation loader.

Rows are `key;message`. Rows starting with `#` are comments, rows that do
not have exactly two columns are ignored.
"""

from __future__ import annotations

import csv
from pathlib import Path

from translationloader.domain.errors import LoadError
from translationloader.infrastructure.loaders.base import FileLoader


class CsvFileLoader(FileLoader):
    name = "csv"

    def __init__(self, delimiter: str = ";", quotechar: str = '"') -> None:
        self.delimiter = delimiter
        self.quotechar = quotechar

    def _read(self, path: Path) -> dict[str, str]:
        messages: dict[str, str] = {}
        with open(path, "r", encoding="utf-8", newline="") as f:
            reader = csv.reader(f, delimiter=self.delimiter, quotechar=self.quotechar)
            try:
                for row in reader:
                    if not row or row[0].startswith("#"):
                        continue
                    if len(row) == 2:
                        messages[row[0]] = row[1]
            except csv.Error as e:
                raise LoadError(path, f"invalid CSV at line {reader.line_num}: {e}") from e
        return messages
