"""Excel translation loader.

Reads the first worksheet: column A is the key, column B the message.
An optional header row (`key` / `message`) is skipped.
"""

from __future__ import annotations

import zipfile
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from translationloader.domain.errors import LoadError
from translationloader.infrastructure.loaders.base import FileLoader

_HEADER_KEYS = {"key", "id", "source"}
_HEADER_MESSAGES = {"message", "translation", "target"}


class XlsxFileLoader(FileLoader):
    name = "xlsx"

    def _read(self, path: Path) -> dict[str, str]:
        try:
            wb = load_workbook(path, read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError, ValueError) as e:
            raise LoadError(path, f"invalid workbook: {e}") from e

        messages: dict[str, str] = {}
        try:
            if not wb.worksheets:
                return messages
            ws = wb.worksheets[0]
            for index, row in enumerate(ws.iter_rows(max_col=2, values_only=True)):
                key = row[0] if row else None
                message = row[1] if len(row) > 1 else None
                if key is None or str(key).strip() == "":
                    continue
                if index == 0 and self._is_header(key, message):
                    continue
                messages[str(key).strip()] = "" if message is None else str(message)
        finally:
            wb.close()
        return messages

    @staticmethod
    def _is_header(key: object, message: object) -> bool:
        return (
            str(key).strip().lower() in _HEADER_KEYS
            and str(message or "").strip().lower() in _HEADER_MESSAGES
        )
