"""INI translation loader.

Keys outside any section are used as-is, keys inside `[section]` are
prefixed with `section.`.
"""

from __future__ import annotations

import configparser
from pathlib import Path

from translationloader.domain.errors import LoadError
from translationloader.infrastructure.loaders.base import FileLoader

# Keys written before the first [section] header land here
_TOP_LEVEL = "__top_level__"


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


class IniFileLoader(FileLoader):
    name = "ini"

    def _read(self, path: Path) -> dict[str, str]:
        parser = configparser.ConfigParser(
            interpolation=None,
            delimiters=("=",),
            default_section="__defaults__",
            strict=False,
            inline_comment_prefixes=(";",),
        )
        parser.optionxform = str  # keep key case

        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
        try:
            parser.read_string(f"[{_TOP_LEVEL}]\n{content}", source=str(path))
        except configparser.Error as e:
            raise LoadError(path, f"invalid INI: {e}") from e

        messages: dict[str, str] = {}
        for section in parser.sections():
            prefix = "" if section == _TOP_LEVEL else f"{section}."
            for key, value in parser.items(section, raw=True):
                messages[f"{prefix}{key}"] = _unquote(value or "")
        return messages
