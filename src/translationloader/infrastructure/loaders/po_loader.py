"""Gettext PO translation loader."""

from __future__ import annotations

from pathlib import Path

import polib

from translationloader.domain.errors import LoadError
from translationloader.infrastructure.loaders.base import FileLoader


class PoFileLoader(FileLoader):
    """Loads `.po` files keyed by msgid.

    Untranslated entries fall back to their msgid. Plural forms are joined
    with `|` in plural index order. Obsolete entries and the header are
    skipped.
    """

    name = "po"

    def _read(self, path: Path) -> dict[str, str]:
        try:
            po = polib.pofile(str(path), encoding="utf-8")
        except (OSError, ValueError) as e:
            raise LoadError(path, f"invalid PO file: {e}") from e

        messages: dict[str, str] = {}
        for entry in po:
            if entry.obsolete or not entry.msgid:
                continue
            if entry.msgstr_plural:
                forms = [entry.msgstr_plural[index] for index in sorted(entry.msgstr_plural)]
                message = "|".join(forms) if any(forms) else ""
            else:
                message = entry.msgstr
            messages[entry.msgid] = message or entry.msgid
        return messages
