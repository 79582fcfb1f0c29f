"""XLIFF translation loader.

Supports XLIFF 1.2 (`<trans-unit>`) and XLIFF 2.0 (`<unit>/<segment>`).
The key is the unit's `resname`/`name` attribute, falling back to the
source text; the message is the target text, falling back to the source.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from translationloader.domain.errors import LoadError
from translationloader.infrastructure.loaders.base import FileLoader


def _local_name(tag: str) -> str:
    """Strip the XML namespace from a tag."""
    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element, name: str) -> ET.Element | None:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _text(element: ET.Element | None) -> str | None:
    if element is None:
        return None
    return "".join(element.itertext())


class XliffFileLoader(FileLoader):
    name = "xliff"

    def _read(self, path: Path) -> dict[str, str]:
        try:
            root = ET.parse(path).getroot()
        except ET.ParseError as e:
            raise LoadError(path, f"invalid XML: {e}") from e

        if _local_name(root.tag) != "xliff":
            raise LoadError(path, f"root element is <{_local_name(root.tag)}>, expected <xliff>")

        messages: dict[str, str] = {}
        for element in root.iter():
            name = _local_name(element.tag)
            if name == "trans-unit":
                self._read_unit(element, element.get("resname"), messages)
            elif name == "unit":
                segment = _child(element, "segment")
                if segment is not None:
                    self._read_unit(segment, element.get("name"), messages)
        return messages

    @staticmethod
    def _read_unit(element: ET.Element, resname: str | None, messages: dict[str, str]) -> None:
        source = _text(_child(element, "source"))
        target = _text(_child(element, "target"))
        key = resname or source
        if not key:
            return
        messages[key] = target if target is not None else (source or "")
