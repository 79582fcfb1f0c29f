"""Translation loading interface.

Defines the contract every format loader implements: given a file path,
a locale and a domain, produce a single-file message catalogue.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from translationloader.domain.catalogue import MessageCatalogue
from translationloader.domain.errors import LoadError
from translationloader.domain.models import DEFAULT_DOMAIN

logger = logging.getLogger(__name__)


def flatten_messages(messages: Mapping[Any, Any], prefix: str = "") -> dict[str, str]:
    """Flatten nested message trees into dotted keys.

    {"form": {"submit": "Send"}} becomes {"form.submit": "Send"}.
    Lists are flattened with their index as the key segment.

    Args:
        messages: Parsed message tree.
        prefix: Key prefix for the current nesting level.

    Returns:
        Flat key -> message mapping.
    """
    flat: dict[str, str] = {}
    for key, value in messages.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(flatten_messages(value, f"{full_key}."))
        elif isinstance(value, list):
            flat.update(flatten_messages(dict(enumerate(value)), f"{full_key}."))
        else:
            flat[full_key] = "" if value is None else str(value)
    return flat


class FileLoader(ABC):
    """Abstract base for translation file loaders.

    Implementations only parse the file. Existence checks, flattening of
    nested keys and catalogue construction are shared.
    """

    name: str = ""

    def load(
        self,
        path: Path | str,
        locale: str,
        domain: str = DEFAULT_DOMAIN,
    ) -> MessageCatalogue:
        """Load a translation file into a single-file catalogue.

        Args:
            path: Translation file to parse.
            locale: Locale the messages belong to.
            domain: Message domain the messages belong to.

        Returns:
            MessageCatalogue holding the file's messages under `domain`.

        Raises:
            LoadError: If the file is missing or cannot be parsed.
        """
        path = Path(path)
        if not path.is_file():
            raise LoadError(path, "file does not exist")

        try:
            data = self._read(path)
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(path, str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise LoadError(path, f"expected a mapping of messages, got {type(data).__name__}")

        catalogue = MessageCatalogue(locale)
        catalogue.add(flatten_messages(data), domain)
        logger.debug(
            "Loaded %d messages from %s (locale=%s, domain=%s)",
            len(catalogue), path, locale, domain,
        )
        return catalogue

    @abstractmethod
    def _read(self, path: Path) -> Mapping[Any, Any] | None:
        """Parse the file into a (possibly nested) message mapping.

        Raises:
            LoadError: If the content is malformed.
        """
