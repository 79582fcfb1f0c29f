"""
Shared fixtures for translationloader tests.

Provides temp component trees and an initialized translation store.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from translationloader.infrastructure.sqlite.store import TranslationStore

TRANSLATIONS = "Resources/translations"


def write_translation(root: Path, filename: str, content: str, subdir: str = TRANSLATIONS) -> Path:
    """Write a translation file below a component root and return its path."""
    directory = root / subdir if subdir else root
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def store(tmp_path: Path):
    """Fresh store with the translations table created."""
    translation_store = TranslationStore(tmp_path / "translations.db")
    translation_store.initialize_schema()
    yield translation_store
    translation_store.close()
