"""
Configuration repository for loading and saving config files.

This module provides the infrastructure layer for configuration persistence.
It handles file I/O operations and validation into ImportSettings.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from translationloader.domain.config import ImportSettings
from translationloader.domain.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "translation_loader"

# // line comments and /* block */ comments outside of strings
_JSONC_COMMENT_RE = re.compile(
    r'("(?:[^"\\]|\\.)*")|//[^\n]*|/\*.*?\*/',
    re.DOTALL,
)


def _strip_comments(jsonc_content: str) -> str:
    """Strip comments from JSONC content, leaving string literals intact."""
    return _JSONC_COMMENT_RE.sub(lambda m: m.group(1) or "", jsonc_content)


class ConfigRepository:
    """
    Repository for configuration file operations.

    Handles loading and saving of configuration files with support for
    JSON and JSONC formats.
    """

    def __init__(self, config_dir: Path):
        """
        Initialize the config repository.

        Args:
            config_dir: Base directory for configuration files
        """
        self.config_dir = Path(config_dir)

    def load_json_file(self, filename: str) -> Dict[str, Any]:
        """
        Load a JSON or JSONC file.

        Args:
            filename: Name of the file to load (without extension)

        Returns:
            Parsed JSON data as dictionary

        Raises:
            FileNotFoundError: If neither file exists
            ConfigError: If the file cannot be parsed
        """
        json_path = self.config_dir / f"{filename}.json"
        jsonc_path = self.config_dir / f"{filename}.jsonc"

        if json_path.exists():
            path, content = json_path, json_path.read_text(encoding="utf-8")
        elif jsonc_path.exists():
            path, content = jsonc_path, _strip_comments(jsonc_path.read_text(encoding="utf-8"))
        else:
            raise FileNotFoundError(
                f"Config file '{filename}.json' or '{filename}.jsonc' not found in {self.config_dir}"
            )

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error("Failed to parse config file %s: %s", path, e)
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be an object in {path}")
        return data

    def save_json_file(self, filename: str, data: Dict[str, Any]) -> Path:
        """
        Save data to a JSON file.

        Args:
            filename: Name of the file to save (without extension)
            data: Data to save

        Returns:
            Path of the written file
        """
        self.config_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.config_dir / f"{filename}.json"
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(json.dumps(data, indent=2, ensure_ascii=False))
        return filepath

    def load_settings(self) -> ImportSettings:
        """
        Load import settings.

        A missing config file yields the defaults.

        Returns:
            ImportSettings domain model

        Raises:
            ConfigError: If the file is invalid
        """
        try:
            data = self.load_json_file(CONFIG_FILENAME)
        except FileNotFoundError:
            logger.info("No %s config in %s, using defaults", CONFIG_FILENAME, self.config_dir)
            return ImportSettings()

        try:
            settings = ImportSettings.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid import settings: {e}") from e

        logger.info("Loaded import settings: %d components", len(settings.components))
        return settings

    def save_settings(self, settings: ImportSettings) -> Path:
        """Write import settings back to disk."""
        return self.save_json_file(CONFIG_FILENAME, settings.model_dump())
