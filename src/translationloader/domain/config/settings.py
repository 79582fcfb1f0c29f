"""
Import settings domain model.

This module defines the settings that control discovery, loader wiring,
persistence and logging for an import run.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Extension token -> built-in loader name
DEFAULT_LOADER_MAP: Dict[str, str] = {
    "yml": "yaml",
    "yaml": "yaml",
    "xlf": "xliff",
    "xliff": "xliff",
    "php": "php",
    "ini": "ini",
    "json": "json",
    "csv": "csv",
    "po": "po",
    "xlsx": "xlsx",
}


def _check_extension(extension: str) -> str:
    if not extension or "." in extension:
        raise ValueError(f"Invalid file extension token: {extension!r}")
    return extension


class ImportSettings(BaseModel):
    """
    Domain model for import configuration.

    Config file settings come first, CLI flags override them.
    """

    model_config = ConfigDict(extra="forbid")

    database_path: str = Field(
        default="output/translations.db",
        description="SQLite database holding the translations table"
    )

    components: List[str] = Field(
        default_factory=list,
        description="Component root directories, in traversal order"
    )

    translation_subdir: str = Field(
        default="Resources/translations",
        description="Directory below each component holding translation files"
    )

    loaders: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_LOADER_MAP),
        description="Extension -> built-in loader name or 'module:Class' path"
    )

    formats: Optional[List[str]] = Field(
        default=None,
        description="Extensions accepted during discovery (defaults to the loader extensions)"
    )

    skip_invalid_files: bool = Field(
        default=False,
        description="Log and skip files that fail to parse instead of aborting"
    )

    batch_per_domain: bool = Field(
        default=False,
        description="Commit once per locale/domain group instead of once per message"
    )

    initialize_schema: bool = Field(
        default=True,
        description="Create the translations table if it does not exist"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Optional log file path"
    )

    @field_validator('loaders')
    @classmethod
    def validate_loaders(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Validate extension tokens and loader specs."""
        for extension, spec in v.items():
            _check_extension(extension)
            if not spec:
                raise ValueError(f"Empty loader for extension '{extension}'")
        return v

    @field_validator('formats')
    @classmethod
    def validate_formats(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is None:
            return v
        return [_check_extension(extension) for extension in v]

    @property
    def accepted_formats(self) -> List[str]:
        """Extensions the discovery scanner accepts."""
        if self.formats is not None:
            return list(self.formats)
        return sorted(self.loaders)
