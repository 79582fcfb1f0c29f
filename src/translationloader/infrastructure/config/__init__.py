"""
Configuration infrastructure package.
"""

from translationloader.infrastructure.config.repository import (
    CONFIG_FILENAME,
    ConfigRepository,
)

__all__ = ["CONFIG_FILENAME", "ConfigRepository"]
