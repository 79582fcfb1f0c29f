"""
Configuration domain package.

This package contains the domain layer for configuration management.
"""

from .settings import DEFAULT_LOADER_MAP, ImportSettings

__all__ = [
    "DEFAULT_LOADER_MAP",
    "ImportSettings",
]
