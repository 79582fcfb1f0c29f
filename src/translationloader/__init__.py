"""
translationloader - Translation file importer.

Discovers localization message files across component directories, merges
them per locale into message catalogues, and upserts the resulting
key/domain/locale/message tuples into a SQLite translation table.

Usage:
    # CLI (recommended)
    translationloader import --clear

    # Programmatic
    from translationloader.application.container import Container
    from translationloader.domain.config import ImportSettings

    container = Container(ImportSettings(components=["vendor/acme/core"]))
    result = container.import_service.run(container.settings.components)
"""

__version__ = "0.1.0"
__author__ = "translationloader Team"

__all__ = ["__version__"]
