"""
translationloader - Translation file importer

Imports translation files (YAML, XLIFF, PHP arrays, INI, JSON, CSV, PO, XLSX)
from component directories into a SQLite translations table.
"""

import sys
from translationloader.interface.cli import main


if __name__ == "__main__":
    sys.exit(main())
