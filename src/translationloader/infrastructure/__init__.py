"""
Infrastructure layer package.

File format loaders, SQLite persistence, configuration files and logging.
"""
