"""
Application layer package.

Use cases of the import pipeline: discovery, catalogue building, sync,
freshness queries and the orchestration that ties them together.
"""
