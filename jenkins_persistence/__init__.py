"""
Jenkins Persistence module.

This module contains the database implementation of the snapshot store.
Currently supports SQLite, but can be extended to PostgreSQL, MySQL, etc.

The persistence layer depends on jenkins_common for domain models and
interfaces, and is driven by the CLI orchestrator.
"""

from .sqlite_repository import SQLiteSnapshotRepository

__all__ = ["SQLiteSnapshotRepository"]
