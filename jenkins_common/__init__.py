"""
Jenkins Common module.

This module contains the shared domain models, result types, configuration
and the storage interface used by the fetcher, the store and the CLI.

The common module has no dependencies on other jenkins_* modules, making it
a pure domain layer that can be imported by any component.
"""

from .config import JobsConfig, load_config
from .models import FetchResult, JobSnapshot, StoreResult
from .repository import SnapshotRepository

__all__ = [
    "FetchResult",
    "JobSnapshot",
    "JobsConfig",
    "SnapshotRepository",
    "StoreResult",
    "load_config",
]
