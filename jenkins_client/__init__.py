"""
Jenkins Client module.

Thin wrapper around the Jenkins JSON API used to read the configured jobs.
"""

from .client import JobFetchError, get_jobs

__all__ = ["JobFetchError", "get_jobs"]
