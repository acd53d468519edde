"""
Orchestration steps behind the get:jobs command.

Each step wraps one external call and returns an explicit result object
instead of letting exceptions escape, so the command has to handle both
outcomes.
"""

import asyncio
import logging
import time
from collections.abc import Callable

from jenkins_client.client import get_jobs
from jenkins_common.config import JobsConfig
from jenkins_common.models import FetchResult, JobSnapshot, StoreResult
from jenkins_persistence.sqlite_repository import SQLiteSnapshotRepository

logger = logging.getLogger(__name__)


def run_async(coro):
    """Helper to run async functions in CLI commands."""
    return asyncio.run(coro)


def fetch_jobs(jenkins_url: str, config: JobsConfig) -> FetchResult:
    """Ask Jenkins for its jobs, capturing any failure in the result."""
    try:
        jobs = get_jobs(jenkins_url, timeout=config.http_timeout, config=config)
    except Exception as e:
        logger.info(f"Fetching jobs from {jenkins_url} failed: {e}")
        logger.debug("Fetch failure details", exc_info=True)
        return FetchResult(error=str(e))
    return FetchResult(jobs=jobs)


async def _store(
    jobs: list[JobSnapshot], db_path: str, config: JobsConfig, checked_at: int
) -> int:
    repo = SQLiteSnapshotRepository(db_path, config)
    try:
        await repo.ensure_schema()
        return await repo.insert_batch(jobs, checked_at)
    finally:
        await repo.close()


def store_jobs(
    jobs: list[JobSnapshot],
    db_path: str,
    config: JobsConfig,
    clock: Callable[[], float] = time.time,
) -> StoreResult:
    """
    Record one run in the snapshot store.

    Args:
        jobs: Jobs returned by the fetch step
        db_path: SQLite file to write to (created if missing)
        config: SQL statements to use
        clock: Source of the run timestamp (seconds since the epoch)

    Returns:
        StoreResult with the row count and shared timestamp, or the error text
    """
    checked_at = int(clock())
    try:
        stored = run_async(_store(jobs, db_path, config, checked_at))
    except Exception as e:
        logger.info(f"Storing run in {db_path} failed: {e}")
        logger.debug("Store failure details", exc_info=True)
        return StoreResult(db_path=db_path, checked_at=checked_at, error=str(e))
    return StoreResult(db_path=db_path, stored=stored, checked_at=checked_at)
