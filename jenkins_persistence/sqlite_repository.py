"""
SQLite implementation of the snapshot repository.

Uses aiosqlite for async operations. The database file is created on first
connect if it does not exist.
"""

import logging

import aiosqlite

from jenkins_common.config import JobsConfig
from jenkins_common.models import JobSnapshot
from jenkins_common.repository import SnapshotRepository

logger = logging.getLogger(__name__)


class SQLiteSnapshotRepository(SnapshotRepository):
    """
    SQLite-based snapshot storage implementation.

    Uses a single table:
    - jobs: one row per job per run (id, name, status, checked_at)
    """

    def __init__(self, db_path: str = "jobs.sqlite", config: JobsConfig | None = None):
        """
        Initialize the SQLite repository.

        Args:
            db_path: Path to the SQLite database file
            config: SQL statements to use (default: JobsConfig())
        """
        self.db_path = db_path
        self.config = config or JobsConfig()
        self._connection: aiosqlite.Connection | None = None

    async def _get_connection(self) -> aiosqlite.Connection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = await aiosqlite.connect(self.db_path)
        return self._connection

    async def ensure_schema(self) -> None:
        """
        Create the jobs table if it doesn't exist.

        Schema:
        - jobs table: id, name, status, checked_at (no indexes beyond the key)
        """
        conn = await self._get_connection()
        await conn.execute(self.config.create_table_sql)
        await conn.commit()
        logger.debug(f"Schema ensured in {self.db_path}")

    async def insert_batch(self, jobs: list[JobSnapshot], checked_at: int) -> int:
        """
        Append one row per job inside a single transaction.

        Args:
            jobs: Snapshots to persist
            checked_at: Unix timestamp shared by every row

        Returns:
            Number of rows inserted
        """
        conn = await self._get_connection()

        await conn.executemany(
            self.config.insert_job_sql,
            [job.to_row(checked_at) for job in jobs],
        )
        await conn.commit()

        for job in jobs:
            job.checked_at = checked_at

        logger.info(f"Stored {len(jobs)} jobs in {self.db_path} at {checked_at}")
        return len(jobs)

    async def list_snapshots(self, checked_at: int | None = None) -> list[JobSnapshot]:
        """
        Read stored rows back in insertion order.

        Args:
            checked_at: If given, only rows from that run

        Returns:
            List of JobSnapshot objects
        """
        conn = await self._get_connection()

        if checked_at is None:
            cursor = await conn.execute(
                "SELECT id, name, status, checked_at FROM jobs ORDER BY id"
            )
        else:
            cursor = await conn.execute(
                "SELECT id, name, status, checked_at FROM jobs WHERE checked_at = ? ORDER BY id",
                (checked_at,),
            )
        rows = await cursor.fetchall()

        return [
            JobSnapshot(id=row_id, name=name, status=status, checked_at=row_checked_at)
            for row_id, name, status, row_checked_at in rows
        ]

    async def close(self) -> None:
        """Close the database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None
