"""
Abstract repository interface for snapshot persistence.

This module defines the contract that any database implementation must follow,
allowing easy swapping between SQLite, PostgreSQL, MySQL, etc.
"""

from abc import ABC, abstractmethod

from .models import JobSnapshot


class SnapshotRepository(ABC):
    """
    Abstract base class for the append-only job snapshot store.

    Implementations handle their own connection management. Rows are only
    ever appended; nothing is updated or deleted.
    """

    @abstractmethod
    async def ensure_schema(self) -> None:
        """
        Create the jobs table if it does not exist.

        Must be safe to call on every run and must not alter existing rows.
        """
        pass

    @abstractmethod
    async def insert_batch(self, jobs: list[JobSnapshot], checked_at: int) -> int:
        """
        Append one row per job, all stamped with the same timestamp.

        Args:
            jobs: Snapshots to persist, in the order they were fetched
            checked_at: Unix timestamp shared by every row of this run

        Returns:
            Number of rows inserted

        Raises:
            Exception: Any driver error; partial batches are not rolled back
                by the caller
        """
        pass

    @abstractmethod
    async def list_snapshots(self, checked_at: int | None = None) -> list[JobSnapshot]:
        """
        Read stored rows back in insertion order.

        Args:
            checked_at: If given, only rows from that run

        Returns:
            List of JobSnapshot objects with id and checked_at populated
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection."""
        pass
