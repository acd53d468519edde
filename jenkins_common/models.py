"""
Data models for Jenkins job snapshots.

These models represent the domain objects used throughout the application,
independent of the remote API and of the underlying storage mechanism.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class JobSnapshot:
    """
    Represents one Jenkins job as seen at a point in time.

    The status is the Jenkins "color" indicator (blue, red, disabled,
    blue_anime, ...). It is opaque to this system and stored verbatim.
    """

    name: str
    status: str
    checked_at: int | None = None  # Unix timestamp shared by a whole run
    id: int | None = None  # Row id, only set when read back from the store

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "JobSnapshot":
        """
        Create a snapshot from one entry of the Jenkins ``jobs`` array.

        Raises:
            KeyError: If the entry has no name
        """
        return cls(name=str(data["name"]), status=str(data.get("color") or ""))

    def to_row(self, checked_at: int) -> tuple[str, str, int]:
        """Convert to the (name, status, checked_at) tuple used for inserts."""
        return (self.name, self.status, checked_at)


@dataclass
class FetchResult:
    """Outcome of asking Jenkins for its job list."""

    jobs: list[JobSnapshot] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class StoreResult:
    """Outcome of persisting one run into the snapshot store."""

    db_path: str
    stored: int = 0
    checked_at: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
