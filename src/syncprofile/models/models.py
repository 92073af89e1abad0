"""Data models for the sync profile package."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SyncResultCode(str, Enum):
    """Overall outcome of a sync session."""

    SUCCESS = "success"
    FAILED = "failed"
    CANCELLED = "cancelled"
    ABORTED = "aborted"


class SyncResults(BaseModel):
    """Outcome of one sync session of a profile."""

    sync_time: datetime
    major_code: SyncResultCode = SyncResultCode.SUCCESS
    minor_code: int = 0
    target_name: str = ""
    items_added: int = Field(default=0, ge=0)
    items_modified: int = Field(default=0, ge=0)
    items_deleted: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def succeeded(self) -> bool:
        """Whether the session completed successfully."""
        return self.major_code == SyncResultCode.SUCCESS

    @property
    def total_changes(self) -> int:
        """Number of items touched by the session."""
        return self.items_added + self.items_modified + self.items_deleted
