"""Per-profile history of sync results."""

import logging
from typing import List, Optional

from ...models import SyncResults

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 5


class SyncLog:
    """Most recent sync results of a single profile, oldest first."""

    def __init__(self, profile_name: str, max_entries: int = DEFAULT_MAX_ENTRIES):
        """Initialize an empty log.

        Args:
            profile_name: Name of the profile the log belongs to
            max_entries: Number of results kept; older entries are discarded
        """
        self._profile_name = profile_name
        self._max_entries = max(1, max_entries)
        self._results: List[SyncResults] = []

    def __len__(self) -> int:
        """Number of stored results."""
        return len(self._results)

    @property
    def profile_name(self) -> str:
        """Name of the owning profile."""
        return self._profile_name

    def set_profile_name(self, name: str) -> None:
        """Follow a rename of the owning profile."""
        self._profile_name = name

    def add_results(self, results: SyncResults) -> None:
        """Append a result, discarding the oldest ones beyond the limit."""
        self._results.append(results)
        overflow = len(self._results) - self._max_entries
        if overflow > 0:
            del self._results[:overflow]
            logger.debug(
                "Discarded %d old results from log of '%s'",
                overflow,
                self._profile_name,
            )

    def last_results(self) -> Optional[SyncResults]:
        """Return the most recently added result, or None if the log is empty."""
        return self._results[-1] if self._results else None

    def all_results(self) -> List[SyncResults]:
        """Return all stored results, oldest first."""
        return list(self._results)

    def copy(self) -> "SyncLog":
        """Return a deep copy that shares no state with this log."""
        clone = SyncLog(self._profile_name, self._max_entries)
        clone._results = [r.model_copy(deep=True) for r in self._results]
        return clone
