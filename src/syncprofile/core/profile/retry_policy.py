"""Retry attempt state machine for failed syncs.

The delay list always starts with an implicit zero delay for the first attempt;
explicitly configured delays follow it. ``current_attempt`` indexes into that
list and runs from 0 (nothing attempted yet) up to ``len(delays)``, where no
attempts remain.
"""

import logging
from dataclasses import dataclass
from dataclasses import field as dataclass_field
from typing import Iterable, List, Union

from ..definitions import INT32_MAX, parse_int

logger = logging.getLogger(__name__)

INVALID_DELAY = -1


@dataclass
class RetryPolicy:
    """Backoff delays (in minutes) and the current attempt counter."""

    delays: List[int] = dataclass_field(default_factory=lambda: [0])
    current_attempt: int = 0

    def __post_init__(self) -> None:
        """Enforce the implicit first-attempt entry."""
        explicit = self.delays[1:] if self.delays[:1] == [0] else self.delays
        self.delays = [0] + [d for d in explicit if 0 < d <= INT32_MAX]

    @classmethod
    def from_delays(cls, values: Iterable[Union[str, int]]) -> "RetryPolicy":
        """Build a policy from explicitly configured delays.

        Values that are not 32-bit integers or are not strictly positive are
        dropped.
        """
        policy = cls()
        for value in values:
            policy.add_delay(value)
        return policy

    def add_delay(self, value: Union[str, int, None]) -> bool:
        """Append an explicit delay if it is a positive 32-bit integer.

        Returns:
            True if the delay was accepted
        """
        minutes = parse_int(value)
        if minutes is None:
            logger.debug("Dropping unparsable or out-of-range retry delay %r", value)
            return False
        if minutes <= 0:
            logger.debug("Dropping non-positive retry delay %d", minutes)
            return False
        self.delays.append(minutes)
        return True

    @property
    def explicit_delays(self) -> List[int]:
        """Configured delays without the implicit first entry."""
        return self.delays[1:]

    def attempt_count(self) -> int:
        """Total number of attempts, including the first one."""
        return len(self.delays)

    def has_more_attempts(self) -> bool:
        """Return True while the attempt counter has not reached the end."""
        return self.current_attempt < len(self.delays)

    def advance(self) -> None:
        """Move to the next attempt. Advancing past the end is allowed."""
        self.current_attempt += 1

    def set_attempt(self, attempt: int) -> None:
        """Set the attempt counter directly. No clamping is applied."""
        self.current_attempt = attempt

    def reset(self) -> None:
        """Start a fresh sync session."""
        self.current_attempt = 0

    def delay_for_attempt(self, attempt: int) -> int:
        """Return the delay for an attempt, or INVALID_DELAY if out of range."""
        if 0 <= attempt < len(self.delays):
            return self.delays[attempt]
        return INVALID_DELAY

    def copy(self) -> "RetryPolicy":
        """Return an independent copy including the attempt counter."""
        return RetryPolicy(delays=list(self.delays), current_attempt=self.current_attempt)
