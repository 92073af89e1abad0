"""XML tags, attribute names, keys and values used in profile documents."""

from typing import Optional, Union

# Elements
TAG_PROFILE = "profile"
TAG_KEY = "key"
TAG_SCHEDULE = "schedule"
TAG_ERROR_ATTEMPTS = "attempts"
TAG_ATTEMPT_DELAY = "attemptdelay"

# Attributes
ATTR_NAME = "name"
ATTR_TYPE = "type"
ATTR_VALUE = "value"
ATTR_ENABLED = "enabled"
ATTR_TIME = "time"
ATTR_INTERVAL = "interval"
ATTR_DAYS = "days"

# Keys
KEY_ENABLED = "enabled"
KEY_SYNC_SCHEDULED = "scheduled"
KEY_SYNC_DIRECTION = "Sync Direction"
KEY_CONFLICT_RESOLUTION_POLICY = "conflictpolicy"
KEY_DESTINATION_TYPE = "destinationtype"
KEY_SOC_AFTER = "sync_on_change_after"
KEY_BACKEND = "backend"

# Values
BOOLEAN_TRUE = "true"
BOOLEAN_FALSE = "false"
VALUE_TWO_WAY = "two-way"
VALUE_FROM_REMOTE = "from-remote"
VALUE_TO_REMOTE = "to-remote"
VALUE_PREFER_REMOTE = "prefer remote"
VALUE_PREFER_LOCAL = "prefer local"
VALUE_ONLINE = "online"
VALUE_DEVICE = "device"

# Numbers in profile documents are signed 32-bit integers
INT32_MAX = 2**31 - 1


def parse_int(
    value: Union[str, int, None], maximum: int = INT32_MAX
) -> Optional[int]:
    """Parse a base-10 integer stored in a profile document.

    Only ASCII digits with an optional sign are accepted, and values outside
    ``-maximum - 1..maximum`` are rejected.

    Returns:
        The parsed integer, or None if the value is not a valid integer
    """
    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text[:1] in ("+", "-") else text
        if not (digits.isascii() and digits.isdigit()):
            return None
        number = int(text)
    else:
        return None
    if not -maximum - 1 <= number <= maximum:
        return None
    return number
