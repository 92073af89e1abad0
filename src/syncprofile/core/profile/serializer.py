"""XML (de)serialization of sync profiles.

The generic keys and sub-profiles are handled by :class:`Profile`; this module
adds the schedule and retry sections owned by sync profiles::

    <profile name="..." type="sync">
        <key .../>
        <profile type="client" .../>
        <schedule .../>
        <attempts>
            <attemptdelay value="5"/>
            <attemptdelay value="15"/>
        </attempts>
    </profile>

The implicit zero delay of the first attempt is never written, and the
``attempts`` element is left out when no explicit delays are configured.
"""

import logging
import xml.etree.ElementTree as ET  # nosec B405 - trusted local profile files

from ..schedule import SyncSchedule
from ..definitions import (
    ATTR_NAME,
    ATTR_VALUE,
    TAG_ATTEMPT_DELAY,
    TAG_ERROR_ATTEMPTS,
    TAG_SCHEDULE,
)
from .profile import ProfileError
from .retry_policy import RetryPolicy
from .sync_profile import SyncProfile

logger = logging.getLogger(__name__)


class ProfileSerializer:
    """Converts sync profiles to and from XML elements."""

    def read_schedule(self, root: ET.Element) -> SyncSchedule:
        """Return the schedule stored under ``root``, or a default schedule."""
        element = root.find(TAG_SCHEDULE)
        if element is None:
            return SyncSchedule()
        return SyncSchedule.from_xml(element)

    def read_retry_policy(self, root: ET.Element) -> RetryPolicy:
        """Return the retry policy stored under ``root``.

        Delays that are not positive integers are dropped.
        """
        policy = RetryPolicy()
        attempts = root.find(TAG_ERROR_ATTEMPTS)
        if attempts is None:
            return policy

        for delay in attempts.findall(TAG_ATTEMPT_DELAY):
            policy.add_delay(delay.get(ATTR_VALUE))
        return policy

    def write_schedule(self, root: ET.Element, schedule: SyncSchedule) -> None:
        """Append the schedule element to ``root``."""
        root.append(schedule.to_xml())

    def write_retry_policy(self, root: ET.Element, policy: RetryPolicy) -> None:
        """Append the explicit retry delays to ``root``, if there are any."""
        if policy.attempt_count() <= 1:
            return
        attempts = ET.SubElement(root, TAG_ERROR_ATTEMPTS)
        for minutes in policy.explicit_delays:
            ET.SubElement(attempts, TAG_ATTEMPT_DELAY, {ATTR_VALUE: str(minutes)})

    def deserialize(self, root: ET.Element) -> SyncProfile:
        """Build a sync profile from its ``<profile>`` element."""
        profile = SyncProfile(root.get(ATTR_NAME, ""))
        profile.read_xml(root)
        profile.set_sync_schedule(self.read_schedule(root))
        profile.retry_policy = self.read_retry_policy(root)
        logger.debug(
            "Loaded profile '%s' with %d retry delays",
            profile.name(),
            len(profile.retry_policy.explicit_delays),
        )
        return profile

    def serialize(self, profile: SyncProfile) -> ET.Element:
        """Build the ``<profile>`` element of a sync profile."""
        root = profile.base_xml()
        self.write_schedule(root, profile.sync_schedule())
        self.write_retry_policy(root, profile.retry_policy)
        return root

    def from_string(self, text: str) -> SyncProfile:
        """Parse a sync profile from an XML document string.

        Raises:
            ProfileError: If the document is not well-formed XML
        """
        try:
            root = ET.fromstring(text)  # nosec B314 - trusted local profile files
        except ET.ParseError as e:
            raise ProfileError(f"Invalid profile document: {e}") from e
        return self.deserialize(root)

    def to_string(self, profile: SyncProfile) -> str:
        """Serialize a sync profile to an XML document string."""
        root = self.serialize(profile)
        ET.indent(root)
        return ET.tostring(root, encoding="unicode")
