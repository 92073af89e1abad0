"""Generic profile tree.

A profile is a named, typed bag of string settings with an ordered list of
child profiles. Sync profiles use it as their storage for everything except the
schedule and retry settings, and the client/server/service/storage children are
plain ``Profile`` instances distinguished only by their type tag.
"""

import copy
import logging
import xml.etree.ElementTree as ET  # nosec B405 - trusted local profile files
from enum import Enum
from typing import Dict, Iterator, List, Optional

from ..definitions import (
    ATTR_NAME,
    ATTR_TYPE,
    ATTR_VALUE,
    BOOLEAN_FALSE,
    BOOLEAN_TRUE,
    KEY_ENABLED,
    TAG_KEY,
    TAG_PROFILE,
)

logger = logging.getLogger(__name__)


class ProfileError(Exception):
    """Base exception for profile handling errors."""

    pass


class ProfileType(str, Enum):
    """Kinds of profiles that can appear in a profile tree."""

    SYNC = "sync"
    CLIENT = "client"
    SERVER = "server"
    STORAGE = "storage"
    SERVICE = "service"


class Profile:
    """Named key/value settings with typed child profiles."""

    def __init__(self, name: str = "", profile_type: ProfileType = ProfileType.SYNC):
        """Initialize an empty profile.

        Args:
            name: Profile name, unique within its storage scope
            profile_type: Type tag of the profile
        """
        self._name = name
        self._type = ProfileType(profile_type)
        self._keys: Dict[str, str] = {}
        self._sub_profiles: List["Profile"] = []

    def __repr__(self) -> str:
        """Short representation with name and type."""
        return f"{type(self).__name__}(name={self._name!r}, type={self._type.value})"

    # Identity

    def name(self) -> str:
        """Return the profile name."""
        return self._name

    def set_name(self, name: str) -> None:
        """Rename the profile."""
        self._name = name

    def type(self) -> ProfileType:
        """Return the profile type tag."""
        return self._type

    # Keys

    def key(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of a key, or ``default`` when it is not set."""
        return self._keys.get(name, default)

    def keys(self) -> Dict[str, str]:
        """Return a copy of all keys."""
        return dict(self._keys)

    def set_key(self, name: str, value: Optional[str]) -> None:
        """Set a key. An empty or ``None`` value removes the key."""
        if value is None or value == "":
            self._keys.pop(name, None)
        else:
            self._keys[name] = str(value)

    def bool_key(self, name: str, default: bool = False) -> bool:
        """Return a key interpreted as a boolean."""
        value = self._keys.get(name)
        if value is None:
            return default
        return value.strip().lower() == BOOLEAN_TRUE

    def set_bool_key(self, name: str, value: bool) -> None:
        """Store a boolean key."""
        self._keys[name] = BOOLEAN_TRUE if value else BOOLEAN_FALSE

    def is_enabled(self) -> bool:
        """Return True unless the profile has been explicitly disabled."""
        return self.bool_key(KEY_ENABLED, True)

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable the profile."""
        self.set_bool_key(KEY_ENABLED, enabled)

    # Sub-profiles

    def add_sub_profile(self, profile: "Profile") -> "Profile":
        """Append a child profile and return it."""
        self._sub_profiles.append(profile)
        return profile

    def remove_sub_profile(self, name: str, profile_type: ProfileType) -> bool:
        """Remove the first direct child matching name and type."""
        for index, child in enumerate(self._sub_profiles):
            if child.name() == name and child.type() == profile_type:
                del self._sub_profiles[index]
                return True
        return False

    def _walk(self) -> Iterator["Profile"]:
        for child in self._sub_profiles:
            yield child
            yield from child._walk()

    def all_sub_profiles(self) -> List["Profile"]:
        """Return all descendants, depth-first in document order."""
        return list(self._walk())

    def sub_profile_names(self, profile_type: ProfileType) -> List[str]:
        """Return the names of all descendants of the given type."""
        return [p.name() for p in self._walk() if p.type() == profile_type]

    def sub_profile(self, name: str, profile_type: ProfileType) -> Optional["Profile"]:
        """Return the first descendant with the given name and type."""
        for p in self._walk():
            if p.name() == name and p.type() == profile_type:
                return p
        return None

    # Copy and XML

    def clone(self) -> "Profile":
        """Return a fully independent copy of this profile and its children."""
        return copy.deepcopy(self)

    def read_xml(self, element: ET.Element) -> None:
        """Load keys and child profiles from a ``<profile>`` element."""
        for child in element:
            if child.tag == TAG_KEY:
                key_name = child.get(ATTR_NAME)
                if key_name:
                    self.set_key(key_name, child.get(ATTR_VALUE, ""))
            elif child.tag == TAG_PROFILE:
                sub_profile = Profile.from_xml(child)
                if sub_profile is not None:
                    self._sub_profiles.append(sub_profile)

    @classmethod
    def from_xml(cls, element: ET.Element) -> Optional["Profile"]:
        """Build a profile from a ``<profile>`` element.

        Returns:
            The parsed profile, or None when its type is not recognised
        """
        type_str = element.get(ATTR_TYPE, ProfileType.SYNC.value)
        try:
            profile_type = ProfileType(type_str)
        except ValueError:
            logger.warning(
                "Skipping profile '%s' with unknown type '%s'",
                element.get(ATTR_NAME, ""),
                type_str,
            )
            return None

        profile = cls(element.get(ATTR_NAME, ""), profile_type)
        profile.read_xml(element)
        return profile

    def to_xml(self) -> ET.Element:
        """Serialize keys and child profiles to a ``<profile>`` element."""
        root = ET.Element(TAG_PROFILE, name=self._name, type=self._type.value)
        for key_name, value in self._keys.items():
            ET.SubElement(root, TAG_KEY, name=key_name, value=value)
        for child in self._sub_profiles:
            root.append(child.to_xml())
        return root
