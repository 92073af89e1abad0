"""File-based storage of sync profiles, one XML document per profile."""

import logging
import xml.etree.ElementTree as ET  # nosec B405 - trusted local profile files
from pathlib import Path
from typing import List, Optional, Union

from ..core.profile import ProfileError, ProfileSerializer, SyncProfile

logger = logging.getLogger(__name__)

PROFILE_SUFFIX = ".xml"


class ProfileLoadError(ProfileError):
    """Raised when a stored profile cannot be read or parsed."""

    def __init__(self, path: Path, reason: str):
        """Initialize the error.

        Args:
            path: File that failed to load
            reason: Description of the failure
        """
        super().__init__(f"Failed to load profile from {path}: {reason}")
        self.path = path


class ProfileStore:
    """Stores sync profiles as ``<name>.xml`` files in a directory."""

    def __init__(self, directory: Union[Path, str]):
        """Initialize the store.

        Args:
            directory: Directory holding the profile files
        """
        self.directory = Path(directory)
        self.serializer = ProfileSerializer()

    def profile_path(self, name: str) -> Path:
        """Return the file path used for a profile name."""
        return self.directory / f"{name}{PROFILE_SUFFIX}"

    def profile_names(self) -> List[str]:
        """Return the names of all stored profiles, sorted."""
        if not self.directory.is_dir():
            return []
        return sorted(p.stem for p in self.directory.glob(f"*{PROFILE_SUFFIX}"))

    def load(self, name: str) -> Optional[SyncProfile]:
        """Load a profile by name.

        Returns:
            The profile, or None if no profile with that name is stored

        Raises:
            ProfileLoadError: If the stored file cannot be parsed
        """
        path = self.profile_path(name)
        if not path.is_file():
            logger.debug("Profile '%s' not found in %s", name, self.directory)
            return None
        return self.load_file(path)

    def load_file(self, path: Union[Path, str]) -> SyncProfile:
        """Load a profile from an explicit file path.

        Raises:
            ProfileLoadError: If the file cannot be read or parsed
        """
        path = Path(path)
        try:
            tree = ET.parse(path)  # nosec B314 - trusted local profile files
        except (OSError, ET.ParseError) as e:
            raise ProfileLoadError(path, str(e)) from e

        profile = self.serializer.deserialize(tree.getroot())
        if not profile.name():
            profile.set_name(path.stem)
        logger.debug("Loaded profile '%s' from %s", profile.name(), path)
        return profile

    def save(self, profile: SyncProfile) -> Path:
        """Write a profile to its file, replacing any previous version.

        Returns:
            Path of the written file
        """
        if not profile.name():
            raise ProfileError("Cannot save a profile without a name")

        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.profile_path(profile.name())
        root = self.serializer.serialize(profile)
        ET.indent(root)
        ET.ElementTree(root).write(path, encoding="UTF-8", xml_declaration=True)
        logger.info("Saved profile '%s' to %s", profile.name(), path)
        return path

    def remove(self, name: str) -> bool:
        """Delete a stored profile.

        Returns:
            True if a file was removed
        """
        path = self.profile_path(name)
        if not path.is_file():
            return False
        path.unlink()
        logger.info("Removed profile '%s'", name)
        return True
