"""Tests for the generic profile tree."""

import logging
import xml.etree.ElementTree as ET  # nosec B405

import pytest

from syncprofile.core.profile import Profile, ProfileType


@pytest.fixture
def tree():
    """Profile with nested client, storage and service children."""
    root = Profile("root", ProfileType.SYNC)
    client = root.add_sub_profile(Profile("client-a", ProfileType.CLIENT))
    client.add_sub_profile(Profile("nested-storage", ProfileType.STORAGE))
    root.add_sub_profile(Profile("storage-a", ProfileType.STORAGE))
    root.add_sub_profile(Profile("client-b", ProfileType.CLIENT))
    return root


class TestProfileKeys:
    """Test key/value handling."""

    def test_key_default(self):
        """Missing keys return the default."""
        profile = Profile("p")
        assert profile.key("missing") is None
        assert profile.key("missing", "fallback") == "fallback"

    def test_set_key_and_remove(self):
        """Setting an empty or None value removes the key."""
        profile = Profile("p")
        profile.set_key("a", "1")
        assert profile.key("a") == "1"
        profile.set_key("a", "")
        assert profile.key("a") is None
        profile.set_key("b", "2")
        profile.set_key("b", None)
        assert "b" not in profile.keys()

    def test_bool_key(self):
        """Boolean keys are stored as true/false strings."""
        profile = Profile("p")
        assert profile.bool_key("flag") is False
        assert profile.bool_key("flag", True) is True
        profile.set_bool_key("flag", True)
        assert profile.key("flag") == "true"
        assert profile.bool_key("flag") is True
        profile.set_key("flag", "TRUE")
        assert profile.bool_key("flag") is True
        profile.set_key("flag", "yes")
        assert profile.bool_key("flag") is False

    def test_enabled_defaults_to_true(self):
        """Profiles are enabled unless disabled explicitly."""
        profile = Profile("p", ProfileType.STORAGE)
        assert profile.is_enabled()
        profile.set_enabled(False)
        assert not profile.is_enabled()


class TestSubProfiles:
    """Test sub-profile enumeration."""

    def test_all_sub_profiles_depth_first(self, tree):
        """Descendants are listed depth-first in insertion order."""
        names = [p.name() for p in tree.all_sub_profiles()]
        assert names == ["client-a", "nested-storage", "storage-a", "client-b"]

    def test_sub_profile_names_by_type(self, tree):
        """Names are filtered by type."""
        assert tree.sub_profile_names(ProfileType.STORAGE) == [
            "nested-storage",
            "storage-a",
        ]
        assert tree.sub_profile_names(ProfileType.SERVER) == []

    def test_sub_profile_lookup(self, tree):
        """Lookup needs both name and type to match."""
        assert tree.sub_profile("client-b", ProfileType.CLIENT).name() == "client-b"
        assert tree.sub_profile("client-b", ProfileType.STORAGE) is None

    def test_remove_sub_profile(self, tree):
        """Only direct children are removed."""
        assert tree.remove_sub_profile("storage-a", ProfileType.STORAGE)
        assert not tree.remove_sub_profile("nested-storage", ProfileType.STORAGE)
        assert tree.sub_profile_names(ProfileType.STORAGE) == ["nested-storage"]

    def test_clone_is_deep(self, tree):
        """Changes to a clone do not reach the original."""
        duplicate = tree.clone()
        duplicate.sub_profile("client-a", ProfileType.CLIENT).set_key("k", "v")
        assert tree.sub_profile("client-a", ProfileType.CLIENT).key("k") is None


class TestProfileXml:
    """Test XML conversion of the profile tree."""

    def test_round_trip(self, tree):
        """Keys and children survive a round trip in order."""
        tree.set_key("scheduled", "true")
        tree.sub_profile("storage-a", ProfileType.STORAGE).set_key("backend", "db")

        parsed = Profile.from_xml(tree.to_xml())

        assert parsed.name() == "root"
        assert parsed.key("scheduled") == "true"
        assert [p.name() for p in parsed.all_sub_profiles()] == [
            p.name() for p in tree.all_sub_profiles()
        ]
        assert parsed.sub_profile("storage-a", ProfileType.STORAGE).key("backend") == "db"

    def test_unknown_child_type_is_skipped(self, caplog):
        """Children with an unknown type are dropped with a warning."""
        element = ET.fromstring(
            '<profile name="p" type="sync">'
            '<profile name="x" type="gadget"/>'
            '<profile name="c" type="client"/>'
            "</profile>"
        )
        with caplog.at_level(logging.WARNING):
            parsed = Profile.from_xml(element)

        assert [p.name() for p in parsed.all_sub_profiles()] == ["c"]
        assert "unknown type 'gadget'" in caplog.text
