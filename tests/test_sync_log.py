"""Tests for the sync result history."""

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from syncprofile.core.log import DEFAULT_MAX_ENTRIES, SyncLog
from syncprofile.models import SyncResultCode, SyncResults

START = datetime(2024, 3, 1, 10, 0)


def make_results(minutes: int = 0, **kwargs) -> SyncResults:
    """Create results at START plus the given number of minutes."""
    return SyncResults(sync_time=START + timedelta(minutes=minutes), **kwargs)


class TestSyncResults:
    """Test the result model."""

    def test_defaults(self):
        """Results default to a successful session without changes."""
        results = make_results()
        assert results.major_code == SyncResultCode.SUCCESS
        assert results.succeeded
        assert results.total_changes == 0

    def test_total_changes(self):
        """Added, modified and deleted items are summed."""
        results = make_results(items_added=2, items_modified=3, items_deleted=1)
        assert results.total_changes == 6

    def test_negative_counts_rejected(self):
        """Item counts cannot be negative."""
        with pytest.raises(ValidationError):
            make_results(items_added=-1)

    def test_failed_result(self):
        """Non-success codes are not successful."""
        assert not make_results(major_code=SyncResultCode.FAILED).succeeded


class TestSyncLog:
    """Test the log container."""

    def test_empty_log(self):
        """A new log has no last result."""
        log = SyncLog("calendar")
        assert log.last_results() is None
        assert len(log) == 0
        assert log.profile_name == "calendar"

    def test_last_results_is_most_recent(self):
        """The latest appended result is reported."""
        log = SyncLog("calendar")
        log.add_results(make_results(0))
        log.add_results(make_results(30))
        assert log.last_results().sync_time == START + timedelta(minutes=30)

    def test_old_entries_are_discarded(self):
        """Only the newest max_entries results are kept."""
        log = SyncLog("calendar")
        for minutes in range(DEFAULT_MAX_ENTRIES + 2):
            log.add_results(make_results(minutes))

        kept = log.all_results()
        assert len(kept) == DEFAULT_MAX_ENTRIES
        assert kept[0].sync_time == START + timedelta(minutes=2)

    def test_rename(self):
        """The log follows profile renames."""
        log = SyncLog("old")
        log.set_profile_name("new")
        assert log.profile_name == "new"

    def test_copy_is_deep(self):
        """Adding to a copy does not change the original."""
        log = SyncLog("calendar", max_entries=3)
        log.add_results(make_results(0))
        duplicate = log.copy()
        duplicate.add_results(make_results(10))

        assert len(log) == 1
        assert len(duplicate) == 2
        assert duplicate.all_results()[0] is not log.all_results()[0]
        assert duplicate.all_results()[0] == log.all_results()[0]
