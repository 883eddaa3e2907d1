"""Shared fixtures for Fleeting tests."""

from datetime import datetime

import pytest

from fakes import LOCAL_TZ, FakeClock


@pytest.fixture
def clock():
    """Clock set to mid-morning local time."""
    return FakeClock(datetime(2026, 3, 14, 9, 30, tzinfo=LOCAL_TZ))


@pytest.fixture
def db_path(tmp_path):
    """Path for a fresh journal database."""
    return tmp_path / "journal.db"
