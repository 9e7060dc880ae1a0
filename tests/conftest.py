"""Shared pytest fixtures for all tests."""

import time

import pytest


@pytest.fixture
def local_timezone(monkeypatch):
    """
    Pin the process-local timezone.

    Returns:
        Function taking a POSIX TZ string (e.g. 'UTC0', 'EST5')
    """

    def pin(tz_string: str):
        monkeypatch.setenv("TZ", tz_string)
        time.tzset()

    yield pin

    monkeypatch.undo()
    time.tzset()
