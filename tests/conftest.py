"""Pytest fixtures for wpbridge tests."""

import pytest

from wpbridge.runtime import WpApp
from wpbridge.testing import RecordingRuntime


@pytest.fixture
def runtime() -> RecordingRuntime:
    """Fresh in-process WordPress runtime."""
    return RecordingRuntime()


@pytest.fixture
def app(runtime: RecordingRuntime) -> WpApp:
    """WpApp bound to the recording runtime."""
    return WpApp(runtime)
