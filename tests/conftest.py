"""Pytest configuration and fixtures for dateserial tests."""

from __future__ import annotations

import sys
import time
from collections.abc import Generator
from datetime import datetime
from pathlib import Path

import pytest

# Add the parent directory to sys.path so dateserial can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def local_utc_minus_5(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Pin the local zone to a fixed UTC-05:00 with no DST."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    # POSIX TZ offsets are west-positive: "XXX+05" is UTC-05:00
    monkeypatch.setenv("TZ", "XXX+05")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def default() -> datetime:
    """A distinctive fallback value."""
    return datetime(1999, 12, 31, 23, 59, 59)
