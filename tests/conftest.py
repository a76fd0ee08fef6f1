"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides fake reader, frame and preference store fixtures.

==============================================================================
"""

import pytest
import numpy as np

from framescan.config import settings
from framescan.core.errors import NotFoundError
from framescan.core.logger import reset_logger
from framescan.core.preference_store import PreferenceStore
from framescan.core.reader_base import ReaderBase


# ============================================================================
# LOGGING FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_logging(tmp_path, monkeypatch):
    """Keep log files out of the working tree and re-run handler setup per test."""
    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path / "logs"))
    reset_logger()
    yield
    reset_logger()


# ============================================================================
# READER FIXTURES
# ============================================================================

class FakeReader(ReaderBase):
    """Returns queued outcomes in order; an exception instance is raised."""

    def __init__(self, outcomes=None):
        super().__init__()
        self.outcomes = list(outcomes or [])
        self.seen = []
        self.reset_count = 0

    def decode(self, luma):
        self.seen.append(luma)
        if not self.outcomes:
            raise NotFoundError()
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def reset(self):
        self.reset_count += 1


@pytest.fixture
def fake_reader() -> FakeReader:
    return FakeReader()


@pytest.fixture
def callback_log():
    """Collects results handed to the decoder callback."""
    results = []
    return results


# ============================================================================
# FRAME FIXTURES
# ============================================================================

@pytest.fixture
def vga_frame() -> np.ndarray:
    """640x480 luma plane with a marker at the framing rect's top-left corner."""
    frame = np.zeros((480, 640), dtype=np.uint8)
    frame[90, 120] = 7
    frame[389, 519] = 9
    return frame


# ============================================================================
# STORE FIXTURES
# ============================================================================

@pytest.fixture
def store(tmp_path) -> PreferenceStore:
    return PreferenceStore(str(tmp_path / "prefs" / "preferences.db"))
