"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import commonkit...' works, and
enables every feature before commonkit.math is first imported.
"""
import os
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

# Feature selection is read once per process, on first import of commonkit.math
os.environ["COMMONKIT_FEATURES"] = "full"


@pytest.fixture
def fresh_logger(monkeypatch):
    """
    Run a test against an uninitialized logger bootstrap.

    Clears COMMONKIT_LOG_* overrides, resets the bootstrap before the test and
    removes whatever it installed afterwards, so each test sees a process that
    has never initialized logging.
    """
    from commonkit.logger import bootstrap

    for name in (
        "COMMONKIT_LOG_LEVEL",
        "COMMONKIT_LOG_DIR",
        "COMMONKIT_LOG_FILENAME",
        "COMMONKIT_LOG_CONSOLE",
        "COMMONKIT_LOG_FILE",
        "COMMONKIT_LOG_ROTATION",
        "COMMONKIT_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)

    bootstrap._reset()
    yield bootstrap
    bootstrap._reset()
