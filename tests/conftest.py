"""
Shared fixtures for log monitor tests
"""
import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from LOGMON.core.config import MonitorSettings
from LOGMON.core.controller import LogMonitor


@pytest.fixture
def log_file(tmp_path):
    """Empty log file inside a temporary directory"""
    path = tmp_path / "app.log"
    path.write_text("")
    return path


@pytest.fixture
def append_lines():
    """Append lines to a log file, each terminated by a newline"""
    def _append(path, *lines):
        with open(path, "a", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
    return _append


@pytest.fixture
def make_monitor(log_file):
    """Build and load a LogMonitor over ``log_file``"""
    def _make(**overrides):
        settings = MonitorSettings(log_path=log_file, **overrides)
        monitor = LogMonitor(settings)
        monitor.load()
        return monitor
    return _make
