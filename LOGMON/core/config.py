"""
Monitor settings

Settings come from three places, in increasing priority:
model defaults, LOGMON_* environment variables, explicit overrides
(normally the command line).
"""
import os
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, Field

DEFAULT_LOG_PATH = Path("/var/log/system.log")

# env var -> settings field
ENV_VARS = {
    "LOGMON_MAX_ENTRIES": "max_entries",
    "LOGMON_INITIAL_LINES": "initial_lines",
    "LOGMON_POLL_INTERVAL": "poll_interval",
    "LOGMON_LIVE_FILTER": "live_filter",
    "LOGMON_LOG_DIR": "log_dir",
    "LOGMON_PAGE_SIZE": "page_size",
}


class MonitorSettings(BaseModel):
    log_path: Path = DEFAULT_LOG_PATH
    max_entries: int = Field(default=1000, gt=0)
    initial_lines: int = Field(default=100, ge=0)
    poll_interval: float = Field(default=0.5, gt=0)
    live_filter: bool = True
    log_dir: Path = Path("app_log")
    page_size: int = Field(default=10, gt=0)

    @classmethod
    def from_env(cls, log_path: Any = None, **overrides: Any) -> "MonitorSettings":
        """
        Build settings from the environment plus explicit overrides

        Args:
            log_path: Log file to tail (None keeps the default)
            **overrides: Field values; None means "not given"

        Returns:
            Validated MonitorSettings
        """
        values: Dict[str, Any] = {}
        for var, field in ENV_VARS.items():
            raw = os.environ.get(var)
            if raw is not None and raw != "":
                values[field] = raw

        values.update({k: v for k, v in overrides.items() if v is not None})
        if log_path is not None:
            values["log_path"] = log_path

        return cls(**values)
