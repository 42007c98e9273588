"""
Log Parser Module - Line classification and timestamp extraction

Handles:
- Log level identification (INFO, DEBUG, WARNING, ERROR, UNKNOWN)
- Fixed-offset timestamp extraction
- Construction of immutable LogEntry records
"""
from typing import List
from dataclasses import dataclass
from enum import Enum


class LogLevel(Enum):
    """Log severity levels"""
    INFO = "INFO"
    DEBUG = "DEBUG"
    WARNING = "WARNING"
    ERROR = "ERROR"
    UNKNOWN = "UNKNOWN"

    @property
    def color(self) -> str:
        """Get color representation for this log level"""
        colors = {
            LogLevel.INFO: "green",
            LogLevel.DEBUG: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
            LogLevel.UNKNOWN: "grey62",
        }
        return colors.get(self, "white")


@dataclass(frozen=True)
class LogEntry:
    """One classified log line, never mutated after creation"""
    content: str
    timestamp: str
    level: LogLevel


class LogParser:
    """
    Keyword-based line classifier

    Rules are checked in priority order; the first hit wins:
    - macOS syslog banner ("ASL Sender Statistics") -> INFO
    - "error", "fail", "exception" -> ERROR
    - "warn" -> WARNING
    - "debug" -> DEBUG
    - "notice", "info" -> INFO
    - anything else -> UNKNOWN
    """

    BANNER_MARKERS = ("ASL Sender Statistics",)

    LEVEL_RULES = [
        (("error", "fail", "exception"), LogLevel.ERROR),
        (("warn",), LogLevel.WARNING),
        (("debug",), LogLevel.DEBUG),
        (("notice", "info"), LogLevel.INFO),
    ]

    # "2024-01-01 10:00:00 ..." -> space at 10, colon at 13
    TIMESTAMP_LENGTH = 19
    MIN_TIMESTAMP_LINE = 20

    def classify(self, line: str) -> LogLevel:
        """
        Classify a raw line into a log level

        Args:
            line: Raw log line (any text, including empty)

        Returns:
            The matching LogLevel, UNKNOWN if no rule matches
        """
        # Banner check is case-sensitive, the keyword rules are not
        if any(marker in line for marker in self.BANNER_MARKERS):
            return LogLevel.INFO

        line_lower = line.lower()
        for keywords, level in self.LEVEL_RULES:
            if any(keyword in line_lower for keyword in keywords):
                return level

        return LogLevel.UNKNOWN

    def extract_timestamp(self, line: str) -> str:
        """
        Take the leading "YYYY-MM-DD HH:MM:SS" slice of a line verbatim

        Returns:
            The first 19 characters, or "" when the line does not look timestamped
        """
        if (
            len(line) >= self.MIN_TIMESTAMP_LINE
            and line[10] == ' '
            and line[13] == ':'
        ):
            return line[:self.TIMESTAMP_LENGTH]
        return ""

    def parse_line(self, line: str) -> LogEntry:
        """
        Parse a single log line

        Args:
            line: The log line to parse, with or without its terminator

        Returns:
            LogEntry object with level and timestamp filled in
        """
        content = line.rstrip('\r\n')
        return LogEntry(
            content=content,
            timestamp=self.extract_timestamp(content),
            level=self.classify(content),
        )

    def parse_lines(self, lines: List[str]) -> List[LogEntry]:
        """Parse multiple log lines, preserving order"""
        return [self.parse_line(line) for line in lines]
