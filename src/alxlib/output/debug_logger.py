"""
Debug logging for AlxLib.

Only the stateful parts of the library log: random streams report seed
advances and stream creation under "rng", the config loader reports loads
under "config". Entries are kept in a bounded in-memory buffer and can be
echoed to a console stream.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, List, Optional, TextIO
from enum import Enum
import sys


class LogLevel(Enum):
    """Log levels for filtering output."""
    TRACE = 0    # Every implicit seed advance
    DEBUG = 1    # Stream creation
    INFO = 2     # Config loads
    WARNING = 3
    ERROR = 4
    NONE = 5     # No logging


@dataclass
class LogEntry:
    """A single log entry."""
    level: LogLevel
    category: str
    message: str
    data: Dict[str, Any] = field(default_factory=dict)

    def format(self) -> str:
        """Format entry as a single line."""
        line = f"{self.level.name[:5].ljust(5)} {self.category[:12].ljust(12)} {self.message}"
        if self.data:
            line += " (" + ", ".join(f"{k}={v}" for k, v in self.data.items()) + ")"
        return line


class DebugLogger:
    """
    Leveled, categorized logger for AlxLib.

    Example:
        >>> logger = DebugLogger(level=LogLevel.DEBUG, use_colors=False)
        >>> logger.log_stream_created("loot", 42)
        >>> logger.get_entries(category="rng")[0].format()
        'DEBUG rng          Stream loot (seed=42)'
    """

    CATEGORY_COLORS = {
        'rng': '\033[33m',       # Yellow
        'config': '\033[36m',    # Cyan
    }
    LEVEL_COLORS = {
        LogLevel.TRACE: '\033[90m',   # Gray
        LogLevel.DEBUG: '\033[37m',   # White
        LogLevel.INFO: '\033[32m',    # Green
        LogLevel.WARNING: '\033[33m', # Yellow
        LogLevel.ERROR: '\033[31m',   # Red
    }
    RESET_COLOR = '\033[0m'

    def __init__(self,
                 level: LogLevel = LogLevel.INFO,
                 output: Optional[TextIO] = None,
                 use_colors: bool = True,
                 max_entries: int = 10000):
        """
        Args:
            level: Minimum log level to record
            output: Console stream (None = buffer only)
            use_colors: Use ANSI colors on the console stream
            max_entries: Oldest entries are dropped past this many
        """
        self.level = level
        self.output = output
        self.use_colors = use_colors

        self._entries: Deque[LogEntry] = deque(maxlen=max_entries)
        self._category_filter: Optional[set] = None

    def set_category_filter(self, categories: Optional[List[str]]) -> None:
        """Only record these categories (None = all)."""
        self._category_filter = None if categories is None else set(categories)

    def is_enabled(self, level: LogLevel, category: str) -> bool:
        """Check whether an entry would be recorded."""
        if level.value < self.level.value or level == LogLevel.NONE:
            return False
        if self._category_filter and category not in self._category_filter:
            return False
        return True

    def log(self, level: LogLevel, category: str, message: str,
            **data) -> Optional[LogEntry]:
        """
        Record a message.

        Returns:
            LogEntry if recorded, None if filtered
        """
        if not self.is_enabled(level, category):
            return None

        entry = LogEntry(level=level, category=category, message=message, data=data)
        self._entries.append(entry)
        if self.output:
            self._write_entry(entry)
        return entry

    def trace(self, category: str, message: str, **data) -> Optional[LogEntry]:
        return self.log(LogLevel.TRACE, category, message, **data)

    def debug(self, category: str, message: str, **data) -> Optional[LogEntry]:
        return self.log(LogLevel.DEBUG, category, message, **data)

    def info(self, category: str, message: str, **data) -> Optional[LogEntry]:
        return self.log(LogLevel.INFO, category, message, **data)

    def warning(self, category: str, message: str, **data) -> Optional[LogEntry]:
        return self.log(LogLevel.WARNING, category, message, **data)

    def error(self, category: str, message: str, **data) -> Optional[LogEntry]:
        return self.log(LogLevel.ERROR, category, message, **data)

    def _write_entry(self, entry: LogEntry) -> None:
        line = entry.format()
        if self.use_colors:
            level_color = self.LEVEL_COLORS.get(entry.level, '')
            cat_color = self.CATEGORY_COLORS.get(entry.category, '')
            line = f"{level_color}{line[:6]}{cat_color}{line[6:19]}{self.RESET_COLOR}{line[19:]}"
        self.output.write(line + "\n")
        self.output.flush()

    # Library events

    def log_seed_advance(self, stream: str, seed: int) -> None:
        """Log an implicit seed counter step."""
        self.trace("rng", f"Advance {stream}", seed=seed)

    def log_stream_created(self, stream: str, seed: int) -> None:
        """Log creation of a named random stream."""
        self.debug("rng", f"Stream {stream}", seed=seed)

    def log_config_loaded(self, path: str, streams: int) -> None:
        """Log a configuration file load."""
        self.info("config", f"Loaded {path}", streams=streams)

    def get_entries(self, level: Optional[LogLevel] = None,
                    category: Optional[str] = None) -> List[LogEntry]:
        """Recorded entries, optionally at or above a level and in one category."""
        entries = list(self._entries)
        if level:
            entries = [e for e in entries if e.level.value >= level.value]
        if category:
            entries = [e for e in entries if e.category == category]
        return entries

    @property
    def count(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DebugLogger(entries={len(self._entries)}, level={self.level.name})"


def create_console_logger(level: LogLevel = LogLevel.INFO,
                          use_colors: bool = True) -> DebugLogger:
    """Create a logger that echoes to stderr."""
    return DebugLogger(level=level, output=sys.stderr, use_colors=use_colors)


# Library-wide logger, quiet unless replaced
_logger: Optional[DebugLogger] = None


def get_logger() -> DebugLogger:
    """Get or create the library logger."""
    global _logger
    if _logger is None:
        _logger = DebugLogger(level=LogLevel.WARNING, use_colors=False)
    return _logger


def set_logger(logger: Optional[DebugLogger]) -> None:
    """Replace the library logger (None restores the quiet default)."""
    global _logger
    _logger = logger
