"""
Logging for AlxLib.
"""

from .debug_logger import (
    DebugLogger,
    LogLevel,
    LogEntry,
    create_console_logger,
    get_logger,
    set_logger,
)

__all__ = [
    'DebugLogger',
    'LogLevel',
    'LogEntry',
    'create_console_logger',
    'get_logger',
    'set_logger',
]
