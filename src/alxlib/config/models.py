"""
Configuration data models for AlxLib.

These dataclasses represent the structure of the optional JSON config file.
Every field has a default, so an empty file (or no file) is valid.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..output.debug_logger import DebugLogger, LogLevel, create_console_logger
from ..utils.math_utils import SMALL_NUMBER, near_tolerance
from ..utils.rng import RNGManager


@dataclass
class RNGConfig:
    """Random stream settings."""
    master_seed: int = 0
    streams: List[str] = field(default_factory=list)  # Created eagerly, in order


@dataclass
class LoggingConfig:
    """Library logger settings."""
    level: LogLevel = LogLevel.WARNING
    categories: Optional[List[str]] = None  # None = all categories
    console: bool = False
    use_colors: bool = False


@dataclass
class AlxConfig:
    """Complete AlxLib configuration."""
    tolerance: float = SMALL_NUMBER
    rng: RNGConfig = field(default_factory=RNGConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def is_near_zero(self, value: float) -> bool:
        """near_tolerance() with the configured tolerance."""
        return near_tolerance(value, self.tolerance)

    def create_logger(self) -> DebugLogger:
        """Build a logger from the logging section."""
        if self.logging.console:
            logger = create_console_logger(self.logging.level, self.logging.use_colors)
        else:
            logger = DebugLogger(level=self.logging.level,
                                 use_colors=self.logging.use_colors)
        logger.set_category_filter(self.logging.categories)
        return logger

    def create_rng(self) -> RNGManager:
        """Build a stream manager with the configured streams already created."""
        manager = RNGManager(master_seed=self.rng.master_seed)
        for name in self.rng.streams:
            manager.get(name)
        return manager
