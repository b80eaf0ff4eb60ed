"""
Configuration loader for AlxLib.

Loads the JSON configuration file and converts it to typed dataclass objects.
Provides validation and helpful error messages for malformed configs.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional

from ..output.debug_logger import LogLevel, get_logger
from ..utils.validators import (
    ValidationError,
    validate_bool,
    validate_enum,
    validate_int,
    validate_number,
    validate_positive,
)
from .models import AlxConfig, LoggingConfig, RNGConfig

DEFAULT_CONFIG_FILE = "alxlib.json"


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""

    def __init__(self, message: str, file: Optional[str] = None,
                 path: Optional[str] = None):
        self.message = message
        self.file = file
        self.path = path

        full_msg = message
        if file:
            full_msg = f"[{file}] {full_msg}"
        if path:
            full_msg = f"{full_msg} (at {path})"

        super().__init__(full_msg)


class ConfigLoader:
    """
    Loads and parses AlxLib configuration files.

    Usage:
        loader = ConfigLoader("./config")
        config = loader.load()

        # Or a differently named file:
        config = loader.load("tools.json")
    """

    def __init__(self, config_dir: str):
        """
        Initialize the config loader.

        Args:
            config_dir: Path to directory containing config JSON files
        """
        self.config_dir = Path(config_dir)

        if not self.config_dir.exists():
            raise ConfigError(f"Config directory not found: {config_dir}")

    def _load_json(self, filename: str) -> Dict[str, Any]:
        """Load a JSON file from the config directory."""
        filepath = self.config_dir / filename

        if not filepath.exists():
            raise ConfigError(f"Config file not found: {filepath}", file=filename)

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigError(f"Invalid JSON: {e}", file=filename)

        if not isinstance(data, dict):
            raise ConfigError("Top level must be an object", file=filename)
        return data

    def load(self, filename: str = DEFAULT_CONFIG_FILE) -> AlxConfig:
        """
        Load and validate a config file.

        Returns:
            Populated AlxConfig; missing sections keep their defaults
        """
        data = self._load_json(filename)

        try:
            config = AlxConfig(
                tolerance=self._parse_tolerance(data),
                rng=self._parse_rng(self._section(data, "rng")),
                logging=self._parse_logging(self._section(data, "logging")),
            )
        except ValidationError as e:
            raise ConfigError(e.message, file=filename, path=e.field)

        get_logger().log_config_loaded(str(self.config_dir / filename),
                                       len(config.rng.streams))
        return config

    def _section(self, data: dict, key: str) -> dict:
        section = data.get(key, {})
        if not isinstance(section, dict):
            raise ValidationError("must be an object", key)
        return section

    def _parse_tolerance(self, data: dict) -> float:
        default = AlxConfig().tolerance
        tolerance = validate_number(data.get("tolerance", default), "tolerance")
        return float(validate_positive(tolerance, "tolerance"))

    def _parse_rng(self, data: dict) -> RNGConfig:
        """Parse the rng section."""
        streams = data.get("streams", [])
        if not isinstance(streams, list) or not all(isinstance(s, str) for s in streams):
            raise ValidationError("must be a list of names", "rng.streams")
        return RNGConfig(
            master_seed=validate_int(data.get("master_seed", 0), "rng.master_seed"),
            streams=list(streams),
        )

    def _parse_logging(self, data: dict) -> LoggingConfig:
        """Parse the logging section."""
        categories = data.get("categories")
        if categories is not None and not isinstance(categories, list):
            raise ValidationError("must be a list or null", "logging.categories")
        return LoggingConfig(
            level=validate_enum(data.get("level", "WARNING"), LogLevel, "logging.level"),
            categories=categories,
            console=validate_bool(data.get("console", False), "logging.console"),
            use_colors=validate_bool(data.get("use_colors", False), "logging.use_colors"),
        )


def load_config(config_dir: str) -> AlxConfig:
    """
    Convenience function to load the default config file.

    Args:
        config_dir: Path to config directory

    Returns:
        Fully populated AlxConfig object
    """
    loader = ConfigLoader(config_dir)
    return loader.load()
