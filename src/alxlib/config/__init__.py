"""
Configuration loading and data models for AlxLib.
"""

from .loader import ConfigLoader, ConfigError, load_config
from .models import AlxConfig, RNGConfig, LoggingConfig

__all__ = [
    'ConfigLoader',
    'ConfigError',
    'load_config',
    'AlxConfig',
    'RNGConfig',
    'LoggingConfig',
]
