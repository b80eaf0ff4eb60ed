"""
AlxLib

Small numeric and bit-manipulation utilities: interpolation and easing,
range mapping, a Lehmer-style pseudo-random generator, linear search,
plain vector records and bit helpers.

Example:
    >>> from alxlib import get_mapped_value_clamped, lehmer_float
    >>> get_mapped_value_clamped(0.0, 10.0, 0.0, 1.0, 15.0)
    1.0
    >>> 0.0 <= lehmer_float(7) <= 1.0
    True
"""

__version__ = "1.0.0"

from .utils import *  # noqa: F401,F403
from .utils import __all__ as _utils_all


# Lazy imports so plain utility use never pulls in the config layer
def __getattr__(name):
    if name in ('AlxConfig', 'ConfigLoader', 'ConfigError', 'load_config'):
        from . import config
        return getattr(config, name)
    elif name in ('DebugLogger', 'LogLevel', 'get_logger', 'set_logger'):
        from . import output
        return getattr(output, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_utils_all) + [
    'AlxConfig',
    'ConfigLoader',
    'ConfigError',
    'load_config',
    'DebugLogger',
    'LogLevel',
    'get_logger',
    'set_logger',
]
