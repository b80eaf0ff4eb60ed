"""
Numeric and bit utility functions for AlxLib.
"""

from .math_utils import (
    PI,
    SMALL_NUMBER,
    lerp,
    interp_ease_in,
    interp_ease_out,
    interp_ease_in_out,
    clamp,
    f_lerp,
    f_interp_ease_in,
    f_interp_ease_out,
    f_clamp,
    near_tolerance,
    get_range_alpha,
    get_mapped_value_unclamped,
    get_mapped_value_clamped,
)
from .rng import LehmerRNG, RNGManager, lehmer_int64, lehmer_float, rand_bool
from .sequences import find_in_vector
from .vectors import Vector2D, Vector3D, Vec2D, Vec2D64, Vec3D, Vec3D64
from .bits import mask_bits, reverse_bits, dec_to_bin, dec_to_bin32, dec_to_bin16
from .validators import ValidationError

__all__ = [
    'PI',
    'SMALL_NUMBER',
    'lerp',
    'interp_ease_in',
    'interp_ease_out',
    'interp_ease_in_out',
    'clamp',
    'f_lerp',
    'f_interp_ease_in',
    'f_interp_ease_out',
    'f_clamp',
    'near_tolerance',
    'get_range_alpha',
    'get_mapped_value_unclamped',
    'get_mapped_value_clamped',
    'LehmerRNG',
    'RNGManager',
    'lehmer_int64',
    'lehmer_float',
    'rand_bool',
    'find_in_vector',
    'Vector2D',
    'Vector3D',
    'Vec2D',
    'Vec2D64',
    'Vec3D',
    'Vec3D64',
    'mask_bits',
    'reverse_bits',
    'dec_to_bin',
    'dec_to_bin32',
    'dec_to_bin16',
    'ValidationError',
]
