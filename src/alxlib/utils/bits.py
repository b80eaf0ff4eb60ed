"""
Bit manipulation helpers for 32-bit unsigned values.
"""

from .validators import validate_int, validate_positive

UINT32_MASK = 0xFFFFFFFF


def mask_bits(a: int, mask: int) -> int:
    """
    Remove bits outside of the mask.

    Example:
        >>> bin(mask_bits(0b1100, 0b1010))
        '0b1000'
    """
    return (a & mask) & UINT32_MASK


def reverse_bits(a: int) -> int:
    """
    Reverse the bit order of the low byte.

    Only bits 0-7 take part in the swaps; anything above bit 7 is
    dropped by the first stage's masks.

    Example:
        >>> bin(reverse_bits(0b11010010))
        '0b1001011'
    """
    a &= UINT32_MASK
    a = (a & 0xF0) >> 4 | (a & 0x0F) << 4
    a = (a & 0xCC) >> 2 | (a & 0x33) << 2
    a = (a & 0xAA) >> 1 | (a & 0x55) << 1
    return a


def dec_to_bin(decimal: int, width: int) -> str:
    """
    Render an integer as a fixed-width two's-complement bit string.

    Values that don't fit in the width are truncated to their low bits.

    Args:
        decimal: Integer to render
        width: Number of bits

    Returns:
        String of '0'/'1' characters, most significant bit first

    Raises:
        ValidationError: If width is not a positive integer
    """
    validate_positive(validate_int(width, "width"), "width", allow_zero=False)
    return format(decimal & ((1 << width) - 1), f"0{width}b")


def dec_to_bin32(decimal: int) -> str:
    """
    Render an int32 as 32 bits.

    Example:
        >>> dec_to_bin32(-1)
        '11111111111111111111111111111111'
    """
    return dec_to_bin(decimal, 32)


def dec_to_bin16(decimal: int) -> str:
    """
    Render an int16 as 16 bits.

    Example:
        >>> dec_to_bin16(5)
        '0000000000000101'
    """
    return dec_to_bin(decimal, 16)
