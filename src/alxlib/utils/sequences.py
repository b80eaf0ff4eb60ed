"""
Linear search helpers over sequences.
"""

from typing import Sequence, TypeVar

T = TypeVar('T')


def find_in_vector(element: T, sequence: Sequence[T], nth: int = 1) -> int:
    """
    Find the index of the nth occurrence of an element.

    Elements are compared with ==, so this works for strings and any other
    equality-comparable type.

    Args:
        element: Element to look for
        sequence: Sequence to scan from the start
        nth: Which occurrence to return (1 = first)

    Returns:
        Index of the nth match, or -1 if there are fewer than nth matches

    Example:
        >>> find_in_vector(2, [1, 2, 3, 2, 2])
        1
        >>> find_in_vector(2, [1, 2, 3, 2, 2], 3)
        4
        >>> find_in_vector(9, [1, 2, 3])
        -1
    """
    iteration = 1
    for i, item in enumerate(sequence):
        if element == item:
            if iteration == nth:
                return i
            iteration += 1
    return -1
