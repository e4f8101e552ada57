"""Type definitions for polytri operations.

This module defines enums for strategy parameters throughout the library.
"""

from enum import Enum


class DegenerateStrategy(Enum):
    """What to do when the ear clipper stalls on degenerate input.

    A stall happens when a full pass over the remaining ring finds no ear,
    which is possible for self-intersecting, collinear or wrongly wound
    rings. Without a strategy the loop would never terminate.

    Attributes:
        RAISE: Raise NoEarFoundError (default)
        WARN: Issue a DegenerateTriangulationWarning and return the
            triangles cut so far
        IGNORE: Silently return the triangles cut so far

    Examples:
        >>> from polytri import triangulate, DegenerateStrategy
        >>> bowtie = [0, 0, 2, 2, 2, 0, 1, 3, 0, 2]
        >>> partial = triangulate(bowtie, on_degenerate=DegenerateStrategy.IGNORE)
    """
    RAISE = 'raise'
    WARN = 'warn'
    IGNORE = 'ignore'


__all__ = [
    'DegenerateStrategy',
]
