# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Dynasor — Dynamic N-dimensional Tensors                             ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Typed errors raised by dynasor.

Every error derives from :class:`DynasorError` and from the builtin that
best describes it, so ``except IndexError`` still catches a rank mismatch.
"""
from __future__ import annotations


class DynasorError(Exception):
    """Base class for all dynasor errors."""


class RankMismatchError(DynasorError, IndexError):
    """A multi-index length differs from the tensor rank."""

    def __init__(self, got: int, rank: int):
        super().__init__(
            f"multi-index has {got} coordinate(s) but tensor rank is {rank}")
        self.got = got
        self.rank = rank


class IndexOutOfRangeError(DynasorError, IndexError):
    """A coordinate or offset lies outside the tensor."""


class ShapeStorageMismatchError(DynasorError, ValueError):
    """The value sequence length differs from the product of extents."""

    def __init__(self, shape: tuple, expected: int, got: int):
        super().__init__(
            f"shape {shape} needs {expected} value(s) but {got} were given")
        self.shape = shape
        self.expected = expected
        self.got = got


class InvalidShapeError(DynasorError, ValueError):
    """An extent is negative."""


class InvalidDistributionParametersError(DynasorError, ValueError):
    """Random factory parameters are out of their domain."""


class AllocationError(DynasorError, MemoryError):
    """Storage could not be allocated."""


__all__ = [
    'DynasorError',
    'RankMismatchError',
    'IndexOutOfRangeError',
    'ShapeStorageMismatchError',
    'InvalidShapeError',
    'InvalidDistributionParametersError',
    'AllocationError',
]
