# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Dynasor — Dynamic N-dimensional Tensors                             ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Shape normalisation and row-major index arithmetic.

For extents ``d[0..R-1]`` and a multi-index ``i[0..R-1]`` the linear
offset is::

    offset(i) = sum(i[k] * prod(d[k+1:]) for k in range(R))

The last axis is contiguous (C order).
"""
from __future__ import annotations

import math
import numbers
from typing import Iterable, Iterator, Sequence

from .errors import IndexOutOfRangeError, InvalidShapeError, RankMismatchError

Shape = tuple[int, ...]


def _as_int(value, what: str) -> int:
    # numbers.Integral covers numpy integer scalars; bool is rejected
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{what} must be an integer, got {value!r}")
    return int(value)


def as_shape(extents: Iterable[int]) -> Shape:
    """Normalise any finite ordered iterable of extents into a tuple."""
    if isinstance(extents, numbers.Integral) and not isinstance(extents, bool):
        extents = (extents,)
    shape = tuple(_as_int(d, 'extent') for d in extents)
    for axis, d in enumerate(shape):
        if d < 0:
            raise InvalidShapeError(
                f"extent {d} of axis {axis} must be non-negative")
    return shape


def numel(shape: Sequence[int]) -> int:
    """Number of elements; the empty product is 1."""
    return math.prod(shape)


def strides(shape: Sequence[int]) -> Shape:
    """Row-major element strides: ``stride[k] = prod(shape[k+1:])``."""
    out = [1] * len(shape)
    for k in range(len(shape) - 2, -1, -1):
        out[k] = out[k + 1] * shape[k + 1]
    return tuple(out)


def ravel_index(index: Iterable[int], shape: Sequence[int],
                check_bounds: bool = True) -> int:
    """Map a multi-index to its linear offset.

    Raises :class:`RankMismatchError` when ``len(index) != len(shape)``.
    With *check_bounds* every coordinate must satisfy
    ``0 <= i[k] < shape[k]`` or :class:`IndexOutOfRangeError` is raised;
    without it the offset is computed as-is and may be meaningless.
    """
    idx = tuple(_as_int(i, 'index') for i in index)
    if len(idx) != len(shape):
        raise RankMismatchError(len(idx), len(shape))
    offset = 0
    # Horner form of sum(i[k] * prod(d[k+1:]))
    for axis, (i, d) in enumerate(zip(idx, shape)):
        if check_bounds and not 0 <= i < d:
            raise IndexOutOfRangeError(
                f"index {i} is out of range for axis {axis} with extent {d}")
        offset = offset * d + i
    return offset


def unravel_index(offset: int, shape: Sequence[int]) -> Shape:
    """Inverse of :func:`ravel_index` for ``0 <= offset < numel(shape)``."""
    offset = _as_int(offset, 'offset')
    total = numel(shape)
    if not 0 <= offset < total:
        raise IndexOutOfRangeError(
            f"offset {offset} is out of range for {total} element(s)")
    coords = []
    for d in reversed(shape):
        offset, i = divmod(offset, d)
        coords.append(i)
    return tuple(reversed(coords))


def ndindex(shape: Sequence[int]) -> Iterator[Shape]:
    """Yield every multi-index of *shape* in row-major order."""
    shape = tuple(shape)
    if numel(shape) == 0:
        return
    idx = [0] * len(shape)
    while True:
        yield tuple(idx)
        axis = len(shape) - 1
        while axis >= 0:
            idx[axis] += 1
            if idx[axis] < shape[axis]:
                break
            idx[axis] = 0
            axis -= 1
        if axis < 0:
            return


__all__ = ['Shape', 'as_shape', 'numel', 'strides',
           'ravel_index', 'unravel_index', 'ndindex']
