# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Dynasor — Dynamic N-dimensional Tensors                             ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
Dynasor — dynamically-shaped, dense N-dimensional tensors.

A :class:`Tensor` owns a shape and a flat row-major NumPy buffer, and is
built through a small set of constructors and factories (zeros, ones,
constant fill, explicit values, generators, seeded uniform and normal
random draws).

Usage::

    import dynasor

    t = dynasor.Tensor([2, 3, 1, 5])                      # all zeros
    u = dynasor.uniform_random([3, 2], seed=4373, a=-2, b=1,
                               dtype=dynasor.int32)
    u[1, 0] = 5
    offset = u.index((1, 0))
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Pictofeed, LLC"

# ── Core tensor class & factory functions ──
from .tensor import (
    Tensor,
    tensor,
    zeros, zeros_like,
    ones, ones_like,
    full,
    from_generator,
    uniform_random,
    normal_random,
    gaussian_random,
)

# ── Dtype constants ──
from .dtype import (
    dtype,
    resolve_dtype,
    int8, int16, int32, int64,
    uint8, uint16, uint32, uint64,
    float16, float32, float64,
    half, double, short, long,
)

# ── Index arithmetic ──
from .indexing import as_shape, numel, strides, ravel_index, unravel_index, ndindex

# ── Execution policy ──
from .execution import ExecutionPolicy, seq, par

# ── Configuration ──
from .config import config

# ── Errors ──
from .errors import (
    DynasorError,
    RankMismatchError,
    IndexOutOfRangeError,
    ShapeStorageMismatchError,
    InvalidShapeError,
    InvalidDistributionParametersError,
    AllocationError,
)

__all__ = [
    "__version__",
    "__author__",

    # Tensor
    'Tensor', 'tensor',
    'zeros', 'zeros_like', 'ones', 'ones_like', 'full', 'from_generator',
    'uniform_random', 'normal_random', 'gaussian_random',
    # Dtypes
    'dtype', 'resolve_dtype',
    'int8', 'int16', 'int32', 'int64',
    'uint8', 'uint16', 'uint32', 'uint64',
    'float16', 'float32', 'float64',
    'half', 'double', 'short', 'long',
    # Indexing
    'as_shape', 'numel', 'strides', 'ravel_index', 'unravel_index', 'ndindex',
    # Execution policy
    'ExecutionPolicy', 'seq', 'par',
    # Configuration
    'config',
    # Errors
    'DynasorError', 'RankMismatchError', 'IndexOutOfRangeError',
    'ShapeStorageMismatchError', 'InvalidShapeError',
    'InvalidDistributionParametersError', 'AllocationError',
]
