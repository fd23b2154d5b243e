# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Dynasor — Dynamic N-dimensional Tensors                             ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Core Tensor class: a dense, row-major N-dimensional value container."""
from __future__ import annotations

import functools
import logging
import numbers
from typing import Any, Callable, Iterable, Iterator

import numpy as np

from . import rng as _rng
from .config import config
from .dtype import dtype as Dtype, resolve_dtype
from .errors import AllocationError, IndexOutOfRangeError, ShapeStorageMismatchError
from .execution import ExecutionPolicy, fill, resolve_policy
from .indexing import Shape, as_shape, numel, ravel_index

logger = logging.getLogger(__name__)

Policy = ExecutionPolicy | str | None


def _allocate(n: int, dt: Dtype) -> np.ndarray:
    """Allocate an uninitialised 1-D buffer of *n* elements."""
    try:
        buf = np.empty(n, dtype=dt.to_numpy())
    except (MemoryError, ValueError, OverflowError) as exc:
        raise AllocationError(
            f"cannot allocate {n} element(s) of {dt.name}") from exc
    logger.debug("allocated %d element(s) of %s", n, dt.name)
    return buf


def _scalar(value, dt: Dtype):
    """Convert a fill value to a numpy scalar of *dt*."""
    if isinstance(value, (str, bytes)) or not isinstance(value, numbers.Real):
        raise TypeError(f"fill value must be a real number, got {value!r}")
    return dt.to_numpy().type(value)


class Tensor:
    """Dense N-dimensional array of arithmetic values.

    A tensor owns a shape (one non-negative extent per axis) and a flat,
    contiguous :class:`numpy.ndarray` holding ``prod(shape)`` elements in
    row-major order.  The shape is fixed for the lifetime of the tensor;
    elements are mutated through ``t[i, j, ...] = v``, :meth:`ref` or the
    raw buffer returned by :meth:`data`.

    Constructors::

        Tensor()                                 # rank 0, empty storage
        Tensor([2, 3])                           # zeros
        Tensor([2, 3], 7, dtype=dynasor.int32)   # constant fill
        Tensor.from_values([2, 3], range(6))     # explicit values
        Tensor.from_generator([2, 3], next, it)  # nullary generator

    Every constructor takes ``dtype`` (default ``float32``) and an
    execution-policy hint ``policy``.
    """

    __slots__ = ('_shape', '_data')

    # ------------------------------------------------------------------ #
    #  Construction                                                      #
    # ------------------------------------------------------------------ #

    def __init__(
        self,
        shape: Iterable[int] | int | None = None,
        fill_value: Any = None,
        *,
        dtype: Dtype | np.dtype | str | None = None,
        policy: Policy = None,
    ):
        dt = resolve_dtype(dtype)
        if shape is None:
            if fill_value is not None:
                raise TypeError("fill_value requires a shape")
            self._shape: Shape = ()
            self._data: np.ndarray = np.empty(0, dtype=dt.to_numpy())
            return

        policy = resolve_policy(policy)
        shp = as_shape(shape)
        value = dt.zero if fill_value is None else _scalar(fill_value, dt)
        data = _allocate(numel(shp), dt)
        fill(data, value, policy)
        self._shape = shp
        self._data = data

    @classmethod
    def from_values(
        cls,
        shape: Iterable[int] | int,
        values: Iterable[Any],
        *,
        dtype: Dtype | np.dtype | str | None = None,
        policy: Policy = None,
    ) -> 'Tensor':
        """Build a tensor from *values* laid out in row-major order.

        The number of values must equal ``prod(shape)``; otherwise
        :class:`ShapeStorageMismatchError` is raised.  Nested sequences
        and multi-dimensional arrays are flattened in C order.  The
        values are always copied.
        """
        dt = resolve_dtype(dtype)
        resolve_policy(policy)
        shp = as_shape(shape)
        src = _as_array(values)
        expected = numel(shp)
        if src.size != expected:
            raise ShapeStorageMismatchError(shp, expected, src.size)
        try:
            data = np.array(src, dtype=dt.to_numpy(), order='C').reshape(-1)
        except MemoryError as exc:
            raise AllocationError(
                f"cannot allocate {expected} element(s) of {dt.name}") from exc
        return cls._wrap(shp, data)

    @classmethod
    def from_generator(
        cls,
        shape: Iterable[int] | int,
        fn: Callable[..., Any],
        *args,
        dtype: Dtype | np.dtype | str | None = None,
        policy: Policy = None,
        **kwargs,
    ) -> 'Tensor':
        """Build a tensor by calling ``fn(*args, **kwargs)`` once per element.

        Calls happen in increasing offset order whatever the policy, so
        stateful generators produce deterministic tensors.
        """
        if not callable(fn):
            raise TypeError(f"generator must be callable, got {fn!r}")
        if args or kwargs:
            fn = functools.partial(fn, *args, **kwargs)
        dt = resolve_dtype(dtype)
        resolve_policy(policy)
        shp = as_shape(shape)
        data = _allocate(numel(shp), dt)
        for k in range(data.size):
            data[k] = fn()
        return cls._wrap(shp, data)

    @staticmethod
    def _wrap(shape: Shape, data: np.ndarray) -> 'Tensor':
        t = Tensor.__new__(Tensor)
        t._shape = shape
        t._data = data
        return t

    # ------------------------------------------------------------------ #
    #  Properties                                                        #
    # ------------------------------------------------------------------ #

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def dtype(self) -> Dtype:
        return Dtype.from_numpy(self._data.dtype)

    def rank(self) -> int:
        """Number of axes."""
        return len(self._shape)

    def numel(self) -> int:
        return self._data.size

    def data(self) -> np.ndarray:
        """The underlying contiguous 1-D buffer, shared, not copied.

        Elements may be read and written freely; the buffer must not be
        resized or replaced.
        """
        return self._data

    def is_empty(self) -> bool:
        """True for default-constructed, moved-from or zero-extent tensors."""
        return self._data.size == 0

    def __len__(self) -> int:
        return self._data.size

    def __iter__(self) -> Iterator:
        return iter(self._data.tolist())

    # ------------------------------------------------------------------ #
    #  Element access                                                    #
    # ------------------------------------------------------------------ #

    def index(self, index: Iterable[int]) -> int:
        """Linear offset of the multi-index *index* (row-major)."""
        return ravel_index(index, self._shape, config.check_bounds)

    def _offset(self, index: Iterable[int]) -> int:
        off = self.index(index)
        if not 0 <= off < self._data.size:
            raise IndexOutOfRangeError(
                f"offset {off} is outside storage of {self._data.size} "
                f"element(s)")
        return off

    @staticmethod
    def _key(key) -> tuple:
        return key if isinstance(key, tuple) else (key,)

    def element(self, index: Iterable[int]):
        """Return the element at *index* by value."""
        return self._data[self._offset(index)].item()

    def ref(self, index: Iterable[int]) -> np.ndarray:
        """Return a writable 0-d view aliasing the element at *index*.

        ``t.ref((1, 2))[()] = 5`` writes through to the tensor.
        """
        return self._data[self._offset(index), ...]

    def __getitem__(self, key):
        return self._data[self._offset(self._key(key))].item()

    def __setitem__(self, key, value):
        self._data[self._offset(self._key(key))] = value

    # ------------------------------------------------------------------ #
    #  Value semantics                                                   #
    # ------------------------------------------------------------------ #

    def copy(self) -> 'Tensor':
        """Deep copy of shape and storage."""
        return Tensor._wrap(self._shape, self._data.copy())

    def __copy__(self) -> 'Tensor':
        return self.copy()

    def __deepcopy__(self, memo) -> 'Tensor':
        return self.copy()

    def move(self) -> 'Tensor':
        """Transfer shape and storage to a new tensor.

        The source is left empty: rank 0 with no storage.
        """
        moved = Tensor._wrap(self._shape, self._data)
        self._shape = ()
        self._data = np.empty(0, dtype=moved._data.dtype)
        return moved

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tensor):
            return NotImplemented
        return (self._shape == other._shape
                and self._data.dtype == other._data.dtype
                and np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    # ------------------------------------------------------------------ #
    #  Conversion                                                        #
    # ------------------------------------------------------------------ #

    def numpy(self) -> np.ndarray:
        """Shaped copy of the storage."""
        if self._data.size != numel(self._shape):
            return self._data.copy()
        return self._data.reshape(self._shape).copy()

    def tolist(self):
        return self.numpy().tolist()

    def __repr__(self) -> str:
        body = np.array2string(self.numpy(), separator=', ')
        return f"tensor({body}, dtype={self.dtype!r})"

    # ------------------------------------------------------------------ #
    #  Factories                                                         #
    # ------------------------------------------------------------------ #

    @staticmethod
    def zeros(shape, dtype=None, policy: Policy = None) -> 'Tensor':
        return Tensor(shape, 0, dtype=dtype, policy=policy)

    @staticmethod
    def ones(shape, dtype=None, policy: Policy = None) -> 'Tensor':
        return Tensor(shape, 1, dtype=dtype, policy=policy)

    @staticmethod
    def full(shape, fill_value, dtype=None, policy: Policy = None) -> 'Tensor':
        return Tensor(shape, fill_value, dtype=dtype, policy=policy)

    @staticmethod
    def uniform_random(shape, seed: int, a, b, dtype=None,
                       policy: Policy = None) -> 'Tensor':
        """Elements drawn independently and uniformly.

        Integer dtypes draw from the closed interval ``[a, b]``, floating
        dtypes from the half-open interval ``[a, b)``.  The output depends
        only on ``(shape, seed, a, b, dtype)``.
        """
        dt = resolve_dtype(dtype)
        resolve_policy(policy)
        shp = as_shape(shape)
        _rng.check_uniform(a, b, dt)
        gen = _rng.generator(seed)
        n = numel(shp)
        try:
            if dt.is_integral:
                data = _rng.uniform_int(gen, n, a, b, dt)
            else:
                data = _rng.uniform_real(gen, n, a, b, dt)
        except MemoryError as exc:
            raise AllocationError(
                f"cannot allocate {n} element(s) of {dt.name}") from exc
        return Tensor._wrap(shp, data)

    @staticmethod
    def normal_random(shape, seed: int, mean, std, dtype=None,
                      policy: Policy = None) -> 'Tensor':
        """Elements drawn i.i.d. from ``N(mean, std**2)``; floating dtypes only."""
        dt = resolve_dtype(dtype)
        if not dt.is_floating_point:
            raise TypeError(
                f"normal_random requires a floating-point dtype, got {dt.name}")
        resolve_policy(policy)
        shp = as_shape(shape)
        _rng.check_normal(mean, std)
        gen = _rng.generator(seed)
        n = numel(shp)
        try:
            data = _rng.normal(gen, n, mean, std, dt)
        except MemoryError as exc:
            raise AllocationError(
                f"cannot allocate {n} element(s) of {dt.name}") from exc
        return Tensor._wrap(shp, data)

    @staticmethod
    def gaussian_random(shape, seed: int, mean, std, dtype=None,
                        policy: Policy = None) -> 'Tensor':
        return Tensor.normal_random(shape, seed, mean, std, dtype, policy)


def _as_array(values) -> np.ndarray:
    if isinstance(values, Tensor):
        arr = values.data()
    elif isinstance(values, np.ndarray):
        arr = values
    elif isinstance(values, (str, bytes)):
        raise TypeError("values must be numbers, not a string")
    elif isinstance(values, (numbers.Number, np.generic)):
        # a bare scalar becomes a rank-0 array
        arr = np.asarray(values)
    else:
        if not isinstance(values, (list, tuple)):
            values = list(values)
        arr = np.asarray(values)
    if arr.dtype.kind not in 'biuf':
        raise TypeError(f"values must be real numbers, got {arr.dtype}")
    return arr


# ====================================================================
# Module-level factory functions (dynasor.zeros, dynasor.ones, etc.)
# ====================================================================

def tensor(values, shape=None, dtype=None, policy: Policy = None) -> Tensor:
    """Build a tensor from *values*.

    Without *shape* the shape and (absent *dtype*) the element type are
    inferred from the nesting of *values*, as :func:`numpy.asarray` does.
    """
    if shape is None and isinstance(values, Tensor):
        shape = values.shape
        dtype = dtype or values.dtype
    if shape is None:
        arr = _as_array(values)
        if dtype is None:
            dtype = Dtype.from_numpy(arr.dtype)
        return Tensor.from_values(arr.shape, arr, dtype=dtype, policy=policy)
    return Tensor.from_values(shape, values, dtype=dtype, policy=policy)


def zeros(shape, dtype=None, policy: Policy = None) -> Tensor:
    return Tensor.zeros(shape, dtype, policy)


def zeros_like(input: Tensor, dtype=None, policy: Policy = None) -> Tensor:
    return Tensor.zeros(input.shape, dtype or input.dtype, policy)


def ones(shape, dtype=None, policy: Policy = None) -> Tensor:
    return Tensor.ones(shape, dtype, policy)


def ones_like(input: Tensor, dtype=None, policy: Policy = None) -> Tensor:
    return Tensor.ones(input.shape, dtype or input.dtype, policy)


def full(shape, fill_value, dtype=None, policy: Policy = None) -> Tensor:
    return Tensor.full(shape, fill_value, dtype, policy)


def from_generator(shape, fn, *args, dtype=None, policy: Policy = None,
                   **kwargs) -> Tensor:
    return Tensor.from_generator(shape, fn, *args, dtype=dtype,
                                 policy=policy, **kwargs)


def uniform_random(shape, seed: int, a, b, dtype=None,
                   policy: Policy = None) -> Tensor:
    return Tensor.uniform_random(shape, seed, a, b, dtype, policy)


def normal_random(shape, seed: int, mean=0.0, std=1.0, dtype=None,
                  policy: Policy = None) -> Tensor:
    return Tensor.normal_random(shape, seed, mean, std, dtype, policy)


def gaussian_random(shape, seed: int, mean=0.0, std=1.0, dtype=None,
                    policy: Policy = None) -> Tensor:
    return Tensor.gaussian_random(shape, seed, mean, std, dtype, policy)
