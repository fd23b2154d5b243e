# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Dynasor — Dynamic N-dimensional Tensors                             ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Seeded random streams for the random tensor factories.

Each factory call builds its own :class:`numpy.random.Generator` from the
supplied seed, draws exactly ``n`` samples in order and drops it, so the
result is a pure function of ``(shape, seed, parameters)``.  The default
bit generator is Mersenne Twister (:class:`numpy.random.MT19937`); set
``config.bit_generator = 'pcg64'`` to use PCG64 instead.  Streams are
reproducible across runs for a given NumPy release but are not
bit-compatible with C++ ``std::mt19937_64``.
"""
from __future__ import annotations

import logging
import math
import numbers

import numpy as np

from .dtype import dtype as Dtype
from .errors import InvalidDistributionParametersError

logger = logging.getLogger(__name__)

# dtypes Generator.random / standard_normal can emit directly
_NATIVE_FLOATS = (np.dtype(np.float32), np.dtype(np.float64))


def generator(seed: int, bit_generator: str | None = None) -> np.random.Generator:
    """Return a fresh generator seeded with *seed*."""
    if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
        raise InvalidDistributionParametersError(
            f"seed must be an integer, got {seed!r}")
    if seed < 0:
        raise InvalidDistributionParametersError(
            f"seed must be non-negative, got {seed}")
    if bit_generator is None:
        from .config import config
        bit_generator = config.bit_generator
    if bit_generator == 'mt19937':
        bits = np.random.MT19937(int(seed))
    elif bit_generator == 'pcg64':
        bits = np.random.PCG64(int(seed))
    else:
        raise ValueError(f"unknown bit generator {bit_generator!r}")
    logger.debug("seeded %s with %d", bit_generator, seed)
    return np.random.Generator(bits)


def check_uniform(a, b, dt: Dtype) -> None:
    if math.isnan(a) or math.isnan(b):
        raise InvalidDistributionParametersError(
            f"uniform bounds must not be NaN, got a={a}, b={b}")
    if math.isinf(a) or math.isinf(b):
        raise InvalidDistributionParametersError(
            f"uniform bounds must be finite, got a={a}, b={b}")
    if a > b:
        raise InvalidDistributionParametersError(
            f"uniform lower bound a={a} exceeds upper bound b={b}")
    if dt.is_integral:
        info = np.iinfo(dt.to_numpy())
        if a != int(a) or b != int(b):
            raise InvalidDistributionParametersError(
                f"integer uniform bounds must be whole numbers, got a={a}, b={b}")
        if a < info.min or b > info.max:
            raise InvalidDistributionParametersError(
                f"uniform bounds [{a}, {b}] exceed the range of {dt.name} "
                f"[{info.min}, {info.max}]")
    else:
        np_dt = dt.to_numpy()
        with np.errstate(over='ignore'):
            span = np_dt.type(b) - np_dt.type(a)
        if not np.isfinite(span):
            raise InvalidDistributionParametersError(
                f"uniform interval [{a}, {b}] is wider than the largest "
                f"finite {dt.name}")


def check_normal(mean, std) -> None:
    if not math.isfinite(mean):
        raise InvalidDistributionParametersError(
            f"normal mean must be finite, got {mean}")
    if not std > 0 or math.isinf(std):
        raise InvalidDistributionParametersError(
            f"normal standard deviation must be positive and finite, got {std}")


def uniform_int(rng: np.random.Generator, n: int, a: int, b: int,
                dt: Dtype) -> np.ndarray:
    """*n* integers uniform over the closed interval ``[a, b]``."""
    return rng.integers(int(a), int(b), size=n, dtype=dt.to_numpy(),
                        endpoint=True)


def uniform_real(rng: np.random.Generator, n: int, a: float, b: float,
                 dt: Dtype) -> np.ndarray:
    """*n* reals uniform over the half-open interval ``[a, b)``."""
    np_dt = dt.to_numpy()
    work = np_dt if np_dt in _NATIVE_FLOATS else np.dtype(np.float64)
    u = rng.random(n, dtype=work)
    lo, hi = work.type(a), work.type(b)
    out = (lo + (hi - lo) * u).astype(np_dt, copy=False)
    if a < b:
        # rounding (or the cast to a narrower type) can land on b
        top = np.nextafter(np_dt.type(b), np_dt.type(a))
        np.minimum(out, top, out=out)
    return out


def normal(rng: np.random.Generator, n: int, mean: float, std: float,
           dt: Dtype) -> np.ndarray:
    """*n* reals drawn i.i.d. from ``N(mean, std**2)``."""
    np_dt = dt.to_numpy()
    work = np_dt if np_dt in _NATIVE_FLOATS else np.dtype(np.float64)
    z = rng.standard_normal(n, dtype=work)
    z *= work.type(std)
    z += work.type(mean)
    return z.astype(np_dt, copy=False)


__all__ = ['generator', 'check_uniform', 'check_normal',
           'uniform_int', 'uniform_real', 'normal']
