# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Dynasor — Dynamic N-dimensional Tensors                             ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Arithmetic element types supported by :class:`dynasor.Tensor`."""
from __future__ import annotations

import enum
import numpy as np


class dtype(enum.Enum):
    """Dynasor element types — signed/unsigned integers and IEEE floats."""
    int8 = "int8"
    int16 = "int16"
    int32 = "int32"
    int64 = "int64"
    uint8 = "uint8"
    uint16 = "uint16"
    uint32 = "uint32"
    uint64 = "uint64"
    float16 = "float16"
    float32 = "float32"
    float64 = "float64"

    def to_numpy(self) -> np.dtype:
        """Convert to numpy dtype."""
        return np.dtype(self.value)

    @staticmethod
    def from_numpy(np_dtype) -> 'dtype':
        """Convert a numpy dtype to a dynasor dtype.

        Raises ``TypeError`` for anything that is not an integer or a
        real floating type (bool, complex, strings, objects, ...).
        """
        dt = np.dtype(np_dtype)
        if dt.kind not in 'iuf':
            raise TypeError(f"dtype must be an arithmetic type, got {dt}")
        try:
            return dtype(dt.name)
        except ValueError:
            # float128 / longdouble and friends
            raise TypeError(f"unsupported element type {dt}") from None

    @property
    def is_integral(self) -> bool:
        return self.to_numpy().kind in 'iu'

    @property
    def is_floating_point(self) -> bool:
        return self.to_numpy().kind == 'f'

    @property
    def is_signed(self) -> bool:
        return self.to_numpy().kind != 'u'

    @property
    def itemsize(self) -> int:
        return self.to_numpy().itemsize

    @property
    def zero(self):
        """Additive identity as a numpy scalar of this type."""
        return self.to_numpy().type(0)

    @property
    def one(self):
        """Multiplicative identity as a numpy scalar of this type."""
        return self.to_numpy().type(1)

    def __repr__(self) -> str:
        return f"dynasor.{self.name}"


def resolve_dtype(value=None) -> dtype:
    """Coerce *value* into a :class:`dtype`; ``None`` means ``float32``."""
    if value is None:
        return dtype.float32
    if isinstance(value, dtype):
        return value
    if isinstance(value, str) and value in aliases:
        return aliases[value]
    try:
        np_dt = np.dtype(value)
    except TypeError as exc:
        raise TypeError(f"cannot interpret {value!r} as a dtype") from exc
    return dtype.from_numpy(np_dt)


# Convenience aliases (dynasor.float32, dynasor.long, etc.)
int8 = dtype.int8
int16 = dtype.int16
int32 = dtype.int32
int64 = dtype.int64
uint8 = dtype.uint8
uint16 = dtype.uint16
uint32 = dtype.uint32
uint64 = dtype.uint64
float16 = dtype.float16
float32 = dtype.float32
float64 = dtype.float64
half = dtype.float16
double = dtype.float64
short = dtype.int16
long = dtype.int64

aliases: dict[str, dtype] = {
    'half': half,
    'float': float32,
    'double': double,
    'short': short,
    'int': int32,
    'long': long,
}
