# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Dynasor — Dynamic N-dimensional Tensors                             ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""dynasor.config — library-wide knobs.

Exposes the settings that influence how tensors are built:

* ``default_policy``      execution hint used when a call passes none
* ``num_threads``         worker count for parallel constant fills
* ``parallel_threshold``  minimum buffer length before fills go parallel
* ``check_bounds``        reject coordinates outside ``[0, extent)``
* ``bit_generator``       ``"mt19937"`` or ``"pcg64"`` for random factories

Each setting may be seeded from the environment (``DYNASOR_POLICY``,
``DYNASOR_NUM_THREADS``, ``DYNASOR_PARALLEL_THRESHOLD``,
``DYNASOR_CHECK_BOUNDS``, ``DYNASOR_BIT_GENERATOR``) and overridden at
runtime::

    from dynasor.config import config
    config.check_bounds = False

    with config.override(default_policy='parallel', num_threads=4):
        t = dynasor.zeros([4096, 4096])
"""
from __future__ import annotations

import logging
import os
from contextlib import contextmanager

from .execution import ExecutionPolicy, resolve_policy

logger = logging.getLogger(__name__)

BIT_GENERATORS = ('mt19937', 'pcg64')

_TRUTHY = {'1', 'true', 'yes', 'on'}
_FALSY = {'0', 'false', 'no', 'off'}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    raw = raw.strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    logger.warning("ignoring %s=%r: expected a boolean", name, raw)
    return default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("ignoring %s=%r: expected an integer", name, raw)
        return default


class _Config:
    """Module-level configuration singleton."""
    __slots__ = ('_default_policy', '_num_threads', '_parallel_threshold',
                 '_check_bounds', '_bit_generator')

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Restore every setting from the environment or its default."""
        self._default_policy = ExecutionPolicy.sequential
        self._num_threads = os.cpu_count() or 1
        self._parallel_threshold = 1 << 16
        self._check_bounds = _env_bool('DYNASOR_CHECK_BOUNDS', True)
        self._bit_generator = 'mt19937'

        policy = os.environ.get('DYNASOR_POLICY')
        if policy:
            try:
                self.default_policy = policy
            except ValueError:
                logger.warning("ignoring DYNASOR_POLICY=%r", policy)
        try:
            self.num_threads = _env_int('DYNASOR_NUM_THREADS',
                                        self._num_threads)
        except ValueError as exc:
            logger.warning("ignoring environment override: %s", exc)
        try:
            self.parallel_threshold = _env_int('DYNASOR_PARALLEL_THRESHOLD',
                                               self._parallel_threshold)
        except ValueError as exc:
            logger.warning("ignoring environment override: %s", exc)
        gen = os.environ.get('DYNASOR_BIT_GENERATOR')
        if gen:
            try:
                self.bit_generator = gen
            except ValueError:
                logger.warning("ignoring DYNASOR_BIT_GENERATOR=%r", gen)

    # ── default_policy ──
    @property
    def default_policy(self) -> ExecutionPolicy:
        return self._default_policy

    @default_policy.setter
    def default_policy(self, value):
        if value is None:
            raise ValueError("default_policy cannot be None")
        self._default_policy = resolve_policy(value)

    # ── num_threads ──
    @property
    def num_threads(self) -> int:
        return self._num_threads

    @num_threads.setter
    def num_threads(self, value: int):
        value = int(value)
        if value < 1:
            raise ValueError(f"num_threads must be >= 1, got {value}")
        self._num_threads = value

    # ── parallel_threshold ──
    @property
    def parallel_threshold(self) -> int:
        return self._parallel_threshold

    @parallel_threshold.setter
    def parallel_threshold(self, value: int):
        value = int(value)
        if value < 0:
            raise ValueError(f"parallel_threshold must be >= 0, got {value}")
        self._parallel_threshold = value

    # ── check_bounds ──
    @property
    def check_bounds(self) -> bool:
        return self._check_bounds

    @check_bounds.setter
    def check_bounds(self, value: bool):
        self._check_bounds = bool(value)

    # ── bit_generator ──
    @property
    def bit_generator(self) -> str:
        return self._bit_generator

    @bit_generator.setter
    def bit_generator(self, value: str):
        name = str(value).lower()
        if name not in BIT_GENERATORS:
            raise ValueError(
                f"bit_generator must be one of {BIT_GENERATORS}, got {value!r}")
        self._bit_generator = name

    @contextmanager
    def override(self, **settings):
        """Temporarily change settings; the previous values come back on exit."""
        saved = {}
        try:
            for name, value in settings.items():
                if name not in _SETTINGS:
                    raise AttributeError(f"unknown setting {name!r}")
                saved[name] = getattr(self, name)
                setattr(self, name, value)
            yield self
        finally:
            for name, value in saved.items():
                setattr(self, name, value)

    def __repr__(self) -> str:
        body = ', '.join(f"{name}={getattr(self, name)!r}" for name in _SETTINGS)
        return f"config({body})"


_SETTINGS = ('default_policy', 'num_threads', 'parallel_threshold',
             'check_bounds', 'bit_generator')

config = _Config()

__all__ = ['config', 'BIT_GENERATORS']
