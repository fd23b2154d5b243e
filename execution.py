# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Dynasor — Dynamic N-dimensional Tensors                             ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Execution-policy hints for bulk tensor operations.

A policy never changes what a construction produces, only how the
constant fill is scheduled.  Generator and random fills always run
sequentially in increasing offset order.
"""
from __future__ import annotations

import enum
import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np

logger = logging.getLogger(__name__)


class ExecutionPolicy(enum.Enum):
    """Sequential or parallel bulk execution."""
    sequential = "sequential"
    parallel = "parallel"

    @property
    def is_parallel(self) -> bool:
        return self is ExecutionPolicy.parallel

    def __repr__(self) -> str:
        return f"dynasor.execution.{self.name}"


seq = ExecutionPolicy.sequential
par = ExecutionPolicy.parallel

_ALIASES = {
    'seq': seq,
    'sequential': seq,
    'par': par,
    'parallel': par,
}


def resolve_policy(policy=None) -> ExecutionPolicy:
    """Coerce *policy* into an :class:`ExecutionPolicy`.

    ``None`` selects ``config.default_policy``.
    """
    if policy is None:
        from .config import config
        return config.default_policy
    if isinstance(policy, ExecutionPolicy):
        return policy
    if isinstance(policy, str):
        try:
            return _ALIASES[policy.strip().lower()]
        except KeyError:
            pass
    raise ValueError(f"unknown execution policy {policy!r}")


def fill(buffer: np.ndarray, value, policy: ExecutionPolicy | None = None) -> np.ndarray:
    """Set every element of the contiguous 1-D *buffer* to *value*."""
    from .config import config
    policy = resolve_policy(policy)
    n = buffer.size
    workers = min(config.num_threads, n)
    if not policy.is_parallel or workers < 2 or n < config.parallel_threshold:
        buffer.fill(value)
        return buffer

    # numpy releases the GIL inside fill, so chunks proceed concurrently
    chunks = np.array_split(buffer, workers)
    logger.debug("parallel fill: %d elements in %d chunks", n, len(chunks))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        for _ in pool.map(lambda chunk: chunk.fill(value), chunks):
            pass
    return buffer


__all__ = ['ExecutionPolicy', 'seq', 'par', 'resolve_policy', 'fill']
