"""Uniform Core: the single source of randomness for every sampler.

``UniformSource`` wraps a seedable engine (the standard library's Mersenne
Twister) and exposes exactly two draws to the rest of the package:
``uniform_float()`` in ``[0, 1)`` and ``uniform_int_below(n)`` in ``[0, n)``.
Samplers never touch the engine directly.

A process-wide default instance backs the module-level functions. It can be
replaced with ``set_source()``, or bypassed per call with ``source=``.

Example:
    ```python
    from variates import UniformSource, gammavariate

    rng = UniformSource(seed=1234)
    gammavariate(2.0, 1.0, source=rng)
    ```
"""

from __future__ import annotations

import hashlib
import logging
import random as _random
import time
from typing import Any

import aiologic

from variates._checks import fail
from variates.errors import EmptyRange, InvalidArgument

__all__ = [
    'DEFAULT_SEED',
    'UniformSource',
    'get_source',
    'reset',
    'seed',
    'set_source',
]

logger = logging.getLogger(__name__)

DEFAULT_SEED = 0


def _child_seed(root: int, index: int) -> int:
    """Derive a 64-bit child seed from a root seed and worker index."""
    digest = hashlib.blake2b(f'{root}/{index}'.encode(), digest_size=8).digest()
    return int.from_bytes(digest, 'big')


class UniformSource:
    """Seeded uniform random stream.

    All engine access happens under a lock, so one instance may be shared
    between threads. Each individual draw is atomic; a sampler that makes
    several draws is not.

    Attributes:
        seed_value: The seed the engine was last initialised from.
    """

    def __init__(self, seed: int | None = DEFAULT_SEED) -> None:
        self._lock = aiologic.Lock()
        self._engine = _random.Random()
        self.seed_value = DEFAULT_SEED
        self.seed(seed)

    def __repr__(self) -> str:
        return f'UniformSource(seed={self.seed_value})'

    def seed(self, value: int | None = None) -> None:
        """Reinitialise the stream from ``value``.

        Args:
            value: Unsigned integer seed. None seeds from the wall clock; the
                chosen value is kept so ``reset()`` can replay it.

        Raises:
            InvalidArgumentError: If ``value`` is negative.
        """
        if value is None:
            value = time.time_ns()
        elif value < 0:
            fail(InvalidArgument('seed', 'value', value, 'seed must be unsigned'))
        with self._lock:
            self.seed_value = value
            self._engine.seed(value)
        logger.debug('seeded uniform source', extra={'seed': value})

    def reset(self) -> None:
        """Restart the deterministic sequence from the last seed."""
        with self._lock:
            self._engine.seed(self.seed_value)
        logger.debug('reset uniform source', extra={'seed': self.seed_value})

    def uniform_float(self) -> float:
        """Return a float in ``[0, 1)`` with 53 bits of resolution. Never 1.0."""
        with self._lock:
            return self._engine.random()

    def uniform_int_below(self, n: int) -> int:
        """Return an integer in ``[0, n)``.

        Draws ``n.bit_length()`` random bits and rejects values ``>= n``, so
        the result is exactly uniform (no modulo bias). Each attempt succeeds
        with probability above one half.

        Raises:
            EmptyRangeError: If ``n <= 0``.
        """
        if n <= 0:
            fail(EmptyRange(0, n))
        k = n.bit_length()
        with self._lock:
            r = self._engine.getrandbits(k)
            while r >= n:
                r = self._engine.getrandbits(k)
        return r

    def getstate(self) -> Any:
        """Snapshot the engine state."""
        with self._lock:
            return self._engine.getstate()

    def setstate(self, state: Any) -> None:
        """Restore an engine state produced by ``getstate()``."""
        with self._lock:
            self._engine.setstate(state)

    def spawn(self, count: int | None = None) -> list[UniformSource]:
        """Derive independent child streams for parallel workers.

        Child ``i`` is seeded from ``(seed_value, i)`` only, so the same root
        seed always yields the same children regardless of how much the parent
        has been drawn from. Children share no lock with the parent.

        Args:
            count: Number of children. Defaults to the configured worker count.

        Returns:
            A list of ``count`` new sources.
        """
        if count is None:
            from variates._config import current_workers

            count = current_workers()
        if count < 0:
            fail(InvalidArgument('spawn', 'count', count, 'must be >= 0'))
        children = [UniformSource(_child_seed(self.seed_value, i)) for i in range(count)]
        logger.debug('spawned child sources', extra={'seed': self.seed_value, 'count': count})
        return children


# Global uniform source (replaced by init() or set_source())
_source = UniformSource(DEFAULT_SEED)


def get_source() -> UniformSource:
    """Get the process-wide uniform source."""
    return _source


def set_source(source: UniformSource) -> UniformSource:
    """Install ``source`` as the process-wide uniform source.

    Returns:
        The previously installed source, so callers can restore it.
    """
    global _source  # noqa: PLW0603
    previous = _source
    _source = source
    return previous


def seed(value: int | None = None) -> None:
    """Seed the process-wide source. None seeds from the wall clock."""
    _source.seed(value)


def reset() -> None:
    """Restart the process-wide source from its last seed."""
    _source.reset()
