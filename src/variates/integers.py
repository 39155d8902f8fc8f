"""Integer-range utilities: randrange, randint, sample and probability trials.

Every function draws through a ``UniformSource``: the one passed as
``source=``, or the process-wide source otherwise.
"""

from __future__ import annotations

import operator

import msgspec

from variates._checks import fail
from variates._source import UniformSource, get_source
from variates.errors import EmptyRange, InvalidArgument, RangeTooSmall, ZeroStep

__all__ = [
    'RangeSpec',
    'probability',
    'randint',
    'randrange',
    'sample',
]


class RangeSpec(msgspec.Struct, frozen=True, gc=False):
    """Arithmetic progression ``start, start + step, ...`` bounded by ``stop``.

    ``stop`` is exclusive: the progression stays below it for a positive
    step and above it for a negative step.
    """

    start: int
    stop: int
    step: int = 1

    def size(self) -> int:
        """Number of values in the progression, without validating it."""
        width = self.stop - self.start
        if self.step > 0:
            return max(0, (width + self.step - 1) // self.step)
        if self.step < 0:
            return max(0, (width + self.step + 1) // self.step)
        return 0

    def resolve(self) -> int:
        """Return the progression length, rejecting empty or zero-step ranges.

        Raises:
            ZeroStepError: If ``step == 0``.
            EmptyRangeError: If the progression holds no values.
        """
        if self.step == 0:
            fail(ZeroStep(self.start, self.stop))
        n = self.size()
        if n <= 0:
            fail(EmptyRange(self.start, self.stop, self.step))
        return n

    def pick(self, source: UniformSource) -> int:
        """Draw one member of the progression."""
        width = self.stop - self.start
        if self.step == 1:
            if width <= 0:
                fail(EmptyRange(self.start, self.stop, self.step))
            return self.start + source.uniform_int_below(width)
        return self.start + self.step * source.uniform_int_below(self.resolve())


def randrange(
    start: int,
    stop: int | None = None,
    step: int = 1,
    *,
    source: UniformSource | None = None,
) -> int:
    """Return a random member of ``range(start, stop, step)``.

    ``randrange(stop)`` is shorthand for ``randrange(0, stop)``.

    Args:
        start: First value of the progression (or the stop, if ``stop`` is None).
        stop: Exclusive bound.
        step: Progression step, positive or negative, never zero.
        source: Uniform source to draw from.

    Returns:
        ``start + step * i`` for a uniformly drawn index ``i``.

    Raises:
        EmptyRangeError: If the progression holds no values.
        ZeroStepError: If ``step == 0``.
        TypeError: If an argument is not an integer.

    Example:
        ```python
        randrange(10)         # 0..9
        randrange(1, 6, 2)    # one of 1, 3, 5
        randrange(10, 0, -3)  # one of 10, 7, 4, 1
        ```
    """
    if stop is None:
        start, stop = 0, start
    spec = RangeSpec(operator.index(start), operator.index(stop), operator.index(step))
    return spec.pick(source or get_source())


def randint(a: int, b: int, *, source: UniformSource | None = None) -> int:
    """Return a random integer N such that ``a <= N <= b``."""
    return randrange(a, operator.index(b) + 1, source=source)


def sample(
    a: int,
    b: int,
    k: int,
    unique: bool = False,
    *,
    source: UniformSource | None = None,
) -> list[int]:
    """Draw ``k`` integers from ``[a, b]`` in draw order.

    With ``unique``, duplicates are discarded and drawing continues until
    ``k`` distinct values are collected. The expected number of draws stays
    finite even when ``k`` equals the size of the range.

    Args:
        a: Inclusive lower bound.
        b: Inclusive upper bound.
        k: Number of values to return.
        unique: Sample without replacement.
        source: Uniform source to draw from.

    Raises:
        InvalidArgumentError: If ``k`` is negative.
        RangeTooSmallError: If ``unique`` and ``[a, b]`` holds fewer than ``k`` values.
        EmptyRangeError: If ``b < a`` and ``k > 0``.
    """
    a, b, k = operator.index(a), operator.index(b), operator.index(k)
    if k < 0:
        fail(InvalidArgument('sample', 'k', k, 'must be >= 0'))
    if unique and k > b - a + 1:
        fail(RangeTooSmall(a, b, k))

    source = source or get_source()
    values: list[int] = []
    seen: set[int] = set()
    while len(values) < k:
        value = randint(a, b, source=source)
        if unique:
            if value in seen:
                continue
            seen.add(value)
        values.append(value)
    return values


def probability(p: float, *, source: UniformSource | None = None) -> bool:
    """Bernoulli trial: True with probability ``p``.

    The trial succeeds when the uniform draw ``u`` satisfies ``u < p``
    (strictly less, not ``u <= p``). Since ``u`` lies in ``[0, 1)``,
    ``P(True) == p`` exactly, ``p <= 0`` is never true and ``p >= 1`` is
    always true.
    """
    return (source or get_source()).uniform_float() < p
