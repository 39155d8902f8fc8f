"""Variate error types: dual struct+exception for logging payloads and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'EmptyRange',
    'EmptyRangeError',
    'InvalidArgument',
    'InvalidArgumentError',
    'RangeTooSmall',
    'RangeTooSmallError',
    'VariatesError',
    'ZeroStep',
    'ZeroStepError',
]


class VariatesError(ValueError):
    """Base class for every contract violation reported by the library."""


# --- Range Errors ---


class EmptyRange(msgspec.Struct, frozen=True, gc=False):
    """Integer progression contains no values - struct variant."""

    start: int
    stop: int
    step: int = 1

    def to_exception(self) -> EmptyRangeError:
        """Convert to exception for raise-based code."""
        return EmptyRangeError(self.start, self.stop, self.step)


class EmptyRangeError(VariatesError):
    """Integer progression contains no values - exception variant."""

    def __init__(self, start: int, stop: int, step: int = 1) -> None:
        self.start = start
        self.stop = stop
        self.step = step
        super().__init__(f'empty range for randrange({start}, {stop}, {step})')

    def to_struct(self) -> EmptyRange:
        """Convert to struct for data-oriented code."""
        return EmptyRange(self.start, self.stop, self.step)


class ZeroStep(msgspec.Struct, frozen=True, gc=False):
    """Progression step is zero - struct variant."""

    start: int
    stop: int

    def to_exception(self) -> ZeroStepError:
        """Convert to exception for raise-based code."""
        return ZeroStepError(self.start, self.stop)


class ZeroStepError(VariatesError):
    """Progression step is zero - exception variant."""

    def __init__(self, start: int, stop: int) -> None:
        self.start = start
        self.stop = stop
        super().__init__(f'zero step for randrange({start}, {stop}, 0)')

    def to_struct(self) -> ZeroStep:
        """Convert to struct for data-oriented code."""
        return ZeroStep(self.start, self.stop)


class RangeTooSmall(msgspec.Struct, frozen=True, gc=False):
    """Unique sample asks for more values than the range holds - struct variant."""

    a: int
    b: int
    k: int

    def to_exception(self) -> RangeTooSmallError:
        """Convert to exception for raise-based code."""
        return RangeTooSmallError(self.a, self.b, self.k)


class RangeTooSmallError(VariatesError):
    """Unique sample asks for more values than the range holds - exception variant."""

    def __init__(self, a: int, b: int, k: int) -> None:
        self.a = a
        self.b = b
        self.k = k
        super().__init__(f'unique sample of {k} values but range [{a}, {b}] holds fewer')

    def to_struct(self) -> RangeTooSmall:
        """Convert to struct for data-oriented code."""
        return RangeTooSmall(self.a, self.b, self.k)


# --- Parameter Errors ---


class InvalidArgument(msgspec.Struct, frozen=True, gc=False):
    """Distribution parameter outside its valid domain - struct variant."""

    function: str
    parameter: str
    value: float
    reason: str | None = None

    def to_exception(self) -> InvalidArgumentError:
        """Convert to exception for raise-based code."""
        return InvalidArgumentError(self.function, self.parameter, self.value, self.reason)


class InvalidArgumentError(VariatesError):
    """Distribution parameter outside its valid domain - exception variant."""

    def __init__(
        self,
        function: str,
        parameter: str,
        value: float,
        reason: str | None = None,
    ) -> None:
        self.function = function
        self.parameter = parameter
        self.value = value
        self.reason = reason
        msg = f'{function}: invalid {parameter}={value!r}'
        if reason:
            msg = f'{msg} ({reason})'
        super().__init__(msg)

    def to_struct(self) -> InvalidArgument:
        """Convert to struct for data-oriented code."""
        return InvalidArgument(self.function, self.parameter, self.value, self.reason)
