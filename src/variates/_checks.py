"""Parameter validation shared by the samplers."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, NoReturn

import msgspec

from variates.errors import InvalidArgument

if TYPE_CHECKING:
    from variates.errors import EmptyRange, RangeTooSmall, ZeroStep

__all__ = ['fail', 'require_finite', 'require_non_negative', 'require_positive']

logger = logging.getLogger('variates')


def fail(error: EmptyRange | InvalidArgument | RangeTooSmall | ZeroStep) -> NoReturn:
    """Log the error payload and raise its exception variant.

    Args:
        error: Struct variant describing the contract violation.

    Raises:
        VariatesError: Always; the exception variant of ``error``.
    """
    logger.debug(
        'rejected %s call',
        type(error).__name__,
        extra={'error': msgspec.to_builtins(error), 'kind': type(error).__name__},
    )
    raise error.to_exception()


def require_finite(function: str, parameter: str, value: float) -> float:
    """Reject NaN and infinities."""
    if not math.isfinite(value):
        fail(InvalidArgument(function, parameter, value, 'must be finite'))
    return value


def require_positive(function: str, parameter: str, value: float) -> float:
    """Reject values that are not finite and strictly greater than zero."""
    require_finite(function, parameter, value)
    if value <= 0.0:
        fail(InvalidArgument(function, parameter, value, 'must be > 0'))
    return value


def require_non_negative(function: str, parameter: str, value: float) -> float:
    """Reject values that are not finite and at least zero."""
    require_finite(function, parameter, value)
    if value < 0.0:
        fail(InvalidArgument(function, parameter, value, 'must be >= 0'))
    return value
