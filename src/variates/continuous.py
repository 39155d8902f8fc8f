"""Continuous-distribution samplers.

Each sampler validates its parameters, then draws only through
``UniformSource.uniform_float()``. The rejection samplers (gamma, normal,
von Mises) loop until a candidate passes its acceptance test; there is no
iteration cap, so parameter validation is what keeps them from stalling.

References:
    R.C.H. Cheng, "The generation of Gamma variables with non-integral shape
    parameters", Applied Statistics (1977), 26, No. 1, p71-74.

    W.J. Kennedy Jr & J.E. Gentle, "Statistical Computing", Algorithm GS.

    A.J. Kinderman & J.F. Monahan, "Computer generation of random variables
    using the ratio of uniform deviates", ACM Trans Math Software (1977), 3, p257-260.

    D.J. Best & N.I. Fisher, "Efficient simulation of the von Mises
    distribution", Applied Statistics (1979), 28, p152-157.
"""

from __future__ import annotations

import math

from variates._checks import fail, require_finite, require_non_negative, require_positive
from variates._source import UniformSource, get_source
from variates.errors import InvalidArgument

__all__ = [
    'LOG4',
    'NV_MAGICCONST',
    'SG_MAGICCONST',
    'TWOPI',
    'betavariate',
    'expovariate',
    'gammavariate',
    'gauss',
    'normalvariate',
    'paretovariate',
    'random',
    'triangular',
    'uniform',
    'vonmisesvariate',
    'weibullvariate',
]

NV_MAGICCONST = 4 * math.exp(-0.5) / math.sqrt(2.0)
LOG4 = math.log(4.0)
SG_MAGICCONST = 1.0 + math.log(4.5)
TWOPI = 2.0 * math.pi

# Draws at or below this are redrawn before taking a logarithm.
_LOG_FLOOR = 1e-7
# Below this concentration the von Mises density is indistinguishable from uniform.
_VONMISES_UNIFORM_KAPPA = 1e-6


def _src(source: UniformSource | None) -> UniformSource:
    return source or get_source()


def random(*, source: UniformSource | None = None) -> float:
    """Return a float in ``[0, 1)``."""
    return _src(source).uniform_float()


def uniform(a: float, b: float, *, source: UniformSource | None = None) -> float:
    """Return a float in ``[a, b)`` (or ``(b, a]`` when ``b < a``)."""
    return a + (b - a) * _src(source).uniform_float()


def triangular(
    low: float = 0.0,
    high: float = 1.0,
    mode: float | None = None,
    *,
    source: UniformSource | None = None,
) -> float:
    """Triangular distribution on ``[low, high]`` peaking at ``mode``.

    Args:
        low: Lower bound.
        high: Upper bound.
        mode: Peak of the density; None means the midpoint.
        source: Uniform source to draw from.

    Raises:
        InvalidArgumentError: If ``mode`` lies outside ``[low, high]``.
    """
    if mode is None:
        mode = low + (high - low) / 2.0
    if not low <= mode <= high:
        fail(InvalidArgument('triangular', 'mode', mode, f'must lie in [{low}, {high}]'))
    if high == low:
        return low

    u = _src(source).uniform_float()
    c = (mode - low) / (high - low)
    if u > c:
        u = 1.0 - u
        c = 1.0 - c
        low, high = high, low
    return low + (high - low) * math.sqrt(u * c)


def expovariate(lambd: float = 1.0, *, source: UniformSource | None = None) -> float:
    """Exponential distribution with rate ``lambd``.

    Returns values in ``[0, +inf)``.

    Raises:
        InvalidArgumentError: If ``lambd`` is not a finite positive number.
    """
    require_positive('expovariate', 'lambd', lambd)
    rng = _src(source)
    u = rng.uniform_float()
    while u <= _LOG_FLOOR:
        u = rng.uniform_float()
    return -math.log(u) / lambd


def gammavariate(alpha: float, beta: float, *, source: UniformSource | None = None) -> float:
    """Gamma distribution with shape ``alpha`` and scale ``beta``.

    The mean is ``alpha * beta`` and the variance ``alpha * beta ** 2``.

    Three regimes by shape:

    - ``alpha > 1``: Cheng's rejection algorithm (1977).
    - ``alpha == 1``: exponential with mean ``beta``.
    - ``0 < alpha < 1``: Kennedy & Gentle Algorithm GS.

    Raises:
        InvalidArgumentError: If ``alpha`` or ``beta`` is not a finite positive number.
    """
    require_positive('gammavariate', 'alpha', alpha)
    require_positive('gammavariate', 'beta', beta)
    rng = _src(source)

    if alpha > 1.0:
        # sqrt(2 * alpha - 1), factored so alpha near the float maximum stays finite
        ainv = math.sqrt(2.0) * math.sqrt(alpha - 0.5)
        bbb = alpha - LOG4
        ccc = alpha + ainv

        while True:
            u1 = rng.uniform_float()
            if not _LOG_FLOOR < u1 < 1.0 - _LOG_FLOOR:
                continue
            u2 = 1.0 - rng.uniform_float()
            v = math.log(u1 / (1.0 - u1)) / ainv
            x = alpha * math.exp(v)
            z = u1 * u1 * u2
            r = bbb + ccc * v - x
            if r + SG_MAGICCONST - 4.5 * z >= 0.0 or r >= math.log(z):
                return x * beta

    if alpha == 1.0:
        u = rng.uniform_float()
        while u <= _LOG_FLOOR:
            u = rng.uniform_float()
        return -math.log(u) * beta

    b = (math.e + alpha) / math.e
    while True:
        p = b * rng.uniform_float()
        if p <= 1.0:
            x = p ** (1.0 / alpha)
        else:
            x = -math.log((b - p) / alpha)
        u1 = rng.uniform_float()
        if p > 1.0:
            if u1 <= x ** (alpha - 1.0):
                break
        elif u1 <= math.exp(-x):
            break
    return x * beta


def betavariate(alpha: float, beta: float, *, source: UniformSource | None = None) -> float:
    """Beta distribution, built from two gamma draws.

    Returns values in ``[0, 1]``.

    Raises:
        InvalidArgumentError: If ``alpha`` or ``beta`` is not a finite positive number.
    """
    require_positive('betavariate', 'alpha', alpha)
    require_positive('betavariate', 'beta', beta)
    rng = _src(source)
    y = gammavariate(alpha, 1.0, source=rng)
    if y == 0.0:
        return 0.0
    return y / (y + gammavariate(beta, 1.0, source=rng))


def normalvariate(mu: float = 0.0, sigma: float = 1.0, *, source: UniformSource | None = None) -> float:
    """Normal distribution with mean ``mu`` and standard deviation ``sigma``.

    Kinderman & Monahan ratio-of-uniforms method.

    Raises:
        InvalidArgumentError: If ``sigma`` is negative or not finite.
    """
    require_non_negative('normalvariate', 'sigma', sigma)
    rng = _src(source)
    while True:
        u1 = rng.uniform_float()
        u2 = 1.0 - rng.uniform_float()
        z = NV_MAGICCONST * (u1 - 0.5) / u2
        zz = z * z / 4.0
        if zz <= -math.log(u2):
            break
    return mu + z * sigma


# Alias: both names share one sampler.
gauss = normalvariate


def vonmisesvariate(mu: float, kappa: float, *, source: UniformSource | None = None) -> float:
    """Von Mises (circular normal) distribution.

    Args:
        mu: Mean angle in radians.
        kappa: Concentration, ``>= 0``. Near zero the angle is uniform on the
            circle.
        source: Uniform source to draw from.

    Returns:
        An angle in ``[0, 2*pi)``.

    Raises:
        InvalidArgumentError: If ``mu`` is not finite, or ``kappa`` is negative
            or not finite.
    """
    require_finite('vonmisesvariate', 'mu', mu)
    require_non_negative('vonmisesvariate', 'kappa', kappa)
    rng = _src(source)

    if kappa <= _VONMISES_UNIFORM_KAPPA:
        return TWOPI * rng.uniform_float()

    # r = 1 + O(1/kappa); the s form avoids cancellation as kappa grows
    s = 0.5 / kappa
    r = s + math.sqrt(1.0 + s * s)

    while True:
        u1 = rng.uniform_float()
        z = math.cos(math.pi * u1)

        d = z / (r + z)
        u2 = rng.uniform_float()
        if u2 < 1.0 - d * d or u2 <= (1.0 - d) * math.exp(d):
            break

    q = 1.0 / r
    f = (q + z) / (1.0 + q * z)
    u3 = rng.uniform_float()
    if u3 > 0.5:
        theta = (mu + math.acos(f)) % TWOPI
    else:
        theta = (mu - math.acos(f)) % TWOPI
    # a tiny negative angle can round up to exactly 2*pi
    return theta if theta < TWOPI else 0.0


def paretovariate(alpha: float, *, source: UniformSource | None = None) -> float:
    """Pareto distribution with shape ``alpha``. Returns values in ``[1, +inf)``.

    Raises:
        InvalidArgumentError: If ``alpha`` is not a finite positive number.
    """
    require_positive('paretovariate', 'alpha', alpha)
    u = 1.0 - _src(source).uniform_float()
    return 1.0 / u ** (1.0 / alpha)


def weibullvariate(alpha: float, beta: float, *, source: UniformSource | None = None) -> float:
    """Weibull distribution with scale ``alpha`` and shape ``beta``.

    Raises:
        InvalidArgumentError: If ``beta`` is not a finite positive number.
    """
    require_positive('weibullvariate', 'beta', beta)
    u = 1.0 - _src(source).uniform_float()
    return alpha * (-math.log(u)) ** (1.0 / beta)
