"""
realmath.py
-----------
Real-valued double functions consumed by the complex type.

Everything here goes through numpy so that the IEEE special values come
back instead of Python exceptions:

    math.exp(1000)      -> OverflowError      realmath.exp(1000)  -> inf
    math.log(0.0)       -> ValueError         realmath.log(0.0)   -> -inf
    math.sin(inf)       -> ValueError         realmath.sin(inf)   -> nan
    1.0 / 0.0           -> ZeroDivisionError  realmath.divide(1.0, 0.0) -> inf

Floating-point warnings are silenced and results are plain ``float``.
"""

import numpy as np


def _ieee(ufunc, *args: float) -> float:
    with np.errstate(all="ignore"):
        return float(ufunc(*args))


def sin(x: float) -> float:
    return _ieee(np.sin, x)


def cos(x: float) -> float:
    return _ieee(np.cos, x)


def exp(x: float) -> float:
    return _ieee(np.exp, x)


def log(x: float) -> float:
    """Natural logarithm; ``log(0) = -inf``, negative input gives NaN."""
    return _ieee(np.log, x)


def sqrt(x: float) -> float:
    return _ieee(np.sqrt, x)


def cosh(x: float) -> float:
    return _ieee(np.cosh, x)


def sinh(x: float) -> float:
    return _ieee(np.sinh, x)


def atan2(y: float, x: float) -> float:
    """Four-quadrant arctangent in (-pi, pi], IEEE conventions for 0 and inf."""
    return _ieee(np.arctan2, y, x)


def copysign(magnitude: float, sign: float) -> float:
    """``magnitude`` carrying the sign bit of ``sign`` (so -0.0 counts as negative)."""
    return _ieee(np.copysign, magnitude, sign)


def divide(x: float, y: float) -> float:
    """IEEE quotient: ``x/0`` is a signed infinity, ``0/0`` is NaN."""
    return _ieee(np.divide, x, y)
