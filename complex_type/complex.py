import logging
import math
import numbers
from typing import Iterator, List, Union

from . import realmath

logger = logging.getLogger(__name__)

NAN_HASH = 7             # every NaN-containing value hashes here
TRIG_SATURATION = 20.0   # tan/tanh return ±i / ±1 past this

Operand = Union["Complex", int, float]


class Complex:
    """
    An immutable double-precision complex number.

    NaN and infinite parts are handled according to the rules for ``float``
    with one exception: every value with a NaN in either part is
    equal to every other, so ``1 + NaN i``, ``NaN + i`` and ``NaN + NaN i``
    all compare equal to ``Complex.NAN`` and share one hash.

    Constructors
    ------------
    Complex(a, b)                       -> a + b i        (rectangular)
    Complex(a)                          -> a + 0 i
    Complex.polar(r, theta)             -> r·e^{iθ}
    Complex.polar(r, deg, radians=False)

    Constants
    ---------
    Complex.ZERO, Complex.ONE, Complex.I, Complex.NAN, Complex.INFINITY
    """

    __slots__ = ("_real", "_imaginary")

    # keep numpy scalars on the left of an operator from broadcasting us
    __array_ufunc__ = None

    # ---------- construction ----------
    def __init__(self, real: Union[int, float], imaginary: Union[int, float] = 0):
        for part in (real, imaginary):
            if not isinstance(part, numbers.Real):
                logger.debug("rejected component %r of type %s", part, type(part).__name__)
                raise TypeError(f"Complex parts must be real numbers, not {type(part).__name__}")
        object.__setattr__(self, "_real", float(real))
        object.__setattr__(self, "_imaginary", float(imaginary))

    @classmethod
    def _of(cls, real: float, imaginary: float = 0.0) -> "Complex":
        # results of float arithmetic, no validation needed
        z = object.__new__(cls)
        object.__setattr__(z, "_real", real)
        object.__setattr__(z, "_imaginary", imaginary)
        return z

    @classmethod
    def polar(cls, r: float, theta: float, radians: bool = True) -> "Complex":
        """
        Build ``r·cos(theta) + r·sin(theta) i``.

        If ``radians`` is False, ``theta`` is taken in degrees. A negative
        ``r`` raises ValueError. NaN ``r``, or NaN/infinite ``theta`` gives
        ``Complex.NAN``. An infinite ``r`` with finite ``theta`` follows float
        arithmetic:

            polar(inf, pi/4)   = inf + inf i
            polar(inf, 0)      = inf + NaN i
            polar(inf, -pi/4)  = inf - inf i
            polar(inf, 5pi/4)  = -inf - inf i
        """
        for value in (r, theta):
            if not isinstance(value, numbers.Real):
                logger.debug("polar() rejected %r of type %s", value, type(value).__name__)
                raise TypeError(f"polar() takes real numbers, not {type(value).__name__}")
        r = float(r)
        theta = float(theta)
        if not radians:
            theta = theta * math.pi / 180.0
        if r < 0:
            logger.debug("polar() called with modulus %r", r)
            raise ValueError(f"Negative complex modulus: {r}")
        if math.isnan(r) or math.isnan(theta) or math.isinf(theta):
            return Complex.NAN
        return cls._of(r * realmath.cos(theta), r * realmath.sin(theta))

    def __setattr__(self, name, value):
        raise AttributeError("Complex values are immutable")

    def __delattr__(self, name):
        raise AttributeError("Complex values are immutable")

    def __reduce__(self):
        return (Complex, (self._real, self._imaginary))

    # ---------- basic properties ----------
    @property
    def real(self) -> float:
        return self._real

    @property
    def imaginary(self) -> float:
        return self._imaginary

    @property
    def is_nan(self) -> bool:
        """True if either part is NaN."""
        return math.isnan(self._real) or math.isnan(self._imaginary)

    @property
    def is_infinite(self) -> bool:
        """True if neither part is NaN and at least one part is ±inf."""
        return not self.is_nan and (math.isinf(self._real) or math.isinf(self._imaginary))

    @property
    def is_finite(self) -> bool:
        return not self.is_nan and math.isfinite(self._real) and math.isfinite(self._imaginary)

    def abs(self) -> float:
        """
        Modulus ``|a + bi|``.

        NaN if either part is NaN, inf if any part is infinite. The larger
        part is factored out before squaring so that components near the
        float limits do not overflow.
        """
        if self.is_nan:
            return math.nan
        if self.is_infinite:
            return math.inf
        real, imaginary = self._real, self._imaginary
        if math.fabs(real) < math.fabs(imaginary):
            if real == 0.0:
                return math.fabs(imaginary)
            q = real / imaginary
            return math.fabs(imaginary) * math.sqrt(1.0 + q * q)
        if imaginary == 0.0:
            return math.fabs(real)
        q = imaginary / real
        return math.fabs(real) * math.sqrt(1.0 + q * q)

    magnitude = abs
    modulus = abs

    def argument(self) -> float:
        """Angle to the positive real axis in (-pi, pi], via atan2."""
        return realmath.atan2(self._imaginary, self._real)

    # ---------- arithmetic helpers ----------
    @staticmethod
    def _operand(other, op: str) -> Union["Complex", float]:
        if isinstance(other, Complex):
            return other
        if isinstance(other, numbers.Real):
            return float(other)
        logger.debug("rejected operand %r for %s", other, op)
        raise TypeError(f"unsupported operand type for {op}: {type(other).__name__!r}; "
                        "expected a real number or a Complex")

    def add(self, addend: Operand) -> "Complex":
        """
        ``(a + bi) + (c + di) = (a+c) + (b+d)i``

        NaN in either operand gives ``Complex.NAN``; infinities follow float
        arithmetic.
        """
        other = self._operand(addend, "+")
        if isinstance(other, Complex):
            if self.is_nan or other.is_nan:
                return Complex.NAN
            return Complex._of(self._real + other._real, self._imaginary + other._imaginary)
        if self.is_nan or math.isnan(other):
            return Complex.NAN
        return Complex._of(self._real + other, self._imaginary)

    def subtract(self, subtrahend: Operand) -> "Complex":
        """``(a + bi) - (c + di) = (a-c) + (b-d)i``, NaN rule as for add."""
        other = self._operand(subtrahend, "-")
        if isinstance(other, Complex):
            if self.is_nan or other.is_nan:
                return Complex.NAN
            return Complex._of(self._real - other._real, self._imaginary - other._imaginary)
        if self.is_nan or math.isnan(other):
            return Complex.NAN
        return Complex._of(self._real - other, self._imaginary)

    def negate(self) -> "Complex":
        if self.is_nan:
            return Complex.NAN
        return Complex._of(-self._real, -self._imaginary)

    def multiply(self, factor: Operand) -> "Complex":
        """
        ``(a + bi)(c + di) = (ac - bd) + (ad + bc)i``

        NaN in either operand gives ``Complex.NAN``. Otherwise any infinite
        part on either side gives ``Complex.INFINITY``, whatever the signs.
        """
        other = self._operand(factor, "*")
        if isinstance(other, Complex):
            if self.is_nan or other.is_nan:
                return Complex.NAN
            # not is_infinite: NaN is already ruled out
            if (math.isinf(self._real) or math.isinf(self._imaginary)
                    or math.isinf(other._real) or math.isinf(other._imaginary)):
                return Complex.INFINITY
            a, b = self._real, self._imaginary
            c, d = other._real, other._imaginary
            return Complex._of(a * c - b * d, a * d + b * c)
        if self.is_nan or math.isnan(other):
            return Complex.NAN
        if math.isinf(self._real) or math.isinf(self._imaginary) or math.isinf(other):
            return Complex.INFINITY
        return Complex._of(self._real * other, self._imaginary * other)

    def divide(self, divisor: Operand) -> "Complex":
        """
        ``(a + bi) / (c + di)`` with prescaling of the operands.

        Rules, in order:
          * NaN in either operand              -> NAN
          * divisor is zero                    -> NAN
          * finite / infinite                  -> ZERO
          * everything else follows float arithmetic on the scaled formula,
            so infinite / infinite comes out with NaN parts.

        A real divisor: zero gives NAN, infinite gives ZERO for a finite
        dividend and NAN otherwise.
        """
        other = self._operand(divisor, "/")
        if isinstance(other, Complex):
            if self.is_nan or other.is_nan:
                return Complex.NAN
            c, d = other._real, other._imaginary
            if c == 0.0 and d == 0.0:
                return Complex.NAN
            if other.is_infinite and not self.is_infinite:
                return Complex.ZERO
            a, b = self._real, self._imaginary
            if math.fabs(c) < math.fabs(d):
                q = c / d
                denominator = c * q + d
                return Complex._of((a * q + b) / denominator, (b * q - a) / denominator)
            q = d / c
            denominator = d * q + c
            return Complex._of((b * q + a) / denominator, (b - a * q) / denominator)
        if self.is_nan or math.isnan(other):
            return Complex.NAN
        if other == 0.0:
            return Complex.NAN
        if math.isinf(other):
            return Complex.ZERO if self.is_finite else Complex.NAN
        return Complex._of(self._real / other, self._imaginary / other)

    def reciprocal(self) -> "Complex":
        """``1 / z``; ZERO maps to INFINITY and anything infinite to ZERO."""
        if self.is_nan:
            return Complex.NAN
        real, imaginary = self._real, self._imaginary
        if real == 0.0 and imaginary == 0.0:
            return Complex.INFINITY
        if self.is_infinite:
            return Complex.ZERO
        if math.fabs(real) < math.fabs(imaginary):
            q = real / imaginary
            scale = 1.0 / (real * q + imaginary)
            return Complex._of(scale * q, -scale)
        q = imaginary / real
        scale = 1.0 / (imaginary * q + real)
        return Complex._of(scale, -scale * q)

    inverse = reciprocal

    def conjugate(self) -> "Complex":
        """
        ``a - bi``. An infinite imaginary part flips sign, so the conjugate
        of ``1 + inf i`` is ``1 - inf i``.
        """
        if self.is_nan:
            return Complex.NAN
        return Complex._of(self._real, -self._imaginary)

    # ---------- transcendental functions ----------
    def exp(self) -> "Complex":
        """
        ``exp(a + bi) = exp(a)cos(b) + exp(a)sin(b)i``

            exp(1 ± inf i)    = NaN + NaN i
            exp(inf + i)      = inf + inf i
            exp(-inf + i)     = 0 + 0i
        """
        if self.is_nan:
            return Complex.NAN
        exp_real = realmath.exp(self._real)
        return Complex._of(exp_real * realmath.cos(self._imaginary),
                           exp_real * realmath.sin(self._imaginary))

    def log(self) -> "Complex":
        """
        ``log(a + bi) = ln|a + bi| + atan2(b, a)i``

            log(0 + 0i)       = -inf + 0i
            log(1 ± inf i)    = inf ± (pi/2)i
            log(-inf + i)     = inf + pi i
        """
        if self.is_nan:
            return Complex.NAN
        return Complex._of(realmath.log(self.abs()),
                           realmath.atan2(self._imaginary, self._real))

    def pow(self, x: float) -> "Complex":
        """``z ** x`` for a real exponent, computed as ``exp(x·log(z))``."""
        return (self.log() * x).exp()

    def power(self, x: "Complex") -> "Complex":
        """
        ``z ** x`` for a complex exponent, computed as ``exp(x·log(z))``.

        Zero, NaN and infinite bases come out as ``Complex.NAN`` through
        ``log``.
        """
        return (self.log() * x).exp()

    def sqrt(self) -> "Complex":
        """
        Principal square root.

        1. ``t = sqrt((|a| + |a + bi|) / 2)``
        2. ``a >= 0``: ``t + (b/2t)i``, else ``|b|/2t + copysign(1, b)·t i``

            sqrt(1 ± inf i)    = inf + NaN i
            sqrt(inf + i)      = inf + 0i
            sqrt(-inf + i)     = 0 + inf i
        """
        if self.is_nan:
            return Complex.NAN
        real, imaginary = self._real, self._imaginary
        if real == 0.0 and imaginary == 0.0:
            return Complex._of(0.0, 0.0)
        t = realmath.sqrt((math.fabs(real) + self.abs()) / 2.0)
        if real >= 0.0:
            return Complex._of(t, realmath.divide(imaginary, 2.0 * t))
        return Complex._of(realmath.divide(math.fabs(imaginary), 2.0 * t),
                           realmath.copysign(1.0, imaginary) * t)

    def sqrt1z(self) -> "Complex":
        """``sqrt(1 - z²)``, straight from the definition."""
        return (Complex._of(1.0, 0.0) - self * self).sqrt()

    def sin(self) -> "Complex":
        """
        ``sin(a + bi) = sin(a)cosh(b) + cos(a)sinh(b)i``

            sin(±inf + i)     = NaN + NaN i
        """
        if self.is_nan:
            return Complex.NAN
        a, b = self._real, self._imaginary
        return Complex._of(realmath.sin(a) * realmath.cosh(b),
                           realmath.cos(a) * realmath.sinh(b))

    def cos(self) -> "Complex":
        """``cos(a + bi) = cos(a)cosh(b) - sin(a)sinh(b)i``"""
        if self.is_nan:
            return Complex.NAN
        a, b = self._real, self._imaginary
        return Complex._of(realmath.cos(a) * realmath.cosh(b),
                           -realmath.sin(a) * realmath.sinh(b))

    def sinh(self) -> "Complex":
        """``sinh(a + bi) = sinh(a)cos(b) + cosh(a)sin(b)i``"""
        if self.is_nan:
            return Complex.NAN
        a, b = self._real, self._imaginary
        return Complex._of(realmath.sinh(a) * realmath.cos(b),
                           realmath.cosh(a) * realmath.sin(b))

    def cosh(self) -> "Complex":
        """``cosh(a + bi) = cosh(a)cos(b) + sinh(a)sin(b)i``"""
        if self.is_nan:
            return Complex.NAN
        a, b = self._real, self._imaginary
        return Complex._of(realmath.cosh(a) * realmath.cos(b),
                           realmath.sinh(a) * realmath.sin(b))

    def tan(self) -> "Complex":
        """
        ``tan(a + bi) = [sin(2a) + sinh(2b)i] / (cos(2a) + cosh(2b))``

            tan(a ± inf i)     = 0 ± i
            tan(±inf + bi)     = NaN + NaN i
            tan(±pi/2 + 0i)    = ±inf + NaN i
        """
        if self.is_nan or math.isinf(self._real):
            return Complex.NAN
        if self._imaginary > TRIG_SATURATION:
            return Complex._of(0.0, 1.0)
        if self._imaginary < -TRIG_SATURATION:
            return Complex._of(0.0, -1.0)
        real2 = 2.0 * self._real
        imaginary2 = 2.0 * self._imaginary
        d = realmath.cos(real2) + realmath.cosh(imaginary2)
        return Complex._of(realmath.divide(realmath.sin(real2), d),
                           realmath.divide(realmath.sinh(imaginary2), d))

    def tanh(self) -> "Complex":
        """
        ``tanh(a + bi) = [sinh(2a) + sin(2b)i] / (cosh(2a) + cos(2b))``

            tanh(±inf + bi)    = ±1 + 0i
            tanh(a ± inf i)    = NaN + NaN i
            tanh(0 + (pi/2)i)  = NaN + inf i
        """
        if self.is_nan or math.isinf(self._imaginary):
            return Complex.NAN
        if self._real > TRIG_SATURATION:
            return Complex._of(1.0, 0.0)
        if self._real < -TRIG_SATURATION:
            return Complex._of(-1.0, 0.0)
        real2 = 2.0 * self._real
        imaginary2 = 2.0 * self._imaginary
        d = realmath.cosh(real2) + realmath.cos(imaginary2)
        return Complex._of(realmath.divide(realmath.sinh(real2), d),
                           realmath.divide(realmath.sin(imaginary2), d))

    def acos(self) -> "Complex":
        """``acos(z) = -i log(z + i sqrt(1 - z²))``"""
        if self.is_nan:
            return Complex.NAN
        return (self + self.sqrt1z() * Complex.I).log() * -Complex.I

    def asin(self) -> "Complex":
        """``asin(z) = -i log(sqrt(1 - z²) + iz)``"""
        if self.is_nan:
            return Complex.NAN
        return (self.sqrt1z() + self * Complex.I).log() * -Complex.I

    def atan(self) -> "Complex":
        """``atan(z) = (i/2) log((i + z)/(i - z))``"""
        if self.is_nan:
            return Complex.NAN
        return ((self + Complex.I) / (Complex.I - self)).log() * (Complex.I / 2.0)

    def nth_root(self, n: int) -> List["Complex"]:
        """
        The ``n`` n-th roots of this number,

            z_k = |z|^(1/n) (cos(phi + 2πk/n) + i sin(phi + 2πk/n)),  k = 0..n-1

        with ``phi = argument() / n``, in increasing ``k``. A NaN value gives
        ``[NAN]`` and an infinite one ``[INFINITY]``.
        """
        if not isinstance(n, numbers.Integral):
            logger.debug("nth_root() called with non-integer n=%r", n)
            raise TypeError(f"n must be an integer, not {type(n).__name__}")
        if n <= 0:
            logger.debug("nth_root() called with n=%r", n)
            raise ValueError(f"Can't compute nth root for non-positive n: {n}")

        if self.is_nan:
            return [Complex.NAN]
        if self.is_infinite:
            return [Complex.INFINITY]

        nth_root_of_abs = math.pow(self.abs(), 1.0 / n)
        nth_phi = self.argument() / n
        slice_ = 2.0 * math.pi / n
        roots = []
        for k in range(n):
            inner = nth_phi + k * slice_
            roots.append(Complex._of(nth_root_of_abs * realmath.cos(inner),
                                     nth_root_of_abs * realmath.sin(inner)))
        return roots

    # ---------- dunder sugar ----------
    __abs__ = abs
    __add__ = add
    __radd__ = add
    __sub__ = subtract
    __neg__ = negate
    __mul__ = multiply
    __rmul__ = multiply
    __truediv__ = divide

    def __rsub__(self, other) -> "Complex":
        return Complex._of(self._operand(other, "-"), 0.0) - self

    def __rtruediv__(self, other) -> "Complex":
        return Complex._of(self._operand(other, "/"), 0.0) / self

    def __pow__(self, exponent, modulo=None) -> "Complex":
        if modulo is not None:
            raise TypeError("pow() 3rd argument not allowed for Complex")
        other = self._operand(exponent, "**")
        if isinstance(other, Complex):
            return self.power(other)
        return self.pow(other)

    def __rpow__(self, base) -> "Complex":
        return Complex._of(self._operand(base, "**"), 0.0).power(self)

    def __eq__(self, other) -> bool:
        """
        NaN-collapsing equality: all values with a NaN part are equal to one
        another; otherwise both parts must be equal as floats (so ``0.0`` and
        ``-0.0`` match).
        """
        if self is other:
            return True
        if not isinstance(other, Complex):
            return NotImplemented
        if other.is_nan:
            return self.is_nan
        return self._real == other._real and self._imaginary == other._imaginary

    def __hash__(self) -> int:
        if self.is_nan:
            return NAN_HASH
        return 37 * (17 * hash(self._imaginary) + hash(self._real))

    def __bool__(self) -> bool:
        return self._real != 0.0 or self._imaginary != 0.0

    def __iter__(self) -> Iterator[float]:
        yield self._real
        yield self._imaginary

    def __complex__(self) -> complex:
        return complex(self._real, self._imaginary)

    # readable REPL / print-outs
    def __repr__(self):
        return f"Complex({self._real!r}, {self._imaginary!r})"


Complex.ZERO = Complex._of(0.0, 0.0)
Complex.ONE = Complex._of(1.0, 0.0)
Complex.I = Complex._of(0.0, 1.0)
Complex.NAN = Complex._of(math.nan, math.nan)
Complex.INFINITY = Complex._of(math.inf, math.inf)


if __name__ == "__main__":
    z1 = Complex(3, 4)                           # 3 + 4i
    z2 = Complex.polar(2, 45, radians=False)     # 2·e^{iπ/4}
    print(z1.abs())                              # 5.0
    print(z1 * Complex(1, -2))                   # 11 - 2i
    print(z1 / Complex.ZERO)                     # NaN class
    print(z1.reciprocal())                       # ≈ 0.12 - 0.16i
    print(Complex(-4).sqrt())                    # ≈ 0 + 2i
    print(z2.nth_root(3))                        # three cube roots
    print(Complex.NAN == Complex(1, math.nan))   # True
