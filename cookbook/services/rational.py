"""
Rational Number Service

Exact fractions used as the only numeric representation of a measured
quantity, plus the display helpers that turn them into and out of text
(mixed fractions, decimals, unicode fraction characters).
"""

import re
from fractions import Fraction

from ..constants import UNICODE_FRACTIONS
from ..errors import ArithmeticOverflow, DivisionByZero, MalformedRational

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Accepted display forms: "1 1/2", "3/2", "-2", "0.125"
_MIXED_RE = re.compile(r'^(-)?(\d+)\s+(\d+)\s*/\s*(\d+)$')
_SIMPLE_RE = re.compile(r'^(-?\d+)\s*/\s*(\d+)$')
_DECIMAL_RE = re.compile(r'^-?(\d+\.?\d*|\.\d+)$')


def fits_int64(n):
    """True if n is representable as a signed 64-bit integer."""
    return INT64_MIN <= n <= INT64_MAX


def _require_int(value, field):
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedRational(f"{field} must be an integer, got {value!r}")
    return value


def _operand(value):
    """Return value as a Fraction, or NotImplemented for inexact types."""
    if isinstance(value, Rational):
        return value._value
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Fraction(value)
    return NotImplemented


class Rational:
    """Exact fraction, always in lowest terms with a positive denominator.

    Values normally live on the 64-bit path. A result whose numerator or
    denominator outgrows 64 bits is promoted to arbitrary precision
    (``is_wide``) rather than wrapping; ``checked_pair`` is the fixed-width
    boundary and raises ArithmeticOverflow for such values.

    Mixing with float is not supported: floats are never exact.
    """

    __slots__ = ('_value',)

    def __init__(self, numerator=0, denominator=1):
        _require_int(numerator, 'numerator')
        _require_int(denominator, 'denominator')
        if denominator == 0:
            raise MalformedRational(f"zero denominator in {numerator}/0")
        self._value = Fraction(numerator, denominator)

    @classmethod
    def _wrap(cls, fraction):
        obj = cls.__new__(cls)
        obj._value = fraction
        return obj

    @classmethod
    def coerce(cls, value):
        """Accept a Rational, int or Fraction; reject anything inexact."""
        fraction = _operand(value)
        if fraction is NotImplemented:
            raise MalformedRational(f"cannot use {value!r} as an exact rational")
        if isinstance(value, Rational):
            return value
        return cls._wrap(fraction)

    @classmethod
    def from_pair(cls, pair):
        """Build from a [numerator, denominator] pair as stored in recipe files."""
        if isinstance(pair, (str, bytes)) or not isinstance(pair, (list, tuple)):
            raise MalformedRational(f"expected [numerator, denominator], got {pair!r}")
        if len(pair) != 2:
            raise MalformedRational(f"expected 2 integers, got {len(pair)}")
        return cls(pair[0], pair[1])

    @classmethod
    def parse(cls, text):
        """
        Parse a display string into an exact rational.

        Handles: 2, -3, 1.25, 1/2, 1 1/2, ½, 1½, 1 ½.
        Decimal input is converted exactly (0.1 is 1/10).
        """
        if not isinstance(text, str):
            raise MalformedRational(f"expected text, got {text!r}")
        s = ' '.join(text.split())
        for char, value in UNICODE_FRACTIONS.items():
            s = s.replace(char, f" {value.numerator}/{value.denominator}")
        s = s.strip()
        if not s:
            raise MalformedRational("empty rational")

        mixed = _MIXED_RE.match(s)
        if mixed:
            sign, whole, num, den = mixed.groups()
            if int(den) == 0:
                raise MalformedRational(f"zero denominator in {text!r}")
            value = int(whole) + Fraction(int(num), int(den))
            return cls._wrap(-value if sign else value)

        simple = _SIMPLE_RE.match(s)
        if simple:
            return cls(int(simple.group(1)), int(simple.group(2)))

        if _DECIMAL_RE.match(s):
            return cls._wrap(Fraction(s))

        raise MalformedRational(f"not a number: {text!r}")

    # -- accessors --------------------------------------------------------

    @property
    def numerator(self):
        return self._value.numerator

    @property
    def denominator(self):
        return self._value.denominator

    @property
    def is_wide(self):
        """True once the value has been promoted past 64-bit components."""
        return not (fits_int64(self.numerator) and fits_int64(self.denominator))

    def is_integer(self):
        return self._value.denominator == 1

    def to_pair(self):
        return (self.numerator, self.denominator)

    def checked_pair(self):
        """The (numerator, denominator) pair, which must fit in 64 bits."""
        if self.is_wide:
            raise ArithmeticOverflow(f"{self} does not fit in 64-bit numerator/denominator")
        return self.to_pair()

    def as_fraction(self):
        return self._value

    # -- arithmetic -------------------------------------------------------

    def __add__(self, other):
        other = _operand(other)
        if other is NotImplemented:
            return other
        return Rational._wrap(self._value + other)

    __radd__ = __add__

    def __sub__(self, other):
        other = _operand(other)
        if other is NotImplemented:
            return other
        return Rational._wrap(self._value - other)

    def __rsub__(self, other):
        other = _operand(other)
        if other is NotImplemented:
            return other
        return Rational._wrap(other - self._value)

    def __mul__(self, other):
        other = _operand(other)
        if other is NotImplemented:
            return other
        return Rational._wrap(self._value * other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = _operand(other)
        if other is NotImplemented:
            return other
        if other == 0:
            raise DivisionByZero(f"cannot divide {self} by zero")
        return Rational._wrap(self._value / other)

    def __rtruediv__(self, other):
        other = _operand(other)
        if other is NotImplemented:
            return other
        if self._value == 0:
            raise DivisionByZero(f"cannot divide {Rational._wrap(other)} by zero")
        return Rational._wrap(other / self._value)

    def __neg__(self):
        return Rational._wrap(-self._value)

    def __pos__(self):
        return self

    def __abs__(self):
        return Rational._wrap(abs(self._value))

    # -- comparison -------------------------------------------------------

    def __eq__(self, other):
        other = _operand(other)
        if other is NotImplemented:
            return other
        return self._value == other

    def __lt__(self, other):
        other = _operand(other)
        if other is NotImplemented:
            return other
        return self._value < other

    def __le__(self, other):
        other = _operand(other)
        if other is NotImplemented:
            return other
        return self._value <= other

    def __gt__(self, other):
        other = _operand(other)
        if other is NotImplemented:
            return other
        return self._value > other

    def __ge__(self, other):
        other = _operand(other)
        if other is NotImplemented:
            return other
        return self._value >= other

    def __hash__(self):
        return hash(self._value)

    def __bool__(self):
        return self._value != 0

    # -- display ----------------------------------------------------------

    def __float__(self):
        return float(self._value)

    def __repr__(self):
        return f"Rational({self.numerator}, {self.denominator})"

    def __str__(self):
        if self.is_integer():
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def to_mixed_string(self):
        """Render as a mixed fraction for display, e.g. '1 1/2'."""
        if self.is_integer():
            return str(self.numerator)
        sign = '-' if self._value < 0 else ''
        whole, rest = divmod(abs(self.numerator), self.denominator)
        if whole:
            return f"{sign}{whole} {rest}/{self.denominator}"
        return f"{sign}{rest}/{self.denominator}"

    def to_decimal_string(self, places=2):
        """
        Render as a decimal rounded to ``places`` for display only.

        Rounds half to even and drops trailing zeros. The stored value is
        never replaced by this form.
        """
        if places < 0:
            raise ValueError("places must be >= 0")
        scaled = round(self._value * 10 ** places)
        sign = '-' if scaled < 0 else ''
        whole, frac = divmod(abs(scaled), 10 ** places)
        if not places:
            return f"{sign}{whole}"
        return f"{sign}{whole}.{frac:0{places}d}".rstrip('0').rstrip('.')


ZERO = Rational(0)
ONE = Rational(1)
