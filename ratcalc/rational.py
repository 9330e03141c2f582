"""
Exact rational numbers with cross-multiplying comparisons.

Python integers have arbitrary precision, so no product can overflow here.
"""

from __future__ import annotations
import math
import re

from quicktions import Fraction  # type: ignore

from .errors import InvalidArgument, DivisionByZero, ParseError, DigitLimitExceeded


_TOKEN_RE = re.compile(r'(-?[0-9]+)/([0-9]+)')


class Rational:
    """Immutable fraction, always kept in lowest terms with positive denominator."""

    __slots__ = ('_n', '_d')

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        for x in (numerator, denominator):
            if isinstance(x, bool) or not isinstance(x, int):
                raise InvalidArgument("Rational requires integers, got {!r}".format(x))
        if denominator == 0:
            raise DivisionByZero("Zero denominator!")
        if denominator < 0:
            numerator = -numerator
            denominator = -denominator
        g = math.gcd(numerator, denominator)  # gcd(0, d) == d gives 0/1
        object.__setattr__(self, '_n', numerator // g)
        object.__setattr__(self, '_d', denominator // g)

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    def __delattr__(self, name):
        raise AttributeError("Rational is immutable")

    @property
    def numerator(self) -> int:
        return self._n

    @property
    def denominator(self) -> int:
        return self._d

    @classmethod
    def parse(cls, token: str) -> Rational:
        """
        Parse operand token "n/d", e.g., "3/4" or "-1/2".

        Raises ParseError for anything else (including operands longer than the
        interpreter's int/str digit limit), DivisionByZero for "n/0".
        """
        if not isinstance(token, str):
            raise ParseError(token)
        match = _TOKEN_RE.fullmatch(token)
        if match is None:
            raise ParseError(token)
        try:
            numerator, denominator = int(match.group(1)), int(match.group(2))
        except ValueError as exc:
            # too many digits for sys.get_int_max_str_digits()
            raise ParseError(token, str(exc)) from exc
        return cls(numerator, denominator)

    @classmethod
    def from_fraction(cls, fraction: Fraction) -> Rational:
        return cls(fraction.numerator, fraction.denominator)

    def as_fraction(self) -> Fraction:
        return Fraction(self._n, self._d)

    def copy(self) -> Rational:
        return Rational(self._n, self._d)

    # All four operations are plain binary functions: Rational.add(a, b) == a.add(b) == a + b

    def add(self, other: Rational) -> Rational:
        _check_rational(other)
        return Rational(self._n * other._d + other._n * self._d, self._d * other._d)

    def subtract(self, other: Rational) -> Rational:
        _check_rational(other)
        return Rational(self._n * other._d - other._n * self._d, self._d * other._d)

    def multiply(self, other: Rational) -> Rational:
        _check_rational(other)
        return Rational(self._n * other._n, self._d * other._d)

    def divide(self, other: Rational) -> Rational:
        _check_rational(other)
        if other._n == 0:
            raise DivisionByZero("Division by zero rational {}".format(other))
        return Rational(self._n * other._d, self._d * other._n)

    def compare(self, other: Rational) -> int:
        """Return -1, 0 or 1 as self is less than, equal to or greater than other."""
        _check_rational(other)
        lhs = self._n * other._d
        rhs = other._n * self._d
        return (lhs > rhs) - (lhs < rhs)

    def __add__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.divide(other)

    def __lt__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self._n * other._d < other._n * self._d

    def __le__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self._n * other._d <= other._n * self._d

    def __gt__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self._n * other._d > other._n * self._d

    def __ge__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self._n * other._d >= other._n * self._d

    def __eq__(self, other):
        # agrees with ordering; for normalized values it is the same as (n, d) equality
        if not isinstance(other, Rational):
            return NotImplemented
        return self._n * other._d == other._n * self._d

    def __hash__(self):
        return hash((self._n, self._d))

    def __reduce__(self):
        # default slots pickling would go through the blocked __setattr__
        return (Rational, (self._n, self._d))

    def __str__(self):
        return '{}/{}'.format(_int_str(self._n), _int_str(self._d))

    def __repr__(self):
        return 'Rational({}, {})'.format(_int_str(self._n), _int_str(self._d))


def _check_rational(x):
    if not isinstance(x, Rational):
        raise InvalidArgument("Rational operand expected, got {!r}".format(x))


def _int_str(n):
    try:
        return str(n)
    except ValueError as exc:
        raise DigitLimitExceeded(str(exc)) from exc
