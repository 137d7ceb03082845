"""Mixed-number rational arithmetic with NumPy interoperability."""
from __future__ import annotations

import logging
import math
import numbers
import operator
from fractions import Fraction
from typing import Any, Callable, Tuple, Union

import numpy as np

from . import glyphs
from .errors import BadDataError, IncorrectTypeError

logger = logging.getLogger(__name__)

Operand = Union["Rational", int]


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it is an integer (``bool`` excluded)."""
    if isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_)):
        return int(value)
    logger.debug("rejected %s of type %r", name, type(value))
    raise IncorrectTypeError(f"{name} must be an integer, got {type(value)!r}")


def _coerce(value: Any) -> "Rational":
    """Return *value* as a :class:`Rational`; only integers and rationals qualify."""
    if isinstance(value, Rational):
        return value
    return Rational(_ensure_int(value, name="operand"), 0, 1)


class Rational:
    """A signed whole number plus a proper fraction, kept in canonical form.

    ``Rational(whole, numerator, denominator)`` stands for the value
    ``whole + numerator / denominator``. On construction the triple is
    normalized: the denominator is positive, the fraction is proper and fully
    reduced, the whole part and the fraction share one sign, and zero is
    ``(0, 0, 1)``. Instances are never mutated afterwards.
    """

    __slots__ = ("_whole", "_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    def __init__(self, whole: int = 0, numerator: int = 0, denominator: int = 1) -> None:
        w = _ensure_int(whole, name="whole")
        num = _ensure_int(numerator, name="numerator")
        den = _ensure_int(denominator, name="denominator")
        if den == 0:
            logger.debug("rejected zero denominator for (%d, %d, %d)", w, num, den)
            raise BadDataError("denominator must be non-zero")

        self._whole, self._numerator, self._denominator = self._normalize(w, num, den)

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_improper(cls, numerator: int, denominator: int) -> "Rational":
        """Create a :class:`Rational` from the improper fraction ``numerator/denominator``."""
        return cls(0, numerator, denominator)

    @classmethod
    def from_integer(cls, value: int) -> "Rational":
        return cls(value, 0, 1)

    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        """Create a :class:`Rational` from :class:`fractions.Fraction`."""
        if not isinstance(value, Fraction):
            logger.debug("rejected fraction of type %r", type(value))
            raise IncorrectTypeError(f"expected a Fraction, got {type(value)!r}")
        return cls(0, value.numerator, value.denominator)

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def whole(self) -> int:
        return self._whole

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def improper(self) -> Tuple[int, int]:
        """Return ``(numerator, denominator)`` of the equivalent improper fraction."""
        return self._whole * self._denominator + self._numerator, self._denominator

    def as_tuple(self) -> Tuple[int, int, int]:
        return self._whole, self._numerator, self._denominator

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(*self.improper())

    def is_zero(self) -> bool:
        return self._whole == 0 and self._numerator == 0

    def is_integer(self) -> bool:
        return self._numerator == 0

    def sign(self) -> int:
        """Return -1, 0 or 1 according to the sign of the value."""
        total, _ = self.improper()
        return (total > 0) - (total < 0)

    # ------------------------------------------------------------------
    # Arithmetic
    def add(self, other: Operand) -> "Rational":
        a_n, a_d = self.improper()
        b_n, b_d = _coerce(other).improper()
        return Rational.from_improper(a_n * b_d + b_n * a_d, a_d * b_d)

    def subtract(self, other: Operand) -> "Rational":
        a_n, a_d = self.improper()
        b_n, b_d = _coerce(other).improper()
        return Rational.from_improper(a_n * b_d - b_n * a_d, a_d * b_d)

    def multiply(self, other: Operand) -> "Rational":
        a_n, a_d = self.improper()
        b_n, b_d = _coerce(other).improper()
        return Rational.from_improper(a_n * b_n, a_d * b_d)

    def divide(self, other: Operand) -> "Rational":
        """Return ``self / other``.

        Raises:
            BadDataError: *other* has the value zero.
            IncorrectTypeError: *other* is neither an integer nor a Rational.
        """
        a_n, a_d = self.improper()
        b_n, b_d = _coerce(other).improper()
        if b_n == 0:
            logger.debug("rejected division of %r by zero", self)
            raise BadDataError("division by zero")
        return Rational.from_improper(a_n * b_d, a_d * b_n)

    def negate(self) -> "Rational":
        return Rational(-self._whole, -self._numerator, self._denominator)

    def abs(self) -> "Rational":
        """Return the magnitude of the value as a new :class:`Rational`."""
        return Rational(abs(self._whole), abs(self._numerator), self._denominator)

    def inverse(self) -> "Rational":
        """Return ``1 / self``; zero has no inverse and raises :class:`BadDataError`."""
        return Rational(1, 0, 1).divide(self)

    def pow(self, exponent: Any) -> "Rational":
        power = self._coerce_power(exponent)
        num, den = self.improper()
        if power >= 0:
            return Rational.from_improper(num ** power, den ** power)
        if num == 0:
            logger.debug("rejected negative power %d of zero", power)
            raise BadDataError("0 cannot be raised to a negative power")
        return Rational.from_improper(den ** -power, num ** -power)

    # ------------------------------------------------------------------
    # Conversions
    def to_float(self) -> float:
        return self._whole + self._numerator / self._denominator

    def to_string(self) -> str:
        """Return the display form, e.g. ``"0"``, ``"-3"``, ``"-¹/₂"`` or ``"15 ³/₄"``."""
        if self._numerator == 0:
            return str(self._whole)
        fraction = glyphs.fraction(abs(self._numerator), self._denominator)
        if self._whole == 0:
            return f"-{fraction}" if self._numerator < 0 else fraction
        return f"{self._whole} {fraction}"

    def equals(self, other: Operand) -> bool:
        """Return whether *other* normalizes to the same triple as ``self``."""
        return self.as_tuple() == _coerce(other).as_tuple()

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self._whole

    def __bool__(self) -> bool:
        return not self.is_zero()

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Rational({self._whole}, {self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        return format(self.to_float(), format_spec)

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _normalize(whole: int, num: int, den: int) -> Tuple[int, int, int]:
        if den < 0:
            num, den = -num, -den
        total = whole * den + num
        # Truncating division so the remainder keeps the sign of the total.
        quotient, remainder = divmod(abs(total), den)
        if total < 0:
            quotient, remainder = -quotient, -remainder
        gcd = math.gcd(remainder, den)
        return quotient, remainder // gcd, den // gcd

    @staticmethod
    def _coerce_power(value: Any) -> int:
        if isinstance(value, Rational):
            if not value.is_integer():
                logger.debug("rejected non-integer exponent %r", value)
                raise IncorrectTypeError("Exponent must be an integer")
            return value.whole
        return _ensure_int(value, name="exponent")

    def _binary_operation(self, other: Any, op: Callable[["Rational", Any], "Rational"]):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(lambda x: op(self, x), otypes=[object])
            return vectorised(other)
        try:
            return op(self, _coerce(other))
        except IncorrectTypeError:
            return NotImplemented

    def _reflected_operation(self, other: Any, op: Callable[["Rational", Any], "Rational"]):
        # ndarray left operands never get here; they dispatch through __array_ufunc__.
        try:
            left = _coerce(other)
        except IncorrectTypeError:
            return NotImplemented
        return op(left, self)

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.add)

    def __radd__(self, other: Any) -> Any:
        return self._reflected_operation(other, Rational.add)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.subtract)

    def __rsub__(self, other: Any) -> Any:
        return self._reflected_operation(other, Rational.subtract)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.multiply)

    def __rmul__(self, other: Any) -> Any:
        return self._reflected_operation(other, Rational.multiply)

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.divide)

    def __rtruediv__(self, other: Any) -> Any:
        return self._reflected_operation(other, Rational.divide)

    def __pow__(self, exponent: Any) -> Any:
        if isinstance(exponent, np.ndarray):
            vectorised = np.vectorize(lambda x: self.pow(x), otypes=[object])
            return vectorised(exponent)
        try:
            power = self._coerce_power(exponent)
        except IncorrectTypeError:
            return NotImplemented
        return self.pow(power)

    def __neg__(self) -> "Rational":
        return self.negate()

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return self.abs()

    # ------------------------------------------------------------------
    # Equality
    def __eq__(self, other: Any) -> bool:
        try:
            return self.equals(other)
        except IncorrectTypeError:
            return False

    def __hash__(self) -> int:  # aligns with int and Fraction hashing
        return hash(self.as_fraction())

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.divide: operator.truediv,
        np.true_divide: operator.truediv,
        np.negative: operator.neg,
        np.positive: operator.pos,
        np.absolute: operator.abs,
        np.power: operator.pow,
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Rational ufuncs")
        if ufunc in (np.equal, np.not_equal):
            return self._equality_ufunc(ufunc, *inputs)
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, np.ndarray):
                coerced.append(np.vectorize(_coerce, otypes=[object])(value))
                has_array = True
            else:
                coerced.append(_coerce(value))
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[object])
            return vectorised(*coerced)
        return op(*coerced)

    @staticmethod
    def _equality_ufunc(ufunc, left: Any, right: Any):
        def _equal(a: Any, b: Any) -> bool:
            # Rational.__eq__ on the left, so NumPy scalars do not re-enter the ufunc.
            if isinstance(b, Rational):
                a, b = b, a
            return a == b

        if ufunc is np.not_equal:
            def compare(a: Any, b: Any) -> bool:
                return not _equal(a, b)
        else:
            compare = _equal
        if isinstance(left, np.ndarray) or isinstance(right, np.ndarray):
            return np.vectorize(compare, otypes=[bool])(left, right)
        return compare(left, right)


def rationalize(value: Operand) -> Rational:
    """Public helper to convert an integer or :class:`Rational` into :class:`Rational`."""

    return _coerce(value)


__all__ = ["Rational", "Operand", "rationalize"]
