"""Exceptions raised by :mod:`mixednum`."""


class RationalError(Exception):
    """Base class for all errors raised by :class:`mixednum.Rational`."""


class BadDataError(RationalError, ValueError):
    """A value would end up with a zero denominator."""


class IncorrectTypeError(RationalError, TypeError):
    """An operand is neither an integer nor a :class:`mixednum.Rational`."""


__all__ = ["RationalError", "BadDataError", "IncorrectTypeError"]
