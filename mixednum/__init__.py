"""Mixed-number rational arithmetic."""

from .arrays import as_rational_array, to_float_array, zeros, zeros_like
from .errors import BadDataError, IncorrectTypeError, RationalError
from .rational import Operand, Rational, rationalize

__all__ = [
    "Rational",
    "Operand",
    "rationalize",
    "RationalError",
    "BadDataError",
    "IncorrectTypeError",
    "as_rational_array",
    "zeros",
    "zeros_like",
    "to_float_array",
]
