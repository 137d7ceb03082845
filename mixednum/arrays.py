"""NumPy object-array helpers for :class:`~mixednum.rational.Rational` values."""
from __future__ import annotations

from typing import Any

import numpy as np

from .rational import Rational, rationalize


def as_rational_array(values: Any, *, copy: bool = True) -> np.ndarray:
    """Return a ``numpy.ndarray`` of :class:`Rational` values.

    ``values`` can be any iterable of integers and rationals or an existing
    NumPy array. When ``copy`` is ``False`` and ``values`` is already an
    object array holding only :class:`Rational` entries, it is returned as is.
    Floating-point entries are rejected with
    :class:`~mixednum.errors.IncorrectTypeError`.
    """

    if isinstance(values, np.ndarray):
        array = values.copy() if copy else values
        if array.dtype == object and all(isinstance(item, Rational) for item in array.flat):
            return array
        if array.size == 0:
            return array.astype(object)
        return np.vectorize(rationalize, otypes=[object])(array)

    if isinstance(values, (list, tuple)):
        array = np.empty(len(values), dtype=object)
        for index, item in enumerate(values):
            array[index] = rationalize(item)
        return array

    return as_rational_array(list(values), copy=copy)


def zeros(length: int) -> np.ndarray:
    """Return a one-dimensional array of length ``length`` filled with zeros."""

    if length < 0:
        raise ValueError("length must be non-negative")
    return as_rational_array([Rational(0, 0, 1) for _ in range(length)])


def zeros_like(values: Any) -> np.ndarray:
    """Return a zero-filled array that matches the shape of ``values``."""

    shape = np.shape(values)
    array = np.empty(shape, dtype=object)
    for index in np.ndindex(shape):
        array[index] = Rational(0, 0, 1)
    return array


def to_float_array(values: Any) -> np.ndarray:
    array = as_rational_array(values, copy=False)
    return np.array([item.to_float() for item in array.flat], dtype=np.float64).reshape(
        array.shape
    )


__all__ = ["as_rational_array", "zeros", "zeros_like", "to_float_array"]
