"""Superscript and subscript digit rendering for fraction display."""
from __future__ import annotations

SUPERSCRIPT_DIGITS = "⁰¹²³⁴⁵⁶⁷⁸⁹"
SUBSCRIPT_DIGITS = "₀₁₂₃₄₅₆₇₈₉"

_SUPERSCRIPT_TABLE = str.maketrans("0123456789", SUPERSCRIPT_DIGITS)
_SUBSCRIPT_TABLE = str.maketrans("0123456789", SUBSCRIPT_DIGITS)


def _render(value: int, table: dict) -> str:
    if value < 0:
        raise ValueError(f"cannot render negative value {value} as glyphs")
    return str(value).translate(table)


def superscript(value: int) -> str:
    """Return the non-negative integer *value* written in superscript digits."""
    return _render(value, _SUPERSCRIPT_TABLE)


def subscript(value: int) -> str:
    """Return the non-negative integer *value* written in subscript digits."""
    return _render(value, _SUBSCRIPT_TABLE)


def fraction(numerator: int, denominator: int) -> str:
    """Render an unsigned fraction, e.g. ``fraction(3, 4) == "³/₄"``."""
    return f"{superscript(numerator)}/{subscript(denominator)}"


__all__ = [
    "SUPERSCRIPT_DIGITS",
    "SUBSCRIPT_DIGITS",
    "superscript",
    "subscript",
    "fraction",
]
