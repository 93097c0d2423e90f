"""
FARS Value Objects (Functional Core)

Validated wrappers for the loosely-typed identifiers callers pass in.
A year or STATE code may arrive as an ``int``, a numeric string read from a
command line, a float pulled from a DataFrame cell, or a numpy scalar.  Each
is coerced exactly once, at the edge, into a small frozen dataclass so that
downstream code only ever sees a plain ``int``.

Package Location: src/fars/analysis/values.py

Coercion rules (mirroring integer truncation of numeric input):
    - ``bool`` is rejected (``True`` is not a year).
    - Integers (including numpy integers) pass through.
    - Finite reals are truncated toward zero (``2013.0`` -> ``2013``).
    - Strings are stripped, then parsed as an integer or, failing that, as a
      finite float which is truncated.
    - Anything else raises ``TypeConversionError``.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any


class TypeConversionError(TypeError, ValueError):
    """
    Raised when a year or STATE code cannot be coerced to an integer.

    Inherits from both ``TypeError`` and ``ValueError`` so callers using
    either idiom catch it.
    """
    pass


def _coerce_int(value: Any, label: str) -> int:
    """Coerce *value* to ``int`` or raise ``TypeConversionError``.

    Args:
        value: Loosely-typed input.
        label: Name used in the error message (``'year'``, ``'STATE code'``).

    Returns:
        The integer value.
    """
    if isinstance(value, bool):
        raise TypeConversionError(f"invalid {label}: {value!r} is not an integer")

    if isinstance(value, numbers.Integral):
        return int(value)

    if isinstance(value, numbers.Real):
        if not math.isfinite(value):
            raise TypeConversionError(f"invalid {label}: {value!r} is not finite")
        return int(value)

    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            as_float = float(text)
        except ValueError:
            raise TypeConversionError(
                f"invalid {label}: {value!r} is not an integer"
            ) from None
        if not math.isfinite(as_float):
            raise TypeConversionError(f"invalid {label}: {value!r} is not finite")
        return int(as_float)

    raise TypeConversionError(
        f"invalid {label}: {value!r} ({type(value).__name__}) is not an integer"
    )


@dataclass(frozen=True)
class Year:
    """A dataset year, always held as a plain ``int``."""

    value: int

    @classmethod
    def parse(cls, value: Any) -> "Year":
        """Build a ``Year`` from any integer-like input.

        Args:
            value: ``int``, numeric string, finite float, or an existing
                ``Year`` (returned unchanged).

        Returns:
            A ``Year`` instance.

        Raises:
            TypeConversionError: If *value* is not integer-like.
        """
        if isinstance(value, cls):
            return value
        return cls(_coerce_int(value, "year"))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class StateCode:
    """A FARS ``STATE`` code (numeric FIPS-style identifier)."""

    value: int

    @classmethod
    def parse(cls, value: Any) -> "StateCode":
        """Build a ``StateCode`` from any integer-like input.

        Raises:
            TypeConversionError: If *value* is not integer-like.
        """
        if isinstance(value, cls):
            return value
        return cls(_coerce_int(value, "STATE code"))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
