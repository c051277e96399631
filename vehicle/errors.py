"""Exception types and argument checks shared by the formula modules.

Both exceptions subclass the matching built-in so callers can catch either
``InvalidArgumentError`` or plain ``ValueError`` (and likewise for
``ZeroDivisionError``).
"""

from __future__ import annotations

import math


class InvalidArgumentError(ValueError):
    """An argument is non-finite or outside the domain of a formula."""


class DivisionByZeroError(ZeroDivisionError):
    """A formula's denominator is zero."""


def require_finite(**values: float) -> None:
    """Raise :class:`InvalidArgumentError` if any keyword value is NaN or infinite.

    Args:
        **values: Argument names mapped to the values to check.  The name is
            used in the error message.
    """
    for name, value in values.items():
        if not math.isfinite(value):
            msg = f"{name} must be a finite number, got {value!r}"
            raise InvalidArgumentError(msg)


def require_nonzero(name: str, value: float) -> None:
    """Raise :class:`DivisionByZeroError` if *value* is zero."""
    if value == 0:
        msg = f"{name} must be non-zero"
        raise DivisionByZeroError(msg)
