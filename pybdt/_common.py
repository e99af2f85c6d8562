"""Shared error type and argument checks."""

from __future__ import annotations

import math
import numbers


class DomainError(ValueError):
    """A mathematical precondition of a calculation does not hold.

    Raised for zero denominators (no diseased or no non-diseased subjects,
    target rate equal to the null rate, a log-ratio of zero) and for
    probabilities or levels outside their admissible range.  Never
    transient: re-running with the same inputs fails the same way.
    """


def _check_probability(value: float, name: str) -> None:
    """Require ``0 <= value <= 1``."""
    if not math.isfinite(value) or not (0.0 <= value <= 1.0):
        raise DomainError(f"{name} must be in [0, 1], got {value}")


def _check_open_unit(value: float, name: str) -> None:
    """Require ``0 < value < 1`` (significance levels, confidence levels)."""
    if not math.isfinite(value) or not (0.0 < value < 1.0):
        raise DomainError(f"{name} must be in (0, 1), got {value}")


def _check_count(value: int, name: str, minimum: int = 0) -> None:
    """Require an integer ``>= minimum`` (bools rejected)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise DomainError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise DomainError(f"{name} must be >= {minimum}, got {value}")
