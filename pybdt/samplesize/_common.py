"""Shared result type and helpers for sample size calculations."""

from __future__ import annotations

import math
from dataclasses import dataclass

from scipy.stats import norm

from pybdt._common import _check_open_unit


@dataclass(frozen=True)
class SampleSizeResult:
    """Required numbers of diseased and non-diseased subjects.

    ``n_diseased`` and ``n_nondiseased`` are the ceilings of the continuous
    formula values kept in ``n_diseased_exact`` and ``n_nondiseased_exact``;
    rounding is always up so the nominal power is preserved.
    """

    n_diseased: int
    n_nondiseased: int
    n_diseased_exact: float
    n_nondiseased_exact: float
    alpha: float
    beta: float
    method: str
    note: str = ""

    @property
    def n_total(self) -> int:
        return self.n_diseased + self.n_nondiseased

    def summary(self) -> str:
        """Human-readable summary, similar to R's print.power.htest."""
        lines = [
            self.method,
            "",
            f"     n diseased = {self.n_diseased}",
            f"  n nondiseased = {self.n_nondiseased}",
            f"          alpha = {self.alpha}",
            f"          power = {1 - self.beta}",
        ]
        if self.note:
            lines.append("")
            lines.append(f"NOTE: {self.note}")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _check_error_rates(alpha: float, beta: float) -> None:
    _check_open_unit(alpha, "alpha")
    _check_open_unit(beta, "beta")


def _z_sqrt(rate: float) -> float:
    """Normal quantile at ``sqrt(1 - rate)``.

    The TPF and FPF hypotheses are tested jointly; splitting each error rate
    as ``1 - sqrt(1 - rate)`` per arm keeps the overall rate at ``rate``.
    """
    return float(norm.ppf(math.sqrt(1.0 - rate)))


def _ceil_n(n: float) -> int:
    """Round up, never below one subject."""
    return max(1, int(math.ceil(n)))
