"""Shared result types for confidence-region analysis."""

from __future__ import annotations

from dataclasses import dataclass

from pybdt._common import DomainError, _check_count


def _percent(level: float) -> str:
    """Format a level in (0, 1) as a percentage, e.g. 0.975 -> '97.5%'."""
    return f"{level * 100:g}%"


@dataclass(frozen=True)
class ContingencyCounts:
    """2x2 table of a binary test against true disease status.

    Attributes
    ----------
    tp, fn : int
        Diseased subjects testing positive / negative.
    fp, tn : int
        Non-diseased subjects testing positive / negative.
    """

    tp: int
    fp: int
    fn: int
    tn: int

    def __post_init__(self) -> None:
        for name in ("tp", "fp", "fn", "tn"):
            value = getattr(self, name)
            _check_count(value, name)
            object.__setattr__(self, name, int(value))
        if self.tp + self.fn == 0:
            raise DomainError("TPF is undefined: tp + fn = 0 (no diseased subjects)")
        if self.fp + self.tn == 0:
            raise DomainError("FPF is undefined: fp + tn = 0 (no non-diseased subjects)")

    @property
    def n_diseased(self) -> int:
        return self.tp + self.fn

    @property
    def n_nondiseased(self) -> int:
        return self.fp + self.tn

    @property
    def tpf(self) -> float:
        """True positive fraction (sensitivity)."""
        return self.tp / self.n_diseased

    @property
    def fpf(self) -> float:
        """False positive fraction (1 - specificity)."""
        return self.fp / self.n_nondiseased


@dataclass(frozen=True)
class ConfidenceRegionResult:
    """Point estimate and rectangular joint confidence region for (FPF, TPF).

    The rectangle is the product of two marginal exact intervals, each at
    level ``sqrt(conf_level)``, so that its joint coverage is at least
    ``conf_level``.  For a one-sided region ``tpf_max`` is 1 and
    ``fpf_min`` is 0.
    """

    tpf: float
    fpf: float
    tpf_min: float
    tpf_max: float
    fpf_min: float
    fpf_max: float
    conf_level: float
    one_sided: bool
    counts: ContingencyCounts

    def summary(self) -> str:
        """Human-readable summary."""
        kind = "one-sided" if self.one_sided else "two-sided"
        c = self.counts
        lines = [
            f"Joint {_percent(self.conf_level)} confidence region ({kind})",
            "=" * 40,
            f"Counts          : TP={c.tp} FN={c.fn} FP={c.fp} TN={c.tn}",
            f"Sensitivity     : {self.tpf:.4f}  ({self.tpf_min:.4f}, {self.tpf_max:.4f})",
            f"1 - Specificity : {self.fpf:.4f}  ({self.fpf_min:.4f}, {self.fpf_max:.4f})",
            f"Marginal level  : {self.conf_level ** 0.5:.4f}",
        ]
        return "\n".join(lines)
