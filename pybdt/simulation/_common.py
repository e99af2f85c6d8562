"""Shared result type for simulated power."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SimulatedPowerResult:
    """Monte Carlo estimate of the power of a Phase 2 design.

    ``power`` is ``n_success / n_trials``, where a trial succeeds when its
    one-sided joint confidence region lies entirely inside
    ``TPF > tpf0, FPF < fpf0``.
    """

    power: float
    n_success: int
    n_trials: int
    n_diseased: int
    n_nondiseased: int
    conf_level: float
    seed: int | None

    @property
    def mc_se(self) -> float:
        """Binomial Monte Carlo standard error of ``power``."""
        return (self.power * (1.0 - self.power) / self.n_trials) ** 0.5

    def summary(self) -> str:
        """Human-readable summary."""
        lines = [
            "Simulated power of Phase 2 binary diagnostic test design",
            "",
            f"     n diseased = {self.n_diseased}",
            f"  n nondiseased = {self.n_nondiseased}",
            f"     conf level = {self.conf_level}",
            f"       n trials = {self.n_trials}",
            f"           seed = {self.seed}",
            f"          power = {self.power:.6f}  (MC SE {self.mc_se:.4f})",
        ]
        return "\n".join(lines)
