"""
Monte Carlo power simulation for Phase 2 binary diagnostic test designs.

Checks a closed-form sample size by simulating repeated studies and
counting how often the one-sided joint confidence region rejects H0.
"""

from pybdt.simulation._common import SimulatedPowerResult
from pybdt.simulation._power import simulate_power, simulate_trial

__all__ = [
    "SimulatedPowerResult",
    "simulate_power",
    "simulate_trial",
]
