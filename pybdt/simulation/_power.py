"""Monte Carlo validation of Phase 2 sample sizes.

Each trial draws test outcomes for the diseased group with probability
``tpf1`` and for the non-diseased group with probability ``fpf1``, builds
the one-sided joint confidence region, and counts a rejection of H0 when the
region clears both thresholds.

Draw order is fixed: within a trial all diseased outcomes precede all
non-diseased outcomes, and trials run in sequence on one generator, so a
given seed always reproduces the same estimate.
"""

from __future__ import annotations

import numpy as np
from loguru import logger

from pybdt._common import _check_count, _check_open_unit, _check_probability
from pybdt.region import confidence_region
from pybdt.simulation._common import SimulatedPowerResult


def simulate_trial(
    rng: np.random.Generator,
    *,
    n_diseased: int,
    n_nondiseased: int,
    tpf0: float,
    fpf0: float,
    tpf1: float,
    fpf1: float,
    conf_level: float,
) -> bool:
    """Run one simulated Phase 2 study; return ``True`` if H0 is rejected."""
    diseased_pos = rng.random(n_diseased) < tpf1
    nondiseased_pos = rng.random(n_nondiseased) < fpf1

    tp = int(diseased_pos.sum())
    fp = int(nondiseased_pos.sum())
    cr = confidence_region(
        tp=tp,
        fp=fp,
        fn=n_diseased - tp,
        tn=n_nondiseased - fp,
        conf_level=conf_level,
        one_sided=True,
    )
    return cr.tpf_min > tpf0 and cr.fpf_max < fpf0


def simulate_power(
    *,
    n_diseased: int = 64,
    n_nondiseased: int = 46,
    tpf0: float = 0.75,
    fpf0: float = 0.2,
    tpf1: float = 0.9,
    fpf1: float = 0.05,
    conf_level: float = 0.95,
    n_trials: int = 500,
    seed: int | None = 185,
    rng: np.random.Generator | None = None,
) -> SimulatedPowerResult:
    """Estimate the power of a Phase 2 design by simulation.

    Parameters
    ----------
    n_diseased, n_nondiseased : int
        Group sizes, typically from :func:`pybdt.samplesize.sample_size_phase2`.
    tpf0, fpf0 : float
        Null thresholds the confidence region has to clear.
    tpf1, fpf1 : float
        True rates used to generate the data.
    conf_level : float
        Joint confidence level of the one-sided region.
    n_trials : int
        Number of simulated studies.
    seed : int or None
        Seed for a fresh ``numpy.random.default_rng``.  Ignored when *rng*
        is given.
    rng : numpy Generator or None
        Caller-owned generator; lets several runs share one stream.

    Returns
    -------
    SimulatedPowerResult

    Examples
    --------
    >>> r1 = simulate_power(seed=185)
    >>> r2 = simulate_power(seed=185)
    >>> r1.power == r2.power
    True
    """
    _check_count(n_diseased, "n_diseased", minimum=1)
    _check_count(n_nondiseased, "n_nondiseased", minimum=1)
    _check_count(n_trials, "n_trials", minimum=1)
    for value, name in ((tpf0, "tpf0"), (fpf0, "fpf0"), (tpf1, "tpf1"), (fpf1, "fpf1")):
        _check_probability(value, name)
    _check_open_unit(conf_level, "conf_level")

    if rng is None:
        rng = np.random.default_rng(seed)
    else:
        seed = None

    logger.debug(
        "Simulating {} trials: n_diseased={}, n_nondiseased={}, "
        "TPF {} vs {}, FPF {} vs {}, conf_level={}, seed={}",
        n_trials, n_diseased, n_nondiseased, tpf1, tpf0, fpf1, fpf0, conf_level, seed,
    )

    n_success = 0
    for _ in range(n_trials):
        if simulate_trial(
            rng,
            n_diseased=n_diseased,
            n_nondiseased=n_nondiseased,
            tpf0=tpf0,
            fpf0=fpf0,
            tpf1=tpf1,
            fpf1=fpf1,
            conf_level=conf_level,
        ):
            n_success += 1

    power = n_success / n_trials
    logger.debug("Power from {} simulations = {}", n_trials, power)

    return SimulatedPowerResult(
        power=power,
        n_success=n_success,
        n_trials=n_trials,
        n_diseased=n_diseased,
        n_nondiseased=n_nondiseased,
        conf_level=conf_level,
        seed=seed,
    )
