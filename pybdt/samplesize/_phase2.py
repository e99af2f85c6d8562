"""Phase 2 sample size: one test against minimally acceptable TPF/FPF.

H0: TPF <= TPF0 or FPF >= FPF0   vs   H1: TPF > TPF0 and FPF < FPF0.
The two groups are sized separately with the one-sample normal
approximation for a binomial proportion.

Reference: Pepe (2003), *The Statistical Evaluation of Medical Tests for
Classification and Prediction*.
"""

from __future__ import annotations

import math

from pybdt._common import DomainError, _check_probability
from pybdt.samplesize._common import (
    SampleSizeResult,
    _ceil_n,
    _check_error_rates,
    _z_sqrt,
)


def _single_arm_n(r0: float, r1: float, z_alpha: float, z_beta: float) -> float:
    """Continuous n to distinguish rate *r1* from null rate *r0*."""
    numer = z_alpha * math.sqrt(r0 * (1.0 - r0)) + z_beta * math.sqrt(r1 * (1.0 - r1))
    return numer ** 2 / (r1 - r0) ** 2


def sample_size_phase2(
    *,
    tpf0: float = 0.75,
    fpf0: float = 0.2,
    tpf1: float = 0.9,
    fpf1: float = 0.05,
    alpha: float = 0.1,
    beta: float = 0.1,
) -> SampleSizeResult:
    """Sample sizes for a single-arm sensitivity/specificity study.

    Parameters
    ----------
    tpf0, fpf0 : float
        Minimally acceptable sensitivity and maximally acceptable
        1 - specificity (the null boundary).
    tpf1, fpf1 : float
        Sensitivity and 1 - specificity the test is expected to achieve.
    alpha : float
        Significance level of the joint test.
    beta : float
        1 - power of the joint test.

    Returns
    -------
    SampleSizeResult

    Raises
    ------
    DomainError
        If ``tpf1 == tpf0`` or ``fpf1 == fpf0`` (nothing to discriminate),
        or a rate or error level is out of range.

    Examples
    --------
    >>> r = sample_size_phase2()
    >>> r.n_diseased, r.n_nondiseased
    (64, 46)
    """
    for value, name in ((tpf0, "tpf0"), (fpf0, "fpf0"), (tpf1, "tpf1"), (fpf1, "fpf1")):
        _check_probability(value, name)
    _check_error_rates(alpha, beta)
    if math.isclose(tpf1, tpf0, rel_tol=1e-9, abs_tol=1e-12):
        raise DomainError(f"tpf1 must differ from tpf0 (both {tpf0})")
    if math.isclose(fpf1, fpf0, rel_tol=1e-9, abs_tol=1e-12):
        raise DomainError(f"fpf1 must differ from fpf0 (both {fpf0})")

    z_alpha = _z_sqrt(alpha)
    z_beta = _z_sqrt(beta)

    n_dis = _single_arm_n(tpf0, tpf1, z_alpha, z_beta)
    n_non = _single_arm_n(fpf0, fpf1, z_alpha, z_beta)

    return SampleSizeResult(
        n_diseased=_ceil_n(n_dis),
        n_nondiseased=_ceil_n(n_non),
        n_diseased_exact=n_dis,
        n_nondiseased_exact=n_non,
        alpha=alpha,
        beta=beta,
        method="Phase 2 binary diagnostic test sample size calculation",
        note=f"H0: TPF <= {tpf0} or FPF >= {fpf0}; H1 target TPF = {tpf1}, FPF = {fpf1}",
    )
