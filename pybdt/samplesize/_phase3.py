"""Phase 3 sample size: comparing a new test A with a standard test B.

Effect sizes are relative fractions rTPF = TPF_A / TPF_B and
rFPF = FPF_A / FPF_B, tested on the log scale against null boundaries
delta0_T and delta0_F.  Both tests are applied to every subject (paired
design); the variance of log rTPF depends on the fraction of diseased
subjects positive on both tests, approximated here by
``TPF_A + TPF_B - 1`` (and ``max(0, FPF_A + FPF_B - 1)`` for the FPF arm).

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


def _paired_arm_n(
    rate_a: float,
    rate_b: float,
    delta0: float,
    z_sum: float,
    name: str,
    *,
    clamp_both_pos: bool,
) -> float:
    """Continuous n for one arm (TPF or FPF) of the comparative design.

    With *clamp_both_pos* a negative fraction positive on both tests is
    replaced by zero; the published method does this for the FPF arm only.
    """
    if rate_b == 0:
        raise DomainError(f"{name}_b must be > 0 (relative fraction undefined)")
    if delta0 <= 0:
        raise DomainError(f"delta0 for {name} must be > 0, got {delta0}")

    delta1 = rate_a / rate_b
    if math.isclose(delta1, delta0, rel_tol=1e-9):
        raise DomainError(
            f"{name}_a / {name}_b = {delta1} equals the null ratio {delta0}; "
            "log(delta1 / delta0) is zero"
        )
    if delta1 == 0:
        raise DomainError(f"{name}_a must be > 0 (log relative fraction undefined)")

    both_pos = (delta1 + 1.0) * rate_b - 1.0
    if clamp_both_pos:
        both_pos = max(0.0, both_pos)

    return (
        (z_sum / math.log(delta1 / delta0)) ** 2
        * ((delta1 + 1.0) * rate_b - 2.0 * both_pos)
        / (delta1 * rate_b ** 2)
    )


def sample_size_phase3(
    *,
    delta0_t: float = 1.0,
    delta0_f: float = 1.5,
    tpf_a: float = 0.8,
    fpf_a: float = 0.01,
    tpf_b: float = 0.75,
    fpf_b: float = 0.01,
    alpha: float = 0.05,
    beta: float = 0.1,
) -> SampleSizeResult:
    """Sample sizes for a paired comparison of two binary diagnostic tests.

    Tests H0: rTPF <= delta0_t or rFPF >= delta0_f against the alternative
    that the new test A has relative sensitivity above ``delta0_t`` and
    relative false positive fraction below ``delta0_f``.

    Parameters
    ----------
    delta0_t, delta0_f : float
        Null boundaries for rTPF and rFPF (> 0).
    tpf_a, fpf_a : float
        Sensitivity and 1 - specificity anticipated for the new test.
    tpf_b, fpf_b : float
        Sensitivity and 1 - specificity of the standard test (> 0).
    alpha : float
        Significance level.
    beta : float
        1 - power.

    Returns
    -------
    SampleSizeResult

    Raises
    ------
    DomainError
        If ``tpf_a / tpf_b == delta0_t`` or ``fpf_a / fpf_b == delta0_f``,
        if ``tpf_b`` or ``fpf_b`` is zero, or an input is out of range.

    Examples
    --------
    >>> r = sample_size_phase3(delta0_t=1, delta0_f=10, tpf_a=0.9,
    ...                        tpf_b=0.75, alpha=0.05, beta=0.2)
    >>> r.n_diseased, r.n_nondiseased
    (161, 388)
    """
    for value, name in (
        (tpf_a, "tpf_a"), (fpf_a, "fpf_a"), (tpf_b, "tpf_b"), (fpf_b, "fpf_b"),
    ):
        _check_probability(value, name)
    _check_error_rates(alpha, beta)

    z_sum = _z_sqrt(beta) + _z_sqrt(alpha)

    n_dis = _paired_arm_n(tpf_a, tpf_b, delta0_t, z_sum, "tpf", clamp_both_pos=False)
    n_non = _paired_arm_n(fpf_a, fpf_b, delta0_f, z_sum, "fpf", clamp_both_pos=True)

    return SampleSizeResult(
        n_diseased=_ceil_n(n_dis),
        n_nondiseased=_ceil_n(n_non),
        n_diseased_exact=n_dis,
        n_nondiseased_exact=n_non,
        alpha=alpha,
        beta=beta,
        method="Phase 3 comparative binary diagnostic test sample size calculation",
        note=(
            f"rTPF = {tpf_a / tpf_b:.4g} vs null {delta0_t}; "
            f"rFPF = {fpf_a / fpf_b:.4g} vs null {delta0_f}"
        ),
    )
