"""Joint confidence region for sensitivity and 1 - specificity.

Treats the diseased and non-diseased groups as two independent binomial
samples and combines one exact interval per group.  Each interval is built
at level ``sqrt(conf_level)`` so the rectangle they span covers the true
(FPF, TPF) pair with probability at least ``conf_level``.

Reference: Pepe (2003), *The Statistical Evaluation of Medical Tests for
Classification and Prediction*.
"""

from __future__ import annotations

import math

from pybdt._common import _check_open_unit
from pybdt.region._binomial import exact_binom_ci
from pybdt.region._common import ConfidenceRegionResult, ContingencyCounts


def confidence_region(
    tp: int,
    fp: int,
    fn: int,
    tn: int,
    *,
    conf_level: float = 0.95,
    one_sided: bool = True,
) -> ConfidenceRegionResult:
    """Point estimates and joint confidence region for (TPF, FPF).

    Parameters
    ----------
    tp, fp, fn, tn : int
        True positives, false positives, false negatives, true negatives.
    conf_level : float
        Joint confidence level of the rectangular region.
    one_sided : bool
        If ``True`` (default), bound TPF from below (``'greater'``) and FPF
        from above (``'less'``), the natural hypotheses for showing a test
        is at least minimally acceptable.  If ``False``, both marginal
        intervals are two-sided.

    Returns
    -------
    ConfidenceRegionResult

    Raises
    ------
    DomainError
        If ``tp + fn == 0`` or ``fp + tn == 0``, a count is negative, or
        ``conf_level`` is outside (0, 1).

    Examples
    --------
    >>> r = confidence_region(18, 1, 6, 92, one_sided=False)
    >>> r.tpf
    0.75
    """
    counts = ContingencyCounts(tp=tp, fp=fp, fn=fn, tn=tn)
    _check_open_unit(conf_level, "conf_level")

    marginal_level = math.sqrt(conf_level)
    if one_sided:
        tpf_alt, fpf_alt = "greater", "less"
    else:
        tpf_alt = fpf_alt = "two.sided"

    tpf_min, tpf_max = exact_binom_ci(
        counts.tp, counts.n_diseased, conf_level=marginal_level, alternative=tpf_alt,
    )
    fpf_min, fpf_max = exact_binom_ci(
        counts.fp, counts.n_nondiseased, conf_level=marginal_level, alternative=fpf_alt,
    )

    return ConfidenceRegionResult(
        tpf=counts.tpf,
        fpf=counts.fpf,
        tpf_min=tpf_min,
        tpf_max=tpf_max,
        fpf_min=fpf_min,
        fpf_max=fpf_max,
        conf_level=conf_level,
        one_sided=one_sided,
        counts=counts,
    )
