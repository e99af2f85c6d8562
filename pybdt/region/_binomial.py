"""Exact (Clopper-Pearson) confidence intervals for a binomial proportion.

Validates against: R ``binom.test()$conf.int``.
"""

from __future__ import annotations

from scipy import stats

from pybdt._common import DomainError, _check_open_unit

_VALID_ALTERNATIVES = ("two.sided", "less", "greater")


def _beta_lower(k: int, n: int, q: float) -> float:
    """Lower Clopper-Pearson limit with tail probability *q*."""
    if k == 0:
        return 0.0
    return float(stats.beta.ppf(q, k, n - k + 1))


def _beta_upper(k: int, n: int, q: float) -> float:
    """Upper Clopper-Pearson limit with tail probability *q*."""
    if k == n:
        return 1.0
    return float(stats.beta.ppf(1.0 - q, k + 1, n - k))


def exact_binom_ci(
    k: int,
    n: int,
    *,
    conf_level: float = 0.95,
    alternative: str = "two.sided",
) -> tuple[float, float]:
    """Exact binomial confidence interval for the proportion ``k / n``.

    Parameters
    ----------
    k : int
        Number of successes, ``0 <= k <= n``.
    n : int
        Number of trials (> 0).
    conf_level : float
        Confidence level in (0, 1).
    alternative : str
        ``'two.sided'`` splits ``1 - conf_level`` over both tails.
        ``'greater'`` gives a lower bound only (upper limit 1).
        ``'less'`` gives an upper bound only (lower limit 0).

    Returns
    -------
    tuple of float
        ``(lower, upper)``.

    Examples
    --------
    >>> lo, hi = exact_binom_ci(0, 10, conf_level=0.95, alternative="less")
    >>> lo
    0.0
    """
    if alternative not in _VALID_ALTERNATIVES:
        raise ValueError(
            f"alternative must be one of {_VALID_ALTERNATIVES}, got {alternative!r}"
        )
    _check_open_unit(conf_level, "conf_level")
    if n <= 0:
        raise DomainError(f"n must be > 0, got {n}")
    if not (0 <= k <= n):
        raise DomainError(f"k must be in [0, n], got k={k}, n={n}")

    alpha = 1.0 - conf_level
    if alternative == "two.sided":
        return _beta_lower(k, n, alpha / 2), _beta_upper(k, n, alpha / 2)
    elif alternative == "greater":
        return _beta_lower(k, n, alpha), 1.0
    else:  # less
        return 0.0, _beta_upper(k, n, alpha)
