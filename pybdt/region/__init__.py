"""
Joint confidence regions for sensitivity and 1 - specificity.

Exact (Clopper-Pearson) marginal intervals for TPF and FPF, combined into a
rectangular region with Bonferroni-style square-root level splitting, plus
an optional matplotlib rendering in ROC space.

Validates against: R ``binom.test()``.
"""

from pybdt.region._common import ContingencyCounts, ConfidenceRegionResult
from pybdt.region._binomial import exact_binom_ci
from pybdt.region._region import confidence_region
from pybdt.region._plot import plot_confidence_region

__all__ = [
    "ContingencyCounts",
    "ConfidenceRegionResult",
    "exact_binom_ci",
    "confidence_region",
    "plot_confidence_region",
]
