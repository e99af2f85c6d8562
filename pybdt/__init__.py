"""
pybdt: study design tools for binary diagnostic tests.

Joint confidence regions for sensitivity and 1 - specificity, Phase 2 and
Phase 3 sample size formulas, and Monte Carlo power simulation, following
Pepe (2003), *The Statistical Evaluation of Medical Tests for
Classification and Prediction*.

Usage:
    from pybdt import region, samplesize, simulation

Logging uses loguru and is disabled for this package by default; enable it
with ``loguru.logger.enable("pybdt")``.
"""

__version__ = "0.1.0"

from loguru import logger

from pybdt._common import DomainError
from pybdt import region
from pybdt import samplesize
from pybdt import simulation

logger.disable("pybdt")

__all__ = [
    "__version__",
    "DomainError",
    "region",
    "samplesize",
    "simulation",
]
