"""
Sample size calculations for binary diagnostic test studies.

Phase 2: a single test against minimally acceptable sensitivity and
specificity.  Phase 3: a new test against a standard one, with effect
sizes on the relative-fraction scale.
"""

from pybdt.samplesize._common import SampleSizeResult
from pybdt.samplesize._phase2 import sample_size_phase2
from pybdt.samplesize._phase3 import sample_size_phase3

__all__ = [
    "SampleSizeResult",
    "sample_size_phase2",
    "sample_size_phase3",
]
