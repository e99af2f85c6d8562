"""Tests for the Phase 3 comparative sample size formula."""

import math

import pytest
from scipy.stats import norm

from pybdt import DomainError
from pybdt.samplesize import SampleSizeResult, sample_size_phase3


def _formula(rate_a, rate_b, delta0, alpha, beta, clamp=True):
    z = norm.ppf(math.sqrt(1 - beta)) + norm.ppf(math.sqrt(1 - alpha))
    delta1 = rate_a / rate_b
    xppf = (delta1 + 1) * rate_b - 1
    if clamp:
        xppf = max(0.0, xppf)
    return (
        (z / math.log(delta1 / delta0)) ** 2
        * ((delta1 + 1) * rate_b - 2 * xppf)
        / (delta1 * rate_b ** 2)
    )


@pytest.fixture
def published_kwargs():
    return dict(
        delta0_t=1, delta0_f=10,
        tpf_a=0.9, fpf_a=0.01,
        tpf_b=0.75, fpf_b=0.01,
        alpha=0.05, beta=0.2,
    )


class TestSampleSizePhase3:
    """Closed-form sample sizes."""

    def test_returns_result(self):
        assert isinstance(sample_size_phase3(), SampleSizeResult)

    def test_published_example(self, published_kwargs):
        r = sample_size_phase3(**published_kwargs)
        assert r.n_diseased == 161
        assert r.n_nondiseased == 388

    def test_exact_values_match_formula(self, published_kwargs):
        r = sample_size_phase3(**published_kwargs)
        assert r.n_diseased_exact == pytest.approx(_formula(0.9, 0.75, 1, 0.05, 0.2))
        assert r.n_nondiseased_exact == pytest.approx(_formula(0.01, 0.01, 10, 0.05, 0.2))

    def test_defaults_match_formula(self):
        r = sample_size_phase3()
        assert r.n_diseased == math.ceil(_formula(0.8, 0.75, 1, 0.05, 0.1))
        assert r.n_nondiseased == math.ceil(_formula(0.01, 0.01, 1.5, 0.05, 0.1))

    def test_negative_both_positive_fraction_clamped(self):
        """FPF_A + FPF_B - 1 < 0 is replaced by zero."""
        r = sample_size_phase3(fpf_a=0.02, fpf_b=0.04, delta0_f=1.0)
        delta1 = 0.5
        z = norm.ppf(math.sqrt(0.9)) + norm.ppf(math.sqrt(0.95))
        expected = (z / math.log(delta1)) ** 2 * ((delta1 + 1) * 0.04) / (delta1 * 0.04 ** 2)
        assert r.n_nondiseased_exact == pytest.approx(expected)

    def test_tpf_both_positive_fraction_not_clamped(self):
        """TPF_A + TPF_B - 1 < 0 enters the TPF arm unchanged."""
        r = sample_size_phase3(tpf_a=0.3, tpf_b=0.4, delta0_t=1.0)
        expected = _formula(0.3, 0.4, 1.0, 0.05, 0.1, clamp=False)
        assert r.n_diseased_exact == pytest.approx(expected)
        assert r.n_diseased == 1684
        assert r.n_diseased_exact > _formula(0.3, 0.4, 1.0, 0.05, 0.1)

    def test_ceiling_property(self, published_kwargs):
        r = sample_size_phase3(**published_kwargs)
        assert r.n_diseased >= r.n_diseased_exact > r.n_diseased - 1
        assert r.n_nondiseased >= r.n_nondiseased_exact > r.n_nondiseased - 1

    def test_larger_effect_needs_fewer(self):
        r1 = sample_size_phase3(tpf_a=0.85)
        r2 = sample_size_phase3(tpf_a=0.9)
        assert r2.n_diseased < r1.n_diseased

    def test_summary(self, published_kwargs):
        s = sample_size_phase3(**published_kwargs).summary()
        assert "n diseased = 161" in s
        assert "Phase 3" in s


class TestPhase3Validation:
    """Input validation."""

    def test_ratio_equals_null_tpf(self):
        with pytest.raises(DomainError, match="null ratio"):
            sample_size_phase3(tpf_a=0.75, tpf_b=0.75, delta0_t=1.0)

    def test_ratio_equals_null_up_to_rounding(self):
        """0.3 / 0.1 is 2.9999999999999996 in floating point."""
        with pytest.raises(DomainError, match="null ratio"):
            sample_size_phase3(tpf_a=0.3, tpf_b=0.1, delta0_t=3.0)

    def test_ratio_equals_null_fpf(self):
        with pytest.raises(DomainError, match="null ratio"):
            sample_size_phase3(fpf_a=0.02, fpf_b=0.01, delta0_f=2.0)

    def test_zero_tpf_b(self):
        with pytest.raises(DomainError, match="tpf_b must be > 0"):
            sample_size_phase3(tpf_b=0.0)

    def test_zero_fpf_b(self):
        with pytest.raises(DomainError, match="fpf_b must be > 0"):
            sample_size_phase3(fpf_b=0.0)

    def test_nonpositive_delta0(self):
        with pytest.raises(DomainError, match="delta0"):
            sample_size_phase3(delta0_t=0.0)

    def test_rate_out_of_range(self):
        with pytest.raises(DomainError, match="fpf_a"):
            sample_size_phase3(fpf_a=-0.1)
