"""Unit tests for the amortization engine"""

import math
import pytest
from westgate_assistant.domain.amortization import annuity_payment, compute
from westgate_assistant.domain.models import AmortizationInput


def test_compute_known_value(default_loan: AmortizationInput):
    """5M price, 1M down, 15 years at 8.5% → ≈ 39,390/month, 80% LTV"""
    result = compute(default_loan)

    assert result is not None
    assert result.monthly_payment == pytest.approx(39_390, abs=5)
    assert result.loan_to_value_percent == pytest.approx(80.0)


def test_compute_totals_follow_monthly_payment(default_loan: AmortizationInput):
    """Total payment includes down payment; interest excludes principal"""
    result = compute(default_loan)

    paid = result.monthly_payment * 180
    assert result.total_payment == pytest.approx(paid + 1_000_000)
    assert result.total_interest == pytest.approx(paid - 4_000_000)
    assert result.total_interest > 0


def test_compute_is_deterministic(default_loan: AmortizationInput):
    assert compute(default_loan) == compute(default_loan)


@pytest.mark.parametrize("down_payment", [5_000_000, 6_500_000])
def test_compute_down_payment_covers_price(down_payment: float):
    """No loan needed: nothing to amortize"""
    result = compute(AmortizationInput(5_000_000, down_payment, 15, 8.5))

    assert result.monthly_payment == 0
    assert result.total_interest == 0
    assert result.total_payment == down_payment
    assert result.loan_to_value_percent == 0


@pytest.mark.parametrize(
    "inputs",
    [
        AmortizationInput(0, 1_000_000, 15, 8.5),
        AmortizationInput(-100, 0, 15, 8.5),
        AmortizationInput(5_000_000, 1_000_000, 0, 8.5),
        AmortizationInput(5_000_000, 1_000_000, -5, 8.5),
        AmortizationInput(5_000_000, 1_000_000, 15, -0.5),
    ],
)
def test_compute_rejects_invalid_preconditions(inputs: AmortizationInput):
    """Invalid inputs produce no result rather than an exception or NaN"""
    assert compute(inputs) is None


def test_compute_zero_rate_is_linear():
    """Zero interest splits the loan evenly across payments"""
    result = compute(AmortizationInput(1_500_000, 300_000, 10, 0))

    assert result.monthly_payment == pytest.approx(10_000)
    assert result.total_interest == 0
    assert result.total_payment == pytest.approx(1_500_000)
    assert result.loan_to_value_percent == pytest.approx(80.0)


def test_compute_without_down_payment_is_full_ltv():
    result = compute(AmortizationInput(2_000_000, 0, 20, 7.5))

    assert result.loan_to_value_percent == pytest.approx(100.0)
    assert result.monthly_payment > 2_000_000 / 240


def test_annuity_payment_matches_closed_form():
    """1,000 over 12 months at 1%/month → 88.85"""
    assert annuity_payment(1_000, 0.01, 12) == pytest.approx(88.8488, abs=1e-3)


def test_annuity_payment_survives_overflow():
    """Extremely long terms approach an interest-only payment instead of raising"""
    payment = annuity_payment(1_000_000, 0.01, 10**9)

    assert math.isfinite(payment)
    assert payment == pytest.approx(10_000)


@pytest.mark.parametrize("annual_rate_percent", [1e-15, 1e-300, 5e-324])
def test_compute_rate_below_float_resolution(annual_rate_percent: float):
    """Rates too small to change 1 + r amortize linearly instead of dividing by zero"""
    result = compute(AmortizationInput(5_000_000, 1_000_000, 15, annual_rate_percent))

    assert result is not None
    assert result.monthly_payment == pytest.approx(4_000_000 / 180)
    assert result.total_interest == pytest.approx(0, abs=1e-3)


def test_annuity_payment_tiny_rate_matches_linear_limit():
    assert annuity_payment(1_200_000, 1e-12, 120) == pytest.approx(10_000, rel=1e-9)


@pytest.mark.parametrize(
    "inputs",
    [
        AmortizationInput(1e308, 0, 30, 8.5),
        AmortizationInput(1.7e308, 1e300, 30, 1e308),
        AmortizationInput(1e308, 0, 10**9, 8.5),
    ],
)
def test_compute_overflowing_figures_have_no_result(inputs: AmortizationInput):
    """Figures that would overflow to inf return the no-result sentinel"""
    assert compute(inputs) is None


def test_compute_large_finite_loan_is_finite():
    result = compute(AmortizationInput(1e200, 0, 30, 8.5))

    assert result is not None
    assert all(
        math.isfinite(v)
        for v in (result.monthly_payment, result.total_payment, result.total_interest, result.loan_to_value_percent)
    )
