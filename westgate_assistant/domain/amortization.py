"""Amortization engine - fixed-rate, fixed-term mortgage payment calculator"""

import math
from typing import Optional
from westgate_assistant.domain.models import AmortizationInput, AmortizationResult


def annuity_payment(loan_amount: float, monthly_rate: float, num_payments: int) -> float:
    """
    Standard annuity payment: P * r(1+r)^n / ((1+r)^n - 1).

    (1+r)^n - 1 is evaluated as expm1(n * log1p(r)) so rates too small to
    move 1 + r still give a non-zero denominator. When it is exactly zero
    (zero rate, or a rate below float resolution) the payment falls back to
    linear amortization (loan_amount / num_payments).
    """
    if monthly_rate == 0:
        return loan_amount / num_payments

    try:
        growth_minus_one = math.expm1(num_payments * math.log1p(monthly_rate))
    except OverflowError:
        # Limit as n grows without bound: interest-only payment
        return loan_amount * monthly_rate
    if growth_minus_one == 0:
        return loan_amount / num_payments
    return loan_amount * monthly_rate * (growth_minus_one + 1) / growth_minus_one


def compute(inputs: AmortizationInput) -> Optional[AmortizationResult]:
    """
    Compute the monthly payment and summary figures for a loan.

    Rules:
    - Non-positive price, non-positive term or negative rate: no result (None)
    - Down payment covering the price: nothing to amortize, all zeros except
      total_payment which equals the down payment
    - Otherwise: annuity payment over term_years * 12 months
    - Any figure overflowing to inf or nan: no result (None)

    Example:
        5,000,000 price, 1,000,000 down, 15 years, 8.5%
        loan 4,000,000 over 180 months at 0.70833%/month → ≈ 39,390/month, LTV 80%
    """
    if inputs.property_price <= 0 or inputs.term_years <= 0 or inputs.annual_rate_percent < 0:
        return None

    loan_amount = inputs.property_price - inputs.down_payment
    monthly_rate = inputs.annual_rate_percent / 100 / 12
    num_payments = inputs.term_years * 12

    if loan_amount <= 0:
        return AmortizationResult(
            monthly_payment=0.0,
            total_payment=inputs.down_payment,
            total_interest=0.0,
            loan_to_value_percent=0.0,
        )

    monthly_payment = annuity_payment(loan_amount, monthly_rate, num_payments)
    paid_over_term = monthly_payment * num_payments

    result = AmortizationResult(
        monthly_payment=monthly_payment,
        total_payment=paid_over_term + inputs.down_payment,
        # Zero-rate division can leave a -1e-10 residue
        total_interest=max(paid_over_term - loan_amount, 0.0),
        loan_to_value_percent=(loan_amount / inputs.property_price) * 100,
    )
    if not _is_finite(result):
        return None
    return result


def _is_finite(result: AmortizationResult) -> bool:
    """Figures near the float ceiling overflow to inf; those inputs have no result"""
    return all(
        math.isfinite(value)
        for value in (
            result.monthly_payment,
            result.total_payment,
            result.total_interest,
            result.loan_to_value_percent,
        )
    )
