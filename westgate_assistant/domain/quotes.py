"""Mortgage quote assembly - engine result plus display figures for the calculator"""

from dataclasses import dataclass
from typing import Optional, Tuple
from westgate_assistant.domain.amortization import compute
from westgate_assistant.domain.models import AmortizationInput, AmortizationResult
from westgate_assistant.utils.formatting import down_payment_percent, format_currency, format_percent

LOAN_TERM_OPTIONS: Tuple[int, ...] = (5, 10, 15, 20, 25, 30)

DEFAULT_INPUT = AmortizationInput(
    property_price=5_000_000,
    down_payment=1_000_000,
    term_years=15,
    annual_rate_percent=8.5,
)

MARKET_RATE_HINT = "7.5% - 12%"
RECOMMENDED_DOWN_PAYMENT_HINT = "Recommended: 20% minimum"
PLACEHOLDER = "Enter property details to calculate your mortgage"

GOOD_LTV_THRESHOLD = 80.0  # percent


@dataclass(frozen=True)
class MortgageQuote:
    """Everything the calculator panel shows for one set of inputs"""

    inputs: AmortizationInput
    result: Optional[AmortizationResult]
    outcome: str  # "computed" | "no_loan" | "no_result"
    display: dict


def ltv_advice(loan_to_value_percent: float) -> str:
    if loan_to_value_percent <= GOOD_LTV_THRESHOLD:
        return "Good LTV ratio"
    return "Consider larger down payment"


def classify(result: Optional[AmortizationResult]) -> str:
    if result is None:
        return "no_result"
    if result.monthly_payment == 0:
        return "no_loan"
    return "computed"


def build_quote(inputs: AmortizationInput) -> MortgageQuote:
    """
    Run the amortization engine and format its figures for display.

    A missing result never raises; the display carries the placeholder text
    instead of amounts.
    """
    result = compute(inputs)
    down_share = down_payment_percent(inputs.property_price, inputs.down_payment)

    display = {
        "down_payment_share": (
            f"{format_percent(down_share)} of property price"
            if down_share is not None
            else RECOMMENDED_DOWN_PAYMENT_HINT
        ),
    }

    if result is None:
        display["placeholder"] = PLACEHOLDER
    else:
        display.update(
            {
                "monthly_payment": format_currency(result.monthly_payment),
                "total_payment": format_currency(result.total_payment),
                "total_interest": format_currency(result.total_interest),
                "loan_to_value": format_percent(result.loan_to_value_percent),
                "ltv_advice": ltv_advice(result.loan_to_value_percent),
                "principal_amount": format_currency(inputs.property_price - inputs.down_payment),
                "down_payment": format_currency(inputs.down_payment),
            }
        )

    return MortgageQuote(inputs=inputs, result=result, outcome=classify(result), display=display)
