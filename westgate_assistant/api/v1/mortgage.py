"""Mortgage calculator endpoints"""

import time
from fastapi import APIRouter, Request

from westgate_assistant.api.v1.schemas import (
    AmortizationResultSchema,
    MortgageForm,
    MortgageOptionsResponse,
    MortgageQuoteResponse,
)
from westgate_assistant.api.dependencies import get_request_id
from westgate_assistant.domain.quotes import DEFAULT_INPUT, LOAN_TERM_OPTIONS, MARKET_RATE_HINT, build_quote
from westgate_assistant.infrastructure.observability.metrics import record_quote
from westgate_assistant.infrastructure.observability.logging import log_quote

router = APIRouter()


@router.get("/mortgage/options", response_model=MortgageOptionsResponse)
def get_mortgage_options():
    """Initial calculator values and the loan terms offered in the form"""
    return MortgageOptionsResponse(
        defaults=MortgageForm(
            property_price=DEFAULT_INPUT.property_price,
            down_payment=DEFAULT_INPUT.down_payment,
            term_years=DEFAULT_INPUT.term_years,
            annual_rate_percent=DEFAULT_INPUT.annual_rate_percent,
        ),
        loan_term_options=list(LOAN_TERM_OPTIONS),
        market_rate_hint=MARKET_RATE_HINT,
    )


@router.post("/mortgage/quote", response_model=MortgageQuoteResponse)
def create_mortgage_quote(form: MortgageForm, request: Request):
    """
    Compute monthly payment, totals and loan-to-value for the calculator form.

    Called on every input change. Inputs that cannot be computed (zero price,
    zero term, negative rate) return 200 with a null result and the
    placeholder text, never an error.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    quote = build_quote(form.to_input())

    duration_ms = (time.time() - start_time) * 1000
    record_quote(quote.outcome, form.term_years)
    log_quote(request_id, quote.outcome, form.term_years, duration_ms)

    result = None
    if quote.result is not None:
        result = AmortizationResultSchema(
            monthly_payment=quote.result.monthly_payment,
            total_payment=quote.result.total_payment,
            total_interest=quote.result.total_interest,
            loan_to_value_percent=quote.result.loan_to_value_percent,
        )

    return MortgageQuoteResponse(
        inputs=form,
        result=result,
        outcome=quote.outcome,
        display=quote.display,
    )
