"""Pydantic schemas for API request/response validation"""

import math
from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from westgate_assistant.domain.models import AmortizationInput, ChatMessage
from westgate_assistant.utils.date_utils import format_clock_time


def coerce_number(value: Any) -> float:
    """Parse a form value the way the calculator inputs do: anything unparseable becomes 0"""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return 0.0
    return number if math.isfinite(number) else 0.0


class MortgageForm(BaseModel):
    """Request body for POST /v1/mortgage/quote; raw calculator form fields"""

    property_price: float = 0.0
    down_payment: float = 0.0
    term_years: int = Field(0, description="Whole years; fractional input is truncated, so \"0.5\" becomes 0 (no result)")
    annual_rate_percent: float = 0.0

    @field_validator("property_price", "down_payment", "annual_rate_percent", mode="before")
    @classmethod
    def _coerce_decimal(cls, value: Any) -> float:
        return coerce_number(value)

    @field_validator("term_years", mode="before")
    @classmethod
    def _coerce_term(cls, value: Any) -> int:
        """Terms are whole years: "15.9" becomes 15 and "0.5" becomes 0"""
        return int(coerce_number(value))

    def to_input(self) -> AmortizationInput:
        return AmortizationInput(
            property_price=self.property_price,
            down_payment=self.down_payment,
            term_years=self.term_years,
            annual_rate_percent=self.annual_rate_percent,
        )


class AmortizationResultSchema(BaseModel):
    monthly_payment: float
    total_payment: float
    total_interest: float
    loan_to_value_percent: float


class MortgageQuoteResponse(BaseModel):
    """Response for POST /v1/mortgage/quote; result is null when inputs cannot be computed"""

    inputs: MortgageForm
    result: Optional[AmortizationResultSchema] = None
    outcome: str
    display: Dict[str, str]


class MortgageOptionsResponse(BaseModel):
    """Response for GET /v1/mortgage/options"""

    defaults: MortgageForm
    loan_term_options: List[int]
    market_rate_hint: str


class ChatRequest(BaseModel):
    """Request body for chat endpoints"""

    text: str = Field(..., max_length=2000, description="Visitor utterance")


class ChatResponse(BaseModel):
    """Response for POST /v1/chat/respond"""

    intent: str
    response: str


class ChatMessageSchema(BaseModel):
    """Single message in a chat log"""

    id: int
    text: str
    is_user: bool
    timestamp: datetime
    display_time: str

    @classmethod
    def from_domain(cls, message: ChatMessage) -> "ChatMessageSchema":
        return cls(
            id=message.id,
            text=message.text,
            is_user=message.is_user,
            timestamp=message.timestamp,
            display_time=format_clock_time(message.timestamp),
        )


class ChatSessionResponse(BaseModel):
    """Response for POST /v1/chat/sessions and GET /v1/chat/sessions/{session_id}"""

    session_id: str
    messages: List[ChatMessageSchema]


class ChatTurnResponse(BaseModel):
    """Response for POST /v1/chat/sessions/{session_id}/messages"""

    session_id: str
    intent: str
    user_message: ChatMessageSchema
    reply: ChatMessageSchema
