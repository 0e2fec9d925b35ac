"""Domain models - pure Python dataclasses for calculator and chat entities"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Tuple


@dataclass(frozen=True)
class AmortizationInput:
    """Loan parameters supplied by the mortgage calculator form"""

    property_price: float
    down_payment: float
    term_years: int
    annual_rate_percent: float  # 8.5 means 8.5% per year


@dataclass(frozen=True)
class AmortizationResult:
    """Fixed-rate monthly payment and derived summary figures"""

    monthly_payment: float
    total_payment: float  # all payments plus down payment
    total_interest: float
    loan_to_value_percent: float


@dataclass(frozen=True)
class ChatMessage:
    """Single entry in a chat session log"""

    id: int
    text: str
    is_user: bool
    timestamp: datetime


@dataclass(frozen=True)
class ChatTurn:
    """User message plus the assistant reply it produced"""

    user_message: ChatMessage
    reply: ChatMessage
    intent: str


@dataclass(frozen=True)
class IntentRule:
    """Keyword-triggered mapping from an utterance to a canned response"""

    name: str
    keywords: Tuple[str, ...]
    response: Callable[[str], str]

    def matches(self, normalized: str) -> bool:
        return any(keyword in normalized for keyword in self.keywords)
