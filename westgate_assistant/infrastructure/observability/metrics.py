"""Prometheus metrics for calculator usage, chat intents, and request latency"""

from prometheus_client import Counter, Histogram
from westgate_assistant.domain.quotes import LOAN_TERM_OPTIONS

# Calculator metrics
quote_counter = Counter(
    "westgate_mortgage_quote_total",
    "Mortgage quotes computed",
    ["outcome"],  # computed | no_loan | no_result
)

loan_term_counter = Counter(
    "westgate_mortgage_term_total",
    "Mortgage quotes by loan term",
    ["term_years"],  # one of LOAN_TERM_OPTIONS, or "other"
)

# Chat metrics
chat_reply_counter = Counter(
    "westgate_chat_reply_total",
    "Chat replies sent by matched intent",
    ["intent"],
)

chat_session_counter = Counter(
    "westgate_chat_session_total",
    "Chat sessions opened",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_quote(outcome: str, term_years: int) -> None:
    """Record calculator usage for monitoring which inputs visitors try"""
    quote_counter.labels(outcome=outcome).inc()
    if outcome != "no_result":
        loan_term_counter.labels(term_years=term_label(term_years)).inc()


def record_chat_reply(intent: str) -> None:
    chat_reply_counter.labels(intent=intent).inc()


def term_label(term_years: int) -> str:
    """Terms outside the form's options share one label to keep cardinality bounded"""
    return str(term_years) if term_years in LOAN_TERM_OPTIONS else "other"
