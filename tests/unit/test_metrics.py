"""Unit tests for metric label helpers"""

import pytest
from westgate_assistant.domain.quotes import LOAN_TERM_OPTIONS
from westgate_assistant.infrastructure.observability.metrics import term_label


@pytest.mark.parametrize("term_years", LOAN_TERM_OPTIONS)
def test_term_label_offered_terms(term_years: int):
    assert term_label(term_years) == str(term_years)


@pytest.mark.parametrize("term_years", [7, 987_654_321, -5])
def test_term_label_buckets_unlisted_terms(term_years: int):
    assert term_label(term_years) == "other"
