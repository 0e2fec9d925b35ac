"""Unit tests for the rule-based intent responder"""

import pytest
from westgate_assistant.domain import intents
from westgate_assistant.domain.intents import FALLBACK_RESPONSE, RULES, match_intent, respond
from westgate_assistant.domain.models import IntentRule


def test_price_rule_wins_over_agricultural_rule():
    """Price is checked before the agricultural listings rule"""
    response = respond("what is the price for agricultural land")

    assert response == intents.AGRICULTURAL_PRICING
    assert match_intent("what is the price for agricultural land")[0] == "pricing"


@pytest.mark.parametrize(
    "utterance,expected",
    [
        ("How much does a house cost?", intents.RESIDENTIAL_PRICING),
        ("price of a home in Vigan", intents.RESIDENTIAL_PRICING),
        ("commercial lot price", intents.COMMERCIAL_PRICING),
        ("PRICE OF FARM LOTS", intents.AGRICULTURAL_PRICING),
        ("what is your budget range", intents.GENERAL_PRICING),
    ],
)
def test_price_sub_branches(utterance: str, expected: str):
    assert respond(utterance) == expected


def test_substring_matching():
    """Substring containment: 'farm' matches inside 'farming'"""
    assert respond("I am farming rice") == intents.AGRICULTURAL_LISTINGS


@pytest.mark.parametrize(
    "utterance,intent",
    [
        ("Tell me about solar energy", "solar"),
        ("Do you have retail space for my business?", "commercial"),
        ("I need help with a title transfer", "documentation"),
        ("Looking for a villa", "residential"),
        ("where are you located", "location"),
        ("Can I get your phone number?", "contact"),
        ("what services do you offer", "services"),
        ("Are you accredited?", "certification"),
        ("what is the ROI", "investment"),
        ("hello there", "greeting"),
        ("thank you", "thanks"),
    ],
)
def test_top_level_intents(utterance: str, intent: str):
    assert match_intent(utterance)[0] == intent


def test_first_match_wins_in_rule_order():
    """Documentation ("title") is listed before services ("help")"""
    assert respond("help me with the title") == intents.DOCUMENTATION_SERVICES


@pytest.mark.parametrize("utterance", ["xyzzy plugh", "", "   ", "12345"])
def test_fallback_is_total(utterance: str):
    """Anything without a keyword gets the fixed fallback"""
    assert respond(utterance) == FALLBACK_RESPONSE
    assert match_intent(utterance)[0] == "fallback"


def test_fallback_points_to_contact_channels():
    assert FALLBACK_RESPONSE
    assert intents.CONTACT_PHONE in FALLBACK_RESPONSE


def test_custom_rule_table():
    """Rule tables are plain data and can be swapped"""
    rules = [IntentRule("parking", ("parking",), lambda text: "Free parking available")]

    assert match_intent("is there parking?", rules) == ("parking", "Free parking available")
    assert match_intent("hello", rules) == ("fallback", FALLBACK_RESPONSE)


def test_rule_keywords_are_lowercase():
    for rule in RULES:
        assert all(keyword == keyword.lower() for keyword in rule.keywords)
