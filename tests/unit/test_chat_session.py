"""Unit tests for the chat session log"""

import pytest
from datetime import datetime
from typing import Callable
from westgate_assistant.domain import intents
from westgate_assistant.domain.chat import ChatSession
from westgate_assistant.domain.exceptions import EmptyMessageError
from westgate_assistant.domain.models import ChatMessage


def test_new_session_starts_with_greeting(fixed_clock: Callable[[], datetime]):
    chat = ChatSession(clock=fixed_clock)

    assert len(chat.messages) == 1
    greeting = chat.messages[0]
    assert greeting.id == 1
    assert greeting.is_user is False
    assert greeting.text == intents.GREETING


def test_send_appends_user_message_and_reply(fixed_clock: Callable[[], datetime]):
    chat = ChatSession(clock=fixed_clock)
    turn = chat.send("Do you sell farm land?")

    assert turn.user_message.id == 2
    assert turn.user_message.is_user is True
    assert turn.user_message.text == "Do you sell farm land?"
    assert turn.reply.id == 3
    assert turn.reply.is_user is False
    assert turn.reply.text == intents.AGRICULTURAL_LISTINGS
    assert turn.intent == "agricultural"
    assert [m.id for m in chat.messages] == [1, 2, 3]


def test_ids_increase_by_one_per_message(fixed_clock: Callable[[], datetime]):
    chat = ChatSession(clock=fixed_clock)
    chat.send("hello")
    chat.send("thanks")
    chat.send("xyzzy")

    assert [m.id for m in chat.messages] == list(range(1, 8))
    assert [m.is_user for m in chat.messages[1:]] == [True, False] * 3


def test_timestamps_come_from_clock(fixed_clock: Callable[[], datetime]):
    chat = ChatSession(clock=fixed_clock)
    turn = chat.send("hello")

    assert turn.user_message.timestamp < turn.reply.timestamp


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_blank_message_rejected(text: str, fixed_clock: Callable[[], datetime]):
    """Blank sends are refused and leave the log untouched"""
    chat = ChatSession(clock=fixed_clock)

    with pytest.raises(EmptyMessageError):
        chat.send(text)

    assert len(chat.messages) == 1


def test_reply_ignores_conversation_history(fixed_clock: Callable[[], datetime]):
    """Same utterance, same reply, regardless of what came before"""
    first = ChatSession(clock=fixed_clock)
    second = ChatSession(clock=fixed_clock)
    second.send("what is the price of a house")
    second.send("tell me about solar")

    assert first.send("where is your address").reply.text == second.send("where is your address").reply.text


def test_resume_from_existing_log(fixed_clock: Callable[[], datetime]):
    """A session rebuilt from stored messages continues the id sequence"""
    stored = [ChatMessage(id=41, text="Hi", is_user=True, timestamp=fixed_clock())]
    chat = ChatSession(messages=stored, clock=fixed_clock)

    turn = chat.send("thank you")

    assert turn.user_message.id == 42
    assert turn.reply.id == 43


def test_messages_property_is_a_copy(fixed_clock: Callable[[], datetime]):
    chat = ChatSession(clock=fixed_clock)
    chat.messages.clear()

    assert len(chat.messages) == 1
