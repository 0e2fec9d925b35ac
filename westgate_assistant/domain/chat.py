"""Chat session log for the website assistant"""

from datetime import datetime
from typing import Callable, List, Optional
from westgate_assistant.domain.exceptions import EmptyMessageError
from westgate_assistant.domain.intents import GREETING, match_intent
from westgate_assistant.domain.models import ChatMessage, ChatTurn
from westgate_assistant.utils.date_utils import utc_now


class ChatSession:
    """
    Append-only message log for one visitor conversation.

    Requirements:
    - A fresh session opens with the assistant greeting as message 1
    - Every message (user or assistant) takes the next sequential id
    - Replies depend only on the latest utterance, never on earlier turns
    - Blank input is rejected and leaves the log untouched
    """

    def __init__(
        self,
        messages: Optional[List[ChatMessage]] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._clock = clock
        if messages is None:
            messages = [ChatMessage(id=1, text=GREETING, is_user=False, timestamp=clock())]
        self._messages = list(messages)

    @property
    def messages(self) -> List[ChatMessage]:
        return list(self._messages)

    @property
    def next_id(self) -> int:
        return self._messages[-1].id + 1 if self._messages else 1

    def _append(self, text: str, is_user: bool) -> ChatMessage:
        message = ChatMessage(id=self.next_id, text=text, is_user=is_user, timestamp=self._clock())
        self._messages.append(message)
        return message

    def send(self, text: str) -> ChatTurn:
        """
        Record a user utterance and the assistant's reply to it.

        Raises:
            EmptyMessageError: text is empty or whitespace only
        """
        if not text.strip():
            raise EmptyMessageError("Message text is empty")

        intent, response = match_intent(text)
        user_message = self._append(text, is_user=True)
        reply = self._append(response, is_user=False)
        return ChatTurn(user_message=user_message, reply=reply, intent=intent)
