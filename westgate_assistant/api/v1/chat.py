"""Website chat assistant endpoints"""

import uuid
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from westgate_assistant.api.v1.schemas import (
    ChatMessageSchema,
    ChatRequest,
    ChatResponse,
    ChatSessionResponse,
    ChatTurnResponse,
)
from westgate_assistant.api.dependencies import get_chat_repository, get_request_id
from westgate_assistant.config import settings
from westgate_assistant.domain.chat import ChatSession
from westgate_assistant.domain.exceptions import (
    ChatSequenceConflictError,
    ChatSessionNotFoundError,
    EmptyMessageError,
)
from westgate_assistant.domain.intents import match_intent
from westgate_assistant.infrastructure.database.session import get_db
from westgate_assistant.infrastructure.database.repositories import ChatSessionRepository, to_domain_message
from westgate_assistant.infrastructure.observability.metrics import chat_session_counter, record_chat_reply
from westgate_assistant.infrastructure.observability.logging import log_chat_reply

router = APIRouter()

SEND_ATTEMPTS = 2  # First try plus one retry after a message id collision


def parse_session_id(session_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(session_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid session ID format")


@router.post("/chat/respond", response_model=ChatResponse)
def respond_to_utterance(request_body: ChatRequest, request: Request):
    """Stateless reply: one utterance in, one canned response out"""
    intent, response = match_intent(request_body.text)

    record_chat_reply(intent)
    log_chat_reply(get_request_id(request), None, intent, None)

    return ChatResponse(intent=intent, response=response)


@router.post("/chat/sessions", response_model=ChatSessionResponse, status_code=201)
def open_chat_session(
    db: Session = Depends(get_db),
    repo: ChatSessionRepository = Depends(get_chat_repository),
):
    """Open a conversation; the log starts with the assistant greeting"""
    chat = ChatSession()
    db_session = repo.create_session(chat.messages)
    db.commit()

    chat_session_counter.inc()

    return ChatSessionResponse(
        session_id=str(db_session.id),
        messages=[ChatMessageSchema.from_domain(m) for m in chat.messages],
    )


@router.get("/chat/sessions/{session_id}", response_model=ChatSessionResponse)
def get_chat_session(
    session_id: str,
    repo: ChatSessionRepository = Depends(get_chat_repository),
):
    """
    Retrieve a conversation log.

    Returns:
        Messages in id order, capped to the most recent chat_history_limit entries
    """
    session_uuid = parse_session_id(session_id)

    if repo.get_session(session_uuid) is None:
        raise HTTPException(status_code=404, detail="Chat session not found")

    records = repo.get_messages(session_uuid, limit=settings.chat_history_limit)
    return ChatSessionResponse(
        session_id=str(session_uuid),
        messages=[ChatMessageSchema.from_domain(to_domain_message(r)) for r in records],
    )


@router.post("/chat/sessions/{session_id}/messages", response_model=ChatTurnResponse)
def send_chat_message(
    session_id: str,
    request_body: ChatRequest,
    request: Request,
    db: Session = Depends(get_db),
    repo: ChatSessionRepository = Depends(get_chat_repository),
):
    """
    Append a visitor message and the assistant reply to a conversation.

    Flow:
    1. Lock the session and load the tail of its log
    2. Match the utterance against the intent rules
    3. Persist the user message and the reply
    4. Return both messages

    A concurrent writer taking the same message ids is retried once against
    the refreshed log, then reported as 409.
    """
    session_uuid = parse_session_id(session_id)
    request_id = get_request_id(request)

    try:
        for attempt in range(1, SEND_ATTEMPTS + 1):
            if repo.get_session(session_uuid, lock=True) is None:
                raise ChatSessionNotFoundError(f"Chat session {session_id} not found")

            # Only the tail is needed to continue the id sequence
            last = repo.get_messages(session_uuid, limit=1)
            chat = ChatSession(messages=[to_domain_message(r) for r in last])
            turn = chat.send(request_body.text)

            try:
                repo.append_messages(session_uuid, [turn.user_message, turn.reply], intent=turn.intent)
                db.commit()
                break
            except IntegrityError:
                db.rollback()
                logging.warning(
                    f"Message id {turn.user_message.id} already taken in session {session_id}",
                    extra={"request_id": request_id, "attempt": attempt},
                )
        else:
            raise ChatSequenceConflictError(f"Chat session {session_id} is being written concurrently")

        record_chat_reply(turn.intent)
        log_chat_reply(request_id, session_id, turn.intent, turn.reply.id)

        return ChatTurnResponse(
            session_id=session_id,
            intent=turn.intent,
            user_message=ChatMessageSchema.from_domain(turn.user_message),
            reply=ChatMessageSchema.from_domain(turn.reply),
        )

    except ChatSessionNotFoundError as e:
        db.rollback()
        logging.warning(f"Chat session missing: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail="Chat session not found")

    except EmptyMessageError as e:
        db.rollback()
        logging.warning(f"Rejected chat message: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except ChatSequenceConflictError as e:
        db.rollback()
        logging.warning(f"Chat write conflict: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=409, detail="Chat session was updated concurrently, please resend")

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
