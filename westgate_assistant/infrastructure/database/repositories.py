"""Data access layer for chat sessions"""

import uuid
from typing import List, Optional
from sqlalchemy.orm import Session
from westgate_assistant.infrastructure.database.models import ChatSessionRecord, ChatMessageRecord
from westgate_assistant.domain.models import ChatMessage


def to_domain_message(record: ChatMessageRecord) -> ChatMessage:
    return ChatMessage(
        id=record.sequence,
        text=record.text,
        is_user=record.is_user,
        timestamp=record.created_at,
    )


class ChatSessionRepository:
    """Repository for chat sessions and their message logs"""

    def __init__(self, db: Session):
        self.db = db

    def create_session(self, messages: List[ChatMessage]) -> ChatSessionRecord:
        """Persist a new session with its opening messages"""
        db_session = ChatSessionRecord()
        self.db.add(db_session)
        self.db.flush()  # Get ID without committing

        self.append_messages(db_session.id, messages)
        return db_session

    def get_session(self, session_id: uuid.UUID, lock: bool = False) -> Optional[ChatSessionRecord]:
        """Fetch a session; lock=True holds the row until commit so appends are serialized"""
        query = self.db.query(ChatSessionRecord).filter(ChatSessionRecord.id == session_id)
        if lock:
            # Rendered as SELECT ... FOR UPDATE on Postgres; SQLite ignores it
            query = query.with_for_update()
        return query.first()

    def get_messages(self, session_id: uuid.UUID, limit: int | None = None) -> List[ChatMessageRecord]:
        """Fetch messages in log order, keeping the most recent `limit` entries"""
        query = (
            self.db.query(ChatMessageRecord)
            .filter(ChatMessageRecord.session_id == session_id)
            .order_by(ChatMessageRecord.sequence.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return list(reversed(query.all()))

    def append_messages(
        self,
        session_id: uuid.UUID,
        messages: List[ChatMessage],
        intent: str | None = None,
    ) -> List[ChatMessageRecord]:
        """Append messages to a session log; the intent is stored on assistant replies"""
        records = []
        for message in messages:
            record = ChatMessageRecord(
                session_id=session_id,
                sequence=message.id,
                text=message.text,
                is_user=message.is_user,
                intent=None if message.is_user else intent,
                created_at=message.timestamp,
            )
            self.db.add(record)
            records.append(record)

        self.db.flush()
        return records
