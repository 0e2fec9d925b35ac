"""SQLAlchemy ORM models for persisted chat sessions"""

import uuid
from sqlalchemy import Column, Uuid, Boolean, DateTime, Integer, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func
from westgate_assistant.utils.date_utils import utc_now

Base = declarative_base()


class ChatSessionRecord(Base):
    """One visitor conversation with the website assistant"""

    __tablename__ = "chat_session"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    messages = relationship(
        "ChatMessageRecord",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="ChatMessageRecord.sequence",
    )


class ChatMessageRecord(Base):
    """Append-only chat log entry; sequence is the per-session message id"""

    __tablename__ = "chat_message"
    __table_args__ = (UniqueConstraint("session_id", "sequence", name="uq_chat_message_sequence"),)

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    session_id = Column(Uuid(as_uuid=True), ForeignKey("chat_session.id", ondelete="CASCADE"), nullable=False, index=True)
    sequence = Column(Integer, nullable=False)
    text = Column(Text, nullable=False)
    is_user = Column(Boolean, nullable=False)
    intent = Column(Text, nullable=True)  # Only set on assistant replies
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    session = relationship("ChatSessionRecord", back_populates="messages")
