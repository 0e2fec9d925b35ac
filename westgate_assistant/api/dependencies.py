"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from westgate_assistant.infrastructure.database.session import get_db
from westgate_assistant.infrastructure.database.repositories import ChatSessionRepository


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_chat_repository(db: Session = Depends(get_db)) -> ChatSessionRepository:
    """Provide chat session repository bound to the request's database session"""
    return ChatSessionRepository(db)
