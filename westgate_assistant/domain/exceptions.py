"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class EmptyMessageError(DomainException):
    """Chat message has no text after trimming whitespace"""

    pass


class ChatSessionNotFoundError(DomainException):
    """Chat session does not exist"""

    pass


class ChatSequenceConflictError(DomainException):
    """Another writer took the next message id of a chat session"""

    pass
