"""Pydantic models shared by the chat widget, contact form and API.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Message: Immutable chat transcript entry
    - ChatRequest / ChatResponse: Completion proxy payloads
    - ContactSubmission: Contact form payload
    - SessionStatus / FormStatus: UI status flags
"""

from src.models.schemas import (
    ChatRequest,
    ChatResponse,
    ContactSubmission,
    FormStatus,
    Message,
    Role,
    ServiceCategory,
    SessionStatus,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ContactSubmission",
    "FormStatus",
    "Message",
    "Role",
    "ServiceCategory",
    "SessionStatus",
]
