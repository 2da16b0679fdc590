"""
Schemas Package

Pydantic models for the REST API and WebSocket events.
"""

from app.schemas.websocket_events import (
    WebSocketEventBase,
    LoginEvent,
    SendMessageEvent,
)
from app.schemas.chat import (
    SendMessageRequest,
    MarkSeenRequest,
    StartChatRequest,
    UsersResponse,
    ContactsResponse,
    ChatHistoryResponse,
    MarkSeenResponse,
    StartChatResponse,
    ErrorResponse,
)

__all__ = [
    "WebSocketEventBase",
    "LoginEvent",
    "SendMessageEvent",
    "SendMessageRequest",
    "MarkSeenRequest",
    "StartChatRequest",
    "UsersResponse",
    "ContactsResponse",
    "ChatHistoryResponse",
    "MarkSeenResponse",
    "StartChatResponse",
    "ErrorResponse",
]
