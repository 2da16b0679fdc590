"""
Models Package

Data models for the chat backend:
1. User - phone-identified user with a contact list (persisted to the users file)
2. Message - text message between two phones (kept in memory)
"""

from .user import User
from .message import Message, now_ms

__all__ = [
    "User",
    "Message",
    "now_ms",
]
