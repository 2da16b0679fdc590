"""
Connection Management Module

Exports the live connection registry and its connection handle.
"""
from .models import LiveConnection
from .manager import ConnectionManager
from .notifications import notify_message_received, notify_message_seen

__all__ = [
    "LiveConnection",
    "ConnectionManager",
    "notify_message_received",
    "notify_message_seen",
]
