"""
Connection Notifications

Functions for pushing chat events to connected users:
- New message for the recipient
- Seen receipt for the sender
"""
from typing import TYPE_CHECKING
import logging

from app.config.constants import EVENT_RECEIVE_MESSAGE, EVENT_MESSAGE_SEEN
from app.models.message import Message

if TYPE_CHECKING:
    from .manager import ConnectionManager

logger = logging.getLogger(__name__)


async def notify_message_received(manager: "ConnectionManager", message: Message) -> int:
    """
    Push a new message to all live connections of its recipient.

    Args:
        manager: Connection registry
        message: The stored message

    Returns:
        Number of connections the message reached
    """
    delivered = await manager.send_to_phone(message.to, {
        "type": EVENT_RECEIVE_MESSAGE,
        "message": message.to_wire(),
    })
    if delivered:
        logger.info(f"Delivered message {message.id} to {message.to} ({delivered} connections)")
    return delivered


async def notify_message_seen(manager: "ConnectionManager", message: Message, by: str) -> int:
    """
    Tell the sender of a message that its recipient has seen it.

    Returns:
        Number of sender connections notified
    """
    return await manager.send_to_phone(message.sender, {
        "type": EVENT_MESSAGE_SEEN,
        "id": message.id,
        "by": by,
    })
