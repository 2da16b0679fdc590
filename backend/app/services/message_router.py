"""
Message Router - Send, history, seen receipts and chat start

Both transports (REST and the live WebSocket channel) call into the same
router, so the send pipeline exists exactly once:

1. Link sender and recipient as contacts
2. Build the message (fresh id, current timestamp, unseen)
3. Store it in memory
4. Push it to the recipient's live connections, if any
5. Return it so the transport can acknowledge the sender

Steps 1-3 contain no await, so they run atomically on the event loop.
"""
import logging
from typing import Dict, List, Optional, Any

from app.config.constants import (
    ERR_MISSING_FIELDS,
    ERR_MISSING_CHAT_FIELDS,
    ERR_MESSAGE_NOT_FOUND,
    ERR_NOT_RECIPIENT,
    ERR_USER_NOT_FOUND,
)
from app.models.message import Message
from app.services.connection import (
    ConnectionManager,
    notify_message_received,
    notify_message_seen,
)
from app.services.exceptions import InvalidRequestError, NotFoundError, ForbiddenError
from app.services.metrics import messages_sent, messages_delivered, messages_seen
from app.services.user_store import UserStore

logger = logging.getLogger(__name__)


class MessageRouter:
    """Stores messages in memory and fans them out to live connections."""

    def __init__(self, store: UserStore, connections: ConnectionManager):
        self.store = store
        self.connections = connections
        # message id -> Message, in insertion order
        self._messages: Dict[str, Message] = {}

    async def send(
        self,
        sender: Optional[str],
        to: Optional[str],
        text: Optional[str],
        validate: bool = True,
        transport: str = "rest",
    ) -> Message:
        """
        Accept a new message and deliver it if the recipient is online.

        Raises:
            InvalidRequestError: if `validate` is set and a field is missing or empty
        """
        if validate and not (sender and to and text):
            raise InvalidRequestError(ERR_MISSING_FIELDS)

        sender = sender or ""
        to = to or ""
        text = text or ""

        self.store.add_contact(sender, to)

        message = Message(sender=sender, to=to, text=text)
        self._messages[message.id] = message
        messages_sent.labels(transport=transport).inc()
        logger.info(f"Stored message {message.id} {sender} -> {to} via {transport}")

        delivered = await notify_message_received(self.connections, message)
        if delivered:
            messages_delivered.inc(delivered)

        return message

    def get_history(self, phone: Optional[str], contact: str) -> List[Message]:
        """
        All messages between `phone` and `contact`, oldest first.

        Equal timestamps keep insertion order.
        """
        if not self.store.has_user(phone):
            raise NotFoundError(ERR_USER_NOT_FOUND)

        chat = [m for m in self._messages.values() if m.is_between(phone, contact)]
        return sorted(chat, key=lambda m: m.timestamp)

    async def mark_seen(self, message_id: str, by_phone: Optional[str]) -> Message:
        """
        Mark a message seen on behalf of its recipient and notify the sender.

        Raises:
            NotFoundError: unknown message id
            ForbiddenError: `by_phone` is not the recipient
        """
        message = self._messages.get(message_id)
        if message is None:
            raise NotFoundError(ERR_MESSAGE_NOT_FOUND)
        if message.to != by_phone:
            raise ForbiddenError(ERR_NOT_RECIPIENT)

        if not message.seen:
            message.seen = True
            messages_seen.inc()
            logger.info(f"Message {message.id} seen by {by_phone}")

        await notify_message_seen(self.connections, message, by_phone)
        return message

    def start_chat(self, phone: Optional[str], contact: Optional[str]) -> Dict[str, Any]:
        """
        Link two existing users and return the caller's contacts with their shared history.

        Raises:
            InvalidRequestError: either phone missing
            NotFoundError: either user unknown (checked before any mutation)
        """
        if not phone or not contact:
            raise InvalidRequestError(ERR_MISSING_CHAT_FIELDS)
        if not self.store.has_user(phone):
            raise NotFoundError(f"User {phone} not found")
        if not self.store.has_user(contact):
            raise NotFoundError(f"Contact {contact} not found")

        self.store.add_contact(phone, contact)
        return {
            "contacts": self.store.get_contacts(phone),
            "chat": self.get_history(phone, contact),
        }

    def get_message(self, message_id: str) -> Optional[Message]:
        return self._messages.get(message_id)

    def get_message_count(self) -> int:
        return len(self._messages)
