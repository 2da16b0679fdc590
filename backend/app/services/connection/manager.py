"""
Connection Manager

Registry of live WebSocket connections keyed by phone:
- Login registration and disconnect cleanup
- Delivery to every connection of a phone
"""
from typing import Dict, List, Set, Any
import logging

from .models import LiveConnection

logger = logging.getLogger(__name__)


class ConnectionManager:
    """
    Maps each logged-in phone to the set of its open connections.

    Consulted only to pick delivery targets; it never holds history.
    A phone may be logged in from several clients at once.
    """

    def __init__(self):
        # phone -> {LiveConnection}
        self._connections: Dict[str, Set[LiveConnection]] = {}

    # === Core Connection Methods ===

    def register(self, conn: LiveConnection, phone: str) -> None:
        """Register a connection under `phone`, moving it if it was logged in as someone else."""
        if conn.phone is not None and conn.phone != phone:
            self._discard(conn)

        conn.phone = phone
        self._connections.setdefault(phone, set()).add(conn)
        logger.info(f"Phone {phone} registered a connection ({len(self._connections[phone])} active)")

    def disconnect(self, conn: LiveConnection) -> None:
        """Forget a connection. Safe to call for connections that never logged in."""
        if conn.phone is None:
            return
        phone = conn.phone
        self._discard(conn)
        logger.info(f"Phone {phone} dropped a connection")

    def _discard(self, conn: LiveConnection) -> None:
        handles = self._connections.get(conn.phone)
        if handles is None:
            return
        handles.discard(conn)
        if not handles:
            del self._connections[conn.phone]

    # === Delivery ===

    async def send_to_phone(self, phone: str, message: Dict[str, Any]) -> int:
        """Send a JSON message to every connection of `phone`. Returns how many succeeded."""
        connections = list(self._connections.get(phone, ()))
        if not connections:
            logger.debug(f"Phone {phone} has no live connection, skipping {message.get('type')}")
            return 0

        sent_count = 0
        for conn in connections:
            if await conn.send_json(message):
                sent_count += 1
        return sent_count

    # === Query Methods ===

    def get_connections(self, phone: str) -> List[LiveConnection]:
        return list(self._connections.get(phone, ()))

    def is_online(self, phone: str) -> bool:
        return phone in self._connections

    def get_online_phones(self) -> List[str]:
        return list(self._connections.keys())

    def get_total_connections(self) -> int:
        return sum(len(handles) for handles in self._connections.values())
