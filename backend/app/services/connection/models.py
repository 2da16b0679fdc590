"""
Connection Models

Data classes representing live WebSocket connections.
"""
from datetime import datetime, UTC
from typing import Dict, Any, Optional
import logging

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class LiveConnection:
    """Represents a single client WebSocket, optionally logged in as a phone."""

    def __init__(self, websocket: WebSocket):
        self.websocket = websocket
        self.phone: Optional[str] = None
        self.connected_at = datetime.now(UTC)

    async def send_json(self, data: Dict[str, Any]) -> bool:
        """Send JSON message to this connection."""
        try:
            await self.websocket.send_json(data)
            return True
        except Exception as e:
            logger.error(f"Error sending JSON to {self.phone}: {e}")
            return False

    def __repr__(self):
        return f"<LiveConnection(phone={self.phone}, connected_at={self.connected_at.isoformat()})>"
