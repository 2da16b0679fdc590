import json
import logging
from typing import Dict, Any

from fastapi import WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from app.config.constants import (
    EVENT_LOGIN,
    EVENT_SEND_MESSAGE,
    EVENT_PING,
    EVENT_LOGIN_SUCCESS,
    EVENT_LOGIN_ERROR,
    EVENT_MESSAGE_SENT,
    EVENT_ERROR,
    EVENT_PONG,
    ERR_MISSING_PHONE,
)
from app.schemas.websocket_events import LoginEvent, SendMessageEvent
from app.services.connection import ConnectionManager, LiveConnection
from app.services.exceptions import ChatServiceError
from app.services.message_router import MessageRouter
from app.services.metrics import live_connections_gauge
from app.services.user_store import UserStore

logger = logging.getLogger(__name__)


class ChatSession:
    """
    Drives one live WebSocket connection.
    Handles:
    - Connection acceptance
    - login / sendMessage / ping events
    - Registry cleanup on disconnect
    """

    def __init__(
        self,
        websocket: WebSocket,
        store: UserStore,
        router: MessageRouter,
        connections: ConnectionManager,
        validate_messages: bool = True,
    ):
        self.websocket = websocket
        self.store = store
        self.router = router
        self.connections = connections
        self.validate_messages = validate_messages
        self.conn = LiveConnection(websocket)

    async def run(self):
        """
        Main entry point: accept, loop over frames, always clean up.
        """
        await self.websocket.accept()
        live_connections_gauge.inc()
        logger.info("[ChatSession] Connection accepted")

        try:
            while True:
                message = await self.websocket.receive()

                if message["type"] == "websocket.disconnect":
                    raise WebSocketDisconnect(message.get("code", 1000))

                if message.get("text") is not None:
                    await self._handle_text_message(message["text"])
                else:
                    logger.warning(f"[ChatSession] Ignoring binary frame from {self.conn.phone}")

        except WebSocketDisconnect:
            logger.info(f"[ChatSession] Client {self.conn.phone or '<anonymous>'} disconnected")

        finally:
            self._cleanup()

    async def _handle_text_message(self, text_data: str):
        """
        Dispatch a JSON event frame.
        """
        try:
            data = json.loads(text_data)
        except json.JSONDecodeError:
            logger.warning("[ChatSession] Invalid JSON received")
            return

        if not isinstance(data, dict):
            logger.warning("[ChatSession] Event frame is not a JSON object")
            return

        msg_type = data.get("type")

        if msg_type == EVENT_LOGIN:
            await self._handle_login(data)

        elif msg_type == EVENT_SEND_MESSAGE:
            await self._handle_send_message(data)

        elif msg_type == EVENT_PING:
            await self.conn.send_json({"type": EVENT_PONG})

        else:
            logger.warning(f"[ChatSession] Unknown message type: {msg_type}")

    async def _handle_login(self, data: Dict[str, Any]):
        try:
            phone = LoginEvent.model_validate(data).phone
        except ValidationError as e:
            logger.warning(f"[ChatSession] Malformed login event: {e}")
            phone = None

        if not phone:
            await self.conn.send_json({"type": EVENT_LOGIN_ERROR, "error": ERR_MISSING_PHONE})
            return

        user = self.store.ensure_user(phone)
        self.connections.register(self.conn, phone)
        logger.info(f"[ChatSession] {phone} logged in")

        await self.conn.send_json({
            "type": EVENT_LOGIN_SUCCESS,
            "contacts": list(user.contacts),
        })

    async def _handle_send_message(self, data: Dict[str, Any]):
        try:
            event = SendMessageEvent.model_validate(data)
        except ValidationError as e:
            logger.warning(f"[ChatSession] Malformed sendMessage event: {e}")
            await self.conn.send_json({"type": EVENT_ERROR, "error": "Invalid sendMessage event"})
            return

        try:
            message = await self.router.send(
                event.sender,
                event.to,
                event.text,
                validate=self.validate_messages,
                transport="live",
            )
        except ChatServiceError as e:
            await self.conn.send_json({"type": EVENT_ERROR, "error": e.message})
            return

        await self.conn.send_json({
            "type": EVENT_MESSAGE_SENT,
            "message": message.to_wire(),
        })

    def _cleanup(self):
        """
        Drop the connection from the registry.
        """
        self.connections.disconnect(self.conn)
        live_connections_gauge.dec()
