"""
WebSocket Router - Live chat channel endpoint

This is the thin routing layer that delegates to ChatSession
for all live connection handling.
"""
from fastapi import APIRouter, WebSocket

from app.api.deps import get_ws_services
from app.services.session import ChatSession

router = APIRouter()


@router.websocket("/ws")
async def ws_endpoint(websocket: WebSocket):
    """
    WebSocket endpoint for the live chat channel.

    Inbound events (JSON text frames):
        - login {phone}: register this connection, reply loginSuccess {contacts}
        - sendMessage {from, to, text}: send, reply messageSent {message}
        - ping: reply pong

    Outbound pushes:
        - receiveMessage {message}: a message addressed to this phone
        - messageSeen {id, by}: the recipient saw a message this phone sent
    """
    store, message_router, connections, settings = get_ws_services(websocket)
    session = ChatSession(
        websocket=websocket,
        store=store,
        router=message_router,
        connections=connections,
        validate_messages=settings.VALIDATE_LIVE_MESSAGES,
    )
    await session.run()
