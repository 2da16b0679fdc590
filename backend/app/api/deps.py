from fastapi import Request, WebSocket
import logging

from app.config.settings import Settings
from app.services.connection import ConnectionManager
from app.services.message_router import MessageRouter
from app.services.user_store import UserStore

logger = logging.getLogger(__name__)


# Services are created by the application lifespan and live on app.state.

def get_user_store(request: Request) -> UserStore:
    """
    Dependency for the application's user store.
    """
    return request.app.state.user_store


def get_message_router(request: Request) -> MessageRouter:
    """
    Dependency for the application's message router.
    """
    return request.app.state.message_router


def get_ws_services(websocket: WebSocket) -> tuple[UserStore, MessageRouter, ConnectionManager, Settings]:
    """
    WebSocket counterpart: everything a live session needs, taken from app.state.
    """
    state = websocket.app.state
    return state.user_store, state.message_router, state.connection_manager, state.settings
