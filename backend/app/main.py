"""
Phone Chat Backend - Main Application

This is the entry point for the FastAPI application.
It handles:
- REST API endpoints (users, contacts, chats, messages)
- WebSocket connections for live message delivery
- Loading the user store at startup
"""
from contextlib import asynccontextmanager
import logging
from datetime import datetime, UTC
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.api import router as api_router
from app.api.errors import register_error_handlers
from app.api.websocket import router as ws_router
from app.config.constants import APP_NAME, APP_VERSION
from app.config.settings import Settings, settings as default_settings
from app.services.connection import ConnectionManager
from app.services.message_router import MessageRouter
from app.services.metrics import start_metrics_server
from app.services.user_store import UserStore

# Configure logging
logging.basicConfig(level=default_settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Builds the store, router and connection registry, and owns them
    for the lifetime of the app.
    """
    # === STARTUP ===
    settings: Settings = app.state.settings
    logger.info(f"🚀 Starting {APP_NAME}...")

    store = UserStore.load(settings.USERS_FILE)
    logger.info(f"✅ User store loaded from {settings.USERS_FILE}")

    connections = ConnectionManager()
    app.state.user_store = store
    app.state.connection_manager = connections
    app.state.message_router = MessageRouter(store, connections)

    if settings.METRICS_ENABLED:
        start_metrics_server(port=settings.METRICS_PORT)

    yield  # Application runs here

    # === SHUTDOWN ===
    logger.info(f"🛑 Shutting down ({connections.get_total_connections()} live connections open)")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build a FastAPI application bound to `settings`."""
    settings = settings or default_settings

    app = FastAPI(
        title=APP_NAME,
        description="Phone-number chat with live delivery and mutual contacts",
        version=APP_VERSION,
        lifespan=lifespan
    )
    app.state.settings = settings

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include REST API routes
    app.include_router(api_router)

    # Include WebSocket routes
    app.include_router(ws_router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": APP_NAME,
            "version": APP_VERSION,
            "status": "running"
        }

    @app.get("/health")
    async def health(request: Request):
        """Health check endpoint."""
        state = request.app.state
        return {
            "status": "ok",
            "timestamp": datetime.now(UTC).isoformat(),
            "users": len(state.user_store),
            "messages": state.message_router.get_message_count(),
            "connections": state.connection_manager.get_total_connections()
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_settings.API_HOST, port=default_settings.API_PORT)
