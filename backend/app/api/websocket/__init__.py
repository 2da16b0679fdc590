"""
WebSocket API module.

Provides the WebSocket router for the live chat channel.
"""
from .router import router

__all__ = ["router"]
