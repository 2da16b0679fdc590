"""
Session management module.

Provides the ChatSession that drives a live WebSocket connection.
"""
from .orchestrator import ChatSession

__all__ = ["ChatSession"]
