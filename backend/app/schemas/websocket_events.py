"""
WebSocket Event Schemas

Pydantic models for type-safe inbound live-channel events.
"""

from typing import Optional, Literal
from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# WebSocket Event Models
# =============================================================================

class WebSocketEventBase(BaseModel):
    """Base model for all WebSocket events."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: str


class LoginEvent(WebSocketEventBase):
    """Register this connection under a phone."""
    type: Literal["login"] = "login"
    phone: Optional[str] = None


class SendMessageEvent(WebSocketEventBase):
    """Send a text message. Field presence is checked by the router."""
    type: Literal["sendMessage"] = "sendMessage"
    sender: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    text: Optional[str] = None
