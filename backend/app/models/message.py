"""
Message Model - A single text message between two phones

Messages live only in memory. Everything except `seen` is fixed at creation;
`seen` flips to True once the recipient reads it.
"""
import time
import uuid

from pydantic import BaseModel, ConfigDict, Field


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


class Message(BaseModel):
    """Message model, serialized with the wire key `from` for the sender."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    sender: str = Field(alias="from")
    to: str
    text: str
    timestamp: int = Field(default_factory=now_ms)
    seen: bool = False

    def is_between(self, phone: str, contact: str) -> bool:
        """True if this message was exchanged between the two phones, either direction."""
        return (
            (self.sender == phone and self.to == contact)
            or (self.sender == contact and self.to == phone)
        )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)

    def __repr__(self):
        return f"<Message(id={self.id}, from={self.sender}, to={self.to}, seen={self.seen})>"
