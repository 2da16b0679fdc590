from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from app.models.message import Message


# Request bodies keep every field optional so a missing one surfaces as
# InvalidRequestError (400) from the service layer rather than a 422.

class SendMessageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sender: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    text: Optional[str] = None


class MarkSeenRequest(BaseModel):
    phone: Optional[str] = None


class StartChatRequest(BaseModel):
    phone: Optional[str] = None
    contact: Optional[str] = None


class UsersResponse(BaseModel):
    users: List[str]


class ContactsResponse(BaseModel):
    contacts: List[str]


class ChatHistoryResponse(BaseModel):
    chat: List[Message]


class MarkSeenResponse(BaseModel):
    success: bool = True
    id: str


class StartChatResponse(BaseModel):
    contacts: List[str]
    chat: List[Message]


class ErrorResponse(BaseModel):
    error: str
