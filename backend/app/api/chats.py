"""
Chats API - Conversation history and starting new chats

Endpoints for:
- Reading the history between a user and one contact
- Starting a chat between two existing users
"""
from typing import Optional
from fastapi import APIRouter, Depends, status

from app.schemas.chat import ChatHistoryResponse, StartChatRequest, StartChatResponse, ErrorResponse
from app.services.message_router import MessageRouter
from app.api.deps import get_message_router

router = APIRouter()


@router.get(
    "/chats/{contact}",
    response_model=ChatHistoryResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_chat_history(
    contact: str,
    phone: Optional[str] = None,
    message_router: MessageRouter = Depends(get_message_router)
):
    """Messages between `phone` and `contact`, oldest first."""
    return ChatHistoryResponse(chat=message_router.get_history(phone, contact))


@router.post(
    "/chats",
    response_model=StartChatResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def start_chat(
    req: Optional[StartChatRequest] = None,
    message_router: MessageRouter = Depends(get_message_router)
):
    """
    Link two existing users as contacts.
    Returns the caller's updated contacts and any existing history.
    """
    req = req or StartChatRequest()
    result = message_router.start_chat(req.phone, req.contact)
    return StartChatResponse(contacts=result["contacts"], chat=result["chat"])
