"""
Messages API - Send messages and mark them seen
"""
from typing import Optional
from fastapi import APIRouter, Depends, status

from app.models.message import Message
from app.schemas.chat import SendMessageRequest, MarkSeenRequest, MarkSeenResponse, ErrorResponse
from app.services.message_router import MessageRouter
from app.api.deps import get_message_router

router = APIRouter()


@router.post(
    "/messages",
    response_model=Message,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def send_message(
    req: Optional[SendMessageRequest] = None,
    message_router: MessageRouter = Depends(get_message_router)
):
    """
    Send a message. Pushed live to the recipient if they are connected;
    otherwise only kept for history.
    """
    req = req or SendMessageRequest()
    return await message_router.send(req.sender, req.to, req.text, transport="rest")


@router.post(
    "/messages/{message_id}/seen",
    response_model=MarkSeenResponse,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def mark_seen(
    message_id: str,
    req: Optional[MarkSeenRequest] = None,
    message_router: MessageRouter = Depends(get_message_router)
):
    """
    Recipient marks a message seen; the sender is notified if connected.
    The message is looked up before the caller, so an unknown id is 404 even without a body.
    """
    message = await message_router.mark_seen(message_id, req.phone if req else None)
    return MarkSeenResponse(id=message.id)
