"""
Contacts API - Read a user's contact list
"""
from typing import Optional
from fastapi import APIRouter, Depends

from app.schemas.chat import ContactsResponse, ErrorResponse
from app.services.user_store import UserStore
from app.api.deps import get_user_store

router = APIRouter()


@router.get("/contacts", response_model=ContactsResponse, responses={404: {"model": ErrorResponse}})
async def get_contacts(
    phone: Optional[str] = None,
    store: UserStore = Depends(get_user_store)
):
    """
    Contacts of `phone`, in the order they were added.
    Unknown or missing phone -> 404.
    """
    return ContactsResponse(contacts=store.get_contacts(phone))
