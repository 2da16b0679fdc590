"""
Users API - Discover registered phones
"""
from fastapi import APIRouter, Depends

from app.schemas.chat import UsersResponse
from app.services.user_store import UserStore
from app.api.deps import get_user_store

router = APIRouter()


@router.get("/users", response_model=UsersResponse)
async def list_users(store: UserStore = Depends(get_user_store)):
    """List every known phone (for starting a new chat)."""
    return UsersResponse(users=store.list_users())
