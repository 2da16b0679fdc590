from fastapi import APIRouter
from app.api import users
from app.api import contacts
from app.api import chats
from app.api import messages

router = APIRouter()


# Include users, contacts, chats, messages routers
router.include_router(users.router)
router.include_router(contacts.router)
router.include_router(chats.router)
router.include_router(messages.router)
