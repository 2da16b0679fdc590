"""
User Model - Phone-identified user with a contact list

Key Fields:
- `phone`: Sole identifier, also the key of the persisted users file
- `contacts`: Phones this user has chatted with, in insertion order, no duplicates
"""
from typing import List

from pydantic import BaseModel, Field


class User(BaseModel):
    """User record as stored in the users file."""
    phone: str
    contacts: List[str] = Field(default_factory=list)

    def add_contact(self, phone: str) -> bool:
        """Append a contact if absent. Returns True if the list changed."""
        if phone in self.contacts:
            return False
        self.contacts.append(phone)
        return True

    def __repr__(self):
        return f"<User(phone={self.phone}, contacts={len(self.contacts)})>"
