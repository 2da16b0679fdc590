"""
User Store - Phone -> User mapping backed by a flat JSON file

Encapsulates:
- Loading the users file once at startup
- Creating users on first reference
- Maintaining symmetric, duplicate-free contact lists
- Rewriting the whole file after every mutation

The file is written to a temporary sibling and renamed over the original,
so a crash mid-write leaves the previous version intact.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from app.config.constants import ERR_USER_NOT_FOUND, USERS_FILE_INDENT
from app.models.user import User
from app.services.exceptions import NotFoundError, StoreCorruptedError

logger = logging.getLogger(__name__)


class UserStore:
    """Owns every known user and persists them to a single JSON file."""

    def __init__(self, path: Union[str, Path], users: Optional[Dict[str, User]] = None):
        self.path = Path(path)
        self._users: Dict[str, User] = users if users is not None else {}

    # === Lifecycle ===

    @classmethod
    def load(cls, path: Union[str, Path]) -> "UserStore":
        """
        Build a store from the users file.

        A missing or empty file yields an empty store. Anything that is not a
        JSON object of `{phone: {phone, contacts}}` raises StoreCorruptedError.
        """
        path = Path(path)
        if not path.exists():
            logger.info(f"Users file {path} not found, starting with an empty store")
            return cls(path)

        raw = path.read_text(encoding="utf-8")
        if not raw.strip():
            return cls(path)

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreCorruptedError(f"Users file {path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise StoreCorruptedError(f"Users file {path} must hold a JSON object")

        users: Dict[str, User] = {}
        for phone, record in data.items():
            if not isinstance(record, dict):
                raise StoreCorruptedError(f"Users file {path}: entry {phone!r} is not an object")
            try:
                users[phone] = User(phone=record.get("phone", phone), contacts=record.get("contacts", []))
            except ValidationError as e:
                raise StoreCorruptedError(f"Users file {path}: entry {phone!r} is invalid: {e}") from e

        logger.info(f"Loaded {len(users)} users from {path}")
        return cls(path, users)

    def save(self) -> None:
        """Rewrite the users file with the full mapping."""
        payload = {phone: user.model_dump() for phone, user in self._users.items()}
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=USERS_FILE_INDENT)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.debug(f"Saved {len(payload)} users to {self.path}")

    # === Operations ===

    def ensure_user(self, phone: str) -> User:
        """Return the user for `phone`, creating and persisting an empty one if unknown."""
        user = self._users.get(phone)
        if user is None:
            user = User(phone=phone)
            self._users[phone] = user
            self.save()
            logger.info(f"Created user {phone}")
        return user

    def add_contact(self, user_phone: str, contact_phone: str) -> None:
        """
        Make two phones each other's contacts.

        Idempotent: when both sides already list each other nothing is
        written. Creating either user persists on its own.
        """
        user = self.ensure_user(user_phone)
        contact = self.ensure_user(contact_phone)

        changed = user.add_contact(contact_phone)
        changed = contact.add_contact(user_phone) or changed

        if changed:
            self.save()
            logger.info(f"Linked contacts {user_phone} <-> {contact_phone}")

    def list_users(self) -> List[str]:
        return list(self._users.keys())

    def get_contacts(self, phone: Optional[str]) -> List[str]:
        """Ordered contact list of `phone`. Raises NotFoundError if unknown."""
        user = self._users.get(phone) if phone else None
        if user is None:
            raise NotFoundError(ERR_USER_NOT_FOUND)
        return list(user.contacts)

    def has_user(self, phone: Optional[str]) -> bool:
        return bool(phone) and phone in self._users

    def __len__(self) -> int:
        return len(self._users)
