"""Model: owns user data and tells listeners when it changes."""

from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class User(BaseModel):
    """A stored user record."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(..., min_length=1)
    email: str


ChangeListener = Callable[[List[User]], None]


class UserModel:
    """In-memory user storage. Knows nothing about presentation or input."""

    def __init__(self):
        self._users: Dict[int, User] = {}
        self._next_id = 1
        self._listeners: List[ChangeListener] = []

    def on_change(self, listener: ChangeListener) -> None:
        """Register a callback receiving the full user list after each change."""
        self._listeners.append(listener)

    def add_user(self, name: str, email: str) -> User:
        user = User(id=self._next_id, name=name, email=email)
        self._users[user.id] = user
        self._next_id += 1
        logger.debug(f"Stored user {user.id}")
        self._changed()
        return user

    def remove_user(self, user_id: int) -> bool:
        if self._users.pop(user_id, None) is None:
            return False
        self._changed()
        return True

    def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_users(self) -> List[User]:
        return list(self._users.values())

    def count(self) -> int:
        return len(self._users)

    def _changed(self) -> None:
        users = self.get_users()
        for listener in list(self._listeners):
            listener(users)
