"""Controller: validates input, updates the model, picks what the view shows."""

from typing import Optional

from src.domain.core.exceptions import ValidationError
from src.infrastructure.logging.logger import get_logger
from src.patterns.mvc.model import UserModel
from src.patterns.mvc.view import UserView

logger = get_logger(__name__)


class UserController:
    """
    Handles user input for the user list.

    Invalid input never reaches the model; it is reported through the view
    instead of raising.
    """

    def __init__(self, model: Optional[UserModel] = None, view: Optional[UserView] = None):
        self.model = model or UserModel()
        self.view = view or UserView()

    def add_user(self, name: str, email: str) -> str:
        """Validate and store a user, returning the refreshed listing or an error."""
        try:
            name, email = self._validate(name, email)
        except ValidationError as e:
            logger.info(f"Rejected user input: {e.message}")
            return self.view.render_error(e.message)

        self.model.add_user(name, email)
        return self.show_users()

    def remove_user(self, user_id: int) -> str:
        if not self.model.remove_user(user_id):
            return self.view.render_error(f"User {user_id} not found")
        return self.show_users()

    def show_users(self) -> str:
        return self.view.render(self.model.get_users())

    @staticmethod
    def _validate(name: str, email: str):
        name = (name or "").strip()
        email = (email or "").strip()
        errors = {}
        if not name:
            errors["name"] = "Name is required"
        if "@" not in email:
            errors["email"] = "Email must contain '@'"
        if errors:
            raise ValidationError("; ".join(errors.values()), errors)
        return name, email
