"""View: turns user data into text. Holds no state of its own."""

from typing import List

from src.patterns.mvc.model import User


class UserView:
    """Plain-text presentation of users."""

    empty_message = "No users"

    def render(self, users: List[User]) -> str:
        if not users:
            return self.empty_message
        lines = [f"Users ({len(users)}):"]
        lines.extend(f"  {self.render_user(user)}" for user in users)
        return "\n".join(lines)

    def render_user(self, user: User) -> str:
        return f"#{user.id} {user.name} <{user.email}>"

    def render_error(self, message: str) -> str:
        return f"Error: {message}"
