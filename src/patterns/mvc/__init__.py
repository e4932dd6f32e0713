"""MVC pattern: model stores, view presents, controller handles input."""

from .controller import UserController
from .model import User, UserModel
from .view import UserView

__all__ = ["User", "UserModel", "UserView", "UserController"]
