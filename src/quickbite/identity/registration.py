"""User registration: command, handler and lookups."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, String

from quickbite.domain import quickbite
from quickbite.identity.user import User
from quickbite.store.entity_store import fetch, find_by, next_id, save

logger = structlog.get_logger(__name__)


@quickbite.command(part_of="User")
class RegisterUser:
    """Create a user account. Usernames are compared case-insensitively."""

    username: String(required=True, max_length=150)
    password: String(required=True, max_length=128)
    name: String(max_length=255)
    email: String(max_length=254)
    is_admin: Boolean(default=False)


def find_user_by_username(username: str) -> User | None:
    wanted = username.strip().lower()
    return next((user for user in find_by(User) if user.username.lower() == wanted), None)


@quickbite.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        if find_user_by_username(command.username) is not None:
            raise ValidationError({"username": ["Username already exists"]})

        user = User.register(
            user_id=next_id("user"),
            username=command.username,
            password=command.password,
            name=command.name,
            email=command.email,
            is_admin=command.is_admin,
        )
        save(user)
        logger.info("User registered", user_id=user.id, is_admin=user.is_admin)
        return user.id


def get_user(user_id) -> User:
    """Load a user by id. Raises ``ObjectNotFoundError`` when absent."""
    return fetch(User, user_id)
