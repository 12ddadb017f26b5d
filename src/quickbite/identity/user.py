"""User aggregate: a customer account or a restaurant administrator."""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, Integer, String
from werkzeug.security import check_password_hash, generate_password_hash

from quickbite.domain import quickbite


@quickbite.aggregate
class User:
    """A person who can hold a cart and place orders.

    Usernames are unique without regard to case; the registration handler
    enforces this because the check spans every User in the store.
    """

    id: Integer(identifier=True)
    username: String(required=True, max_length=150)
    password_hash: String(required=True, max_length=255)
    name: String(max_length=255)
    email: String(max_length=254)
    is_admin: Boolean(default=False)
    registered_at: DateTime()

    @classmethod
    def register(cls, user_id, username, password, name=None, email=None, is_admin=False):
        from quickbite.identity.events import UserRegistered

        now = datetime.now(UTC)
        user = cls(
            id=user_id,
            username=username.strip(),
            password_hash=generate_password_hash(password),
            name=name,
            email=email,
            is_admin=bool(is_admin),
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user_id,
                username=user.username,
                is_admin=user.is_admin,
                registered_at=now,
            )
        )
        return user

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    def owns(self, user_id) -> bool:
        return self.is_admin or self.id == user_id
