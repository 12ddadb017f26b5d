"""Domain events for the User aggregate."""

from protean.fields import Boolean, DateTime, Integer, String

from quickbite.domain import quickbite


@quickbite.event(part_of="User")
class UserRegistered:
    __version__ = 1

    user_id: Integer(required=True)
    username: String(required=True)
    is_admin: Boolean(default=False)
    registered_at: DateTime(required=True)
