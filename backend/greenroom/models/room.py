"""
Database model for rooms.
A room belongs to one user and is addressed externally by its friendly_id,
never by its numeric primary key.
"""
import secrets
import string
from tortoise import fields, models

_ALPHANUM = string.ascii_lowercase + string.digits


def _random_alphanumeric(length: int) -> str:
    return "".join(secrets.choice(_ALPHANUM) for _ in range(length))


def generate_friendly_id() -> str:
    """Shareable room identifier, e.g. "abc-1d2-x9z-q0w"."""
    return "-".join(_random_alphanumeric(3) for _ in range(4))


def generate_meeting_id() -> str:
    return _random_alphanumeric(40)


class Room(models.Model):
    """
    Room database model.

    Relationships:
    - Belongs to a User (many-to-one); cascade delete with the owner
    - Has many Recordings (one-to-many, via related_name in Recording model)
    - Has many RoomMeetingOptions (one-to-many)
    - Has one "presentation" Attachment (stored in the attachments table)
    """
    id = fields.IntField(pk=True)
    user = fields.ForeignKeyField(
        "models.User",
        related_name="rooms",
        on_delete=fields.CASCADE
    )
    name = fields.CharField(max_length=255)
    friendly_id = fields.CharField(max_length=255, unique=True, index=True, default=generate_friendly_id)
    meeting_id = fields.CharField(max_length=64, unique=True, default=generate_meeting_id)
    last_session = fields.DatetimeField(null=True)  # When a meeting last ran in this room
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "rooms"
