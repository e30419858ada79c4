"""
Database model for users.
Represents a user account in the system, containing authentication credentials,
profile information, and the role that carries the user's permissions.
"""
import uuid
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    Represents a user account in the system. Each user can own multiple
    rooms and is associated with an optional role.

    Relationships:
    - Belongs to a Role (many-to-one, nullable)
    - Has many Rooms (one-to-many, via related_name="rooms")
    - Has one "avatar" Attachment (stored in the attachments table)

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Email must be unique across all users
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique user identifier
    name = fields.CharField(max_length=255)  # Display name shown to other users
    email = fields.CharField(
        max_length=256,
        unique=True,
        index=True
    )  # Login identifier (must be unique, indexed for fast lookups)
    password_hash = fields.CharField(max_length=255)  # Hashed password (argon2, never store plain text)
    provider = fields.CharField(max_length=64, default="greenlight")  # Tenant the account belongs to
    role = fields.ForeignKeyField(
        "models.Role",
        related_name="users",
        null=True,
        on_delete=fields.SET_NULL,
    )
    created_at = fields.DatetimeField(auto_now_add=True)  # Timestamp when account was created (auto-set on creation)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name

    async def permission_names(self) -> set[str]:
        """Names of the permissions granted by the user's role."""
        from .role import RolePermission

        if self.role_id is None:
            return set()
        names = await RolePermission.filter(role_id=self.role_id, value="true").values_list(
            "permission__name", flat=True
        )
        return set(names)
