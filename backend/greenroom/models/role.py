"""
Database models for roles and permissions.
A user's permissions are the names of the Permission rows linked to the
user's Role with value "true".
"""
from tortoise import fields, models

# Permission names known to the application
CREATE_ROOM = "CreateRoom"
MANAGE_USERS = "ManageUsers"
MANAGE_ROOMS = "ManageRooms"
MANAGE_RECORDINGS = "ManageRecordings"
MANAGE_SITE_SETTINGS = "ManageSiteSettings"
MANAGE_ROLES = "ManageRoles"

ALL_PERMISSIONS = (
    CREATE_ROOM,
    MANAGE_USERS,
    MANAGE_ROOMS,
    MANAGE_RECORDINGS,
    MANAGE_SITE_SETTINGS,
    MANAGE_ROLES,
)


class Permission(models.Model):
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=64, unique=True)

    class Meta:
        table = "permissions"


class Role(models.Model):
    """
    Role database model.

    Relationships:
    - Has many Users (via related_name="users" in User model)
    - Has many RolePermissions (one row per granted or revoked permission)
    """
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=64, unique=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "roles"


class RolePermission(models.Model):
    id = fields.IntField(pk=True)
    role = fields.ForeignKeyField("models.Role", related_name="role_permissions", on_delete=fields.CASCADE)
    permission = fields.ForeignKeyField("models.Permission", related_name="role_permissions", on_delete=fields.CASCADE)
    value = fields.CharField(max_length=16, default="false")  # "true" grants the permission

    class Meta:
        table = "role_permissions"
        unique_together = (("role", "permission"),)
