# greenroom/core/bootstrap.py
"""
Bootstrap module for application initialization.
Seeds permissions, default roles and meeting options, and creates a default
administrator on first startup.
"""
import os
import logging
from greenroom.config import settings
from greenroom.core.security import hash_password
from greenroom.models.meeting_option import CONFIG_OPTIONAL, MeetingOption, RoomsConfiguration
from greenroom.models.role import ALL_PERMISSIONS, CREATE_ROOM, Permission, Role, RolePermission
from greenroom.models.user import User

logger = logging.getLogger("uvicorn.error")

ADMIN_ROLE = "Administrator"
USER_ROLE = "User"

# Meeting option name -> default value for new rooms
DEFAULT_MEETING_OPTIONS = {
    "record": "false",
    "muteOnStart": "false",
    "guestPolicy": "ALWAYS_ACCEPT",
    "glAnyoneCanStart": "false",
    "glAnyoneJoinAsModerator": "false",
    "glRequireAuthentication": "false",
    "glViewerAccessCode": "",
    "glModeratorAccessCode": "",
}

async def ensure_permissions_and_roles() -> None:
    """
    Create missing permissions and the Administrator / User roles.
    Administrator holds every permission; User may only create rooms.
    Existing RolePermission values are never overwritten.
    """
    permissions = {}
    for name in ALL_PERMISSIONS:
        permissions[name], _ = await Permission.get_or_create(name=name)

    grants = {
        ADMIN_ROLE: set(ALL_PERMISSIONS),
        USER_ROLE: {CREATE_ROOM},
    }
    for role_name, granted in grants.items():
        role, created = await Role.get_or_create(name=role_name)
        if created:
            logger.info("[bootstrap] Created role %s", role_name)
        for perm_name, perm in permissions.items():
            await RolePermission.get_or_create(
                role=role,
                permission=perm,
                defaults={"value": "true" if perm_name in granted else "false"},
            )

async def ensure_meeting_options() -> None:
    """Create missing meeting options and their default-provider configuration."""
    for name, default_value in DEFAULT_MEETING_OPTIONS.items():
        option, _ = await MeetingOption.get_or_create(name=name, defaults={"default_value": default_value})
        await RoomsConfiguration.get_or_create(
            meeting_option=option,
            provider=settings.default_provider,
            defaults={"value": CONFIG_OPTIONAL},
        )

async def ensure_default_admin() -> None:
    """
    If no administrator exists in the database, create one based on environment variables.
    Only takes effect under the following conditions:
      - Currently no user with the Administrator role
      - And ADMIN_PASSWORD is set (to avoid using default weak password)
    Environment variables:
      ADMIN_NAME     (default: "Administrator")
      ADMIN_EMAIL    (default: "admin@example.com")
      ADMIN_PASSWORD (required, otherwise won't create)
    """
    role = await Role.get_or_none(name=ADMIN_ROLE)
    if role is None or await User.filter(role=role).exists():
        return

    admin_password = os.getenv("ADMIN_PASSWORD")
    if not admin_password:
        logger.warning("[bootstrap] No admin present, but ADMIN_PASSWORD not set -> skip creating default admin.")
        return

    admin_email = os.getenv("ADMIN_EMAIL", "admin@example.com").lower()
    if await User.filter(email=admin_email).exists():
        logger.warning("[bootstrap] %s already registered without admin role -> skip creating default admin.",
                       admin_email)
        return

    u = await User.create(
        name=os.getenv("ADMIN_NAME", "Administrator"),
        email=admin_email,
        password_hash=hash_password(admin_password),
        provider=settings.default_provider,
        role=role,
    )
    logger.warning("[bootstrap] Created default admin -> email=%s id=%s", u.email, u.id)

async def seed() -> None:
    await ensure_permissions_and_roles()
    await ensure_meeting_options()
    await ensure_default_admin()
