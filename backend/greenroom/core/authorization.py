# greenroom/core/authorization.py
"""
Authorization gate for room actions.

Room actions are allowed for the room's owner or for a holder of
ManageRooms. Creating a room on behalf of a user is allowed for that user
or for a holder of ManageUsers. public_show never reaches this module.
"""
import logging
import uuid
from typing import Iterable

from greenroom.core.errors import ForbiddenError
from greenroom.models.role import MANAGE_ROOMS, MANAGE_USERS
from greenroom.models.room import Room
from greenroom.models.user import User

logger = logging.getLogger("uvicorn.error")

ROOM_ACTIONS = frozenset({"show", "update", "destroy", "purge_presentation", "recordings", "settings"})
CREATE_ACTION = "create"


def is_allowed(actor_id: str, permissions: Iterable[str], target_owner_id: str, action: str) -> bool:
    """
    Decide whether an actor may perform an action.

    Args:
        actor_id: Id of the acting user
        permissions: Permission names the actor holds
        target_owner_id: Owner id of the target room, or the target user id for "create"
        action: One of ROOM_ACTIONS or CREATE_ACTION

    Returns:
        True if the action is allowed

    Raises:
        ValueError: If the action is unknown
    """
    permissions = set(permissions)
    is_self = str(actor_id) == str(target_owner_id)
    if action == CREATE_ACTION:
        return is_self or MANAGE_USERS in permissions
    if action in ROOM_ACTIONS:
        return is_self or MANAGE_ROOMS in permissions
    raise ValueError(f"unknown action: {action}")


async def authorize_room(actor: User, room: Room, action: str) -> None:
    """Raise ForbiddenError unless actor may perform action on room."""
    permissions = await actor.permission_names()
    if not is_allowed(str(actor.id), permissions, str(room.user_id), action):
        logger.info("[authz] denied %s on room %s for user %s", action, room.friendly_id, actor.id)
        raise ForbiddenError()


async def authorize_create(actor: User, target_user_id: str) -> None:
    """
    Raise ForbiddenError unless actor may create a room owned by target_user_id.

    The target is compared in canonical UUID form, so any spelling of the
    actor's own id counts as self. Unparseable ids are never self.
    """
    try:
        target = str(uuid.UUID(str(target_user_id)))
    except ValueError:
        target = str(target_user_id)
    permissions = await actor.permission_names()
    if not is_allowed(str(actor.id), permissions, target, CREATE_ACTION):
        logger.info("[authz] denied create for user %s by user %s", target_user_id, actor.id)
        raise ForbiddenError()
