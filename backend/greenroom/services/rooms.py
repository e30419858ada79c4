"""
Room lifecycle operations that touch more than one table.
"""
import logging
import uuid
from typing import Optional

from tortoise.transactions import in_transaction

from greenroom.core.errors import BadRequestError, NotFoundError
from greenroom.models.meeting_option import MeetingOption, RoomMeetingOption
from greenroom.models.recording import Recording
from greenroom.models.room import Room
from greenroom.models.user import User
from greenroom.services.attachments import attachment_store

logger = logging.getLogger("uvicorn.error")


async def find_room(friendly_id: str) -> Room:
    """Resolve a room by friendly_id or raise NotFoundError."""
    room = await Room.get_or_none(friendly_id=friendly_id)
    if room is None:
        raise NotFoundError()
    return room


async def find_user_for_create(user_id: str) -> User:
    """
    Resolve the target user of a room creation.

    Malformed ids and unknown users are both BadRequestError: the caller
    referenced an invalid user, the requested resource itself exists.
    """
    try:
        uid = uuid.UUID(str(user_id))
    except ValueError:
        raise BadRequestError("InvalidUser")
    user = await User.get_or_none(id=uid)
    if user is None:
        raise BadRequestError("InvalidUser")
    return user


async def create_room(owner: User, name: str) -> Room:
    """Create a room and seed its meeting options from their defaults."""
    name = clean_room_name(name)
    async with in_transaction():
        room = await Room.create(user=owner, name=name)
        options = await MeetingOption.all()
        if options:
            await RoomMeetingOption.bulk_create([
                RoomMeetingOption(room=room, meeting_option=opt, value=opt.default_value)
                for opt in options
            ])
    logger.info("[rooms] created %s for user %s", room.friendly_id, owner.id)
    return room


async def destroy_room(room: Room) -> int:
    """
    Delete a room with its recordings, meeting options and attachments.

    All rows go in one transaction; attachment files are removed after it
    commits.

    Returns:
        Number of recordings deleted
    """
    async with in_transaction():
        deleted_recordings = await Recording.filter(room_id=room.id).delete()
        await RoomMeetingOption.filter(room_id=room.id).delete()
        keys = await attachment_store.detach_all(room)
        await room.delete()
    attachment_store.unlink_keys(keys)
    logger.info("[rooms] destroyed %s (%s recordings)", room.friendly_id, deleted_recordings)
    return deleted_recordings


def clean_room_name(name: str) -> str:
    """Strip a room name; BadRequestError unless 1..255 characters remain."""
    name = name.strip()
    if not name or len(name) > 255:
        raise BadRequestError("InvalidName")
    return name


async def rename_room(room: Room, name: Optional[str]) -> None:
    if name is None:
        return
    room.name = clean_room_name(name)
    await room.save(update_fields=["name"])
