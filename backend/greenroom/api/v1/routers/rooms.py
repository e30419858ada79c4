import datetime as dt
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from greenroom.api.v1.deps import get_current_user, get_optional_user
from greenroom.config import settings
from greenroom.core.authorization import authorize_create, authorize_room
from greenroom.core.errors import BadRequestError
from greenroom.models.recording import Recording
from greenroom.models.room import Room
from greenroom.models.user import User
from greenroom.schemas.room import RoomCreateIn
from greenroom.services.attachments import attachment_store
from greenroom.services.room_settings import PUBLIC_SETTINGS, RoomSettingsGetter
from greenroom.services.rooms import (
    clean_room_name,
    create_room,
    destroy_room,
    find_room,
    find_user_for_create,
    rename_room,
)

router = APIRouter(prefix="/rooms", tags=["rooms"])

PRESENTATION = "presentation"
AVATAR = "avatar"


# ===== Serializers =====
def _iso(value: dt.datetime | None) -> str | None:
    return value.isoformat() if value else None


def _room_item(room: Room) -> dict:
    return {
        "id": room.id,
        "friendly_id": room.friendly_id,
        "name": room.name,
        "created_at": _iso(room.created_at),
        "last_session": _iso(room.last_session),
    }


async def _room_detail(room: Room, include_owner: bool) -> dict:
    presentation = await attachment_store.get(room, PRESENTATION)
    data = _room_item(room)
    data["presentation_name"] = presentation.filename if presentation else None
    data["presentation_url"] = attachment_store.url_for(presentation)
    if include_owner:
        owner = await room.user
        data["owner_id"] = str(owner.id)
        data["owner_name"] = owner.name
        data["owner_avatar"] = attachment_store.url_for(await attachment_store.get(owner, AVATAR))
    return data


def _recording_item(r: Recording) -> dict:
    return {
        "id": r.id,
        "record_id": r.record_id,
        "name": r.name,
        "visibility": r.visibility,
        "length": r.length,
        "participants": r.participants,
        "protectable": r.protectable,
        "recorded_at": _iso(r.recorded_at),
        "created_at": _iso(r.created_at),
    }


# ===== Routes =====
@router.get("")
async def list_rooms(
    user: User = Depends(get_current_user),
    search: str | None = Query(default=None, description="Case-insensitive match on room name"),
):
    """
    List the rooms owned by the authenticated user, newest first.

    Rooms of other users are never returned, whatever the caller's permissions.
    """
    qs = Room.filter(user_id=user.id).order_by("-created_at", "-id")
    if search:
        qs = qs.filter(name__icontains=search.strip())
    rows = await qs
    return {"data": [_room_item(r) for r in rows]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create(body: RoomCreateIn, user: User = Depends(get_current_user)):
    """
    Create a room owned by body.room.user_id.

    Raises:
        ForbiddenError (403): target is another user and caller lacks ManageUsers
        BadRequestError (400): target user id is malformed or unknown, or name is blank
    """
    await authorize_create(user, body.room.user_id)
    owner = await find_user_for_create(body.room.user_id)
    room = await create_room(owner, body.room.name)
    return {"data": _room_item(room)}


@router.get("/{friendly_id}")
async def show(
    friendly_id: str,
    include_owner: bool = Query(False),
    user: User = Depends(get_current_user),
):
    """
    Get a room by friendly_id.

    owner_id, owner_name and owner_avatar are included only when
    include_owner is true.

    Raises:
        NotFoundError (404): friendly_id does not resolve
        ForbiddenError (403): caller is not the owner and lacks ManageRooms
    """
    room = await find_room(friendly_id)
    await authorize_room(user, room, "show")
    return {"data": await _room_detail(room, include_owner)}


@router.get("/{friendly_id}/public")
async def public_show(friendly_id: str, user: User | None = Depends(get_optional_user)):
    """
    Public room information for the join page. No session required.
    Access codes are reported only as "is set" booleans.
    """
    room = await find_room(friendly_id)
    values = await RoomSettingsGetter(
        room_id=room.id,
        provider=settings.default_provider,
        current_user=user,
        show_codes=False,
        settings=PUBLIC_SETTINGS,
    ).call()
    return {
        "data": {
            "name": room.name,
            "require_authentication": values.get("glRequireAuthentication") in (True, "true"),
            "viewer_access_code": bool(values.get("glViewerAccessCode")),
            "moderator_access_code": bool(values.get("glModeratorAccessCode")),
        }
    }


@router.patch("/{friendly_id}")
async def update(
    friendly_id: str,
    name: str | None = Form(default=None),
    presentation: UploadFile | None = File(default=None),
    user: User = Depends(get_current_user),
):
    """
    Rename a room and/or replace its presentation.

    A supplied presentation becomes the room's only presentation file.
    All input is checked before anything is written.

    Raises:
        BadRequestError (400): empty name, unsupported content type or oversized file
    """
    room = await find_room(friendly_id)
    await authorize_room(user, room, "update")

    if name is not None:
        name = clean_room_name(name)
    if presentation is not None:
        content_type = presentation.content_type or "application/octet-stream"
        if content_type not in settings.presentation_content_types:
            raise BadRequestError("InvalidPresentationType")
        data = await presentation.read()
        if len(data) > settings.max_presentation_bytes:
            raise BadRequestError("PresentationTooLarge")

    await rename_room(room, name)
    if presentation is not None:
        await attachment_store.attach(
            room,
            PRESENTATION,
            filename=presentation.filename or PRESENTATION,
            content_type=content_type,
            data=data,
        )

    return {"data": await _room_detail(room, include_owner=False)}


@router.delete("/{friendly_id}/purge_presentation")
async def purge_presentation(friendly_id: str, user: User = Depends(get_current_user)):
    """Remove the room's presentation. Succeeds when none is attached."""
    room = await find_room(friendly_id)
    await authorize_room(user, room, "purge_presentation")
    purged = await attachment_store.purge(room, PRESENTATION)
    return {"data": {"friendly_id": room.friendly_id, "purged": purged}}


@router.delete("/{friendly_id}")
async def destroy(friendly_id: str, user: User = Depends(get_current_user)):
    """
    Delete a room together with its recordings and attachments.

    Raises:
        NotFoundError (404): friendly_id does not resolve
        ForbiddenError (403): caller is not the owner and lacks ManageRooms
    """
    room = await find_room(friendly_id)
    await authorize_room(user, room, "destroy")
    deleted_recordings = await destroy_room(room)
    return {"data": {"friendly_id": friendly_id, "deleted_recordings": deleted_recordings}}


@router.get("/{friendly_id}/recordings")
async def recordings(friendly_id: str, user: User = Depends(get_current_user)):
    """List the room's recordings in creation order."""
    room = await find_room(friendly_id)
    await authorize_room(user, room, "recordings")
    rows = await Recording.filter(room_id=room.id).order_by("created_at", "id")
    return {"data": [_recording_item(r) for r in rows]}


@router.get("/{friendly_id}/settings")
async def room_settings(friendly_id: str, user: User = Depends(get_current_user)):
    """All meeting option values of the room, access codes included."""
    room = await find_room(friendly_id)
    await authorize_room(user, room, "settings")
    values = await RoomSettingsGetter(
        room_id=room.id,
        provider=settings.default_provider,
        current_user=user,
        show_codes=True,
    ).call()
    return {"data": values}
