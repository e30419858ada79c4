from fastapi import APIRouter, Depends, File, UploadFile

from greenroom.api.v1.deps import get_current_user
from greenroom.core.errors import BadRequestError
from greenroom.models.user import User
from greenroom.services.attachments import attachment_store

router = APIRouter(prefix="/users", tags=["users"])

AVATAR = "avatar"
AVATAR_CONTENT_TYPES = ("image/png", "image/jpeg", "image/svg+xml")
MAX_AVATAR_BYTES = 3 * 1024 * 1024

@router.patch("/me/avatar")
async def update_avatar(avatar: UploadFile = File(...), user: User = Depends(get_current_user)):
    """
    Replace the authenticated user's avatar.

    Raises:
        BadRequestError (400): non-image content type or file over 3 MB
    """
    if avatar.content_type not in AVATAR_CONTENT_TYPES:
        raise BadRequestError("InvalidAvatarType")
    data = await avatar.read()
    if len(data) > MAX_AVATAR_BYTES:
        raise BadRequestError("AvatarTooLarge")
    attachment = await attachment_store.attach(
        user,
        AVATAR,
        filename=avatar.filename or AVATAR,
        content_type=avatar.content_type,
        data=data,
    )
    return {"data": {"avatar": attachment_store.url_for(attachment)}}

@router.delete("/me/avatar")
async def purge_avatar(user: User = Depends(get_current_user)):
    purged = await attachment_store.purge(user, AVATAR)
    return {"data": {"purged": purged}}
