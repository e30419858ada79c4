from fastapi import APIRouter
from fastapi.responses import FileResponse

from greenroom.core.errors import NotFoundError
from greenroom.models.attachment import Attachment
from greenroom.services.attachments import attachment_store

router = APIRouter(prefix="/attachments", tags=["attachments"])

@router.get("/{key}")
async def download(key: str):
    """
    Stream a stored attachment (avatar or presentation) by its storage key.

    Keys are unguessable tokens, so the route is public like the share links
    that embed them.
    """
    attachment = await Attachment.get_or_none(key=key)
    if attachment is None:
        raise NotFoundError()
    path = attachment_store.path_for(attachment.key)
    if not path.is_file():
        raise NotFoundError()
    return FileResponse(path, media_type=attachment.content_type, filename=attachment.filename)
