"""
Attachment store: one named file per record, bytes on local disk.

Rows live in the attachments table; bytes live in STORAGE_DIR/<key>.
Replacing or purging an attachment removes the old file only after the
database change has been committed.
"""
import logging
from pathlib import Path
from typing import Optional

from tortoise import models
from tortoise.transactions import in_transaction

from greenroom.config import settings
from greenroom.models.attachment import Attachment

logger = logging.getLogger("uvicorn.error")


def _owner(record: models.Model) -> tuple[str, str]:
    return record.__class__.__name__, str(record.pk)


class AttachmentStore:
    def __init__(self, root: Optional[str] = None):
        # None means "read settings.storage_dir at call time"
        self._root = root

    @property
    def root(self) -> Path:
        return Path(self._root or settings.storage_dir)

    def path_for(self, key: str) -> Path:
        return self.root / key

    def url_for(self, attachment: Optional[Attachment]) -> Optional[str]:
        if attachment is None:
            return None
        return f"{settings.attachments_url_prefix}/{attachment.key}"

    async def get(self, record: models.Model, name: str) -> Optional[Attachment]:
        record_type, record_id = _owner(record)
        return await Attachment.get_or_none(record_type=record_type, record_id=record_id, name=name)

    async def is_attached(self, record: models.Model, name: str) -> bool:
        record_type, record_id = _owner(record)
        return await Attachment.filter(record_type=record_type, record_id=record_id, name=name).exists()

    async def attach(
        self,
        record: models.Model,
        name: str,
        *,
        filename: str,
        content_type: str,
        data: bytes,
    ) -> Attachment:
        """
        Attach a file to record under name, replacing any previous file.

        Returns:
            The new Attachment row
        """
        record_type, record_id = _owner(record)
        self.root.mkdir(parents=True, exist_ok=True)

        async with in_transaction():
            previous = await Attachment.get_or_none(record_type=record_type, record_id=record_id, name=name)
            if previous is not None:
                await previous.delete()
            attachment = await Attachment.create(
                record_type=record_type,
                record_id=record_id,
                name=name,
                filename=filename,
                content_type=content_type,
                byte_size=len(data),
            )
            self.path_for(attachment.key).write_bytes(data)

        if previous is not None:
            self._unlink(previous.key)
            logger.info("[attachments] replaced %s on %s %s", name, record_type, record_id)
        return attachment

    async def purge(self, record: models.Model, name: str) -> bool:
        """Remove the named attachment. Returns False when nothing was attached."""
        record_type, record_id = _owner(record)
        attachment = await Attachment.get_or_none(record_type=record_type, record_id=record_id, name=name)
        if attachment is None:
            return False
        await attachment.delete()
        self._unlink(attachment.key)
        logger.info("[attachments] purged %s on %s %s", name, record_type, record_id)
        return True

    async def detach_all(self, record: models.Model) -> list[str]:
        """
        Delete every attachment row of record and return their storage keys.

        Callers running inside a transaction pass the keys to unlink_keys()
        once it has committed.
        """
        record_type, record_id = _owner(record)
        rows = Attachment.filter(record_type=record_type, record_id=record_id)
        keys = await rows.values_list("key", flat=True)
        await rows.delete()
        return list(keys)

    def unlink_keys(self, keys: list[str]) -> None:
        for key in keys:
            self._unlink(key)

    def _unlink(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)


attachment_store = AttachmentStore()
