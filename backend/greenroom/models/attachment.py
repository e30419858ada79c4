import secrets
from tortoise import fields, models

class Attachment(models.Model):
    """
    A single named file attached to a record.
    - record_type / record_id: owning record (e.g. "Room" / "12", "User" / uuid)
    - name: attachment slot on that record ("presentation", "avatar")
    - key: storage key, also the file name on disk (plain random token)
    """
    id = fields.IntField(pk=True)
    record_type = fields.CharField(max_length=32)
    record_id = fields.CharField(max_length=64)
    name = fields.CharField(max_length=32)

    key = fields.CharField(max_length=64, unique=True, index=True, default=lambda: secrets.token_hex(16))
    filename = fields.CharField(max_length=255)
    content_type = fields.CharField(max_length=128)
    byte_size = fields.BigIntField(default=0)

    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "attachments"
        unique_together = (("record_type", "record_id", "name"),)
