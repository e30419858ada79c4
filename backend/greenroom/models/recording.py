import uuid
from tortoise import fields, models

class Recording(models.Model):
    id = fields.IntField(pk=True)
    room = fields.ForeignKeyField("models.Room", related_name="recordings", on_delete=fields.CASCADE)

    name = fields.CharField(max_length=255)
    record_id = fields.CharField(max_length=255, unique=True, default=lambda: uuid.uuid4().hex)
    visibility = fields.CharField(max_length=32, default="Unpublished")

    length = fields.IntField(default=0)         # Minutes
    participants = fields.IntField(default=0)
    protectable = fields.BooleanField(default=False)

    recorded_at = fields.DatetimeField(null=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "recordings"
