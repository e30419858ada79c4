"""
Database models for meeting options.
MeetingOption lists every option a room can carry, RoomMeetingOption holds a
room's value for it, and RoomsConfiguration lets a provider force or free it.
"""
from tortoise import fields, models

# RoomsConfiguration values
CONFIG_TRUE = "true"
CONFIG_FALSE = "false"
CONFIG_OPTIONAL = "optional"
CONFIG_DEFAULT_ENABLED = "default_enabled"


class MeetingOption(models.Model):
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=128, unique=True)
    default_value = fields.CharField(max_length=255, default="")

    class Meta:
        table = "meeting_options"


class RoomMeetingOption(models.Model):
    id = fields.IntField(pk=True)
    room = fields.ForeignKeyField("models.Room", related_name="meeting_options", on_delete=fields.CASCADE)
    meeting_option = fields.ForeignKeyField(
        "models.MeetingOption", related_name="room_meeting_options", on_delete=fields.CASCADE
    )
    value = fields.CharField(max_length=255, default="")

    class Meta:
        table = "room_meeting_options"
        unique_together = (("room", "meeting_option"),)


class RoomsConfiguration(models.Model):
    id = fields.IntField(pk=True)
    meeting_option = fields.ForeignKeyField(
        "models.MeetingOption", related_name="rooms_configurations", on_delete=fields.CASCADE
    )
    provider = fields.CharField(max_length=64)
    value = fields.CharField(max_length=32, default=CONFIG_OPTIONAL)

    class Meta:
        table = "rooms_configurations"
        unique_together = (("meeting_option", "provider"),)
