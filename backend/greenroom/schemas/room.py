"""
Pydantic schemas for room endpoints.
Defines request models for room creation.
"""
from pydantic import BaseModel, field_validator

class RoomCreateFields(BaseModel):
    """
    Attributes of the room being created.
    user_id is the future owner; it may differ from the acting user.
    """
    name: str  # Room display name (stripped and length-checked by the handler)
    user_id: str  # Owner user id (UUID string, validated by the handler)

    @field_validator("user_id", mode="before")
    @classmethod
    def _user_id_as_text(cls, value):
        # Any scalar id is accepted here; unknown ids become 400 InvalidUser later
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

class RoomCreateIn(BaseModel):
    """
    Request model for room creation: {"room": {"name": ..., "user_id": ...}}
    """
    room: RoomCreateFields
