"""
Room settings retrieval.

Reads a room's meeting option values, applies the provider's rooms
configuration, and hides access codes unless the caller may see them.
"""
import secrets
import string
from typing import Iterable, Optional

from greenroom.models.meeting_option import (
    CONFIG_FALSE,
    CONFIG_TRUE,
    RoomMeetingOption,
    RoomsConfiguration,
)
from greenroom.models.user import User

ACCESS_CODE_LENGTH = 6

PUBLIC_SETTINGS = ["glRequireAuthentication", "glViewerAccessCode", "glModeratorAccessCode"]


def _is_access_code(name: str) -> bool:
    return name.endswith("AccessCode")


def generate_access_code() -> str:
    alphabet = string.ascii_lowercase + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(ACCESS_CODE_LENGTH))


class RoomSettingsGetter:
    """
    Fetch meeting option values for a room.

    Args:
        room_id: Numeric id of the room
        provider: Provider whose RoomsConfiguration applies
        current_user: Acting user, None for anonymous callers
        show_codes: When False, access codes are reported as booleans
        settings: Option names to return; None returns all of the room's options
    """

    def __init__(
        self,
        room_id: int,
        provider: str,
        current_user: Optional[User],
        show_codes: bool,
        settings: Optional[Iterable[str]] = None,
    ):
        self.room_id = room_id
        self.provider = provider
        self.current_user = current_user
        self.show_codes = show_codes
        self.settings = list(settings) if settings is not None else None

    async def call(self) -> dict:
        query = RoomMeetingOption.filter(room_id=self.room_id).prefetch_related("meeting_option")
        if self.settings is not None:
            query = query.filter(meeting_option__name__in=self.settings)
        room_options = {rmo.meeting_option.name: rmo for rmo in await query}

        configs = dict(
            await RoomsConfiguration.filter(
                provider=self.provider,
                meeting_option__name__in=list(room_options),
            ).values_list("meeting_option__name", "value")
        )

        values: dict = {}
        for name, rmo in room_options.items():
            values[name] = await self._apply_config(rmo, configs.get(name))

        if not self.show_codes:
            for name in values:
                if _is_access_code(name):
                    values[name] = bool(values[name])
        return values

    async def _apply_config(self, rmo: RoomMeetingOption, config: Optional[str]) -> str:
        name = rmo.meeting_option.name
        if config == CONFIG_TRUE:
            if not _is_access_code(name):
                return "true"
            if not rmo.value:
                # Forced access codes are generated once and kept
                rmo.value = generate_access_code()
                await rmo.save(update_fields=["value"])
            return rmo.value
        if config == CONFIG_FALSE:
            return "" if _is_access_code(name) else "false"
        return rmo.value
