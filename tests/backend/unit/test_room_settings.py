"""
Unit tests for services.room_settings module.
Tests meeting option retrieval, provider configuration and code hiding.
"""
import pytest

from greenroom.models.meeting_option import MeetingOption, RoomMeetingOption, RoomsConfiguration
from greenroom.services.room_settings import PUBLIC_SETTINGS, RoomSettingsGetter
from greenroom.services.rooms import create_room


pytestmark = pytest.mark.asyncio


async def _set_value(room, name: str, value: str) -> None:
    option = await MeetingOption.get(name=name)
    await RoomMeetingOption.filter(room=room, meeting_option=option).update(value=value)


async def _configure(name: str, value: str, provider: str = "greenlight") -> None:
    option = await MeetingOption.get(name=name)
    await RoomsConfiguration.filter(meeting_option=option, provider=provider).update(value=value)


async def _room(create_user):
    owner = await create_user()
    return await create_room(owner, "Settings Room")


async def test_returns_only_requested_settings(db, create_user):
    room = await _room(create_user)
    values = await RoomSettingsGetter(
        room_id=room.id, provider="greenlight", current_user=None, show_codes=True, settings=PUBLIC_SETTINGS
    ).call()
    assert set(values) == set(PUBLIC_SETTINGS)


async def test_returns_all_settings_when_none_requested(db, create_user):
    room = await _room(create_user)
    values = await RoomSettingsGetter(
        room_id=room.id, provider="greenlight", current_user=None, show_codes=True
    ).call()
    assert set(values) == set(await MeetingOption.all().values_list("name", flat=True))


async def test_hides_codes_when_show_codes_false(db, create_user):
    room = await _room(create_user)
    await _set_value(room, "glViewerAccessCode", "view42")

    values = await RoomSettingsGetter(
        room_id=room.id, provider="greenlight", current_user=None, show_codes=False, settings=PUBLIC_SETTINGS
    ).call()
    assert values["glViewerAccessCode"] is True
    assert values["glModeratorAccessCode"] is False
    assert values["glRequireAuthentication"] == "false"


async def test_shows_codes_when_show_codes_true(db, create_user):
    room = await _room(create_user)
    await _set_value(room, "glViewerAccessCode", "view42")

    values = await RoomSettingsGetter(
        room_id=room.id, provider="greenlight", current_user=None, show_codes=True, settings=PUBLIC_SETTINGS
    ).call()
    assert values["glViewerAccessCode"] == "view42"


async def test_config_true_forces_boolean_option(db, create_user):
    room = await _room(create_user)
    await _configure("glRequireAuthentication", "true")

    values = await RoomSettingsGetter(
        room_id=room.id, provider="greenlight", current_user=None, show_codes=True,
        settings=["glRequireAuthentication"],
    ).call()
    assert values == {"glRequireAuthentication": "true"}


async def test_config_true_generates_and_keeps_access_code(db, create_user):
    room = await _room(create_user)
    await _configure("glModeratorAccessCode", "true")
    getter_kwargs = dict(
        room_id=room.id, provider="greenlight", current_user=None, show_codes=True,
        settings=["glModeratorAccessCode"],
    )

    first = (await RoomSettingsGetter(**getter_kwargs).call())["glModeratorAccessCode"]
    second = (await RoomSettingsGetter(**getter_kwargs).call())["glModeratorAccessCode"]
    assert len(first) == 6
    assert first == second


async def test_config_false_blanks_code_and_disables_option(db, create_user):
    room = await _room(create_user)
    await _set_value(room, "glViewerAccessCode", "view42")
    await _set_value(room, "glAnyoneCanStart", "true")
    await _configure("glViewerAccessCode", "false")
    await _configure("glAnyoneCanStart", "false")

    values = await RoomSettingsGetter(
        room_id=room.id, provider="greenlight", current_user=None, show_codes=True,
        settings=["glViewerAccessCode", "glAnyoneCanStart"],
    ).call()
    assert values == {"glViewerAccessCode": "", "glAnyoneCanStart": "false"}


async def test_other_provider_configuration_is_ignored(db, create_user):
    room = await _room(create_user)
    option = await MeetingOption.get(name="glRequireAuthentication")
    await RoomsConfiguration.create(meeting_option=option, provider="other", value="true")

    values = await RoomSettingsGetter(
        room_id=room.id, provider="greenlight", current_user=None, show_codes=True,
        settings=["glRequireAuthentication"],
    ).call()
    assert values["glRequireAuthentication"] == "false"
