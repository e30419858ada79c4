"""
Unit tests for core.authorization module.
Tests the ownership / permission rule set for room actions.
"""
import pytest

from greenroom.core.authorization import CREATE_ACTION, ROOM_ACTIONS, authorize_create, authorize_room, is_allowed
from greenroom.core.errors import ForbiddenError
from greenroom.models.room import Room


OWNER = "owner-id"
OTHER = "other-id"


class TestRoomActions:
    """show / update / destroy / purge_presentation / recordings / settings"""

    @pytest.mark.parametrize("action", sorted(ROOM_ACTIONS))
    def test_owner_is_allowed(self, action):
        assert is_allowed(OWNER, set(), OWNER, action) is True

    @pytest.mark.parametrize("action", sorted(ROOM_ACTIONS))
    def test_non_owner_is_forbidden(self, action):
        assert is_allowed(OTHER, set(), OWNER, action) is False

    @pytest.mark.parametrize("action", sorted(ROOM_ACTIONS))
    def test_manage_rooms_is_allowed(self, action):
        assert is_allowed(OTHER, {"ManageRooms"}, OWNER, action) is True

    def test_manage_users_does_not_grant_room_access(self):
        assert is_allowed(OTHER, {"ManageUsers"}, OWNER, "show") is False


class TestCreateAction:

    def test_self_is_allowed(self):
        assert is_allowed(OWNER, set(), OWNER, CREATE_ACTION) is True

    def test_other_target_is_forbidden(self):
        assert is_allowed(OWNER, {"ManageRooms"}, OTHER, CREATE_ACTION) is False

    def test_manage_users_may_target_anyone(self):
        assert is_allowed(OWNER, {"ManageUsers"}, "invalid-user", CREATE_ACTION) is True


def test_ids_compare_as_strings():
    import uuid
    uid = uuid.uuid4()
    assert is_allowed(uid, [], str(uid), "show") is True


def test_unknown_action_raises():
    with pytest.raises(ValueError):
        is_allowed(OWNER, set(), OWNER, "public_show")


@pytest.mark.asyncio
async def test_authorize_room_reads_role_permissions(db, create_user):
    owner = await create_user()
    stranger = await create_user()
    manager = await create_user("ManageRooms")
    room = await Room.create(user=owner, name="Gate")

    await authorize_room(owner, room, "destroy")
    await authorize_room(manager, room, "destroy")
    with pytest.raises(ForbiddenError):
        await authorize_room(stranger, room, "destroy")


@pytest.mark.asyncio
async def test_authorize_create_reads_role_permissions(db, create_user):
    actor = await create_user()
    manager = await create_user("ManageUsers")
    target = await create_user()

    await authorize_create(actor, str(actor.id))
    await authorize_create(manager, str(target.id))
    with pytest.raises(ForbiddenError):
        await authorize_create(actor, str(target.id))


@pytest.mark.asyncio
@pytest.mark.parametrize("spelling", [str.upper, lambda s: s.replace("-", ""), lambda s: "{" + s + "}"])
async def test_authorize_create_self_in_any_uuid_spelling(db, create_user, spelling):
    actor = await create_user()
    other = await create_user()

    await authorize_create(actor, spelling(str(actor.id)))
    with pytest.raises(ForbiddenError):
        await authorize_create(actor, spelling(str(other.id)))


@pytest.mark.asyncio
async def test_authorize_create_unparseable_target_is_not_self(db, create_user):
    actor = await create_user()

    with pytest.raises(ForbiddenError):
        await authorize_create(actor, "not-a-uuid")
