import os
import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from greenroom.config import settings
from greenroom.core import db as db_module
from greenroom.core.bootstrap import ensure_meeting_options, ensure_permissions_and_roles
from greenroom.core.security import create_access_token, hash_password
from greenroom.main import app
from greenroom.models.role import Permission, Role, RolePermission
from greenroom.models.user import User


TEST_DB_URL = "sqlite://:memory:?cache=shared"
os.environ["DATABASE_URL"] = TEST_DB_URL
db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch and seeded like a fresh install.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()
    await ensure_permissions_and_roles()
    await ensure_meeting_options()


@pytest.fixture(autouse=True)
def storage_dir(tmp_path, monkeypatch):
    """
    Keep attachment bytes in a per-test directory.
    """
    path = tmp_path / "storage"
    monkeypatch.setattr(settings, "storage_dir", str(path))
    return path


@pytest_asyncio.fixture
async def db():
    """
    Fresh database without an HTTP client, for service-level tests.
    """
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client():
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    """
    await _init_test_db()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def create_user():
    """
    Factory fixture to create users directly via ORM.
    Each user gets a role of their own holding exactly the given permissions.
    """

    async def _create_user(*permissions: str, name: str | None = None, password: str = "UserPass!23") -> User:
        suffix = uuid.uuid4().hex[:6]
        role = await Role.create(name=f"role_{suffix}")
        for perm_name in permissions:
            perm, _ = await Permission.get_or_create(name=perm_name)
            await RolePermission.create(role=role, permission=perm, value="true")
        return await User.create(
            name=name or f"User {suffix}",
            email=f"user_{suffix}@example.com",
            password_hash=hash_password(password),
            role=role,
        )

    return _create_user


@pytest.fixture
def auth_headers():
    """
    Build Authorization headers for a user without going through /auth/login.
    """

    def _headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(str(user.id))}"}

    return _headers
