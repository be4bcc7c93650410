from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog
from typer.testing import CliRunner

from services.user_service.repository import UserRepository


@pytest.fixture(autouse=True)
def reset_structlog():
    """Each CLI invocation reconfigures structlog; start every test from defaults."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def users_file(tmp_path):
    return tmp_path / "data" / "users.json"


@pytest.fixture
def user_repo(users_file):
    return UserRepository(users_file)


@pytest.fixture
def mock_collection():
    collection = MagicMock()
    collection.insert_one = AsyncMock()
    collection.find_one = AsyncMock()
    collection.update_one = AsyncMock()
    collection.delete_one = AsyncMock()
    collection.create_index = AsyncMock()
    collection.find.return_value.to_list = AsyncMock(return_value=[])
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__.return_value = mock_collection
    return db


@pytest.fixture
def fake_lifespan(mock_db):
    @asynccontextmanager
    async def lifespan():
        yield mock_db

    return lifespan
