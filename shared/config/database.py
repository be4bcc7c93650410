import os
from contextlib import asynccontextmanager

import structlog
from beanie import init_beanie
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from .env import load_env

load_env()

MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017/ecommerce")
MONGO_DB = os.getenv("MONGO_DB", "ecommerce")  # used when the URI names no database
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

logger = structlog.get_logger(__name__)


class DatabaseConnectionError(Exception):
    """Raised when MongoDB cannot be reached."""


def create_client(uri: str | None = None) -> AsyncMongoClient:
    return AsyncMongoClient(uri or MONGO_URI, serverSelectionTimeoutMS=MONGO_TIMEOUT_MS)


async def connect(client: AsyncMongoClient):
    """Pings the server and returns the default database."""
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        logger.error("mongo_connection_failed", error=str(e))
        raise DatabaseConnectionError(str(e)) from e

    db = client.get_default_database(default=MONGO_DB)
    logger.info("mongo_connected", database=db.name)
    return db


@asynccontextmanager
async def get_db(uri: str | None = None):
    """Yields a connected database handle and closes the client afterwards."""
    client = create_client(uri)
    try:
        yield await connect(client)
    finally:
        await client.close()


@asynccontextmanager
async def init_odm(document_models: list, uri: str | None = None):
    """Same as get_db, but also registers the beanie document models."""
    async with get_db(uri) as db:
        await init_beanie(database=db, document_models=document_models)
        yield db
