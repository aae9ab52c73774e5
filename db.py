import asyncio
import logging

from motor.motor_asyncio import AsyncIOMotorClient

from config import Settings
from errors import StoreTimeout

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> AsyncIOMotorClient:
    return AsyncIOMotorClient(
        settings.mongodb_uri,
        serverSelectionTimeoutMS=int(settings.store_timeout_seconds * 1000),
    )


async def ping(client) -> bool:
    """Report whether the database answers a ping."""
    try:
        await client.admin.command("ping")
        return True
    except Exception as e:
        logger.warning("Database ping failed: %s", e)
        return False


async def ensure_indexes(database) -> None:
    await database["users"].create_index("email", unique=True)
    await database["orders"].create_index([("userId", 1), ("date", -1)])
    await database["blogposts"].create_index("category")


class Store:
    """Base for a repository bound to one collection with a per-call timeout."""

    collection_name = ""

    def __init__(self, database, timeout: float = 10.0):
        self.collection = database[self.collection_name]
        self.timeout = timeout

    async def _run(self, awaitable):
        try:
            return await asyncio.wait_for(awaitable, self.timeout)
        except asyncio.TimeoutError:
            logger.error("%s call exceeded %.1fs", self.collection_name, self.timeout)
            raise StoreTimeout()

    async def _find_all(self, query=None, sort=None):
        cursor = self.collection.find(query or {}, sort=sort)
        return await self._run(cursor.to_list(length=None))
