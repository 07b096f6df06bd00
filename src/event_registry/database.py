"""
Database configuration for MongoDB persistence.

Uses Motor (async MongoDB driver) for async operations. A single
MongoConnection is opened at application startup and handed to the
services that need it.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING

logger = logging.getLogger(__name__)

# Collection names
EVENTS_COLLECTION = "events"
PARTICIPANTS_COLLECTION = "participants"


def redact_url(mongo_url: str) -> str:
    """Strip credentials from a connection URL so it can be logged."""
    scheme, sep, rest = mongo_url.partition("://")
    if not sep:
        return mongo_url.split("@")[-1]
    return f"{scheme}://{rest.split('@')[-1]}"


class MongoConnection:
    """Owns the Motor client and the application database handle."""

    def __init__(self, mongo_url: str, database_name: str) -> None:
        self._mongo_url = mongo_url
        self._database_name = database_name
        self._client: AsyncIOMotorClient | None = None
        self._db: AsyncIOMotorDatabase | None = None

    @property
    def database(self) -> AsyncIOMotorDatabase:
        """Get the database instance."""
        if self._db is None:
            raise RuntimeError("Database not initialized. Call connect() first.")
        return self._db

    async def connect(self) -> None:
        """Open the client and verify the server answers."""
        logger.info(f"Connecting to MongoDB: {redact_url(self._mongo_url)} / {self._database_name}")

        # tz_aware so stored timestamps come back as UTC-aware datetimes
        self._client = AsyncIOMotorClient(self._mongo_url, tz_aware=True)
        self._db = self._client[self._database_name]

        try:
            await self._client.admin.command("ping")
            logger.info("MongoDB connection established")
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise

    async def init_indexes(self) -> None:
        """Create database indexes for the listing and participant lookups."""
        events_col = self.database[EVENTS_COLLECTION]
        await events_col.create_index([("title", ASCENDING)])
        await events_col.create_index([("eventDate", ASCENDING)])

        participants_col = self.database[PARTICIPANTS_COLLECTION]
        await participants_col.create_index([("eventId", ASCENDING)])

        logger.info("Database indexes created")

    async def close(self) -> None:
        """Close MongoDB connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._db = None
            logger.info("MongoDB connection closed")
