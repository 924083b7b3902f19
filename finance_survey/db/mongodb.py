"""MongoDB database connection using Motor (async driver)."""

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from finance_survey.core.config import settings

logger = logging.getLogger(__name__)

# Global MongoDB client and database instances
mongodb_client: AsyncIOMotorClient | None = None
mongodb_db: AsyncIOMotorDatabase | None = None


async def connect_mongodb() -> None:
    """Connect to MongoDB."""
    global mongodb_client, mongodb_db

    mongodb_client = AsyncIOMotorClient(
        settings.mongodb_url,
        tz_aware=True,  # created_at comes back as aware UTC
        maxPoolSize=20,
        connectTimeoutMS=5000,
        serverSelectionTimeoutMS=5000,
    )
    mongodb_db = mongodb_client[settings.mongodb_database]

    try:
        await mongodb_client.admin.command("ping")
        logger.info("Connected to MongoDB: %s", settings.mongodb_database)
    except Exception as e:
        logger.error("Failed to connect to MongoDB: %s", e)
        raise

    await ensure_indexes()


async def close_mongodb() -> None:
    """Close MongoDB connection."""
    global mongodb_client, mongodb_db

    if mongodb_client:
        mongodb_client.close()
        mongodb_client = None
        mongodb_db = None
        logger.info("MongoDB connection closed")


def get_mongodb() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance.

    Usage:
        @app.get("/")
        async def endpoint(db: AsyncIOMotorDatabase = Depends(get_mongodb)):
            collection = db["survey_responses"]
            ...
    """
    if mongodb_db is None:
        raise RuntimeError("MongoDB is not connected")
    return mongodb_db


def get_responses_collection() -> AsyncIOMotorCollection:
    """Collection holding submitted survey responses."""
    return get_mongodb()[settings.responses_collection]


async def ensure_indexes() -> None:
    """Create indexes used by the dashboard listing (newest first, per counter)."""
    collection = get_responses_collection()
    await collection.create_index([("created_at", -1)])
    await collection.create_index([("loket", 1), ("created_at", -1)])
    logger.debug("Ensured indexes on %s", settings.responses_collection)
