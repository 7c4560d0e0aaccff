# app/database.py
import logging
from dataclasses import dataclass

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.config import Settings

logger = logging.getLogger(__name__)

EMPLOYEES_COLLECTION = "employees"

@dataclass(frozen=True)
class MongoInstance:
    client: AsyncIOMotorClient
    db: AsyncIOMotorDatabase

async def connect_to_mongo(settings: Settings) -> MongoInstance:
    """Open the client and make sure the server answers within the timeout.

    Raises ``PyMongoError`` when the server cannot be reached.
    """
    client = AsyncIOMotorClient(
        settings.MONGODB_URI,
        serverSelectionTimeoutMS=settings.MONGODB_CONNECT_TIMEOUT_MS,
        connectTimeoutMS=settings.MONGODB_CONNECT_TIMEOUT_MS,
    )
    try:
        await client.admin.command("ping")
    except PyMongoError:
        client.close()
        raise
    logger.info("Connected to MongoDB: %s", settings.MONGODB_DB_NAME)
    return MongoInstance(client=client, db=client[settings.MONGODB_DB_NAME])

async def close_mongo_connection(mongo: MongoInstance) -> None:
    mongo.client.close()
    logger.info("Closed MongoDB connection")

async def init_db(mongo: MongoInstance) -> None:
    collections = await mongo.db.list_collection_names()
    if EMPLOYEES_COLLECTION not in collections:
        await mongo.db.create_collection(EMPLOYEES_COLLECTION)
        logger.info("Created collection '%s'", EMPLOYEES_COLLECTION)

async def get_database(request: Request) -> AsyncIOMotorDatabase:
    return request.app.state.mongo.db
