# app/database.py
import logging

import certifi
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.core.config import settings

logger = logging.getLogger(__name__)

USERS = "users"
PRODUCTS = "products"


def get_database(url: str = None, name: str = None) -> AsyncIOMotorDatabase:
    url = url or settings.MONGO_URL
    kwargs = {}
    # Atlas clusters need a CA bundle on hosts without one
    if url.startswith("mongodb+srv://"):
        kwargs["tlsCAFile"] = certifi.where()
    client = AsyncIOMotorClient(url, **kwargs)
    return client[name or settings.MONGO_DB]


async def ping(db) -> bool:
    try:
        await db[USERS].find_one({})
        logger.info("MongoDB connected successfully.")
        return True
    except Exception as e:
        logger.error("MongoDB connection failed: %s", e)
        return False


def get_db(request: Request):
    return request.app.state.db
