# app/models/user.py
import logging

from app.core.config import settings
from app.core.error_messages import InvalidRequest, NotFound
from app.database import USERS

logger = logging.getLogger(__name__)

HIDE_PASSWORD = {"password": 0}


def strip_password(user: dict) -> dict:
    user = dict(user)
    user.pop("password", None)
    user["_id"] = str(user["_id"])
    return user


async def register_user(db, data: dict) -> dict:
    """Store a new user as submitted and return it without the password.

    No duplicate-email check and no hashing. New accounts are never admins.
    """
    user = {**data, "isAdmin": False}
    result = await db[USERS].insert_one(user)
    user["_id"] = result.inserted_id
    return strip_password(user)


async def login_user(db, email, password) -> dict:
    if not email or not password:
        raise InvalidRequest()

    user = await db[USERS].find_one({"email": email, "password": password}, HIDE_PASSWORD)
    if not user:
        raise NotFound()
    return strip_password(user)


async def ensure_default_admin(db) -> None:
    result = await db[USERS].update_one(
        {"email": settings.ADMIN_EMAIL},
        {
            "$setOnInsert": {
                "name": settings.ADMIN_NAME,
                "email": settings.ADMIN_EMAIL,
                "password": settings.ADMIN_PASSWORD,
                "isAdmin": True,
            }
        },
        upsert=True,
    )
    if result.upserted_id is not None:
        logger.info("Created default admin %s", settings.ADMIN_EMAIL)
