# app/utils/auth_utils.py
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import BaseModel

from app.core.config import settings
from app.core.error_messages import InvalidToken


class Identity(BaseModel):
    id: str
    is_admin: bool = False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"iat": now, "exp": now + expires_delta})
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> dict:
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.ALGORITHM])


def issue_token(user: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a token carrying the user's id and admin flag."""
    claims = {"user": {"_id": str(user["_id"]), "isAdmin": bool(user.get("isAdmin", False))}}
    return create_access_token(claims, expires_delta)


def verify_token(token: str) -> Identity:
    """Decode a token back into an Identity.

    Raises InvalidToken for a bad signature, an expired token, or a payload
    without the user claim. Whether the user still exists is not checked.
    """
    try:
        payload = decode_token(token)
    except jwt.PyJWTError:
        raise InvalidToken()

    user = payload.get("user")
    if not isinstance(user, dict) or not user.get("_id"):
        raise InvalidToken()
    return Identity(id=str(user["_id"]), is_admin=bool(user.get("isAdmin", False)))
