# app/routes/auth.py
import logging

from fastapi import APIRouter, Depends
from pymongo.errors import PyMongoError

from app.core.error_messages import ErrorResponses, InternalFailure
from app.database import get_db
from app.models.user import login_user, register_user
from app.schemas.user import AuthResponse, LoginSchema, RegisterSchema
from app.utils.auth_utils import issue_token

logger = logging.getLogger(__name__)

auth_router = APIRouter(tags=["Auth"])


@auth_router.post("/register", response_model=AuthResponse)
async def register(data: RegisterSchema, db=Depends(get_db)):
    try:
        user = await register_user(db, data.model_dump())
    except PyMongoError as e:
        logger.error("Registration failed for %s: %s", data.email, e)
        raise InternalFailure(ErrorResponses.REGISTRATION_FAILED, error=str(e))
    return {"user": user, "auth": issue_token(user)}


@auth_router.post("/login", response_model=AuthResponse)
async def login(data: LoginSchema, db=Depends(get_db)):
    user = await login_user(db, data.email, data.password)
    return {"user": user, "auth": issue_token(user)}
