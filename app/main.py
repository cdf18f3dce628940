# app/main.py
import logging
import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from pymongo.errors import PyMongoError

from app.core.config import settings
from app.core.error_messages import AppError, InternalFailure, InvalidRequest, app_error_handler
from app.database import get_database, ping
from app.models.user import ensure_default_admin
from app.routes.auth import auth_router
from app.routes.products import product_router
from app.utils.storage import LocalImageStorage

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return await app_error_handler(request, InvalidRequest())


async def database_error_handler(request: Request, exc: PyMongoError):
    logger.error("Database error on %s: %s", request.url.path, exc)
    return await app_error_handler(request, InternalFailure(error=str(exc)))


def create_app(db=None, storage=None, upload_dir: str = None) -> FastAPI:
    """Build the API.

    `storage` only needs a `store(data, suggested_name)` method; whatever it
    stores is served from `upload_dir`. The Mongo client and the upload
    directory are created on startup, not here.
    """
    app = FastAPI(title=settings.APP_NAME)

    upload_dir = upload_dir or settings.UPLOAD_DIR
    app.state.db = db
    app.state.storage = storage or LocalImageStorage(upload_dir)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(PyMongoError, database_error_handler)

    app.include_router(auth_router)
    app.include_router(product_router)

    app.mount("/uploads", StaticFiles(directory=upload_dir, check_dir=False), name="uploads")

    @app.get("/")
    async def root():
        return {"message": f"Welcome to {settings.APP_NAME}"}

    @app.on_event("startup")
    async def startup():
        if settings.JWT_SECRET_KEY == "e-comm":
            logger.warning("JWT_SECRET_KEY is the built-in default; set it in the environment")
        os.makedirs(upload_dir, exist_ok=True)
        if app.state.db is None:
            app.state.db = get_database()
        if await ping(app.state.db):
            await ensure_default_admin(app.state.db)

    return app


app = create_app()


def run():
    logging.basicConfig(level=logging.INFO)
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
