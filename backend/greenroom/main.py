# greenroom/main.py
import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from greenroom.config import settings
from greenroom.core.db import init_db, close_db
from greenroom.core.errors import AppError, app_error_handler, validation_error_handler
from greenroom.core.bootstrap import seed

from greenroom.api.v1.routers import attachments, auth, rooms, users

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# CORS (with Cookie)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# NotFound / BadRequest / Forbidden -> {"data": null, "errors": ...}
app.add_exception_handler(AppError, app_error_handler)
# Malformed bodies / params -> 400 {"data": null, "errors": "BadRequest"}
app.add_exception_handler(RequestValidationError, validation_error_handler)

@app.on_event("startup")
async def on_startup():
    await init_db()
    # Permissions, roles, meeting options and the default admin account
    await seed()
    logger.info("[startup] %s ready (provider=%s, storage=%s)",
                settings.APP_NAME, settings.default_provider, settings.storage_dir)

@app.on_event("shutdown")
async def on_shutdown():
    await close_db()

# REST
app.include_router(auth.router, prefix="/api/v1")
app.include_router(users.router, prefix="/api/v1")
app.include_router(rooms.router, prefix="/api/v1")
app.include_router(attachments.router, prefix="/api/v1")

@app.get("/healthz")
def healthz():
    return {"ok": True}
