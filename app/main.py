"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import router as v1_router
from app.core.config import settings
from app.core.database import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Optionally create tables on start-up (local SQLite runs); Alembic owns the schema otherwise."""
    if settings.CREATE_TABLES_ON_STARTUP:
        init_db()
        logger.info("Created missing tables on start-up")
    yield


app = FastAPI(
    title="Userstore API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(v1_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; lists the resource collections."""
    return {
        "message": "Userstore API",
        "roles": f"{settings.API_V1_PREFIX}/roles",
        "users": f"{settings.API_V1_PREFIX}/users",
    }
