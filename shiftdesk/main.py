# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from shiftdesk import __version__
from shiftdesk.config import get_settings
from shiftdesk.database import SessionLocal, check_database, dispose_engine, get_db
from shiftdesk.schemas.common import HealthResponse

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Starting ShiftDesk...")
    db = SessionLocal()
    try:
        if not check_database(db):
            logger.error("Database is not reachable at startup")
    finally:
        db.close()

    yield

    logger.info("Shutting down ShiftDesk...")
    dispose_engine()


app = FastAPI(
    title="ShiftDesk",
    description="Employee shift scheduling with overlap and duration checks",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", response_model=HealthResponse)
def health_check(db: Session = Depends(get_db)) -> HealthResponse:
    """Health check endpoint."""
    database_ok = check_database(db)
    return HealthResponse(
        status="healthy" if database_ok else "degraded",
        database="ok" if database_ok else "unavailable",
    )


# Import and include API router after the app is created
from shiftdesk.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
