"""
FastAPI application entry point.

- Mounts all routers under /api
- Adds CORS so the portal frontend can call the backend
- Creates the key/value table and seeds the default data on startup
- Maps data-layer errors to HTTP status codes
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from internhub.config import settings
from internhub.database import Base, SessionLocal, engine
from internhub.exceptions import (
    DuplicateEntityError, InternHubError, InvalidUpdateError, NotFoundError, TransportFailure,
    ValidationFailure,
)
from internhub.logging_config import setup_logging
from internhub.routers import (
    announcements, applications, auth, hackathons, ingest, jobs, learning, notifications, stats, support, users,
)
from internhub.store import CollectionStore

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the table (if it doesn't exist yet) and fill any empty collections."""
    setup_logging()
    Base.metadata.create_all(bind=engine)

    if settings.SEED_ON_STARTUP:
        db = SessionLocal()
        try:
            CollectionStore.open(db)
        finally:
            db.close()

    logger.info("startup_complete", database=settings.DATABASE_URL.split("://")[0])
    yield


app = FastAPI(
    title="InternHub",
    description="Placement portal data layer: jobs, applications, hackathons, learning, support",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount all routers under /api
app.include_router(auth.router, prefix="/api", tags=["auth"])
app.include_router(users.router, prefix="/api", tags=["users"])
app.include_router(jobs.router, prefix="/api", tags=["jobs"])
app.include_router(applications.router, prefix="/api", tags=["applications"])
app.include_router(notifications.router, prefix="/api", tags=["notifications"])
app.include_router(hackathons.router, prefix="/api", tags=["hackathons"])
app.include_router(learning.router, prefix="/api", tags=["learning"])
app.include_router(announcements.router, prefix="/api", tags=["announcements"])
app.include_router(support.router, prefix="/api", tags=["support"])
app.include_router(ingest.router, prefix="/api", tags=["ingest"])
app.include_router(stats.router, prefix="/api", tags=["stats"])


# ─── Error mapping ───────────────────────────────────────────────────

def _status_for(exc: InternHubError) -> int:
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, DuplicateEntityError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, InvalidUpdateError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if isinstance(exc, ValidationFailure):
        # The auth backend's own 4xx (401 bad password, 409 duplicate email, ...) passes through
        if exc.status_code and 400 <= exc.status_code < 500:
            return exc.status_code
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, TransportFailure):
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@app.exception_handler(InternHubError)
async def internhub_error_handler(request: Request, exc: InternHubError):
    code = _status_for(exc)
    logger.warning("request_failed", method=request.method, path=request.url.path,
                   status=code, error=exc.error_code, message=exc.message)
    return JSONResponse(
        status_code=code,
        content={"error": exc.error_code, "message": exc.message},
    )


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "InternHub API is running"}
