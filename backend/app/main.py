import logging
import os
import sys

# Make the repository root (engine package) importable when run from backend/
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from app.config import settings
from app.db.db import Base, SessionLocal, engine
from app.routes import (
    analytics_router,
    catalog_router,
    recommendation_router,
    wallet_router,
)
from app.services.catalog_service import CatalogService
from app.services.errors import ServiceError
from engine.catalog import default_catalog

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def init_catalog() -> None:
    """Create tables and seed the bundled cards into an empty catalog."""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        CatalogService(db).seed_cards(default_catalog())
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler - runs on startup and shutdown"""
    # Startup
    init_catalog()
    yield
    # Shutdown


app = FastAPI(
    title="Card Recommendation API",
    version="0.1.0",
    docs_url="/api/docs",
    openapi_url="/api/openapi.json",
    lifespan=lifespan
)

# CORS middleware - MUST be added first before other middlewares
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:8081",
        "http://127.0.0.1:8081",
        "http://localhost:19006",
        "http://127.0.0.1:19006",
    ],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(request, exc: ServiceError):  # type: ignore[override]
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.envelope(),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc: RequestValidationError):  # type: ignore[override]
    """Handle validation errors with HTTP 400 to keep the error envelope contract."""
    return JSONResponse(
        status_code=400,
        content=ServiceError(
            400,
            "VALIDATION_ERROR",
            "Invalid request payload.",
            {"errors": jsonable_errors(exc)},
        ).envelope(),
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    # ctx may hold exception instances that JSON cannot encode
    return [
        {key: value for key, value in error.items() if key != "ctx"}
        for error in exc.errors()
    ]


@app.exception_handler(Exception)
async def general_exception_handler(request, exc: Exception):  # type: ignore[override]
    """Handle general exceptions - log and return 500 error"""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=ServiceError(500, "INTERNAL_SERVER_ERROR", "Internal server error.").envelope(),
    )


# Register routers
app.include_router(catalog_router)
app.include_router(wallet_router)
app.include_router(recommendation_router)
app.include_router(analytics_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
