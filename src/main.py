import uvicorn
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.core.constants import REQUEST_ID_HEADER, SIDEBAR_VERSION_HEADER
from src.api.core.exceptions.base import register_exception_handlers
from src.api.core.middleware.logging import logging_middleware
from src.api.core.middleware.security import (
    SecurityHeadersMiddleware,
    PayloadSizeMiddleware,
)
from src.api.router import api_router
from src.database.connection import get_firestore_client, initialize_firebase_app
from src.utils.settings.app import AppSettings
from src.utils.logger import setup_logging


is_production = AppSettings().ENVIRONMENT.upper() == "PROD"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger = setup_logging(is_production, AppSettings().ENVIRONMENT)
    logger.info("Starting admin console API...")
    AppSettings().validate_prod()

    firebase_app = initialize_firebase_app()
    app.state.firebase_app = firebase_app
    app.state.firestore = (
        get_firestore_client(firebase_app) if firebase_app is not None else None
    )
    logger.info("Firebase clients added to app state", configured=firebase_app is not None)

    yield

    # Shutdown
    logger.info("Shutting down admin console API...")


app = FastAPI(
    title="Admin Console API",
    description="Tenant user administration and sidebar configuration",
    version=AppSettings().API_VERSION,
    lifespan=lifespan,
    docs_url=None if is_production else "/docs",
    redoc_url=None if is_production else "/redoc",
    openapi_url=None if is_production else "/openapi.json",
)

# Register global exception handlers
register_exception_handlers(app)


app_settings = AppSettings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    expose_headers=[SIDEBAR_VERSION_HEADER, REQUEST_ID_HEADER],
)

app.add_middleware(SecurityHeadersMiddleware, is_production=is_production)
app.add_middleware(
    PayloadSizeMiddleware, max_request_size=app_settings.MAX_REQUEST_SIZE
)
app.middleware("http")(logging_middleware)

app.include_router(api_router)


def run_dev_server():
    """Run development server with auto-reload."""
    uvicorn.run(
        "src.main:app", host="0.0.0.0", port=8010, reload=True, access_log=False
    )


def run_prod_server():
    """Run production server."""
    uvicorn.run(
        "src.main:app", host="0.0.0.0", port=8010, reload=False, access_log=False
    )
