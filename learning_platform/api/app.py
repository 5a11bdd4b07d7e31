"""
FastAPI application for the learning platform backend.

The API provides endpoints for:
- Greetings under ``/api`` (hello with current time, diagnostic test message)

No other routes are registered besides the framework's own ``/docs``,
``/redoc`` and ``/openapi.json`` pages.

Unmatched routes and methods are answered by FastAPI's default 404 and 405
handlers; no custom error handling is installed.
"""

import logging
import os
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from learning_platform import __version__
from learning_platform.api.routers import greetings

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def setup_logging() -> None:
    """Configure logging based on environment variables"""
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    log_format = os.environ.get(
        "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Validate log level
    numeric_level = getattr(logging, log_level, None)
    if not isinstance(numeric_level, int):
        print(f"Invalid log level: {log_level}, defaulting to INFO")
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        force=True,  # Override any existing configuration
    )


def get_cors_origins() -> List[str]:
    """Allowed CORS origins from the comma separated CORS_ORIGINS variable."""
    raw = os.environ.get("CORS_ORIGINS", "*")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


def create_app() -> FastAPI:
    """Build the FastAPI application with all routers mounted."""
    application = FastAPI(
        title="Learning Platform API",
        description="Backend API for the learning platform frontend",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    origins = get_cors_origins()
    application.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentials with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(
        greetings.router, prefix=API_PREFIX, tags=["Greetings"]
    )

    logger.info(
        "Application created",
        extra={"api_prefix": API_PREFIX, "cors_origins": origins},
    )
    return application


# Setup logging when module is imported
setup_logging()

app = create_app()


if __name__ == "__main__":
    from learning_platform.cli.serve import main

    main()
