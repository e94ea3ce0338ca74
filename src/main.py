"""Main application entry point for the Rural Connect API.

This module provides the FastAPI application factory and configuration
for running the service locally or in production.
"""

import logging
import os

from fastapi import FastAPI

from rural_connect.auth.token_validator import parse_token_config
from rural_connect.handlers.api_handler import create_app
from rural_connect.observability import configure_logging, setup_observability
from rural_connect.repositories.booking_repositories import (
    BookingRepository,
    ContactRepository,
    UserRepository,
)
from rural_connect.repositories.catalog_repositories import (
    NewsRepository,
    ProductRepository,
    ServiceRepository,
)
from rural_connect.services.booking_service import BookingService
from rural_connect.settings import get_dynamodb_resource, get_table_name

logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    """Create and configure the FastAPI application with all dependencies.

    Returns:
        Configured FastAPI application instance
    """
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))

    logger.info("Initializing Rural Connect API...")

    dynamodb_resource = get_dynamodb_resource()

    product_repository = ProductRepository(dynamodb_resource, get_table_name("products"))
    service_repository = ServiceRepository(dynamodb_resource, get_table_name("services"))
    news_repository = NewsRepository(dynamodb_resource, get_table_name("news"))
    booking_repository = BookingRepository(dynamodb_resource, get_table_name("bookings"))
    user_repository = UserRepository(dynamodb_resource, get_table_name("users"))
    contact_repository = ContactRepository(dynamodb_resource, get_table_name("contacts"))

    logger.info("Repositories configured")

    booking_service = BookingService(
        product_repository=product_repository,
        booking_repository=booking_repository,
    )

    auth_tokens = parse_token_config(os.getenv("AUTH_TOKENS", ""))
    if not auth_tokens:
        logger.warning("No AUTH_TOKENS configured - only the development token will be accepted")
        auth_tokens = {"dummy-token-for-development": "dev-user"}

    app = create_app(
        product_repository=product_repository,
        service_repository=service_repository,
        news_repository=news_repository,
        booking_service=booking_service,
        user_repository=user_repository,
        contact_repository=contact_repository,
        auth_tokens=auth_tokens,
    )

    setup_observability(app)

    logger.info("Rural Connect API initialized successfully")

    return app


# Tests import this module with ENVIRONMENT=test and get an empty placeholder app
if os.getenv("ENVIRONMENT") != "test":  # noqa: SIM108
    app = create_application()
else:
    app = FastAPI()


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", "8000"))
    host = os.getenv("HOST", "0.0.0.0")

    logger.info(f"Starting development server on {host}:{port}")
    logger.info(f"API documentation available at http://{host}:{port}/docs")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
