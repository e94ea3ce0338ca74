"""FastAPI application for the Rural Connect REST API."""

import logging
import uuid
from datetime import UTC, datetime

from fastapi import Depends, FastAPI, Header, HTTPException
from pydantic import BaseModel

from rural_connect.auth.api_dependencies import get_user_id_from_authorization
from rural_connect.auth.token_validator import BearerTokenValidator
from rural_connect.models.booking_models import (
    Booking,
    BookingRequest,
    ContactMessage,
    ProfileUpdate,
    StoredContactMessage,
    UserProfile,
)
from rural_connect.models.catalog_models import NewsItem, Product, Service
from rural_connect.repositories.booking_repositories import ContactRepository, UserRepository
from rural_connect.repositories.catalog_repositories import (
    NewsRepository,
    ProductRepository,
    ServiceRepository,
)
from rural_connect.services.booking_service import BookingError, BookingService

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


class ContactResponse(BaseModel):
    """Acknowledgement of a contact message."""

    id: str
    message: str


def create_app(
    product_repository: ProductRepository,
    service_repository: ServiceRepository,
    news_repository: NewsRepository,
    booking_service: BookingService,
    user_repository: UserRepository,
    contact_repository: ContactRepository,
    auth_tokens: dict[str, str],
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        product_repository: Repository serving the product catalog
        service_repository: Repository serving service listings
        news_repository: Repository serving news items
        booking_service: Service for creating and listing bookings
        user_repository: Repository for customer profiles
        contact_repository: Repository for contact messages
        auth_tokens: Mapping of bearer token to user id

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Rural Connect API",
        description="Catalog, booking, and contact API for rural customers",
        version="1.0.0",
    )

    app.state.product_repository = product_repository
    app.state.service_repository = service_repository
    app.state.news_repository = news_repository
    app.state.booking_service = booking_service
    app.state.user_repository = user_repository
    app.state.contact_repository = contact_repository
    app.state.token_validator = BearerTokenValidator(tokens=auth_tokens)

    def current_user_id(authorization: str | None = Header(None)) -> str:
        """Dependency resolving the bearer token to a user id."""
        return get_user_id_from_authorization(
            authorization=authorization, validator=app.state.token_validator
        )

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy")

    @app.get("/api/products", response_model=list[Product], tags=["Catalog"])
    async def list_products() -> list[Product]:
        """List all products in display order."""
        products: list[Product] = app.state.product_repository.list_all()
        return products

    @app.get("/api/services", response_model=list[Service], tags=["Catalog"])
    async def list_services() -> list[Service]:
        """List all service listings in display order."""
        services: list[Service] = app.state.service_repository.list_all()
        return services

    @app.get("/api/news", response_model=list[NewsItem], tags=["Catalog"])
    async def list_news() -> list[NewsItem]:
        """List all news items in display order."""
        news: list[NewsItem] = app.state.news_repository.list_all()
        return news

    @app.get("/api/bookings", response_model=list[Booking], tags=["Bookings"])
    async def list_bookings(user_id: str = Depends(current_user_id)) -> list[Booking]:
        """List the caller's bookings, most recent first."""
        bookings: list[Booking] = await app.state.booking_service.get_bookings_for_user(user_id)
        return bookings

    @app.post("/api/bookings", response_model=Booking, status_code=201, tags=["Bookings"])
    async def create_booking(
        request: BookingRequest,
        user_id: str = Depends(current_user_id),
    ) -> Booking:
        """Create a pending booking priced from the catalog.

        Raises:
            HTTPException: 404 for unknown products, 400 for stock problems,
                500 if the booking could not be stored
        """
        try:
            booking: Booking = await app.state.booking_service.create_booking(user_id, request)
        except BookingError as e:
            logger.warning(f"Booking rejected for user {user_id}: {e}")
            raise HTTPException(status_code=e.status_code, detail=str(e)) from e
        return booking

    @app.put("/api/auth/profile", response_model=UserProfile, tags=["Profile"])
    async def update_profile(
        update: ProfileUpdate,
        user_id: str = Depends(current_user_id),
    ) -> UserProfile:
        """Update the caller's name and phone number."""
        profile = app.state.user_repository.update_profile(user_id, update.name, update.phone)
        if profile is None:
            raise HTTPException(status_code=500, detail="Failed to update profile")

        logger.info(f"Profile updated for user {user_id}")
        return profile

    @app.post("/api/contact", response_model=ContactResponse, status_code=201, tags=["Contact"])
    async def submit_contact(message: ContactMessage) -> ContactResponse:
        """Store a contact form message."""
        stored = StoredContactMessage(
            id=f"msg_{uuid.uuid4().hex[:12]}",
            name=message.name,
            message=message.message,
            created_at=datetime.now(UTC),
        )

        if not app.state.contact_repository.save_message(stored):
            raise HTTPException(status_code=500, detail="Failed to send message")

        return ContactResponse(id=stored.id, message="Message received")

    return app
