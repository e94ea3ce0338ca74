"""Booking service for creating and listing customer orders."""

import logging
import uuid
from datetime import UTC, datetime

from rural_connect.models.booking_models import (
    Booking,
    BookingItem,
    BookingRequest,
    BookingStatus,
)
from rural_connect.repositories.booking_repositories import BookingRepository
from rural_connect.repositories.catalog_repositories import ProductRepository

logger = logging.getLogger(__name__)


class BookingError(Exception):
    """Base class for booking failures that map to an HTTP status code."""

    status_code = 400


class ProductNotFoundError(BookingError):
    """A requested product does not exist."""

    status_code = 404


class InsufficientStockError(BookingError):
    """A requested product is out of stock or short on units."""

    status_code = 400


class BookingPersistenceError(BookingError):
    """The booking could not be stored."""

    status_code = 500


class BookingService:
    """Creates bookings priced from the product catalog.

    Line prices and the total are always recomputed from the stored products;
    the client-supplied total is only compared and logged.
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        booking_repository: BookingRepository,
    ) -> None:
        """Initialize the BookingService.

        Args:
            product_repository: Repository used to price requested products
            booking_repository: Repository for storing bookings
        """
        self.product_repository = product_repository
        self.booking_repository = booking_repository

    async def create_booking(self, user_id: str, request: BookingRequest) -> Booking:
        """Create a pending booking for a customer.

        Args:
            user_id: Customer placing the order
            request: Requested product ids, quantities, and client total

        Returns:
            The stored Booking

        Raises:
            ProductNotFoundError: If a product id is unknown
            InsufficientStockError: If a product cannot cover the quantity
            BookingPersistenceError: If the booking could not be saved
        """
        items: list[BookingItem] = []

        for line in request.items:
            product = self.product_repository.get(line.product)
            if product is None:
                raise ProductNotFoundError(f"Product {line.product} not found")

            if not product.in_stock or product.stock_quantity < line.quantity:
                raise InsufficientStockError(f"Insufficient stock for {product.name}")

            items.append(BookingItem(product=product, quantity=line.quantity, price=product.price))

        total_amount = sum(item.line_total for item in items)
        if total_amount != request.total_amount:
            logger.warning(
                f"Client total {request.total_amount} differs from catalog total {total_amount} "
                f"for user {user_id}"
            )

        booking = Booking(
            id=f"bkg_{uuid.uuid4().hex[:12]}",
            user_id=user_id,
            items=items,
            total_amount=total_amount,
            status=BookingStatus.PENDING,
            created_at=datetime.now(UTC),
        )

        if not self.booking_repository.save_booking(booking):
            raise BookingPersistenceError("Failed to save booking")

        logger.info(f"Booking {booking.id} created for user {user_id} totalling {total_amount}")
        return booking

    async def get_bookings_for_user(self, user_id: str) -> list[Booking]:
        """List a customer's bookings, most recent first.

        Args:
            user_id: Customer identifier

        Returns:
            List of bookings, empty list if none found
        """
        bookings = self.booking_repository.list_bookings_for_user(user_id)
        return bookings if bookings else []
