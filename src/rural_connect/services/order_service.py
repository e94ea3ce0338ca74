"""Order submission from the client-side cart."""

import logging
from dataclasses import dataclass, field

from rural_connect.models.booking_models import Booking, BookingRequest, BookingRequestItem
from rural_connect.observability.decorators import traced
from rural_connect.observability.metrics import record_order_failure, record_order_placed
from rural_connect.services.api_client import RuralConnectClient
from rural_connect.services.cart_service import CartManager

logger = logging.getLogger(__name__)

ORDER_FAILED_MESSAGE = "Failed to place order. Please try again."
EMPTY_CART_MESSAGE = "Your cart is empty."


@dataclass
class OrderResult:
    """Outcome of an order submission.

    Attributes:
        success: Whether the API accepted the order
        booking: The created booking on success
        bookings: Refreshed booking list on success (None if the refresh failed)
        error_message: User-facing failure notice
    """

    success: bool
    booking: Booking | None = None
    bookings: list[Booking] | None = field(default=None)
    error_message: str | None = None


def build_booking_request(cart: CartManager) -> BookingRequest:
    """Serialize cart contents into a booking request.

    Only product ids and quantities are sent as line items; the total is
    computed from the cart prices and the server is expected to re-price.
    """
    return BookingRequest(
        items=[
            BookingRequestItem(product=item.product.id, quantity=item.quantity)
            for item in cart.items
        ],
        total_amount=cart.total,
    )


class OrderService:
    """Submits the cart as a booking and clears it on success.

    Submission is not idempotent: submitting again after a failure whose
    request actually reached the server may create a duplicate booking.
    """

    def __init__(self, client: RuralConnectClient, cart: CartManager) -> None:
        """Initialize the OrderService.

        Args:
            client: API client used to create and list bookings
            cart: Cart whose contents are submitted
        """
        self.client = client
        self.cart = cart

    @traced("place_order")
    async def place_order(self) -> OrderResult:
        """Submit the current cart.

        Returns:
            OrderResult; on failure the cart is left intact
        """
        if self.cart.is_empty:
            record_order_failure("empty_cart")
            return OrderResult(success=False, error_message=EMPTY_CART_MESSAGE)

        request = build_booking_request(self.cart)
        logger.info(
            f"Placing order with {len(request.items)} items totalling {request.total_amount}"
        )

        booking = await self.client.create_booking(request)
        if booking is None:
            record_order_failure("api_error")
            return OrderResult(success=False, error_message=ORDER_FAILED_MESSAGE)

        self.cart.clear()
        record_order_placed(booking.total_amount, len(booking.items))
        logger.info(f"Order {booking.id} placed with status {booking.status.value}")

        bookings = await self.client.get_bookings()
        return OrderResult(success=True, booking=booking, bookings=bookings)
