"""Client for the Rural Connect REST API."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from rural_connect.models.booking_models import (
    Booking,
    BookingRequest,
    ContactMessage,
    ProfileUpdate,
)
from rural_connect.models.catalog_models import NewsItem, Product, Service
from rural_connect.storage.local_storage import TOKEN_KEY, LocalStorage

logger = logging.getLogger(__name__)


class RuralConnectClient:
    """HTTP client used by the page views.

    Catalog reads are anonymous. Booking and profile calls send the bearer
    token kept in local storage. Failed requests are logged and reported as
    None (reads, booking creation) or False (profile and contact writes);
    there is no retry.
    """

    def __init__(
        self,
        base_url: str,
        storage: LocalStorage,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL of the API (e.g., "https://ruralconnect.example.com")
            storage: Local storage holding the bearer token
            transport: Optional httpx transport (e.g., an ASGI transport in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.storage = storage
        self.transport = transport

    def _auth_headers(self) -> dict[str, str]:
        token = self.storage.get_item(TOKEN_KEY)
        return {"Authorization": f"Bearer {token}"}

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        authenticated: bool = False,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            httpx.HTTPStatusError: On non-2xx responses
            httpx.RequestError: On connection failures
            ValueError: If the body is not valid JSON
        """
        url = f"{self.base_url}{path}"
        headers = self._auth_headers() if authenticated else {}

        async with httpx.AsyncClient(transport=self.transport) as client:
            response = await client.request(method, url, headers=headers, json=json)
            response.raise_for_status()
            return response.json()

    async def _get_list(
        self,
        path: str,
        model: Any,
        authenticated: bool = False,
        envelope: str | None = None,
    ) -> list[Any] | None:
        try:
            data = await self._request("GET", path, authenticated=authenticated)
        except (httpx.HTTPStatusError, httpx.RequestError) as e:
            logger.error(f"Failed to fetch {path}: {e}")
            return None
        except ValueError as e:
            logger.error(f"Response from {path} is not JSON: {e}")
            return None

        if envelope is not None and isinstance(data, dict):
            data = data.get(envelope, [])

        try:
            return [model.model_validate(entry) for entry in data]
        except (ValidationError, TypeError) as e:
            logger.error(f"Unexpected payload from {path}: {e}")
            return None

    async def get_products(self) -> list[Product] | None:
        """Fetch the product catalog.

        Returns:
            List of Product objects, or None on failure
        """
        return await self._get_list("/api/products", Product)

    async def get_services(self) -> list[Service] | None:
        """Fetch the service listings.

        Returns:
            List of Service objects, or None on failure
        """
        return await self._get_list("/api/services", Service)

    async def get_news(self) -> list[NewsItem] | None:
        """Fetch news items.

        Returns:
            List of NewsItem objects, or None on failure
        """
        return await self._get_list("/api/news", NewsItem)

    async def get_bookings(self) -> list[Booking] | None:
        """Fetch the signed-in customer's bookings.

        Accepts both a bare list and a ``{"bookings": [...]}`` envelope.

        Returns:
            List of Booking objects, or None on failure
        """
        return await self._get_list(
            "/api/bookings", Booking, authenticated=True, envelope="bookings"
        )

    async def create_booking(self, request: BookingRequest) -> Booking | None:
        """Submit a new booking.

        Args:
            request: Product ids, quantities, and the client-computed total

        Returns:
            The created Booking, or None on failure
        """
        try:
            data = await self._request(
                "POST",
                "/api/bookings",
                json=request.model_dump(mode="json", by_alias=True),
                authenticated=True,
            )
            return Booking.model_validate(data)
        except (httpx.HTTPStatusError, httpx.RequestError) as e:
            logger.error(f"Failed to create booking: {e}")
            return None
        except ValueError as e:
            logger.error(f"Unexpected booking payload: {e}")
            return None

    async def update_profile(self, update: ProfileUpdate) -> bool:
        """Update the signed-in customer's name and phone.

        Returns:
            True if the API accepted the update, False otherwise
        """
        try:
            await self._request(
                "PUT",
                "/api/auth/profile",
                json=update.model_dump(mode="json", by_alias=True),
                authenticated=True,
            )
            return True
        except (httpx.HTTPStatusError, httpx.RequestError) as e:
            logger.error(f"Failed to update profile: {e}")
            return False
        except ValueError as e:
            logger.error(f"Profile response is not JSON: {e}")
            return False

    async def submit_contact(self, message: ContactMessage) -> bool:
        """Send a contact form message.

        Returns:
            True if the API accepted the message, False otherwise
        """
        try:
            await self._request(
                "POST",
                "/api/contact",
                json=message.model_dump(mode="json", by_alias=True),
            )
            return True
        except (httpx.HTTPStatusError, httpx.RequestError) as e:
            logger.error(f"Failed to submit contact message: {e}")
            return False
        except ValueError as e:
            logger.error(f"Contact response is not JSON: {e}")
            return False
