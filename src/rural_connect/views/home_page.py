"""Home page view state: services, product showcase, news, and contact form."""

import asyncio
import logging

from pydantic import ValidationError

from rural_connect.models.booking_models import ContactMessage
from rural_connect.models.catalog_models import NewsItem, Product, Service
from rural_connect.services.api_client import RuralConnectClient
from rural_connect.services.catalog_filter import ALL_CATEGORIES, filter_products, list_categories

logger = logging.getLogger(__name__)

SERVICE_GLYPHS = {
    "truck": "truck",
    "heart": "heart",
    "shield": "shield",
    "clock": "clock",
    "users": "users",
    "package": "package",
}
DEFAULT_GLYPH = "package"

GRID_VIEW = "grid"
LIST_VIEW = "list"


def service_glyph(service: Service) -> str:
    """Glyph name for a service icon tag, "package" when the tag is unknown."""
    return SERVICE_GLYPHS.get(service.icon, DEFAULT_GLYPH)


class HomePageView:
    """State behind the public home page."""

    def __init__(self, client: RuralConnectClient) -> None:
        self.client = client

        self.services: list[Service] = []
        self.products: list[Product] = []
        self.news: list[NewsItem] = []
        self.search_term = ""
        self.selected_category = ALL_CATEGORIES
        self.contact_form = {"name": "", "message": ""}
        self.submit_status = ""
        self.view_mode = GRID_VIEW
        self.is_loading = True

    async def fetch_data(self) -> bool:
        """Load services, products, and news concurrently.

        Lists are only replaced when all three requests succeed.

        Returns:
            True if everything loaded
        """
        self.is_loading = True
        try:
            services, products, news = await asyncio.gather(
                self.client.get_services(),
                self.client.get_products(),
                self.client.get_news(),
            )
        finally:
            self.is_loading = False

        if services is None or products is None or news is None:
            logger.error("Error fetching home page data")
            return False

        self.services = services
        self.products = products
        self.news = news
        return True

    @property
    def filtered_products(self) -> list[Product]:
        return filter_products(self.products, self.search_term, self.selected_category)

    @property
    def categories(self) -> list[str]:
        return list_categories(self.products)

    def set_view_mode(self, mode: str) -> None:
        if mode not in (GRID_VIEW, LIST_VIEW):
            raise ValueError(f"Unknown view mode: {mode}")
        self.view_mode = mode

    async def submit_contact(self) -> bool:
        """Send the contact form; the form is reset only on success."""
        try:
            message = ContactMessage(**self.contact_form)
        except ValidationError as e:
            logger.warning(f"Rejected contact form: {e}")
            self.submit_status = "error"
            return False

        if await self.client.submit_contact(message):
            self.submit_status = "success"
            self.contact_form = {"name": "", "message": ""}
            return True

        self.submit_status = "error"
        return False

    def clear_submit_status(self) -> None:
        self.submit_status = ""
