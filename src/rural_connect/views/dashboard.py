"""Dashboard view state: catalog browsing, cart, orders, and profile."""

import logging
from dataclasses import dataclass
from datetime import datetime

from pydantic import ValidationError

from rural_connect.models.booking_models import Booking, ProfileUpdate, UserProfile
from rural_connect.models.cart_models import CartItem
from rural_connect.models.catalog_models import Product
from rural_connect.services.api_client import RuralConnectClient
from rural_connect.services.cart_service import CartManager
from rural_connect.services.catalog_filter import ALL_CATEGORIES, filter_products, list_categories
from rural_connect.services.order_service import OrderService

logger = logging.getLogger(__name__)

OVERVIEW_TAB = "overview"
PRODUCTS_TAB = "products"
CART_TAB = "cart"
BOOKINGS_TAB = "bookings"

PROFILE_UPDATED_MESSAGE = "Profile updated successfully!"
PROFILE_FAILED_MESSAGE = "Failed to update profile. Please try again."


@dataclass
class Tab:
    id: str
    label: str


def format_booking_date(created_at: datetime) -> str:
    """Long date as shown on order cards, e.g. "15 December 2024"."""
    return f"{created_at.day} {created_at:%B %Y}"


def status_label(booking: Booking) -> str:
    """Capitalized status, e.g. "Pending"."""
    return booking.status.value.capitalize()


def item_count_label(booking: Booking) -> str:
    """Line count, e.g. "1 item" or "3 items"."""
    count = len(booking.items)
    return f"{count} item{'s' if count > 1 else ''}"


class DashboardView:
    """State behind the signed-in customer's dashboard.

    Search, category and tab selections last for the page session only; the
    cart is the only state that survives a reload.
    """

    def __init__(
        self,
        client: RuralConnectClient,
        cart: CartManager,
        order_service: OrderService,
        user: UserProfile,
    ) -> None:
        self.client = client
        self.cart = cart
        self.order_service = order_service
        self.user = user

        self.active_tab = OVERVIEW_TAB
        self.products: list[Product] = []
        self.bookings: list[Booking] = []
        self.editing_profile = False
        self.profile_form = {"name": user.name, "phone": user.phone}
        self.search_term = ""
        self.selected_category = ALL_CATEGORIES
        self.is_loading = False
        self.alert: str | None = None

    async def mount(self) -> None:
        """Load products, bookings, and the saved cart."""
        await self.fetch_products()
        await self.fetch_bookings()
        self.cart.load()

    async def fetch_products(self) -> None:
        self.is_loading = True
        try:
            products = await self.client.get_products()
            if products is not None:
                self.products = products
        finally:
            self.is_loading = False

    async def fetch_bookings(self) -> None:
        bookings = await self.client.get_bookings()
        if bookings is not None:
            self.bookings = bookings

    @property
    def tabs(self) -> list[Tab]:
        return [
            Tab(OVERVIEW_TAB, "Overview"),
            Tab(PRODUCTS_TAB, "Products"),
            Tab(CART_TAB, f"Cart ({self.cart.count})"),
            Tab(BOOKINGS_TAB, "My Orders"),
        ]

    def select_tab(self, tab_id: str) -> None:
        if tab_id not in {tab.id for tab in self.tabs}:
            raise ValueError(f"Unknown tab: {tab_id}")
        self.active_tab = tab_id

    @property
    def filtered_products(self) -> list[Product]:
        return filter_products(self.products, self.search_term, self.selected_category)

    @property
    def categories(self) -> list[str]:
        return list_categories(self.products)

    @property
    def cart_items(self) -> list[CartItem]:
        return self.cart.items

    @property
    def total_cart_amount(self) -> int:
        return self.cart.total

    def add_to_cart(self, product: Product) -> bool:
        """Add a product unless it is out of stock.

        Returns:
            True if the cart changed
        """
        if not product.in_stock:
            return False
        self.cart.add(product)
        return True

    def update_quantity(self, product_id: str, quantity: int) -> None:
        self.cart.set_quantity(product_id, quantity)

    def remove_from_cart(self, product_id: str) -> None:
        self.cart.remove(product_id)

    async def place_order(self) -> bool:
        """Submit the cart and switch to the orders tab on success.

        Returns:
            True if the order was placed
        """
        self.is_loading = True
        try:
            result = await self.order_service.place_order()
        finally:
            self.is_loading = False

        if not result.success:
            self.alert = result.error_message
            return False

        if result.bookings is not None:
            self.bookings = result.bookings
        self.active_tab = BOOKINGS_TAB
        return True

    def toggle_profile_editing(self) -> None:
        self.editing_profile = not self.editing_profile

    async def update_profile(self) -> bool:
        """Send the profile form and report the outcome through ``alert``."""
        try:
            update = ProfileUpdate(name=self.profile_form["name"], phone=self.profile_form["phone"])
        except ValidationError as e:
            logger.warning(f"Rejected profile form: {e}")
            self.alert = PROFILE_FAILED_MESSAGE
            return False

        if not await self.client.update_profile(update):
            self.alert = PROFILE_FAILED_MESSAGE
            return False

        self.user = self.user.model_copy(update={"name": update.name, "phone": update.phone})
        self.editing_profile = False
        self.alert = PROFILE_UPDATED_MESSAGE
        return True
