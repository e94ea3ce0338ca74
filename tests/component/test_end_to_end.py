"""Component tests running the API client and views against the real app.

The FastAPI app is served through ``httpx.ASGITransport`` and backed by
in-memory DynamoDB tables, so requests go through routing, validation,
authentication, repositories, and model conversion.
"""

from collections import Counter

import httpx
import pytest
from fastapi import FastAPI

from rural_connect.handlers.api_handler import create_app
from rural_connect.models.booking_models import BookingStatus, ContactMessage, UserProfile
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
from rural_connect.services.api_client import RuralConnectClient
from rural_connect.services.booking_service import BookingService
from rural_connect.services.cart_service import CartManager
from rural_connect.services.catalog_filter import filter_products
from rural_connect.services.order_service import OrderService
from rural_connect.services.seed_service import SeedResult, SeedService
from rural_connect.storage.local_storage import CART_KEY, TOKEN_KEY, LocalStorage
from rural_connect.views.dashboard import BOOKINGS_TAB, DashboardView
from rural_connect.views.home_page import HomePageView, service_glyph
from tests.component.fake_dynamodb import FakeDynamoDBResource

TOKEN = "tok_asha"
USER_ID = "user_asha"


@pytest.fixture
def seeded(dynamodb: FakeDynamoDBResource) -> SeedResult:
    """Seed the catalog tables."""
    return SeedService(
        service_repository=ServiceRepository(dynamodb, "services"),
        product_repository=ProductRepository(dynamodb, "products"),
        news_repository=NewsRepository(dynamodb, "news"),
    ).seed_all()


@pytest.fixture
def app(dynamodb: FakeDynamoDBResource, seeded: SeedResult) -> FastAPI:
    """The API wired to the seeded in-memory tables."""
    product_repository = ProductRepository(dynamodb, "products")
    return create_app(
        product_repository=product_repository,
        service_repository=ServiceRepository(dynamodb, "services"),
        news_repository=NewsRepository(dynamodb, "news"),
        booking_service=BookingService(
            product_repository=product_repository,
            booking_repository=BookingRepository(dynamodb, "bookings"),
        ),
        user_repository=UserRepository(dynamodb, "users"),
        contact_repository=ContactRepository(dynamodb, "contacts"),
        auth_tokens={TOKEN: USER_ID},
    )


@pytest.fixture
def client_storage(tmp_path) -> LocalStorage:
    """Client-side storage holding the customer's token."""
    storage = LocalStorage(storage_file=str(tmp_path / "client.json"))
    storage.set_item(TOKEN_KEY, TOKEN)
    return storage


@pytest.fixture
def api_client(app: FastAPI, client_storage: LocalStorage) -> RuralConnectClient:
    """API client talking to the app in-process."""
    return RuralConnectClient(
        base_url="http://testserver",
        storage=client_storage,
        transport=httpx.ASGITransport(app=app),
    )


@pytest.mark.component
class TestSeededCatalog:
    """Seed loader and catalog endpoints together."""

    def test_seed_counts(self, seeded: SeedResult) -> None:
        """Test that seeding reports every collection."""
        assert seeded == SeedResult(services=6, products=20, news=6)

    def test_reseed_replaces_collections(
        self, dynamodb: FakeDynamoDBResource, seeded: SeedResult
    ) -> None:
        """Test that seeding twice leaves one copy of each record."""
        SeedService(
            service_repository=ServiceRepository(dynamodb, "services"),
            product_repository=ProductRepository(dynamodb, "products"),
            news_repository=NewsRepository(dynamodb, "news"),
        ).seed_all()

        assert len(dynamodb.Table("products").items) == 20
        assert len(dynamodb.Table("services").items) == 6

    @pytest.mark.asyncio
    async def test_products_after_seed(self, api_client: RuralConnectClient) -> None:
        """Test that the API serves 20 products in seed order."""
        products = await api_client.get_products()

        assert products is not None
        assert len(products) == 20
        assert products[0].name == "Premium Basmati Rice (5kg)"
        assert products[0].price == 450
        assert Counter(p.category.value for p in products) == {
            "groceries": 8,
            "medicines": 4,
            "household": 4,
            "electronics": 2,
            "agriculture": 2,
        }

    @pytest.mark.asyncio
    async def test_filter_served_products(self, api_client: RuralConnectClient) -> None:
        """Test filtering the served catalog for paracetamol in medicines."""
        products = await api_client.get_products()

        assert products is not None
        result = filter_products(products, "paracetamol", "medicines")
        assert [p.name for p in result] == ["Paracetamol Tablets (Strip of 10)"]

    @pytest.mark.asyncio
    async def test_home_page_loads(self, api_client: RuralConnectClient) -> None:
        """Test the home page view against the served catalog."""
        view = HomePageView(api_client)

        assert await view.fetch_data() is True
        assert len(view.services) == 6
        assert [service_glyph(s) for s in view.services][0] == "truck"
        assert len(view.products) == 20
        assert len(view.news) == 6
        assert view.news[0].published.year == 2024

    @pytest.mark.asyncio
    async def test_contact_message_is_stored(
        self, api_client: RuralConnectClient, dynamodb: FakeDynamoDBResource
    ) -> None:
        """Test that a contact message reaches the contacts table."""
        sent = await api_client.submit_contact(
            ContactMessage(name="Ravi", message="Do you deliver to Rampur?")
        )

        assert sent is True
        (stored,) = dynamodb.Table("contacts").items.values()
        assert stored["message"] == "Do you deliver to Rampur?"


@pytest.mark.component
class TestPlacingOrders:
    """Cart, order submission, and the bookings API together."""

    @pytest.fixture
    def cart(self, client_storage: LocalStorage) -> CartManager:
        """Empty cart in client storage."""
        return CartManager(client_storage)

    @pytest.mark.asyncio
    async def test_place_450_rupee_order(
        self, api_client: RuralConnectClient, cart: CartManager
    ) -> None:
        """Test that a one-item ₹450 order empties the cart and creates a pending booking."""
        products = await api_client.get_products()
        assert products is not None
        rice = next(p for p in products if p.price == 450 and p.category.value == "groceries")
        cart.add(rice)
        assert cart.total == 450

        result = await OrderService(api_client, cart).place_order()

        assert result.success is True
        assert cart.is_empty
        assert cart.storage.get_item(CART_KEY) == "[]"
        assert result.booking is not None
        assert result.booking.status == BookingStatus.PENDING
        assert result.booking.total_amount == 450
        assert result.booking.user_id == USER_ID
        assert result.bookings is not None
        assert [b.id for b in result.bookings] == [result.booking.id]

    @pytest.mark.asyncio
    async def test_booking_wire_format(
        self, app: FastAPI, api_client: RuralConnectClient, cart: CartManager
    ) -> None:
        """Test that the created booking is returned with camelCase fields."""
        products = await api_client.get_products()
        assert products is not None
        cart.add(products[0])
        await OrderService(api_client, cart).place_order()

        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://testserver"
        ) as raw:
            response = await raw.get(
                "/api/bookings", headers={"Authorization": f"Bearer {TOKEN}"}
            )

        assert response.status_code == 200
        booking = response.json()[0]
        assert booking["totalAmount"] == 450
        assert booking["status"] == "pending"
        assert booking["items"][0]["quantity"] == 1
        assert booking["items"][0]["product"]["stockQuantity"] == 100

    @pytest.mark.asyncio
    async def test_failed_order_keeps_cart(
        self, app: FastAPI, client_storage: LocalStorage, cart: CartManager
    ) -> None:
        """Test that a rejected token leaves the cart intact."""
        client_storage.set_item(TOKEN_KEY, "tok_revoked")
        api_client = RuralConnectClient(
            base_url="http://testserver",
            storage=client_storage,
            transport=httpx.ASGITransport(app=app),
        )
        products = await api_client.get_products()
        assert products is not None
        cart.add(products[0])

        result = await OrderService(api_client, cart).place_order()

        assert result.success is False
        assert cart.count == 1

    @pytest.mark.asyncio
    async def test_dashboard_order_and_profile(
        self, api_client: RuralConnectClient, cart: CartManager
    ) -> None:
        """Test a dashboard session: add to cart, order, then edit the profile."""
        view = DashboardView(
            client=api_client,
            cart=cart,
            order_service=OrderService(api_client, cart),
            user=UserProfile(id=USER_ID, name="Asha Devi", phone=""),
        )
        await view.mount()
        assert len(view.products) == 20
        assert view.bookings == []

        view.selected_category = "medicines"
        for product in view.filtered_products[:2]:
            view.add_to_cart(product)
        view.update_quantity(view.cart_items[0].product.id, 3)
        expected_total = view.total_cart_amount

        assert await view.place_order() is True
        assert view.active_tab == BOOKINGS_TAB
        assert len(view.bookings) == 1
        assert view.bookings[0].total_amount == expected_total
        assert view.cart_items == []

        view.profile_form = {"name": "Asha Devi", "phone": "9876543210"}
        assert await view.update_profile() is True
        assert view.user.phone == "9876543210"
