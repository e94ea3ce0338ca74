"""Shared pytest fixtures and configuration for all tests."""

from datetime import UTC, datetime

import pytest

from rural_connect.models.booking_models import Booking, BookingItem, BookingStatus, UserProfile
from rural_connect.models.catalog_models import Product, ProductCategory
from rural_connect.storage.local_storage import TOKEN_KEY, LocalStorage


@pytest.fixture
def mock_user_id() -> str:
    """Fixture providing a standard test user ID."""
    return "user_123456"


@pytest.fixture
def mock_token() -> str:
    """Fixture providing a standard test bearer token."""
    return "tok_test_abc"


@pytest.fixture
def rice() -> Product:
    """Fixture providing a ₹450 grocery product."""
    return Product(
        id="prod_rice",
        name="Premium Basmati Rice (5kg)",
        description="Premium quality aged basmati rice.",
        price=450,
        category=ProductCategory.GROCERIES,
        in_stock=True,
        stock_quantity=100,
        image="https://example.com/rice.jpg",
        sort_order=0,
    )


@pytest.fixture
def paracetamol() -> Product:
    """Fixture providing a ₹25 medicine product."""
    return Product(
        id="prod_para",
        name="Paracetamol Tablets (Strip of 10)",
        description="Pain relief and fever reducer.",
        price=25,
        category=ProductCategory.MEDICINES,
        in_stock=True,
        stock_quantity=300,
        sort_order=1,
    )


@pytest.fixture
def sold_out_lantern() -> Product:
    """Fixture providing an out-of-stock electronics product."""
    return Product(
        id="prod_lantern",
        name="Solar LED Lantern",
        description="Portable solar-powered lantern.",
        price=450,
        category=ProductCategory.ELECTRONICS,
        in_stock=False,
        stock_quantity=0,
        sort_order=2,
    )


@pytest.fixture
def sample_booking(rice: Product, mock_user_id: str) -> Booking:
    """Fixture providing a pending one-line booking."""
    return Booking(
        id="bkg_1",
        user_id=mock_user_id,
        items=[BookingItem(product=rice, quantity=1, price=450)],
        total_amount=450,
        status=BookingStatus.PENDING,
        created_at=datetime(2024, 12, 15, 10, 30, tzinfo=UTC),
    )


@pytest.fixture
def sample_user(mock_user_id: str) -> UserProfile:
    """Fixture providing a customer profile."""
    return UserProfile(id=mock_user_id, name="Asha Devi", phone="9876543210")


@pytest.fixture
def storage(tmp_path) -> LocalStorage:
    """Fixture providing an empty local storage file in a temp directory."""
    return LocalStorage(storage_file=str(tmp_path / "storage.json"))


@pytest.fixture
def signed_in_storage(storage: LocalStorage, mock_token: str) -> LocalStorage:
    """Fixture providing local storage holding a bearer token."""
    storage.set_item(TOKEN_KEY, mock_token)
    return storage
