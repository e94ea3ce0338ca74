"""Booking, profile, and contact models.

A booking is a placed order. Bookings are created through the REST API and
stored in DynamoDB with a price snapshot per line item, so later catalog price
changes do not alter historical orders.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from rural_connect.models.catalog_models import Product


class BookingStatus(str, Enum):
    """Enumeration of booking status values."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class ApiModel(BaseModel):
    """Base model using camelCase aliases on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookingItem(ApiModel):
    """Single line of a booking with the price charged at order time."""

    product: Product = Field(..., description="Snapshot of the ordered product")
    quantity: int = Field(..., description="Units ordered", gt=0)
    price: int = Field(..., description="Unit price at order time in rupees", gt=0)

    @property
    def line_total(self) -> int:
        """Price multiplied by quantity."""
        return self.price * self.quantity


class Booking(ApiModel):
    """Placed order.

    Stored in DynamoDB with id as partition key and a user_id-index GSI
    (range key created_at) for listing a customer's orders.
    """

    id: str = Field(..., description="Unique booking identifier")
    user_id: str = Field(..., description="Customer who placed the booking")
    items: list[BookingItem] = Field(..., description="Ordered line items", min_length=1)
    total_amount: int = Field(..., description="Order total in rupees", ge=0)
    status: BookingStatus = Field(default=BookingStatus.PENDING, description="Order status")
    created_at: datetime = Field(..., description="Booking creation timestamp")

    def to_dynamodb_item(self) -> dict[str, Any]:
        """Convert to DynamoDB item format.

        Returns:
            dict: DynamoDB-compatible representation
        """
        return {
            "id": self.id,
            "user_id": self.user_id,
            "items": [
                {
                    "product": item.product.to_dynamodb_item(),
                    "quantity": item.quantity,
                    "price": item.price,
                }
                for item in self.items
            ],
            "total_amount": self.total_amount,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dynamodb_item(cls, item: dict[str, Any]) -> "Booking":
        """Create Booking from DynamoDB item.

        Args:
            item: DynamoDB item dictionary

        Returns:
            Booking: Parsed model instance
        """
        return cls(
            id=item["id"],
            user_id=item["user_id"],
            items=[
                BookingItem(
                    product=Product.from_dynamodb_item(line["product"]),
                    quantity=int(line["quantity"]),
                    price=int(line["price"]),
                )
                for line in item["items"]
            ],
            total_amount=int(item["total_amount"]),
            status=BookingStatus(item["status"]),
            created_at=datetime.fromisoformat(item["created_at"]),
        )


class BookingRequestItem(ApiModel):
    """Requested line: product identifier and quantity, never a price."""

    product: str = Field(..., description="Product identifier")
    quantity: int = Field(..., description="Units requested", gt=0)


class BookingRequest(ApiModel):
    """Body of POST /api/bookings."""

    items: list[BookingRequestItem] = Field(..., description="Requested lines")
    total_amount: int = Field(..., description="Client-computed total in rupees", ge=0)

    @field_validator("items")
    @classmethod
    def validate_items(cls, v: list[BookingRequestItem]) -> list[BookingRequestItem]:
        """Validate that at least one line is requested."""
        if not v:
            raise ValueError("items must not be empty")
        return v


class ProfileUpdate(ApiModel):
    """Body of PUT /api/auth/profile."""

    name: str = Field(..., description="Display name", min_length=1)
    phone: str = Field(default="", description="Contact phone number")


class UserProfile(ApiModel):
    """Customer profile."""

    id: str = Field(..., description="User identifier")
    name: str = Field(..., description="Display name")
    phone: str = Field(default="", description="Contact phone number")

    def to_dynamodb_item(self) -> dict[str, Any]:
        """Convert to DynamoDB item format."""
        return {"id": self.id, "name": self.name, "phone": self.phone}

    @classmethod
    def from_dynamodb_item(cls, item: dict[str, Any]) -> "UserProfile":
        """Create UserProfile from DynamoDB item."""
        return cls(id=item["id"], name=item.get("name", ""), phone=item.get("phone", ""))


class ContactMessage(ApiModel):
    """Body of POST /api/contact."""

    name: str = Field(..., description="Sender name", min_length=1)
    message: str = Field(..., description="Message text", min_length=1)


class StoredContactMessage(ContactMessage):
    """Contact message as persisted."""

    id: str = Field(..., description="Message identifier")
    created_at: datetime = Field(..., description="Receipt timestamp")

    def to_dynamodb_item(self) -> dict[str, Any]:
        """Convert to DynamoDB item format."""
        return {
            "id": self.id,
            "name": self.name,
            "message": self.message,
            "created_at": self.created_at.isoformat(),
        }
