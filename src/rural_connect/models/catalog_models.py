"""Catalog data models.

These models represent the read-only reference data served to customers:
products, service listings, and news items. They are stored in DynamoDB and
exposed over the REST API with camelCase field names.
"""

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ProductCategory(str, Enum):
    """Enumeration of product categories."""

    GROCERIES = "groceries"
    MEDICINES = "medicines"
    HOUSEHOLD = "household"
    ELECTRONICS = "electronics"
    AGRICULTURE = "agriculture"
    CLOTHING = "clothing"


class CatalogModel(BaseModel):
    """Base model for catalog entities using camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Product(CatalogModel):
    """Product available for purchase."""

    id: str = Field(..., description="Unique product identifier")
    name: str = Field(..., description="Product name")
    description: str = Field(..., description="Product description")
    price: int = Field(..., description="Price in rupees", gt=0)
    category: ProductCategory = Field(..., description="Product category")
    in_stock: bool = Field(default=True, description="Whether the product can be ordered")
    stock_quantity: int = Field(default=0, description="Units available", ge=0)
    image: str | None = Field(None, description="URL to product image")
    sort_order: int = Field(default=0, description="Display order in listings")

    def to_dynamodb_item(self) -> dict[str, Any]:
        """Convert to DynamoDB item format.

        Returns:
            dict: DynamoDB-compatible representation
        """
        item: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category.value,
            "in_stock": self.in_stock,
            "stock_quantity": self.stock_quantity,
            "sort_order": self.sort_order,
        }

        if self.image is not None:
            item["image"] = self.image

        return item

    @classmethod
    def from_dynamodb_item(cls, item: dict[str, Any]) -> "Product":
        """Create Product from DynamoDB item.

        DynamoDB returns numbers as Decimal, so numeric fields are coerced to int.

        Args:
            item: DynamoDB item dictionary

        Returns:
            Product: Parsed model instance
        """
        return cls(
            id=item["id"],
            name=item["name"],
            description=item["description"],
            price=int(item["price"]),
            category=ProductCategory(item["category"]),
            in_stock=item.get("in_stock", True),
            stock_quantity=int(item.get("stock_quantity", 0)),
            image=item.get("image"),
            sort_order=int(item.get("sort_order", 0)),
        )


class Service(CatalogModel):
    """Service listing shown on the home page."""

    id: str = Field(..., description="Unique service identifier")
    name: str = Field(..., description="Service name")
    description: str = Field(..., description="Service description")
    icon: str = Field(default="package", description="Icon tag mapped to a glyph by the client")
    sort_order: int = Field(default=0, description="Display order in listings")

    def to_dynamodb_item(self) -> dict[str, Any]:
        """Convert to DynamoDB item format."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
            "sort_order": self.sort_order,
        }

    @classmethod
    def from_dynamodb_item(cls, item: dict[str, Any]) -> "Service":
        """Create Service from DynamoDB item."""
        return cls(
            id=item["id"],
            name=item["name"],
            description=item["description"],
            icon=item.get("icon", "package"),
            sort_order=int(item.get("sort_order", 0)),
        )


class NewsItem(CatalogModel):
    """News article shown on the home page."""

    id: str = Field(..., description="Unique news identifier")
    title: str = Field(..., description="Headline")
    description: str = Field(..., description="Article summary")
    category: str = Field(..., description="News category (e.g., 'health')")
    published: date = Field(..., alias="date", description="Publication date")
    author: str = Field(..., description="Publishing author or department")
    sort_order: int = Field(default=0, description="Display order in listings")

    def to_dynamodb_item(self) -> dict[str, Any]:
        """Convert to DynamoDB item format."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "date": self.published.isoformat(),
            "author": self.author,
            "sort_order": self.sort_order,
        }

    @classmethod
    def from_dynamodb_item(cls, item: dict[str, Any]) -> "NewsItem":
        """Create NewsItem from DynamoDB item."""
        return cls(
            id=item["id"],
            title=item["title"],
            description=item["description"],
            category=item["category"],
            published=date.fromisoformat(item["date"]),
            author=item["author"],
            sort_order=int(item.get("sort_order", 0)),
        )
