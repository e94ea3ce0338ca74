"""Cart models.

Cart items live only on the client and are serialized to local storage as a
JSON array of ``{"product": {...}, "quantity": n}`` objects.
"""

from pydantic import Field

from rural_connect.models.catalog_models import CatalogModel, Product


class CartItem(CatalogModel):
    """Pairing of a product and the quantity selected."""

    product: Product = Field(..., description="Product added to the cart")
    quantity: int = Field(default=1, description="Units selected", gt=0)

    @property
    def line_total(self) -> int:
        """Price multiplied by quantity."""
        return self.product.price * self.quantity
