"""Entity: Product."""

from decimal import Decimal
from typing import Any

from pydantic import Field

from src.product_api.entities.core import Entity


class Product(Entity):
    """Product entity representing an item in the catalog.

    This is the domain model handed between the repository and the service.
    It inherits from Entity to get a UUID identifier and audit timestamps.
    """

    name: str = Field(max_length=200, description="Product name")
    description: str | None = Field(
        default=None, max_length=1000, description="Product description"
    )
    price: Decimal = Field(default=Decimal("0"), description="Unit price")
    # Negative stock is accepted as-is (backorders)
    stock: int = Field(default=0, description="Units in stock")
    is_active: bool = Field(default=True, description="Whether the product is listed")

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.price == other.price
            and self.stock == other.stock
            and self.is_active == other.is_active
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.description,
            self.price,
            self.stock,
            self.is_active,
        ))
