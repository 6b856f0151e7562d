"""Transfer objects for the Product HTTP surface.

JSON field names are camelCase (``isActive``); snake_case names are accepted
on input as well.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from .entity import Product

# Prices travel as JSON numbers, not strings
JsonDecimal = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]

_NULLABLE_FIELDS = frozenset({"description"})


class _Dto(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CreateProductDto(_Dto):
    """Input for creating a product."""

    name: str = Field(min_length=1, max_length=200, description="Product name")
    description: str | None = Field(
        default=None, max_length=1000, description="Product description"
    )
    price: Decimal = Field(
        default=Decimal("0"), max_digits=18, decimal_places=2, description="Unit price"
    )
    stock: int = Field(default=0, description="Units in stock")


class UpdateProductDto(_Dto):
    """Partial update: only the fields present and non-null are applied.

    Omitting a field, or sending ``null`` for one that cannot be empty, leaves
    it unchanged. ``description`` is nullable, so an explicit ``null`` clears it.
    """

    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    price: Decimal | None = Field(default=None, max_digits=18, decimal_places=2)
    stock: int | None = None
    is_active: bool | None = None

    def changes(self) -> dict[str, Any]:
        """Return the applicable fields keyed by entity attribute name."""
        supplied = self.model_dump(exclude_unset=True)
        return {
            field_name: value
            for field_name, value in supplied.items()
            if value is not None or field_name in _NULLABLE_FIELDS
        }


class ProductDto(_Dto):
    """Product as returned to clients."""

    id: str
    name: str
    description: str | None = None
    price: JsonDecimal
    stock: int
    is_active: bool

    @classmethod
    def from_entity(cls, product: Product) -> ProductDto:
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            stock=product.stock,
            is_active=product.is_active,
        )
