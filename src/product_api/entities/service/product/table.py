"""Product database table model."""

from decimal import Decimal

from sqlmodel import Field

from src.product_api.entities.core import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "product"

    name: str = Field(max_length=200, nullable=False)
    description: str | None = Field(default=None, max_length=1000)
    price: Decimal = Field(default=Decimal("0"), max_digits=18, decimal_places=2)
    stock: int = Field(default=0)
    is_active: bool = Field(default=True)
