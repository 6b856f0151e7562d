"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
- dto.py: Transfer objects for the HTTP surface
"""

from .service.product import (
    CreateProductDto,
    Product,
    ProductDto,
    ProductRepository,
    ProductTable,
    UpdateProductDto,
)

__all__ = [
    "Product",
    "ProductTable",
    "ProductRepository",
    "CreateProductDto",
    "UpdateProductDto",
    "ProductDto",
]
