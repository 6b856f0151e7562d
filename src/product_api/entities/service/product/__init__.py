"""Entity package: Product."""

from .dto import CreateProductDto, ProductDto, UpdateProductDto
from .entity import Product
from .repository import ProductRepository
from .table import ProductTable

__all__ = [
    "Product",
    "ProductRepository",
    "ProductTable",
    "CreateProductDto",
    "UpdateProductDto",
    "ProductDto",
]
