"""Product repository."""

from src.product_api.core.repositories.repository import Repository

from .entity import Product
from .table import ProductTable


class ProductRepository(Repository[Product, ProductTable]):
    """Data-access layer for products."""

    entity_type = Product
    table_type = ProductTable
