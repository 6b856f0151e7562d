from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger as default_logger

from src.product_api.core.services.database.unit_of_work import UnitOfWork
from src.product_api.core.services.tracing import LogTracer, Tracer
from src.product_api.entities.core import utc_now
from src.product_api.entities.service.product import (
    CreateProductDto,
    Product,
    ProductDto,
    ProductRepository,
    UpdateProductDto,
)

if TYPE_CHECKING:
    from loguru import Logger


class ProductService:
    """Product use cases: one repository call and at most one commit each.

    Missing products are reported as ``None``/``False`` rather than raised.
    Store errors propagate unchanged. Every use case runs inside a tracer span.
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        unit_of_work: UnitOfWork,
        logger: Logger | None = None,
        tracer: Tracer | None = None,
    ):
        self._products = product_repository
        self._uow = unit_of_work
        self._logger = (logger or default_logger).bind(component="product_service")
        self._tracer = tracer or LogTracer(self._logger)

    def get_all_products(self) -> list[ProductDto]:
        with self._tracer.span("product.get_all"):
            self._logger.info("Getting all products")
            return [ProductDto.from_entity(p) for p in self._products.get_all()]

    def get_product_by_id(self, product_id: str) -> ProductDto | None:
        with self._tracer.span("product.get_by_id", product_id=product_id):
            self._logger.info(
                "Getting product with id: {}", product_id, product_id=product_id
            )
            product = self._products.get_by_id(product_id)
            if product is None:
                self._logger.warning(
                    "Product with id {} not found", product_id, product_id=product_id
                )
                return None
            return ProductDto.from_entity(product)

    def create_product(self, create_dto: CreateProductDto) -> ProductDto:
        with self._tracer.span("product.create"):
            self._logger.info("Creating new product: {}", create_dto.name)
            product = Product(
                name=create_dto.name,
                description=create_dto.description,
                price=create_dto.price,
                stock=create_dto.stock,
                is_active=True,
                created_at=utc_now(),
            )

            self._products.add(product)
            self._uow.commit()

            return ProductDto.from_entity(product)

    def update_product(
        self, product_id: str, update_dto: UpdateProductDto
    ) -> ProductDto | None:
        with self._tracer.span("product.update", product_id=product_id):
            self._logger.info(
                "Updating product with id: {}", product_id, product_id=product_id
            )
            product = self._products.get_by_id(product_id)
            if product is None:
                self._logger.warning(
                    "Product with id {} not found for update",
                    product_id,
                    product_id=product_id,
                )
                return None

            changes = update_dto.changes()
            changes["updated_at"] = utc_now()
            product = product.model_copy(update=changes)

            self._products.update(product)
            self._uow.commit()

            return ProductDto.from_entity(product)

    def delete_product(self, product_id: str) -> bool:
        with self._tracer.span("product.delete", product_id=product_id):
            self._logger.info(
                "Deleting product with id: {}", product_id, product_id=product_id
            )
            product = self._products.get_by_id(product_id)
            if product is None:
                self._logger.warning(
                    "Product with id {} not found for deletion",
                    product_id,
                    product_id=product_id,
                )
                return False

            self._products.delete(product)
            self._uow.commit()
            return True
