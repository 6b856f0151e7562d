"""Product API router with CRUD operations."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from src.product_api.api.http.deps import get_product_service
from src.product_api.core.services import ProductService
from src.product_api.entities.service.product import (
    CreateProductDto,
    ProductDto,
    UpdateProductDto,
)

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=list[ProductDto])
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductDto]:
    """List all products."""
    return service.get_all_products()


@router.get(
    "/{product_id}",
    response_model=ProductDto,
    responses={404: {"description": "Product not found"}},
)
def get_product(
    product_id: UUID,
    service: ProductService = Depends(get_product_service),
) -> ProductDto:
    """Get a product by ID."""
    product = service.get_product_by_id(str(product_id))
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post("", response_model=ProductDto, status_code=status.HTTP_201_CREATED)
def create_product(
    create_dto: CreateProductDto,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
) -> ProductDto:
    """Create a new product."""
    product = service.create_product(create_dto)
    response.headers["Location"] = str(
        request.url_for("get_product", product_id=product.id).path
    )
    return product


@router.put(
    "/{product_id}",
    response_model=ProductDto,
    responses={404: {"description": "Product not found"}},
)
def update_product(
    product_id: UUID,
    update_dto: UpdateProductDto,
    service: ProductService = Depends(get_product_service),
) -> ProductDto:
    """Apply a partial update to a product."""
    product = service.update_product(str(product_id), update_dto)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Product not found"}},
)
def delete_product(
    product_id: UUID,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Delete a product."""
    if not service.delete_product(str(product_id)):
        raise HTTPException(status_code=404, detail="Product not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
