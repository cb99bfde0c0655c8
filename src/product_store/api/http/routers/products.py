"""Product API router with CRUD operations."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status

from src.product_store.api.http.deps import get_product_service
from src.product_store.core.services import ProductService, filter_products
from src.product_store.entities.product import Product


router = APIRouter(prefix="/products", tags=["products"])

# Identifiers are signed 64-bit integers in the datastore
ProductId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    product: Product,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a new product. Any id in the body is ignored."""
    created_product = service.create(product)
    response.headers["Location"] = str(
        request.url_for("get_product", product_id=created_product.id)
    )
    return created_product


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: ProductId,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Get a product by ID."""
    return service.find_by_id(product_id)


@router.put("/{product_id}", response_model=Product)
def update_product(
    product_id: ProductId,
    product: Product,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Replace a product. The path id wins over any id in the body."""
    return service.update(product_id, product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: ProductId,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Delete a product."""
    service.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=list[Product])
def list_products(
    name: str | None = None,
    category: str | None = None,
    available: bool | None = None,
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    """List products filtered by name, category or availability (one at a time)."""
    return filter_products(service, name=name, category=category, available=available)
