"""Product API router."""

from fastapi import APIRouter, Depends, Query

from src.storefront.api.http.deps import get_product_service
from src.storefront.api.http.errors import http_errors
from src.storefront.core.services.catalog import ProductService
from src.storefront.entities.catalog.product import (
    Product,
    ProductCreate,
    ProductDetail,
    ProductUpdate,
)

router = APIRouter(prefix="/api/products", tags=["products"])


@router.post("", response_model=Product, status_code=201)
def create_product(
    payload: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a product; the slug is derived from the name unless one is given."""
    with http_errors():
        return service.create_product(payload)


@router.get("", response_model=list[Product])
def list_products(
    include_inactive: bool = Query(default=False),
    platform: str | None = Query(default=None, description="Platform name filter"),
    search: str | None = Query(default=None, description="Case-insensitive name or subtitle match"),
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    with http_errors():
        return service.list_products(
            include_inactive=include_inactive, platform=platform, search=search
        )


@router.get("/slug/{slug}", response_model=ProductDetail)
def get_product_by_slug(
    slug: str,
    service: ProductService = Depends(get_product_service),
) -> ProductDetail:
    """Public product detail page lookup."""
    with http_errors():
        return service.get_detail_by_slug(slug)


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Get a product by ID and count the view."""
    with http_errors():
        return service.record_view(product_id)


@router.put("/{product_id}", response_model=Product)
def update_product(
    product_id: str,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> Product:
    with http_errors():
        return service.update_product(product_id, payload)


@router.delete("/{product_id}")
def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> dict[str, str]:
    with http_errors():
        service.delete_product(product_id)
    return {"message": "Product deleted successfully"}
