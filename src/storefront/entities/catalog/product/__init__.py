"""Entity package: Product."""

from .entity import Product, ProductCreate, ProductDetail, ProductUpdate
from .repository import ProductRepository
from .table import ProductPlatformLink, ProductTable

__all__ = [
    "Product",
    "ProductCreate",
    "ProductDetail",
    "ProductPlatformLink",
    "ProductRepository",
    "ProductTable",
    "ProductUpdate",
]
