"""Core services exports."""

# Database Service
from .database.db_session import DbSessionService

# Product Services
from .product_service import ProductService, filter_products

__all__ = [
    # Database Service
    "DbSessionService",
    # Product Services
    "ProductService",
    "filter_products",
]
