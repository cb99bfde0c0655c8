"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model with validation
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .product import Category, Product, ProductRepository, ProductTable, SqlProductRepository

__all__ = [
    "Category",
    "Product",
    "ProductRepository",
    "ProductTable",
    "SqlProductRepository",
]
