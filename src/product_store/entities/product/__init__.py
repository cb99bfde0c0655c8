"""Entity package: Product.

- entity.py: Domain model with validation
- table.py: Database persistence model
- repository.py: Data access port and its SQL adapter
"""

from .entity import Category, Product
from .repository import ProductRepository, SqlProductRepository
from .table import ProductTable

__all__ = [
    "Category",
    "Product",
    "ProductRepository",
    "ProductTable",
    "SqlProductRepository",
]
