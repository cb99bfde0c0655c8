"""Application-level exceptions.

Raised by the service layer and translated into HTTP responses by the
exception handlers registered on the FastAPI application.
"""


class ProductStoreError(Exception):
    """Base class for all product store errors."""


class ProductNotFoundError(ProductStoreError):
    """A requested product id has no stored record."""

    def __init__(self, product_id: int, message: str | None = None) -> None:
        self.product_id = product_id
        super().__init__(message or f"Product with id '{product_id}' was not found.")

    @property
    def message(self) -> str:
        return str(self)
