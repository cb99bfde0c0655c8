"""Product application service."""

from loguru import logger

from src.product_store.core.exceptions import ProductNotFoundError
from src.product_store.entities.product import Category, Product, ProductRepository


class ProductService:
    """Orchestrates repository calls and applies not-found and id rules."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def create(self, product: Product) -> Product:
        """Persist ``product`` as a new record, ignoring any supplied id."""
        created = self._repository.save(product.model_copy(update={"id": None}))
        logger.info("Created product {} ({})", created.id, created.name)
        return created

    def find_by_id(self, product_id: int) -> Product:
        product = self._repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def update(self, product_id: int, product: Product) -> Product:
        """Overwrite the stored product with ``product``'s fields.

        The id always comes from ``product_id``. Raises ProductNotFoundError
        when nothing is stored under that id; there is no upsert.
        """
        self.find_by_id(product_id)
        updated = self._repository.save(product.model_copy(update={"id": product_id}))
        logger.info("Updated product {}", product_id)
        return updated

    def delete(self, product_id: int) -> None:
        """Remove the product. Deleting an unknown id succeeds silently."""
        self._repository.delete_by_id(product_id)
        logger.info("Deleted product {}", product_id)

    def find_all(self) -> list[Product]:
        return self._repository.find_all()

    def find_by_name(self, name: str) -> list[Product]:
        return self._repository.find_by_name(name)

    def find_by_category(self, category: Category) -> list[Product]:
        return self._repository.find_by_category(category)

    def find_by_availability(self, available: bool) -> list[Product]:
        return self._repository.find_by_available(available)


def filter_products(
    service: ProductService,
    name: str | None = None,
    category: str | None = None,
    available: bool | None = None,
) -> list[Product]:
    """List products, filtered by at most one of name, category or availability.

    Precedence is name, then category, then availability. A category that
    names no known member falls back to the full, unfiltered list.
    """
    if name:
        return service.find_by_name(name)

    if category:
        category_member = Category.parse(category)
        if category_member is None:
            logger.debug("Unknown category filter {!r}; listing all products", category)
            return service.find_all()
        return service.find_by_category(category_member)

    if available is not None:
        return service.find_by_availability(available)

    return service.find_all()
