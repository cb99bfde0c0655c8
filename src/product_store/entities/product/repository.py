"""Product data access.

``ProductRepository`` is the port the service layer depends on;
``SqlProductRepository`` is the SQLModel adapter used by the API.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from loguru import logger
from sqlalchemy import delete as sa_delete
from sqlmodel import Session, func, select

from src.product_store.entities.product.entity import Category, Product
from src.product_store.entities.product.table import ProductTable


class ProductRepository(ABC):
    """Storage-access abstraction over the Product collection."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Insert when ``product.id`` is unset, otherwise update that row."""

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product | None:
        """Return the product with this id, or None."""

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product in insertion order."""

    @abstractmethod
    def find_by_name(self, name: str) -> list[Product]:
        """Return products whose name equals ``name`` exactly."""

    @abstractmethod
    def find_by_category(self, category: Category) -> list[Product]:
        """Return products in ``category``."""

    @abstractmethod
    def find_by_available(self, available: bool) -> list[Product]:
        """Return products whose availability equals ``available``."""

    @abstractmethod
    def delete_by_id(self, product_id: int) -> None:
        """Remove the row with this id. Absent ids are ignored."""

    @abstractmethod
    def delete_all(self) -> None:
        """Remove every product."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored products."""

    def delete(self, product: Product) -> None:
        """Remove the stored row matching ``product.id``."""
        if product.id is not None:
            self.delete_by_id(product.id)


class SqlProductRepository(ProductRepository):
    """Data-access layer for products backed by a SQLModel session.

    Every mutating call commits, so each operation is its own transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, product: Product) -> Product:
        data = product.model_dump(exclude={"id"})
        row = None
        if product.id is not None:
            row = self._session.get(ProductTable, product.id)

        if row is None:
            row = ProductTable(id=product.id, **data)
            self._session.add(row)
        else:
            for field, value in data.items():
                setattr(row, field, value)

        self._session.commit()
        self._session.refresh(row)
        logger.debug("Saved product row {}", row.id)
        return Product.model_validate(row)

    def find_by_id(self, product_id: int) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row)

    def find_all(self) -> list[Product]:
        return self._select(select(ProductTable))

    def find_by_name(self, name: str) -> list[Product]:
        return self._select(select(ProductTable).where(ProductTable.name == name))

    def find_by_category(self, category: Category) -> list[Product]:
        return self._select(
            select(ProductTable).where(ProductTable.category == category)
        )

    def find_by_available(self, available: bool) -> list[Product]:
        return self._select(
            select(ProductTable).where(ProductTable.available == available)
        )

    def delete_by_id(self, product_id: int) -> None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            logger.debug("No product row {} to delete", product_id)
            return
        self._session.delete(row)
        self._session.commit()

    def delete_all(self) -> None:
        self._session.exec(sa_delete(ProductTable))
        self._session.commit()

    def count(self) -> int:
        return self._session.exec(select(func.count()).select_from(ProductTable)).one()

    def _select(self, statement) -> list[Product]:
        rows = self._session.exec(statement.order_by(ProductTable.id)).all()
        return [Product.model_validate(row) for row in rows]
