"""Product database table model."""

from decimal import Decimal

from sqlalchemy import Column, Enum as SAEnum, Numeric
from sqlmodel import Field, SQLModel

from src.product_store.entities.product.entity import Category


class ProductTable(SQLModel, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, index=True)
    description: str = Field(max_length=250)
    price: Decimal = Field(sa_column=Column(Numeric(10, 2), nullable=False))
    available: bool = Field(default=True, index=True)
    category: Category = Field(
        sa_column=Column(
            SAEnum(Category, name="product_category"), nullable=False, index=True
        )
    )
