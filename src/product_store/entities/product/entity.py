"""Entity: Product."""

from decimal import Decimal
from enum import Enum
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    StrictBool,
    field_validator,
)

# Monetary amount; JSON clients receive a number, not a quoted decimal string.
Money = Annotated[
    Decimal,
    Field(max_digits=10, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class Category(str, Enum):
    """Closed set of product categories, serialized by member name."""

    UNKNOWN = "UNKNOWN"
    CLOTHS = "CLOTHS"
    FOOD = "FOOD"
    ELECTRONICS = "ELECTRONICS"
    HOUSEWARES = "HOUSEWARES"
    AUTOMOTIVE = "AUTOMOTIVE"
    TOOLS = "TOOLS"

    @classmethod
    def parse(cls, value: str) -> "Category | None":
        """Look a member up by name, ignoring case. Returns None for unknown names."""
        return cls.__members__.get(value.upper())


class Product(BaseModel):
    """Product entity representing an item in the store catalog.

    This is the domain model that carries validation. The identifier is
    assigned by the datastore, so it is absent until the product is saved.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int | None = Field(default=None, description="Store-assigned identifier")
    name: str = Field(min_length=1, max_length=100, description="Product name")
    description: str = Field(
        min_length=1, max_length=250, description="Product description"
    )
    price: Money = Field(description="Unit price")
    available: StrictBool = Field(description="Whether the product can be ordered")
    category: Category = Field(description="Product category")

    @field_validator("name", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def __eq__(self, other: Any) -> bool:
        """Compare products by identifier and business attributes."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.price == other.price
            and self.available == other.available
            and self.category == other.category
        )

    def __hash__(self) -> int:
        return hash((
            self.id,
            self.name,
            self.description,
            self.price,
            self.available,
            self.category,
        ))
