import uuid

from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    """
    Product catalog entry.

    All descriptive fields are required; the id is generated on insert.
    """

    __tablename__ = "products"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        index=True,
        description="Display name of the product",
    )

    price: float = Field(
        ge=0,
        description="Unit price",
    )

    description: str = Field(
        description="Long description shown on the product page",
    )

    image: str = Field(
        description="Image URL",
    )

    category: str = Field(
        index=True,
        description="Product category",
    )
