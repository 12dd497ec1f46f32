import uuid

from sqlmodel import SQLModel, Field


class CartItem(SQLModel, table=True):
    """
    Shopping cart entry, owned by an email address.

    One owner should not have 2 rows for the same product. This is
    enforced by CartService at insert time, not by a unique constraint.
    """

    __tablename__ = "cart_items"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    # Plain string reference; deleting a product leaves cart rows in place.
    product_id: str = Field(
        index=True,
        description="Id of the referenced product",
    )

    name: str = Field(
        description="Product name at the time it was added",
    )

    email: str = Field(
        index=True,
        description="Owner of the cart item",
    )

    image: str

    price: float = Field(
        ge=0,
        description="Unit price at the time it was added",
    )

    quantity: int = Field(
        gt=0,
        description="Must be >= 1",
    )
