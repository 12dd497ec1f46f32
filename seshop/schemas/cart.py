import uuid

from pydantic import BaseModel, Field, ConfigDict


class CartItemBase(BaseModel):
    """
    Base fields for create/replace payloads.
    """

    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId", min_length=1)
    name: str
    email: str = Field(min_length=1)
    image: str
    price: float = Field(ge=0)
    quantity: int = Field(gt=0)


class CartItemCreate(CartItemBase):
    """
    Payload for adding to cart.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class CartItemUpdate(CartItemBase):
    """
    Full replacement payload for PUT /carts/{id}.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class CartItemRead(CartItemBase):
    """
    Read model for a single cart item.
    """

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: uuid.UUID = Field(alias="_id")


class CartClearResult(BaseModel):
    """
    Result of clearing an owner's cart.
    """

    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    deleted_count: int = Field(alias="deletedCount")
