import uuid

from pydantic import BaseModel, Field, ConfigDict, field_validator


class ProductBase(BaseModel):
    """
    Shared product fields. Every field is required.
    """

    name: str = Field(max_length=255)
    price: float = Field(ge=0)
    description: str
    image: str
    category: str = Field(max_length=50)

    @field_validator("name", "description", "image", "category")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class ProductCreate(ProductBase):
    """
    Payload for creating a product.
    """

    model_config = ConfigDict(extra="forbid")


class ProductUpdate(ProductBase):
    """
    Full replacement payload for PUT /products/{id}.

    Unknown keys (e.g. `_id` echoed back by a client) are ignored.
    """

    model_config = ConfigDict(extra="ignore")


class ProductRead(ProductBase):
    """
    Product representation for clients. The id is exposed as `_id`.
    """

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: uuid.UUID = Field(alias="_id")
