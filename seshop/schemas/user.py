import uuid
from typing import Literal

from pydantic import BaseModel, Field, EmailStr, ConfigDict, field_validator

# App-level roles.
Role = Literal["user", "admin"]


class UserBase(BaseModel):
    """
    Shared fields.

    Validation rules:
      - email must be a valid EmailStr
      - name cannot be empty or whitespace
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(max_length=200)
    email: EmailStr

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class UserCreate(UserBase):
    """
    Payload for POST /users.

    photoURL and role are optional; UserService fills in defaults.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    photo_url: str | None = Field(default=None, alias="photoURL")
    role: Role | None = None


class UserUpdate(UserBase):
    """
    Full replacement payload for PUT /users/{id}.
    The role is only changed when supplied.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    photo_url: str = Field(alias="photoURL")
    role: Role | None = None


class UserRead(UserBase):
    """Response schema returned to clients."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: uuid.UUID = Field(alias="_id")
    photo_url: str = Field(alias="photoURL")
    role: Role


class UserRoleUpdate(BaseModel):
    """
    Role change applied by the admin-only PATCH endpoints.
    """

    model_config = ConfigDict(extra="forbid")
    role: Role


class AdminStatus(BaseModel):
    """Answer to GET /users/admin/{email}."""

    model_config = ConfigDict(populate_by_name=True)

    is_admin: bool = Field(alias="isAdmin")
