import uuid

from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    Persistent user profile.

    Identity:
      - id: generated on insert
      - email: lookup key for auth and admin checks (not unique in the schema;
        UserService refuses duplicates on create)

    Role:
      - "user" | "admin"

    Passwords live with the identity provider, not here.
    """

    __tablename__ = "users"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        description="Display name",
    )

    email: str = Field(
        index=True,
        description="Email used by the identity provider",
    )

    photo_url: str = Field(
        description="Avatar URL",
    )

    # Application role
    role: str = Field(
        default="user",
        index=True,
        description="Application role: user | admin",
    )
