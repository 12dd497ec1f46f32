import logging
import uuid

from fastapi import HTTPException, status
from sqlmodel import Session

from seshop.models.user import User
from seshop.repositories.user_repo import UserRepository
from seshop.schemas.user import (
    AdminStatus,
    UserCreate,
    UserRead,
    UserRoleUpdate,
    UserUpdate,
)

logger = logging.getLogger(__name__)

DEFAULT_PHOTO_URL = (
    "https://daisyui.com/images/stock/photo-1534528741775-53994a69daeb.jpg"
)
DEFAULT_ROLE = "user"


class UserService:
    """
    Business logic for User.

    Responsibilities:
      - refuse duplicate emails on create
      - default photo URL and role
      - orchestrate repository operations
      - map missing rows to HTTP errors
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    def list_users(self, session: Session) -> list[User]:
        return self.repo.list_all(session)

    def get_user(
        self,
        session: Session,
        user_id: uuid.UUID,
    ) -> User:
        """
        Get a user by id.

        Raises:
            HTTPException(404): if not found.
        """
        user = self.repo.get_by_id(session, user_id)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found",
            )
        return user

    def create_user(self, session: Session, payload: UserCreate) -> User:
        """
        Register a new user.

        Raises:
            HTTPException(302): if the email is already taken.
        """
        if self.repo.get_by_email(session, payload.email) is not None:
            raise HTTPException(
                status_code=status.HTTP_302_FOUND,
                detail="User already exists",
            )

        user = User(
            name=payload.name,
            email=payload.email,
            photo_url=payload.photo_url or DEFAULT_PHOTO_URL,
            role=payload.role or DEFAULT_ROLE,
        )
        return self.repo.create(session, user)

    def replace_user(
        self,
        session: Session,
        user_id: uuid.UUID,
        payload: UserUpdate,
    ) -> User:
        """
        Overwrite name, email and photo URL. Role only changes if supplied.
        """
        user = self.get_user(session, user_id)
        user.sqlmodel_update(payload.model_dump(exclude_none=True))
        return self.repo.update(session, user)

    def delete_user(self, session: Session, user_id: uuid.UUID) -> UserRead:
        """Delete a user and return what was stored."""
        user = self.get_user(session, user_id)
        deleted = UserRead.model_validate(user)
        self.repo.delete(session, user)
        return deleted

    def check_admin(self, session: Session, email: str) -> AdminStatus:
        """
        Report whether the user with `email` has the admin role.

        Raises:
            HTTPException(500): if no user has this email.
        """
        user = self.repo.get_by_email(session, email)
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"No user registered with email {email}",
            )
        return AdminStatus(is_admin=user.role == "admin")

    def update_role(
        self,
        session: Session,
        user_id: uuid.UUID,
        payload: UserRoleUpdate,
    ) -> User:
        """
        Change user's role (admin only).

        Role validation is enforced by the schema (Literal).
        """
        user = self.get_user(session, user_id)
        user.role = payload.role
        user = self.repo.update(session, user)
        logger.info("User %s role set to %s", user.id, user.role)
        return user
