import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from seshop.core.auth import require_auth, require_admin
from seshop.database import get_session
from seshop.repositories.user_repo import UserRepository
from seshop.schemas.user import (
    AdminStatus,
    UserCreate,
    UserRead,
    UserRoleUpdate,
    UserUpdate,
)
from seshop.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])

repo = UserRepository()
service = UserService(repo)


# -------- Public endpoints --------


@router.get("", response_model=list[UserRead])
def list_users(session: Session = Depends(get_session)):
    """
    Retrieve a list of all users.
    """
    return service.list_users(session)


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Get a user by id.
    """
    return service.get_user(session, user_id)


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_302_FOUND: {"description": "User already exists"}},
)
def create_user(
    payload: UserCreate,
    session: Session = Depends(get_session),
):
    """
    Create a new user.

    photoURL falls back to a stock avatar and role to "user".
    An already registered email answers 302 without creating anything.
    """
    return service.create_user(session, payload)


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: uuid.UUID,
    payload: UserUpdate,
    session: Session = Depends(get_session),
):
    """
    Replace a user's name, email and photoURL (and role, if sent).
    """
    return service.replace_user(session, user_id, payload)


@router.delete("/{user_id}", response_model=UserRead)
def delete_user(
    user_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Delete a user and return it.
    """
    return service.delete_user(session, user_id)


# -------- Token-protected endpoints --------


@router.get(
    "/admin/{email}",
    response_model=AdminStatus,
    dependencies=[Depends(require_auth)],
)
def check_admin(
    email: str,
    session: Session = Depends(get_session),
):
    """
    Check if a user is an admin.

    Auth:
      - Requires a valid bearer token.
    """
    return service.check_admin(session, email)


@router.patch(
    "/user/{user_id}",
    response_model=UserRead,
    dependencies=[Depends(require_admin)],
)
def demote_to_user(
    user_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Change an admin to the regular "user" role (admin only).
    """
    return service.update_role(session, user_id, UserRoleUpdate(role="user"))


@router.patch(
    "/admin/{user_id}",
    response_model=UserRead,
    dependencies=[Depends(require_admin)],
)
def promote_to_admin(
    user_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Change a regular user to the "admin" role (admin only).
    """
    return service.update_role(session, user_id, UserRoleUpdate(role="admin"))
