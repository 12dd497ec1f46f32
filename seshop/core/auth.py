from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from sqlmodel import Session

from seshop.core.config import Settings
from seshop.database import get_session
from seshop.models.user import User
from seshop.repositories.user_repo import UserRepository

# HTTP Bearer scheme:
# - auto_error=False => missing Authorization header will NOT raise immediately
#   so require_auth can answer with our own 401 message.
bearer_scheme = HTTPBearer(auto_error=False)

user_repo = UserRepository()


def create_access_token(
    email: str,
    settings: Settings,
    expires_minutes: int = 60,
) -> str:
    """
    Mint a signed access token for `email`.

    Used by tooling and tests; production tokens come from the identity
    provider and only need to share JWT_SECRET / JWT_ALG.
    """
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    claims = {"sub": email, "email": email, "exp": expire}
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALG)


def decode_access_token(token: str, settings: Settings) -> dict[str, Any]:
    """
    Decode and verify an access token (JWT).

    Verification:
      - signature (JWT_ALG using JWT_SECRET)
      - expiration time (exp)
      - audience is NOT verified

    Args:
        token: raw JWT from the Authorization header.

    Returns:
        Decoded JWT claims.

    Raises:
        HTTPException(401): if token is invalid/expired.
    """
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALG],
            options={"verify_aud": False},
        )
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )


def get_token_claims(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict[str, Any] | None:
    """
    Verify the bearer token, if any.

    Returns:
        Decoded claims, or None when no Authorization header was sent.

    Raises:
        HTTPException(401): if a token was sent but does not verify.
    """
    if credentials is None:
        return None
    return decode_access_token(credentials.credentials, request.app.state.settings)


def require_auth(claims: dict[str, Any] | None = Depends(get_token_claims)) -> dict[str, Any]:
    """
    Enforce a valid bearer token.

    Returns:
        The verified claims; `email` is guaranteed to be present.

    Raises:
        HTTPException(401): if no token was sent or it carries no email.
    """
    if claims is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    if not claims.get("email"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token missing email",
        )
    return claims


def get_current_user(
    claims: dict[str, Any] = Depends(require_auth),
    session: Session = Depends(get_session),
) -> User | None:
    """
    Resolve the caller's profile from the token's email claim.

    Returns:
        User instance, or None if the caller has no profile yet.
    """
    return user_repo.get_by_email(session, claims["email"])


def require_admin(user: User | None = Depends(get_current_user)) -> User:
    """
    Enforce admin role.

    Route is accessible only if:
      - the token verifies
      - a profile exists for its email
      - user.role == "admin"

    Returns:
        The authenticated admin User.

    Raises:
        HTTPException(403): if the caller is unknown or not an admin.
    """
    if user is None or user.role != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user
