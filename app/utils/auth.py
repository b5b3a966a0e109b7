"""
Authentication helpers
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from uuid import UUID

from jose import JWTError, jwt
from fastapi import Header, HTTPException, status
from app.core.config import settings

logger = logging.getLogger(__name__)


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed JWT access token

    Args:
        data: claims to encode; `sub` should hold the profile id
        expires_delta: lifetime, defaults to ACCESS_TOKEN_EXPIRE_MINUTES

    Returns:
        str: encoded JWT
    """
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def verify_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Decode a JWT token

    Returns:
        Dict: the token payload, or None when the token is invalid or expired
    """
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None


def _profile_id_from_header(authorization: Optional[str]) -> Optional[UUID]:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None

    payload = verify_token(parts[1])
    if not payload or not payload.get("sub"):
        return None
    try:
        return UUID(payload["sub"])
    except ValueError:
        return None


def login_redirect() -> HTTPException:
    """Exception that sends the client to the login page"""
    return HTTPException(
        status_code=status.HTTP_303_SEE_OTHER,
        detail="Login required",
        headers={"Location": settings.LOGIN_URL},
    )


async def get_current_profile_id(authorization: Optional[str] = Header(None)) -> UUID:
    """
    Profile id of the logged-in user, from the `Authorization: Bearer` header

    Unauthenticated requests are redirected to the login page instead of
    receiving an error.
    """
    profile_id = _profile_id_from_header(authorization)
    if profile_id is None:
        logger.info("Unauthenticated request, redirecting to %s", settings.LOGIN_URL)
        raise login_redirect()
    return profile_id


async def get_optional_profile_id(authorization: Optional[str] = Header(None)) -> Optional[UUID]:
    """
    Profile id of the logged-in user, or None for anonymous visitors
    """
    return _profile_id_from_header(authorization)
