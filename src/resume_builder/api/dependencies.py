"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from resume_builder.services.auth import decode_token, get_user

_bearer = HTTPBearer(auto_error=False, description="JWT issued by /api/auth/login")


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
) -> int:
    """Resolve the authenticated user from the bearer token.

    Args:
        credentials: Parsed ``Authorization: Bearer <token>`` header, if any.

    Returns:
        int: ID of the authenticated user.

    Raises:
        HTTPException: 401 if the token is missing or its user no longer
            exists, 403 if the token is invalid or expired.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token required",
        )

    payload = decode_token(credentials.credentials)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )

    user_id = payload["userId"]
    if get_user(user_id) is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    return user_id
