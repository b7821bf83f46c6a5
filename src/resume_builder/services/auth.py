"""Authentication helpers for the REST API.

This module provides an email/password authentication layer backed by the
users table, plus issuing and verifying the bearer tokens the API expects.
Passwords are stored as salted PBKDF2 hashes; tokens are HS256 JWTs.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import os
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from resume_builder.data.db import get_session
from resume_builder.data.models import User

logger = logging.getLogger(__name__)

_PBKDF2_ITERATIONS = 100_000
_SALT_BYTES = 16
_MIN_PASSWORD_LENGTH = 8

_JWT_ALGORITHM = "HS256"
_DEFAULT_JWT_SECRET = "change-this-secret"
_DEFAULT_JWT_EXPIRES_DAYS = 7

_warned_default_secret = False


def _hash_password(password: str) -> str:
    """Return a salted PBKDF2 hash for the given password.

    The result is stored as ``<salt_hex>:<hash_hex>``.
    """
    salt = os.urandom(_SALT_BYTES)
    derived = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    return f"{salt.hex()}:{derived.hex()}"


def _verify_password(password: str, stored_hash: str) -> bool:
    """Verify a password against a stored ``salt:hash`` string."""
    try:
        salt_hex, hash_hex = stored_hash.split(":", 1)
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(hash_hex)
    except ValueError:
        return False

    candidate = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    return hmac.compare_digest(candidate, expected)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _user_to_dict(user: User) -> dict[str, Any]:
    return {
        "id": user.id,
        "email": user.email,
        "first_name": user.first_name,
        "last_name": user.last_name,
    }


def create_user(
    first_name: str,
    last_name: str,
    email: str,
    password: str,
    date_of_birth: str,
) -> tuple[dict[str, Any] | None, str | None]:
    """Create a new local user account.

    Returns:
        Tuple of (user info, error message). On success, error is None; on
        failure, user info is None.
    """
    email_clean = normalize_email(email)
    if not all(value.strip() for value in (first_name, last_name, email_clean, date_of_birth)):
        return None, "All fields required"
    if not password:
        return None, "All fields required"
    if len(password) < _MIN_PASSWORD_LENGTH:
        return None, f"Password min {_MIN_PASSWORD_LENGTH} chars"

    with get_session() as session:
        existing = session.query(User).filter(User.email == email_clean).first()
        if existing is not None:
            return None, "Email already exists"

        user = User(
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            email=email_clean,
            date_of_birth=date_of_birth.strip(),
            password_hash=_hash_password(password),
            auth_provider="local",
        )
        session.add(user)
        session.flush()
        logger.info("Created user %s (id %s)", email_clean, user.id)
        return _user_to_dict(user), None


def authenticate_user(email: str, password: str) -> dict[str, Any] | None:
    """Return the user info for valid local credentials, otherwise None."""
    email_clean = normalize_email(email)
    if not email_clean or not password:
        return None

    with get_session() as session:
        user = (
            session.query(User)
            .filter(User.email == email_clean, User.auth_provider == "local")
            .first()
        )
        if user is None:
            logger.info("Login failed: user not found for email %s", email_clean)
            return None
        if not _verify_password(password, user.password_hash):
            logger.info("Login failed: invalid password for email %s", email_clean)
            return None
        return _user_to_dict(user)


def get_user(user_id: int) -> dict[str, Any] | None:
    with get_session() as session:
        user = session.get(User, user_id)
        return _user_to_dict(user) if user is not None else None


def _jwt_secret() -> str:
    global _warned_default_secret
    secret = os.getenv("JWT_SECRET")
    if secret:
        return secret
    if not _warned_default_secret:
        logger.warning("JWT_SECRET is not set; using the insecure development default")
        _warned_default_secret = True
    return _DEFAULT_JWT_SECRET


def _jwt_expires_days() -> int:
    try:
        return int(os.getenv("JWT_EXPIRES_DAYS", _DEFAULT_JWT_EXPIRES_DAYS))
    except ValueError:
        logger.warning("Invalid JWT_EXPIRES_DAYS, using %d", _DEFAULT_JWT_EXPIRES_DAYS)
        return _DEFAULT_JWT_EXPIRES_DAYS


def issue_token(user_id: int, email: str) -> str:
    """Return a signed bearer token for the given user."""
    now = datetime.now(UTC)
    payload = {
        "userId": user_id,
        "email": email,
        "iat": now,
        "exp": now + timedelta(days=_jwt_expires_days()),
    }
    return jwt.encode(payload, _jwt_secret(), algorithm=_JWT_ALGORITHM)


def decode_token(token: str) -> dict[str, Any] | None:
    """Return the token payload, or None if it is invalid or expired."""
    try:
        payload = jwt.decode(token, _jwt_secret(), algorithms=[_JWT_ALGORITHM])
    except jwt.PyJWTError as exc:
        logger.debug("Rejected token: %s", exc)
        return None
    if not isinstance(payload.get("userId"), int):
        return None
    return payload
