"""Authentication routes for the API."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from resume_builder.api.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from resume_builder.services.auth import authenticate_user, create_user, issue_token

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(data: RegisterRequest) -> AuthResponse:
    """Create a local account and return a bearer token for it."""
    user, error = create_user(
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
        password=data.password,
        date_of_birth=data.date_of_birth,
    )
    if user is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)

    return AuthResponse(
        message="User created",
        token=issue_token(user["id"], user["email"]),
        user=user,
    )


@router.post("/login", response_model=AuthResponse)
def login(data: LoginRequest) -> AuthResponse:
    """Exchange email and password for a bearer token."""
    user = authenticate_user(data.email, data.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    return AuthResponse(
        message="Login successful",
        token=issue_token(user["id"], user["email"]),
        user=user,
    )
