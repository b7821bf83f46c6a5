"""Pydantic schemas for authentication endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterRequest(_CamelModel):
    """Request schema for creating an account."""

    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")
    email: str = Field(..., description="Login email address")
    password: str = Field(..., description="Password, at least 8 characters")
    date_of_birth: str = Field(..., description="Date of birth, e.g. 1990-04-12")


class LoginRequest(_CamelModel):
    """Request schema for email/password login."""

    email: str = Field(..., description="Login email address")
    password: str = Field(..., description="Account password")


class UserInfo(_CamelModel):
    """Public account details returned after login or sign-up."""

    id: int
    email: str
    first_name: str
    last_name: str


class AuthResponse(_CamelModel):
    """Response schema carrying the issued bearer token."""

    message: str
    token: str
    user: UserInfo
