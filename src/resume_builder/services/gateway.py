"""HTTP client for the resume persistence API.

Each authenticated user owns exactly one resume on the server. The gateway
saves (replacing), loads and deletes it, carrying the bearer token issued
at login on every request.

This is the system boundary: tests drive it against the in-process app
through FastAPI's ``TestClient``, which is an ``httpx.Client``.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import httpx

from resume_builder.models.exceptions import AuthorizationError, GatewayError
from resume_builder.models.resume import Resume

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_API_URL", "ResumeGateway"]

DEFAULT_API_URL = "http://localhost:8000/api"
_TIMEOUT = 10.0


class ResumeGateway:
    """Save, load and delete the caller's resume.

    Args:
        client: HTTP client whose ``base_url`` points at the API root
            (``.../api``).
        token: Bearer token; can also be set later by :meth:`login`.
    """

    def __init__(self, client: httpx.Client, token: str | None = None) -> None:
        self.client = client
        self.token = token

    @classmethod
    def from_env(cls, token: str | None = None) -> ResumeGateway:
        """Build a gateway against ``RESUME_BUILDER_API_URL``."""
        base_url = os.getenv("RESUME_BUILDER_API_URL", DEFAULT_API_URL)
        return cls(httpx.Client(base_url=base_url, timeout=_TIMEOUT), token=token)

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    def login(self, email: str, password: str) -> dict[str, Any]:
        """Log in and keep the issued token for later requests.

        Returns:
            The user info returned by the server.
        """
        body = self._request("POST", "auth/login", json={"email": email, "password": password})
        self.token = body["token"]
        return body["user"]

    def register(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        date_of_birth: str,
    ) -> dict[str, Any]:
        """Create an account and keep the issued token."""
        body = self._request(
            "POST",
            "auth/register",
            json={
                "firstName": first_name,
                "lastName": last_name,
                "email": email,
                "password": password,
                "dateOfBirth": date_of_birth,
            },
        )
        self.token = body["token"]
        return body["user"]

    def logout(self) -> None:
        self.token = None

    # ------------------------------------------------------------------
    # Resume persistence
    # ------------------------------------------------------------------

    def save(self, resume: Resume) -> None:
        """Create or replace the caller's resume."""
        self._request("POST", "resume", json=resume.content())

    def load(self) -> Resume | None:
        """Return the caller's resume, or None if they have not saved one yet."""
        try:
            body = self._request("GET", "resume")
        except GatewayError as exc:
            if exc.status_code == httpx.codes.NOT_FOUND:
                return None
            raise
        return Resume.model_validate(body)

    def delete(self) -> None:
        """Delete the caller's resume."""
        self._request("DELETE", "resume")

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        try:
            response = self.client.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("Request to %s failed: %s", path, exc)
            raise GatewayError(f"API request failed: {exc}") from exc

        if response.status_code in (httpx.codes.UNAUTHORIZED, httpx.codes.FORBIDDEN):
            raise AuthorizationError(
                f"API request failed: {response.status_code} - {response.text}",
                status_code=response.status_code,
            )
        if response.is_error:
            raise GatewayError(
                f"API request failed: {response.status_code} - {response.text}",
                status_code=response.status_code,
            )

        if "application/json" in response.headers.get("content-type", ""):
            return response.json()
        return response.text
