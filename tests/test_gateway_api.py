"""End-to-end tests for the resume gateway against the in-process API."""

from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from resume_builder.api.main import app
from resume_builder.models.exceptions import AuthorizationError, GatewayError
from resume_builder.models.resume import Resume, Skills, demo_resume
from resume_builder.services.editor import ResumeEditor
from resume_builder.services.gateway import ResumeGateway


@pytest.fixture
def gateway() -> ResumeGateway:
    """Gateway talking to the app through FastAPI's TestClient."""
    return ResumeGateway(TestClient(app, base_url="http://testserver/api"))


@pytest.fixture
def signed_in(gateway: ResumeGateway) -> ResumeGateway:
    gateway.register(
        first_name="Jane",
        last_name="Doe",
        email="jane@example.com",
        password="s3cret-pass",
        date_of_birth="1990-04-12",
    )
    return gateway


class TestAuthentication:
    def test_register_stores_token(self, gateway: ResumeGateway) -> None:
        user = gateway.register(
            first_name="Jane",
            last_name="Doe",
            email="jane@example.com",
            password="s3cret-pass",
            date_of_birth="1990-04-12",
        )
        assert user["email"] == "jane@example.com"
        assert gateway.token

    def test_login_stores_token(self, signed_in: ResumeGateway) -> None:
        signed_in.logout()
        assert signed_in.token is None
        signed_in.login("jane@example.com", "s3cret-pass")
        assert signed_in.token

    def test_bad_login(self, gateway: ResumeGateway) -> None:
        with pytest.raises(AuthorizationError) as exc_info:
            gateway.login("ghost@example.com", "whatever1")
        assert exc_info.value.status_code == 401

    def test_anonymous_load_is_unauthorized(self, gateway: ResumeGateway) -> None:
        with pytest.raises(AuthorizationError):
            gateway.load()

    def test_invalid_token_is_unauthorized(self, gateway: ResumeGateway) -> None:
        gateway.token = "garbage"
        with pytest.raises(AuthorizationError) as exc_info:
            gateway.load()
        assert exc_info.value.status_code == 403


class TestPersistence:
    """Save, load and delete the single per-user document."""

    def test_load_before_save_is_none(self, signed_in: ResumeGateway) -> None:
        assert signed_in.load() is None

    def test_round_trip(self, signed_in: ResumeGateway) -> None:
        original = demo_resume()
        signed_in.save(original)

        loaded = signed_in.load()
        assert loaded is not None
        assert loaded.content() == original.content()

    def test_overwrite_replaces(self, signed_in: ResumeGateway) -> None:
        signed_in.save(demo_resume())
        signed_in.save(Resume(title="Second", skills=Skills(tools=("Git",))))

        loaded = signed_in.load()
        assert loaded.title == "Second"
        assert loaded.projects == ()
        assert loaded.skills.tools == ("Git",)

    def test_delete_then_load(self, signed_in: ResumeGateway) -> None:
        signed_in.save(demo_resume())
        signed_in.delete()
        assert signed_in.load() is None

    def test_delete_missing_is_error(self, signed_in: ResumeGateway) -> None:
        with pytest.raises(GatewayError) as exc_info:
            signed_in.delete()
        assert exc_info.value.status_code == 404
        assert not isinstance(exc_info.value, AuthorizationError)


class TestTransportErrors:
    def test_connection_failure(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = httpx.Client(base_url="http://api.invalid/api", transport=httpx.MockTransport(refuse))
        with pytest.raises(GatewayError) as exc_info:
            ResumeGateway(client, token="t").load()
        assert exc_info.value.status_code is None

    def test_server_error(self) -> None:
        client = httpx.Client(
            base_url="http://api.invalid/api",
            transport=httpx.MockTransport(lambda request: httpx.Response(500, text="oops")),
        )
        with pytest.raises(GatewayError) as exc_info:
            ResumeGateway(client, token="t").load()
        assert exc_info.value.status_code == 500


class TestEditorSession:
    def test_save_now_then_rehydrate(self, signed_in: ResumeGateway) -> None:
        editor = ResumeEditor(gateway=signed_in)
        editor.hydrate("jane")
        editor.update_personal_info(full_name="Jane Doe")
        editor.save_now()
        editor.close()

        fresh = ResumeEditor(gateway=signed_in)
        assert fresh.hydrate("jane").personal_info.full_name == "Jane Doe"
