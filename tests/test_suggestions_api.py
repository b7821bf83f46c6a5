"""Tests for the suggestion endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from resume_builder.api.main import app
from resume_builder.constants import ACTION_VERBS
from resume_builder.models.resume import Resume


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(app)


class TestSuggestions:
    def test_empty_resume(self, client: TestClient) -> None:
        response = client.post("/api/suggestions", json={})
        assert response.status_code == 200
        assert response.json()["suggestions"] == [
            "Professional summary is too short. Aim for 3-4 compelling sentences that "
            "highlight your key achievements and value proposition.",
            'Add quantifiable metrics to your summary (e.g., "increased sales by 30%").',
            "Add more technical skills and tools relevant to your target role.",
            "Consider adding 3-4 key soft skills (e.g., Leadership, Communication, "
            "Problem-solving).",
        ]

    def test_accepts_wire_payload(self, client: TestClient) -> None:
        payload = Resume(professional_summary="worked on stuff").content()
        response = client.post("/api/suggestions", json=payload)
        assert any("weak phrases" in s for s in response.json()["suggestions"])

    def test_action_verbs(self, client: TestClient) -> None:
        response = client.get("/api/action-verbs")
        assert response.json() == {"verbs": list(ACTION_VERBS)}

    def test_improve_achievement(self, client: TestClient) -> None:
        response = client.post(
            "/api/suggestions/achievement", json={"achievement": "Reduced latency by 40%"}
        )
        assert response.json() == {"improved": "Reduced latency by 40%"}

    def test_summary_template(self, client: TestClient) -> None:
        response = client.post(
            "/api/suggestions/summary", json={"role": "Data Engineer", "yearsExperience": 4}
        )
        summary = response.json()["summary"]
        assert "Data Engineer" in summary
        assert "4" in summary
