"""Tests for the notes HTTP API."""

from __future__ import annotations

import warnings
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from server.__main__ import main as serve
from server.main import app
from server.server_config import MAX_NOTES_SIZE


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestParseEndpoint:
    """Tests for POST /api/parse."""

    def test_parses_document(self, client: TestClient) -> None:
        response = client.post("/api/parse", json={"text": "# Title\n\n## Section\n- item one\n- item two\n"})

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Title"
        assert body["section_count"] == 2
        assert body["document"]["sections"][1] == {
            "heading": "Section",
            "level": 2,
            "blocks": [
                {"kind": "list_item", "text": "item one", "bullet": True},
                {"kind": "list_item", "text": "item two", "bullet": True},
            ],
        }

    def test_malformed_document(self, client: TestClient) -> None:
        response = client.post("/api/parse", json={"text": "# Title\n### Deep\n"})

        assert response.status_code == 422
        assert response.json() == {"error": "heading level skips from 1 to 3", "line": 2}

    def test_blank_text_is_rejected(self, client: TestClient) -> None:
        response = client.post("/api/parse", json={"text": "   "})

        assert response.status_code == 422
        assert "detail" in response.json()

    def test_oversized_text_is_rejected(self, client: TestClient) -> None:
        response = client.post("/api/parse", json={"text": "# T\n" + "x" * MAX_NOTES_SIZE})

        assert response.status_code == 422
        assert "detail" in response.json()


class TestValidateEndpoint:
    """Tests for POST /api/validate."""

    def test_reports_issues(self, client: TestClient) -> None:
        response = client.post("/api/validate", json={"text": "# T\n## A\n## B\n- x \n"})

        assert response.status_code == 200
        body = response.json()
        assert body["issue_count"] == 2
        assert [issue["kind"] for issue in body["issues"]] == ["empty section", "trailing whitespace"]
        assert body["issues"][1]["block_index"] == 0

    def test_select(self, client: TestClient) -> None:
        response = client.post(
            "/api/validate",
            json={"text": "# T\n## A\n## B\n- x \n", "select": ["trailing whitespace"]},
        )

        assert response.json()["issue_count"] == 1

    def test_unknown_kind(self, client: TestClient) -> None:
        response = client.post("/api/validate", json={"text": "# T\n", "select": ["typo"]})

        assert response.status_code == 422

    def test_malformed_document(self, client: TestClient) -> None:
        response = client.post("/api/validate", json={"text": "intro\n# T\n"})

        assert response.status_code == 422
        assert response.json()["line"] == 1


class TestRenderEndpoint:
    """Tests for POST /api/render."""

    def test_unchanged(self, client: TestClient) -> None:
        text = "# Title\n\n## Section\n- item one\n- item two\n"

        response = client.post("/api/render", json={"text": text})

        assert response.json() == {"text": text, "changed": False}

    def test_normalized(self, client: TestClient) -> None:
        response = client.post("/api/render", json={"text": "# T\n* a"})

        assert response.json() == {"text": "# T\n- a\n", "changed": True}


def test_malformed_response_emits_no_warnings(client: TestClient) -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        response = client.post("/api/render", json={"text": "- item\n# T\n"})

    assert response.status_code == 422
    assert [str(warning.message) for warning in caught if "422" in str(warning.message)] == []


class TestServeCommand:
    """Tests for ``python -m server``."""

    def test_arguments_reach_uvicorn(self) -> None:
        with patch("server.__main__.uvicorn.run") as run:
            serve(["--host", "0.0.0.0", "--port", "9000", "--log-level", "WARNING"])

        run.assert_called_once_with("server.main:app", host="0.0.0.0", port=9000, reload=False, log_config=None)

    def test_environment_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8123")
        monkeypatch.setenv("RELOAD", "true")

        with patch("server.__main__.uvicorn.run") as run:
            serve([])

        assert run.call_args.kwargs["port"] == 8123
        assert run.call_args.kwargs["reload"] is True
