"""
Tests for the HTTP service.

Run with:
    pytest tests/test_api.py -v
"""

import pytest
from fastapi.testclient import TestClient

from conventional_commit_parser.main import app


@pytest.fixture
def client():
    return TestClient(app)


# ---------------------------------------------------------------------------
# Parsing endpoints
# ---------------------------------------------------------------------------

class TestParseEndpoints:

    def test_parse(self, client):
        response = client.post("/parse", json={"message": "fix(parser): fix parser implementation"})

        assert response.status_code == 200
        assert response.json() == {
            "commit_type": "fix",
            "is_custom_type": False,
            "scope": "parser",
            "summary": "fix parser implementation",
            "body": None,
            "footers": [],
            "is_breaking_change": False,
        }

    def test_parse_full_message(self, client):
        message = "feat!: new api\n\nDetails here.\n\nBREAKING CHANGE: old api removed\nRefs #7"

        data = client.post("/parse", json={"message": message}).json()

        assert data["is_breaking_change"] is True
        assert data["body"] == "Details here."
        assert [footer["token"] for footer in data["footers"]] == ["BREAKING CHANGE", "Refs"]

    def test_parse_summary(self, client):
        data = client.post("/parse/summary", json={"message": "docs(readme): typo"}).json()

        assert data["commit_type"] == "docs"
        assert data["scope"] == "readme"

    def test_parse_body(self, client):
        response = client.post("/parse/body", json={"message": "just text"})

        assert response.json() == {"body": "just text"}

    def test_parse_empty_body(self, client):
        assert client.post("/parse/body", json={"message": "  "}).json() == {"body": None}

    def test_parse_footers(self, client):
        response = client.post("/parse/footers", json={"message": "a-token: v1\nanother-token #v2"})

        assert response.json() == {"footers": [
            {"token": "a-token", "content": "v1", "separator": "colon_space"},
            {"token": "another-token", "content": "v2", "separator": "space_hash"},
        ]}

    def test_missing_message_field(self, client):
        assert client.post("/parse", json={}).status_code == 422


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class TestParseErrors:

    def test_parse_error_response(self, client):
        response = client.post("/parse", json={"message": "feat:x"})

        assert response.status_code == 422
        data = response.json()
        assert data["kind"] == "MissingWhiteSpace"
        assert data["message"] == "Missing whitespace terminal after commit type separator `:`"
        assert data["line"] == 1
        assert data["column"] == 6
        assert data["expected"] == ["whitespace_terminal"]
        assert "details" not in data

    def test_details_when_enabled(self, client, monkeypatch):
        monkeypatch.setenv("ERROR_INCLUDE_DETAILS", "true")

        data = client.post("/parse/body", json={"message": "Refs: 1"}).json()

        assert data["kind"] == "MalformedOrUnexpectedFooterSeparator"
        assert data["details"].startswith("error[MalformedOrUnexpectedFooterSeparator]")


# ---------------------------------------------------------------------------
# Formatting and service info
# ---------------------------------------------------------------------------

class TestFormatEndpoint:

    def test_format(self, client):
        response = client.post("/format", json={
            "commit_type": "Feat",
            "scope": "api",
            "summary": "add endpoint",
            "footers": [{"token": "Refs", "content": "3", "separator": "space_hash"}],
            "is_breaking_change": True,
        })

        assert response.json() == {"message": "feat(api)!: add endpoint\n\nRefs #3"}

    def test_format_then_parse(self, client):
        message = client.post("/format", json={"commit_type": "chore", "summary": "tidy"}).json()["message"]

        assert client.post("/parse", json={"message": message}).json()["summary"] == "tidy"

    def test_unknown_separator(self, client):
        response = client.post("/format", json={
            "commit_type": "fix",
            "summary": "x",
            "footers": [{"token": "Refs", "content": "3", "separator": "dash"}],
        })

        assert response.status_code == 422

    @pytest.mark.parametrize("fields", [
        {"commit_type": "", "summary": "x"},
        {"commit_type": "feat fix", "summary": "x"},
        {"commit_type": "feat!", "summary": "x"},
        {"commit_type": "feat", "scope": "a b", "summary": "x"},
        {"commit_type": "feat", "scope": "a(b)", "summary": "x"},
        {"commit_type": "feat", "summary": ""},
        {"commit_type": "feat", "summary": "two\nlines"},
        {"commit_type": "feat", "summary": "x", "footers": [{"token": "Signed off", "content": "Z"}]},
    ])
    def test_rejects_fields_that_would_not_parse_back(self, client, fields):
        response = client.post("/format", json=fields)

        assert response.status_code == 422
        assert "detail" in response.json()

    def test_breaking_change_footer_token_allowed(self, client):
        response = client.post("/format", json={
            "commit_type": "feat",
            "summary": "x",
            "footers": [{"token": "BREAKING CHANGE", "content": "gone"}],
        })

        assert response.json() == {"message": "feat: x\n\nBREAKING CHANGE: gone"}


class TestServiceInfo:

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"

    def test_root_lists_commit_types(self, client):
        data = client.get("/").json()

        assert "feat" in data["commit_types"]
        assert "/parse" in data["endpoints"]
