"""Unit tests for the placeholder API routes."""

import io

import pytest
from fastapi.testclient import TestClient

from docx_placeholders.core.config import Settings
from docx_placeholders.main import app, create_app

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def docx_upload(document, name="template.docx"):
    buffer = io.BytesIO()
    document.save(buffer)
    return (name, buffer.getvalue(), DOCX_MIME)


@pytest.fixture
def client(tmp_path):
    settings = Settings(upload_dir=tmp_path / "uploads", log_level="WARNING")
    return TestClient(create_app(settings))


class TestPlaceholderAPI:
    """Test suite for the /placeholders routes."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_module_level_app_serves_routes(self):
        paths = {route.path for route in app.routes}
        assert {"/health", "/placeholders/debug", "/placeholders/diff"} <= paths

    def test_debug_passing_template(self, client, make_document):
        document = make_document(["Dear _cli", "ent_name_,"])

        response = client.post(
            "/placeholders/debug",
            files={"file": docx_upload(document)},
            data={"placeholders": "client_name", "syntax": "underline"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["passed"] is True
        assert body["session"]["total"] == 1
        assert body["session"]["document"] == "template.docx"
        assert body["session"]["details"][0]["placeholder"]["formatted"] == "_client_name_"
        assert "SUMMARY" in body["report"]

    def test_debug_reports_failures(self, client, make_document):
        document = make_document("{{ name }}")

        response = client.post(
            "/placeholders/debug",
            files={"file": docx_upload(document)},
            data={"placeholders": "name, missing"},
        )

        body = response.json()
        assert response.status_code == 200
        assert body["passed"] is False
        assert body["session"]["failed"] == 1
        assert body["session"]["details"][1]["issue"] == "not_found"

    def test_debug_rejects_non_docx(self, client):
        response = client.post(
            "/placeholders/debug",
            files={"file": ("notes.txt", b"hello", "text/plain")},
            data={"placeholders": "name"},
        )
        assert response.status_code == 415

    def test_debug_requires_names(self, client, make_document):
        response = client.post(
            "/placeholders/debug",
            files={"file": docx_upload(make_document("x"))},
            data={"placeholders": " , "},
        )
        assert response.status_code == 422

    def test_diff(self, client, make_document):
        original = make_document("{{ name }} agrees to {{ terms }}")
        processed = make_document("Alice agrees to {{ terms }}")

        response = client.post(
            "/placeholders/diff",
            files={
                "original": docx_upload(original, "original.docx"),
                "processed": docx_upload(processed, "processed.docx"),
            },
            data={"expected": "{{ name }}"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["passed"] is False
        assert body["report"]["failed_replacements"] == 1
        assert body["expected"][0]["successfully_replaced"] is True
        assert "Missed placeholders" in body["report_text"]

    def test_uploads_are_not_kept(self, client, make_document, tmp_path):
        client.post(
            "/placeholders/debug",
            files={"file": docx_upload(make_document("{{ a }}"))},
            data={"placeholders": "a"},
        )
        assert list((tmp_path / "uploads").iterdir()) == []
