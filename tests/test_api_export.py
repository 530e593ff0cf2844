"""Tests for the export route with a stubbed rendering service client."""

import re

import pytest

from cardsmith.delivery.api.deps import get_render_client
from cardsmith.domain.errors import RenderConnectionError, RenderTimeoutError, UpstreamRenderError
from cardsmith.main import app

from conftest import make_card_data

API = "/api/v1"


class StubRenderClient:
    def __init__(self, error: Exception = None):
        self.error = error
        self.documents = []

    async def render_document(self, document, export_format):
        if self.error is not None:
            raise self.error
        self.documents.append((document, export_format))
        return f"{export_format.name}-bytes".encode()


@pytest.fixture
def stub_renderer(client):
    stub = StubRenderClient()
    app.dependency_overrides[get_render_client] = lambda: stub
    return stub


@pytest.fixture
def card_id(client, alice, default_template_id):
    body = {"templateId": default_template_id, "cardDataJson": make_card_data()}
    return client.post(f"{API}/cards", json=body, auth=alice).json()["id"]


class TestExportSuccess:
    @pytest.mark.parametrize(
        "fmt, media_type",
        [("png", "image/png"), ("jpeg", "image/jpeg"), ("pdf", "application/pdf")],
    )
    def test_formats(self, client, alice, card_id, stub_renderer, fmt, media_type):
        response = client.get(f"{API}/export/card/{card_id}", params={"format": fmt}, auth=alice)
        assert response.status_code == 200
        assert response.headers["content-type"] == media_type
        assert response.content == f"{fmt}-bytes".encode()
        assert response.headers["content-length"] == str(len(response.content))
        disposition = response.headers["content-disposition"]
        assert re.fullmatch(rf'attachment; filename="card-{card_id}-\d+\.{fmt}"', disposition)

    def test_default_format_is_png(self, client, alice, card_id, stub_renderer):
        response = client.get(f"{API}/export/card/{card_id}", auth=alice)
        assert response.headers["content-type"] == "image/png"

    def test_export_uses_preview_document(self, client, alice, card_id, stub_renderer):
        client.get(f"{API}/export/card/{card_id}", auth=alice)
        preview = client.get(f"{API}/cards/{card_id}/preview", auth=alice).json()
        document, _ = stub_renderer.documents[0]
        assert document.html == preview["html"]

    def test_pdf_uses_print_document(self, client, alice, card_id, stub_renderer):
        client.get(f"{API}/export/card/{card_id}", params={"format": "pdf"}, auth=alice)
        document, export_format = stub_renderer.documents[0]
        assert export_format.document_mode == "print"
        assert (document.page_width, document.page_height) == (350, 490)


class TestExportErrors:
    def test_invalid_format_before_lookup(self, client, alice, stub_renderer):
        response = client.get(f"{API}/export/card/does-not-exist", params={"format": "gif"}, auth=alice)
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid format: gif. Must be one of: png, jpeg, pdf"
        assert stub_renderer.documents == []

    def test_unknown_card(self, client, alice, stub_renderer):
        response = client.get(f"{API}/export/card/00000000-0000-0000-0000-000000000000", auth=alice)
        assert response.status_code == 404
        assert response.json()["statusCode"] == 404

    def test_other_users_card(self, client, bob, card_id, stub_renderer):
        assert client.get(f"{API}/export/card/{card_id}", auth=bob).status_code == 404

    def test_requires_auth(self, client, card_id):
        assert client.get(f"{API}/export/card/{card_id}").status_code == 401

    @pytest.mark.parametrize(
        "error, status",
        [
            (UpstreamRenderError("Rendering service error: boom (Status: 500)", upstream_status=500), 502),
            (RenderConnectionError("Cannot connect to rendering service"), 502),
            (RenderTimeoutError("Rendering service timed out"), 504),
        ],
    )
    def test_upstream_failures_are_json(self, client, alice, card_id, error, status):
        app.dependency_overrides[get_render_client] = lambda: StubRenderClient(error)
        response = client.get(f"{API}/export/card/{card_id}", auth=alice)
        assert response.status_code == status
        assert response.headers["content-type"] == "application/json"
        assert response.json()["message"] == error.message

    def test_unexpected_failure_is_json_500(self, client, alice, card_id):
        app.dependency_overrides[get_render_client] = lambda: StubRenderClient(RuntimeError("kaboom"))
        response = client.get(f"{API}/export/card/{card_id}", auth=alice)
        assert response.status_code == 500
        assert response.json()["message"] == "Export failed: kaboom"
