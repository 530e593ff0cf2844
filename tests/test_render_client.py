"""Tests for RenderClient against fake rendering services."""

import asyncio
import socket

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from cardsmith.domain.errors import RenderConnectionError, RenderTimeoutError, UpstreamRenderError
from cardsmith.domain.formats import EXPORT_FORMATS
from cardsmith.infrastructure.painting.html_painter import HtmlDocument
from cardsmith.infrastructure.rendering.client import RenderClient

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"
DOCUMENT = HtmlDocument(html="<html></html>", viewport_width=100, viewport_height=50, page_width=40, page_height=50)


async def _png(request):
    payload = await request.json()
    request.app["payloads"].append(payload)
    return web.Response(body=PNG_BYTES, content_type="image/png")


async def _json_with_ok_status(request):
    return web.json_response({"error": "Failed to render card", "message": "browser crashed"})


async def _server_error(request):
    return web.json_response({"error": "Failed to render card", "message": "out of memory"}, status=500)


async def _plain_bad_request(request):
    return web.Response(text="nope", status=400)


async def _slow(request):
    await asyncio.sleep(0.5)
    return web.Response(body=PNG_BYTES, content_type="image/png")


async def _start(handler) -> TestServer:
    app = web.Application()
    app["payloads"] = []
    app.router.add_post("/render", handler)
    server = TestServer(app)
    await server.start_server()
    return server


@pytest.fixture
async def server_for():
    servers = []

    async def factory(handler):
        server = await _start(handler)
        servers.append(server)
        return server

    yield factory
    for server in servers:
        await server.close()


def _base_url(server: TestServer) -> str:
    return str(server.make_url("")).rstrip("/")


class TestSuccess:
    async def test_returns_bytes_and_sends_document(self, server_for):
        server = await server_for(_png)
        client = RenderClient(_base_url(server), timeout_seconds=5)
        content = await client.render_document(DOCUMENT, EXPORT_FORMATS["png"])
        assert content == PNG_BYTES
        payload = server.app["payloads"][0]
        assert payload["format"] == "png"
        assert payload["html"] == "<html></html>"
        assert (payload["viewportWidth"], payload["pageHeight"]) == (100, 50)


class TestFailures:
    async def test_json_body_with_ok_status(self, server_for):
        server = await server_for(_json_with_ok_status)
        with pytest.raises(UpstreamRenderError, match="browser crashed") as info:
            await RenderClient(_base_url(server)).post_render({"format": "png"})
        assert info.value.status_code == 502

    async def test_server_error_carries_diagnostic(self, server_for):
        server = await server_for(_server_error)
        with pytest.raises(UpstreamRenderError, match="out of memory") as info:
            await RenderClient(_base_url(server)).post_render({"format": "png"})
        assert info.value.upstream_status == 500

    async def test_non_json_error(self, server_for):
        server = await server_for(_plain_bad_request)
        with pytest.raises(UpstreamRenderError, match="HTTP 400"):
            await RenderClient(_base_url(server)).post_render({"format": "png"})

    async def test_timeout(self, server_for):
        server = await server_for(_slow)
        with pytest.raises(RenderTimeoutError) as info:
            await RenderClient(_base_url(server), timeout_seconds=0.05).post_render({"format": "png"})
        assert info.value.status_code == 504

    async def test_connection_refused(self):
        with socket.socket() as sock:
            sock.bind(("127.0.0.1", 0))
            port = sock.getsockname()[1]
        with pytest.raises(RenderConnectionError) as info:
            await RenderClient(f"http://127.0.0.1:{port}").post_render({"format": "png"})
        assert info.value.status_code == 502
