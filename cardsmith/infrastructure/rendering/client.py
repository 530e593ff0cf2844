# cardsmith/infrastructure/rendering/client.py
"""HTTP client for the rendering service.

One POST per export, no retries. Every failure mode maps onto its own
``UpstreamRenderError`` subclass so the export route can answer 502/504.
"""
import asyncio
import json
import logging
import time
from typing import Any, Dict, Optional

import aiohttp

from cardsmith.config.settings import settings
from cardsmith.domain.errors import RenderConnectionError, RenderTimeoutError, UpstreamRenderError
from cardsmith.domain.formats import ExportFormat
from cardsmith.infrastructure.painting.html_painter import HtmlDocument

logger = logging.getLogger("uvicorn.error")

RENDER_PATH = "/render"


def _diagnostic(body: bytes) -> Optional[str]:
    """Best-effort ``message``/``error`` extraction from a JSON error body."""
    try:
        data = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    return data.get("message") or data.get("error")


def document_payload(document: HtmlDocument, export_format: ExportFormat) -> Dict[str, Any]:
    return {
        "html": document.html,
        "viewportWidth": document.viewport_width,
        "viewportHeight": document.viewport_height,
        "pageWidth": document.page_width,
        "pageHeight": document.page_height,
        "format": export_format.name,
    }


class RenderClient:
    def __init__(self, base_url: Optional[str] = None, timeout_seconds: Optional[float] = None):
        self.base_url = (base_url or settings.RENDERING_SERVICE_URL).rstrip("/")
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else settings.RENDER_TIMEOUT_SECONDS

    @property
    def render_url(self) -> str:
        return f"{self.base_url}{RENDER_PATH}"

    async def render_document(self, document: HtmlDocument, export_format: ExportFormat) -> bytes:
        return await self.post_render(document_payload(document, export_format))

    async def post_render(self, payload: Dict[str, Any]) -> bytes:
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        start = time.perf_counter()
        logger.info(f"Calling rendering service: {self.render_url} (format={payload.get('format')})")
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(self.render_url, json=payload) as response:
                    body = await response.read()
                    content_type = response.headers.get("Content-Type", "")
                    status = response.status
        except asyncio.TimeoutError as e:
            raise RenderTimeoutError(
                f"Rendering service timed out after {self.timeout_seconds:g} seconds"
            ) from e
        except aiohttp.ClientConnectionError as e:
            raise RenderConnectionError(
                f"Cannot connect to rendering service at {self.base_url}: {e}"
            ) from e
        except aiohttp.ClientError as e:
            raise UpstreamRenderError(f"Rendering request failed: {e}") from e

        if not 200 <= status < 300:
            message = _diagnostic(body) or f"HTTP {status}"
            raise UpstreamRenderError(
                f"Rendering service error: {message} (Status: {status})", upstream_status=status
            )
        if "application/json" in content_type:
            # A JSON body under a success status is still an error report.
            message = _diagnostic(body) or "Unknown rendering error"
            raise UpstreamRenderError(
                f"Rendering service returned error: {message}", upstream_status=status
            )

        logger.info(f"Rendering successful: {len(body)} bytes in {time.perf_counter() - start:.2f}s")
        return body
