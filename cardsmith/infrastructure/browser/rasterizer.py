# cardsmith/infrastructure/browser/rasterizer.py
import asyncio
import logging
import os
import time
from typing import Optional

import psutil
from playwright.async_api import Browser, Playwright, async_playwright

from cardsmith.config.settings import settings
from cardsmith.domain.formats import ExportFormat
from cardsmith.infrastructure.painting.html_painter import HtmlDocument, css_length

logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s', '%Y-%m-%d %H:%M:%S')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False

BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]
LOAD_STATE = "networkidle"


def _rss_mb() -> float:
    return psutil.Process(os.getpid()).memory_info().rss / (1024 * 1024)


class PlaywrightRasterizer:
    """Turns composed HTML documents into PNG, JPEG or PDF bytes.

    The browser is started on first use and shared; each render gets its own
    context so nothing leaks between cards.
    """

    def __init__(self, scale: Optional[float] = None, jpeg_quality: Optional[int] = None):
        self.scale = scale or settings.RENDER_SCALE
        self.jpeg_quality = jpeg_quality or settings.JPEG_QUALITY
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._lock = asyncio.Lock()

    async def _ensure_browser(self) -> Browser:
        async with self._lock:
            if self._browser is None or not self._browser.is_connected():
                logger.info("Launching headless Chromium (lazy-init)...")
                if self._playwright is None:
                    self._playwright = await async_playwright().start()
                self._browser = await self._playwright.chromium.launch(headless=True, args=BROWSER_ARGS)
                logger.info("Chromium ready.")
            return self._browser

    async def rasterize(self, document: HtmlDocument, export_format: ExportFormat) -> bytes:
        browser = await self._ensure_browser()
        start = time.perf_counter()
        logger.info(f"Render start: format={export_format.name}, RSS={_rss_mb():.1f} MB")

        context = await browser.new_context(
            viewport={"width": document.viewport_width, "height": document.viewport_height},
            device_scale_factor=self.scale if export_format.is_raster else 1,
        )
        try:
            page = await context.new_page()
            await page.set_content(document.html, wait_until=LOAD_STATE)
            if export_format.is_raster:
                options = {"type": export_format.name, "full_page": False}
                if export_format.name == "jpeg":
                    options["quality"] = self.jpeg_quality
                result = await page.screenshot(**options)
            else:
                result = await page.pdf(
                    width=css_length(document.page_width),
                    height=css_length(document.page_height),
                    print_background=True,
                    prefer_css_page_size=True,
                    margin={"top": "0", "right": "0", "bottom": "0", "left": "0"},
                )
        finally:
            await context.close()

        logger.info(
            f"Render done: format={export_format.name}, {len(result)} bytes in "
            f"{time.perf_counter() - start:.2f}s, RSS={_rss_mb():.1f} MB"
        )
        return result

    async def close(self) -> None:
        async with self._lock:
            if self._browser is not None:
                await self._browser.close()
                self._browser = None
            if self._playwright is not None:
                await self._playwright.stop()
                self._playwright = None
