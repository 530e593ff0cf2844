"""Tests for the Playwright rasterizer against a stub browser."""

import pytest

from cardsmith.domain.formats import EXPORT_FORMATS
from cardsmith.infrastructure.browser.rasterizer import PlaywrightRasterizer
from cardsmith.infrastructure.painting.html_painter import HtmlDocument

DOCUMENT = HtmlDocument(
    html="<html><body>card</body></html>",
    viewport_width=720,
    viewport_height=530,
    page_width=350,
    page_height=490,
)


class StubPage:
    def __init__(self, fail: bool):
        self.fail = fail
        self.content = None
        self.screenshot_options = None
        self.pdf_options = None

    async def set_content(self, html, wait_until=None):
        if self.fail:
            raise RuntimeError("page crashed")
        self.content = (html, wait_until)

    async def screenshot(self, **options):
        self.screenshot_options = options
        return b"\x89PNG stub"

    async def pdf(self, **options):
        self.pdf_options = options
        return b"%PDF-1.7 stub"


class StubContext:
    def __init__(self, fail: bool):
        self.page = StubPage(fail)
        self.closed = False

    async def new_page(self):
        return self.page

    async def close(self):
        self.closed = True


class StubBrowser:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.contexts = []

    def is_connected(self):
        return True

    async def new_context(self, **options):
        context = StubContext(self.fail)
        self.contexts.append((options, context))
        return context


def rasterizer_with(browser: StubBrowser) -> PlaywrightRasterizer:
    rasterizer = PlaywrightRasterizer(scale=3, jpeg_quality=80)
    rasterizer._browser = browser
    return rasterizer


class TestRasterize:
    async def test_png_uses_scale_factor(self):
        browser = StubBrowser()
        result = await rasterizer_with(browser).rasterize(DOCUMENT, EXPORT_FORMATS["png"])
        options, context = browser.contexts[0]
        assert result == b"\x89PNG stub"
        assert options == {"viewport": {"width": 720, "height": 530}, "device_scale_factor": 3}
        assert context.page.content == (DOCUMENT.html, "networkidle")
        assert context.page.screenshot_options == {"type": "png", "full_page": False}
        assert context.closed

    async def test_jpeg_carries_quality(self):
        browser = StubBrowser()
        await rasterizer_with(browser).rasterize(DOCUMENT, EXPORT_FORMATS["jpeg"])
        _, context = browser.contexts[0]
        assert context.page.screenshot_options["quality"] == 80

    async def test_pdf_is_sized_to_the_page(self):
        browser = StubBrowser()
        result = await rasterizer_with(browser).rasterize(DOCUMENT, EXPORT_FORMATS["pdf"])
        options, context = browser.contexts[0]
        assert result.startswith(b"%PDF")
        assert options["device_scale_factor"] == 1
        pdf = context.page.pdf_options
        assert (pdf["width"], pdf["height"]) == ("350px", "490px")
        assert pdf["prefer_css_page_size"] is True
        assert pdf["print_background"] is True
        assert context.page.screenshot_options is None

    async def test_context_is_closed_when_rendering_fails(self):
        browser = StubBrowser(fail=True)
        with pytest.raises(RuntimeError):
            await rasterizer_with(browser).rasterize(DOCUMENT, EXPORT_FORMATS["png"])
        _, context = browser.contexts[0]
        assert context.closed

    async def test_close_releases_browser(self):
        rasterizer = rasterizer_with(StubBrowser())
        closed = []

        async def close():
            closed.append(True)

        rasterizer._browser.close = close
        await rasterizer.close()
        assert closed == [True]
        assert rasterizer._browser is None
