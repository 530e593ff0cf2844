# cardsmith/delivery/api/render.py
import logging
import traceback
from typing import Any, Dict, Optional

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from cardsmith.delivery.schemas.body import Body
from cardsmith.domain.composition import compose_card
from cardsmith.domain.errors import CardsmithError
from cardsmith.domain.formats import DEFAULT_EXPORT_FORMAT, validate_format
from cardsmith.infrastructure.painting.html_painter import HtmlDocument, HtmlPainter

router = APIRouter(tags=["render"])
logger = logging.getLogger("uvicorn.error")


class RenderRequest(Body):
    """Either a composed document (``html`` + geometry) or a raw ``template``/``cardData`` pair."""

    format: str = DEFAULT_EXPORT_FORMAT
    html: Optional[str] = None
    viewport_width: Optional[int] = None
    viewport_height: Optional[int] = None
    page_width: Optional[float] = None
    page_height: Optional[float] = None
    template: Optional[Dict[str, Any]] = None
    card_data: Optional[Dict[str, Any]] = None


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, "message": message})


def _document(body: RenderRequest, mode: str, painter: HtmlPainter) -> HtmlDocument:
    if body.html:
        if not (body.viewport_width and body.viewport_height and body.page_width and body.page_height):
            raise ValueError("Document renders need viewportWidth, viewportHeight, pageWidth and pageHeight")
        return HtmlDocument(
            html=body.html,
            viewport_width=body.viewport_width,
            viewport_height=body.viewport_height,
            page_width=body.page_width,
            page_height=body.page_height,
        )
    if body.template is None or body.card_data is None:
        raise ValueError("Missing template or cardData")
    return painter.render_document(compose_card(body.template, body.card_data), mode=mode)


@router.post("/render")
async def render(request: Request):
    try:
        body = RenderRequest.model_validate(await request.json())
    except (ValueError, ValidationError) as e:
        return _error(400, "Invalid render request", str(e))

    try:
        export_format = validate_format(body.format)
        document = _document(body, export_format.document_mode, request.app.state.painter)
    except (ValueError, CardsmithError) as e:
        return _error(400, "Invalid render request", getattr(e, "message", str(e)))

    try:
        content = await request.app.state.rasterizer.rasterize(document, export_format)
    except Exception as e:
        logger.error(f"Rendering error: {e}\n{traceback.format_exc()}")
        return _error(500, "Failed to render card", str(e))

    return Response(content=content, media_type=export_format.media_type)
