# cardsmith/delivery/api/export.py
import asyncio
import logging
import traceback

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from cardsmith.config.settings import settings
from cardsmith.delivery.api.deps import get_card_service, get_current_user, get_render_client
from cardsmith.domain.card_service import CardService
from cardsmith.domain.errors import CardsmithError, RenderTimeoutError
from cardsmith.domain.export_service import ExportService
from cardsmith.domain.formats import DEFAULT_EXPORT_FORMAT
from cardsmith.infrastructure.database.models import User
from cardsmith.infrastructure.rendering.client import RenderClient

router = APIRouter(prefix="/export", tags=["export"])
logger = logging.getLogger("uvicorn.error")

# Slightly above the render client's own timeout so that one reports first.
ENDPOINT_GRACE_SECONDS = 5


@router.get("/card/{card_id}")
async def export_card(
    request: Request,
    card_id: str,
    format: str = Query(DEFAULT_EXPORT_FORMAT),
    user: User = Depends(get_current_user),
    cards: CardService = Depends(get_card_service),
    render_client: RenderClient = Depends(get_render_client),
):
    logger.info(f"=== EXPORT START for card {card_id} (format={format}, user={user.id}) ===")
    service = ExportService(cards, render_client, painter=getattr(request.app.state, "painter", None))
    endpoint_timeout = settings.RENDER_TIMEOUT_SECONDS + ENDPOINT_GRACE_SECONDS

    try:
        # Abort fast if the client already closed
        if await request.is_disconnected():
            logger.warning(f"[{card_id}] Client already disconnected")
            raise HTTPException(status_code=499, detail="Client closed request")

        try:
            exported = await asyncio.wait_for(
                service.export_card(user, card_id, format), timeout=endpoint_timeout
            )
        except asyncio.TimeoutError:
            logger.error(f"=== EXPORT TIMEOUT for card {card_id} after {endpoint_timeout}s ===")
            raise RenderTimeoutError(f"Export timed out after {endpoint_timeout:g} seconds")

        logger.info(f"=== EXPORT SUCCESS for card {card_id}: {exported.filename} ({exported.size} bytes) ===")
        return Response(
            content=exported.content,
            media_type=exported.media_type,
            headers={
                "Content-Disposition": f'attachment; filename="{exported.filename}"',
                "Content-Length": str(exported.size),
            },
        )

    except (HTTPException, CardsmithError):
        raise
    except Exception as e:
        logger.error(f"=== EXPORT ERROR for card {card_id}: {e} ===\n{traceback.format_exc()}")
        raise CardsmithError(f"Export failed: {e}") from e
