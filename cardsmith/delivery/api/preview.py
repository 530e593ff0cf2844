# cardsmith/delivery/api/preview.py
from fastapi import APIRouter

from cardsmith.delivery.schemas.body import PreviewRequest
from cardsmith.domain.preview_service import preview

router = APIRouter(tags=["preview"])


@router.post("/preview")
async def preview_unsaved(body: PreviewRequest):
    """Compose an unsaved template/card pair exactly as export would."""
    return preview(body.template, body.card_data)
