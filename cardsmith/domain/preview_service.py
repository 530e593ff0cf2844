# cardsmith/domain/preview_service.py
from typing import Any, Dict

from cardsmith.domain.composition import compose_card
from cardsmith.domain.primitives import ComposedCard
from cardsmith.infrastructure.painting.html_painter import SCREEN, HtmlPainter
from cardsmith.infrastructure.painting.scene_painter import ScenePainter


def preview_payload(card: ComposedCard, painter: HtmlPainter = None) -> Dict[str, Any]:
    """Scene JSON plus the exact screen document a PNG/JPEG export would rasterize."""
    document = (painter or HtmlPainter()).render_document(card, mode=SCREEN)
    return {
        "scene": ScenePainter().render_scene(card),
        "html": document.html,
        "viewport": {"width": document.viewport_width, "height": document.viewport_height},
    }


def preview(template: Any, card_data: Any) -> Dict[str, Any]:
    return preview_payload(compose_card(template, card_data))
