# cardsmith/domain/variants.py
"""Chooses between generic element rendering and the bordered card composition."""
from typing import List, Optional

from cardsmith.domain.elements import paint_order, render_elements, resolve_image_source
from cardsmith.domain.layout import (
    LAYOUT_KIND_BORDERED,
    LAYOUT_KIND_GENERIC,
    CardData,
    CardLayout,
    ImageElement,
)
from cardsmith.domain.primitives import BannerLabel, BorderedFrontPanel, Primitive
from cardsmith.domain.stat_table import inject_stat_table

BORDERED_BACKGROUND = "#3f7f4f"
BORDERED_NAME_HINT = "donruss"

DEFAULT_BORDER_WIDTH = 12
DEFAULT_INNER_PADDING = 6
DEFAULT_INNER_BACKGROUND = "#FFFFFF"

NAME_ELEMENT_ID = "player-name"
POSITION_ELEMENT_ID = "player-position"
PHOTO_ELEMENT_ID = "player-photo"
STRUCTURAL_ELEMENT_IDS = {NAME_ELEMENT_ID, POSITION_ELEMENT_ID, PHOTO_ELEMENT_ID}


def detect_layout_kind(
    layout: CardLayout,
    template_name: Optional[str] = None,
    template_id: Optional[str] = None,
) -> str:
    """Legacy heuristics; any single signal marks the layout as bordered."""
    signals = (
        layout.border_width is not None,
        layout.inner_padding is not None,
        (layout.background_color or "").lower() == BORDERED_BACKGROUND,
        BORDERED_NAME_HINT in str(template_name or "").lower(),
        BORDERED_NAME_HINT in str(template_id or "").lower(),
    )
    return LAYOUT_KIND_BORDERED if any(signals) else LAYOUT_KIND_GENERIC


def bordered_front_panel(layout: CardLayout, data: CardData) -> BorderedFrontPanel:
    name_el = layout.find_element(NAME_ELEMENT_ID)
    position_el = layout.find_element(POSITION_ELEMENT_ID)
    photo_el = layout.find_element(PHOTO_ELEMENT_ID)
    if not isinstance(photo_el, ImageElement):
        photo_el = next((el for el in layout.elements if isinstance(el, ImageElement)), None)

    name = BannerLabel(
        text=data.player.name or "Player Name",
        font_size=getattr(name_el, "font_size", None) or 20,
        font_weight=getattr(name_el, "font_weight", None) or "bold",
        color=getattr(name_el, "color", None) or "#FFFFFF",
    )
    position = BannerLabel(
        text=data.player.position or "POSITION",
        font_size=getattr(position_el, "font_size", None) or 14,
        font_weight=getattr(position_el, "font_weight", None) or "normal",
        color=getattr(position_el, "color", None) or "#000000",
        background_color=getattr(position_el, "background_color", None) or "#86a8b8",
        padding=getattr(position_el, "padding", None) or "2px 8px",
        border_radius=getattr(position_el, "border_radius", None) or "2px",
    )

    return BorderedFrontPanel(
        id="bordered-front",
        x=0,
        y=0,
        width=layout.width,
        height=layout.height,
        z_index=0,
        border_color=layout.background_color or BORDERED_BACKGROUND,
        border_width=layout.border_width or DEFAULT_BORDER_WIDTH,
        inner_padding=layout.inner_padding or DEFAULT_INNER_PADDING,
        inner_background_color=layout.inner_background_color or DEFAULT_INNER_BACKGROUND,
        photo_src=resolve_image_source(photo_el.src if photo_el else None, data),
        name=name,
        position=position,
    )


def face_primitives(layout: CardLayout, side: str, data: CardData) -> List[Primitive]:
    if not layout.is_bordered:
        return render_elements(layout.elements, data)

    if side == "front":
        # Photo, name and position are painted by the panel itself.
        extras = [
            el for el in layout.elements
            if el.id not in STRUCTURAL_ELEMENT_IDS and not isinstance(el, ImageElement)
        ]
        return paint_order([bordered_front_panel(layout, data)] + render_elements(extras, data))

    return render_elements(inject_stat_table(layout, data), data)
