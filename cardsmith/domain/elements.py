# cardsmith/domain/elements.py
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from cardsmith.domain.layout import (
    CardData,
    ImageElement,
    RectangleElement,
    StatElement,
    TextElement,
)
from cardsmith.domain.placeholders import display_value, resolve_placeholders
from cardsmith.domain.primitives import Box, ImageBox, Primitive, TextBox

DEFAULT_OUTLINE_COLOR = "#000000"
DEFAULT_OUTLINE_SHADOW_WIDTH = 3
DEFAULT_OUTLINE_STROKE_WIDTH = 2
USABLE_REFERENCE_PREFIXES = ("http://", "https://", "data:", "/")
YEAR_STAT_KEY = "year"


def usable_reference(value: Optional[str]) -> Optional[str]:
    """Accept absolute http(s) URLs, data URIs and root-relative paths only."""
    if not value:
        return None
    value = value.strip()
    if value.startswith(USABLE_REFERENCE_PREFIXES):
        return value
    return None


def resolve_image_source(src: Optional[str], data: CardData) -> Optional[str]:
    if src and "{{" not in src:
        authored = usable_reference(src)
        if authored:
            return authored
    return usable_reference(data.image_url)


def outline_decoration(element) -> Tuple[Optional[str], Optional[str]]:
    """(text-shadow, text-stroke) for an element, approximating outlines with shadows."""
    shadow, stroke = element.text_shadow, None
    if element.text_outline:
        color = element.text_outline_color or DEFAULT_OUTLINE_COLOR
        shadow_width = display_value(element.text_outline_width or DEFAULT_OUTLINE_SHADOW_WIDTH)
        stroke_width = display_value(element.text_outline_width or DEFAULT_OUTLINE_STROKE_WIDTH)
        if not shadow:
            shadow = f"0 0 {shadow_width}px {color}, 0 0 {shadow_width}px {color}"
        stroke = f"{stroke_width}px {color}"
    return shadow, stroke


def _text_box(element, text: str) -> TextBox:
    shadow, stroke = outline_decoration(element)
    return TextBox(
        id=element.id,
        x=element.x,
        y=element.y,
        width=element.width or None,
        height=element.height or None,
        z_index=element.z_index,
        text=text,
        font_size=element.font_size,
        font_family=element.font_family or "Arial, sans-serif",
        font_weight=element.font_weight or "normal",
        color=element.color or "#000000",
        text_align=element.text_align or "left",
        white_space=element.white_space or "nowrap",
        text_shadow=shadow,
        text_stroke=stroke,
        background_color=element.background_color,
        padding=element.padding,
        border_radius=element.border_radius,
        overflow=element.overflow,
    )


def render_text(element: TextElement, data: CardData) -> TextBox:
    return _text_box(element, resolve_placeholders(element.content or "", data))


def resolve_stat_value(stat_key: str, data: CardData):
    if stat_key == YEAR_STAT_KEY:
        return data.player.year
    return data.stats.get(stat_key)


def render_stat(element: StatElement, data: CardData) -> Optional[TextBox]:
    value = resolve_stat_value(element.stat_key, data)
    if value is None or value == "":
        return None
    if element.format == "value-only":
        text = display_value(value)
    else:
        text = f"{element.label or element.stat_key}: {display_value(value)}"
    return _text_box(element, text)


def render_image(element: ImageElement, data: CardData) -> Optional[ImageBox]:
    src = resolve_image_source(element.src, data)
    if src is None:
        return None
    return ImageBox(
        id=element.id,
        x=element.x,
        y=element.y,
        width=element.width,
        height=element.height,
        z_index=element.z_index,
        src=src,
        object_fit=element.object_fit,
    )


def render_rectangle(element: RectangleElement, data: CardData) -> Box:
    return Box(
        id=element.id,
        x=element.x,
        y=element.y,
        width=element.width,
        height=element.height,
        z_index=element.z_index,
        background_color=element.background_color or "#FFFFFF",
        border_color=element.border_color,
        border_width=(element.border_width or 1) if element.border_color else None,
        border_radius=element.border_radius or None,
    )


ELEMENT_RENDERERS: Dict[type, Callable[..., Optional[Primitive]]] = {
    TextElement: render_text,
    ImageElement: render_image,
    StatElement: render_stat,
    RectangleElement: render_rectangle,
}


def render_element(element, data: CardData) -> Optional[Primitive]:
    if not element.visible:
        return None
    renderer = ELEMENT_RENDERERS.get(type(element))
    if renderer is None:
        raise TypeError(f"No renderer for element type {type(element).__name__}")
    return renderer(element, data)


def paint_order(primitives: Iterable[Primitive]) -> List[Primitive]:
    # sorted() is stable, so equal zIndex keeps list order.
    return sorted(primitives, key=lambda primitive: primitive.z_index)


def render_elements(elements: Iterable, data: CardData) -> List[Primitive]:
    rendered = (render_element(element, data) for element in elements)
    return paint_order(primitive for primitive in rendered if primitive is not None)
