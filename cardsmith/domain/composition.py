# cardsmith/domain/composition.py
"""Card composition pipeline shared by the live preview and the export path.

    layouts + card data -> variant selection -> stat table synthesis
        -> placeholder resolution -> primitives -> one Surface per face

Painters (HTML, scene JSON) only ever see the resulting ``ComposedCard``, so
whatever the preview shows is exactly what the rasterizer is given.
"""
import json
from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from cardsmith.domain.elements import usable_reference
from cardsmith.domain.errors import MalformedDataError
from cardsmith.domain.layout import CardData, CardLayout, TemplateLayouts
from cardsmith.domain.primitives import ComposedCard, Surface
from cardsmith.domain.variants import BORDERED_BACKGROUND, detect_layout_kind, face_primitives

FRONT = "front"
BACK = "back"
DEFAULT_BACKGROUND = "#FFFFFF"

ModelT = TypeVar("ModelT", bound=BaseModel)


def _parse(raw: Any, model: Type[ModelT], what: str) -> ModelT:
    """Accept a model, a mapping, or its serialized JSON form."""
    if isinstance(raw, model):
        return raw
    if isinstance(raw, (str, bytes, bytearray)):
        try:
            raw = json.loads(raw)
        except ValueError as e:
            raise MalformedDataError(f"Invalid {what} JSON: {e}") from e
    if not isinstance(raw, Mapping):
        raise MalformedDataError(f"Invalid {what}: expected an object, got {type(raw).__name__}")
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise MalformedDataError(f"Invalid {what}: {e}") from e


def load_layout(
    raw: Any,
    side: str = FRONT,
    template_name: Optional[str] = None,
    template_id: Optional[str] = None,
) -> CardLayout:
    layout = _parse(raw, CardLayout, f"{side} layout")
    if layout.layout_kind is None:
        kind = detect_layout_kind(layout, template_name, template_id)
        layout = layout.model_copy(update={"layout_kind": kind})
    return layout


def load_template_layouts(
    front: Any,
    back: Any,
    template_name: Optional[str] = None,
    template_id: Optional[str] = None,
) -> TemplateLayouts:
    return TemplateLayouts(
        front=load_layout(front, FRONT, template_name, template_id),
        back=load_layout(back, BACK, template_name, template_id),
    )


def load_card_data(raw: Any) -> CardData:
    return _parse(raw, CardData, "card data")


def _background_image(layout: CardLayout, side: str, data: CardData) -> Optional[str]:
    candidates = [layout.background_image]
    candidates.append(data.image_url if side == FRONT else data.back_image_url)
    return next((src for src in map(usable_reference, candidates) if src), None)


def compose_surface(layout: CardLayout, side: str, data: CardData) -> Surface:
    if layout.layout_kind is None:
        layout = load_layout(layout, side)

    if layout.is_bordered and side == FRONT:
        background_color = layout.background_color or BORDERED_BACKGROUND
        background_image = None
    else:
        background_color = layout.background_color or DEFAULT_BACKGROUND
        background_image = _background_image(layout, side, data)

    return Surface(
        side=side,
        width=layout.width,
        height=layout.height,
        background_color=background_color,
        background_image=background_image,
        primitives=tuple(face_primitives(layout, side, data)),
    )


def compose_card(template: Any, card_data: Any) -> ComposedCard:
    """Compose both faces; ``template`` is a TemplateLayouts or a {front, back} mapping."""
    if not isinstance(template, TemplateLayouts):
        if isinstance(template, (str, bytes, bytearray)):
            try:
                template = json.loads(template)
            except ValueError as e:
                raise MalformedDataError(f"Invalid template JSON: {e}") from e
        if not isinstance(template, Mapping) or "front" not in template or "back" not in template:
            raise MalformedDataError("Invalid template: expected front and back layouts")
        template = load_template_layouts(
            template["front"], template["back"], template.get("name"), template.get("id")
        )
    data = load_card_data(card_data)
    return ComposedCard(
        front=compose_surface(template.front, FRONT, data),
        back=compose_surface(template.back, BACK, data),
    )
