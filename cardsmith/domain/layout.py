# cardsmith/domain/layout.py
"""Declarative card layouts and the card data they are resolved against.

Field names are snake_case in Python and camelCase on the wire, which is how
layouts are authored and stored (``zIndex``, ``statKey``, ``borderWidth``...).
"""
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Number = Union[int, float]
StatValue = Union[int, float, str, None]

LAYOUT_KIND_GENERIC = "generic"
LAYOUT_KIND_BORDERED = "bordered"
LayoutKind = Literal["generic", "bordered"]


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ElementBase(WireModel):
    id: str
    x: Number = 0
    y: Number = 0
    width: Optional[Number] = None
    height: Optional[Number] = None
    z_index: int = 1
    visible: bool = True


class TypographyMixin(WireModel):
    font_size: Number = 16
    font_family: str = "Arial, sans-serif"
    font_weight: Union[str, int] = "normal"
    color: str = "#000000"
    text_align: str = "left"
    text_shadow: Optional[str] = None
    text_outline: bool = False
    text_outline_width: Optional[Number] = None
    text_outline_color: Optional[str] = None
    background_color: Optional[str] = None
    padding: Optional[Union[str, Number]] = None
    border_radius: Optional[Union[str, Number]] = None
    white_space: Optional[str] = None
    overflow: Optional[str] = None


class TextElement(TypographyMixin, ElementBase):
    type: Literal["text"] = "text"
    content: Optional[str] = None


class ImageElement(ElementBase):
    type: Literal["image"] = "image"
    src: Optional[str] = None
    object_fit: Literal["cover", "contain", "fill"] = "cover"


class StatElement(TypographyMixin, ElementBase):
    type: Literal["stat"] = "stat"
    stat_key: str = ""
    label: Optional[str] = None
    format: str = "label-value"


class RectangleElement(ElementBase):
    type: Literal["rectangle"] = "rectangle"
    background_color: Optional[str] = None
    border_color: Optional[str] = None
    border_width: Optional[Number] = None
    border_radius: Optional[Number] = None


TemplateElement = Annotated[
    Union[TextElement, ImageElement, StatElement, RectangleElement],
    Field(discriminator="type"),
]


class CardLayout(WireModel):
    width: Number = Field(default=630, gt=0)
    height: Number = Field(default=880, gt=0)
    background_color: Optional[str] = None
    background_image: Optional[str] = None
    border_width: Optional[Number] = None
    inner_padding: Optional[Number] = None
    inner_background_color: Optional[str] = None
    elements: List[TemplateElement] = Field(default_factory=list)
    # Filled in once by the loader; never re-inferred downstream.
    layout_kind: Optional[LayoutKind] = None

    def find_element(self, element_id: str):
        return next((el for el in self.elements if el.id == element_id), None)

    def duplicate_ids(self) -> List[str]:
        seen, duplicates = set(), []
        for element in self.elements:
            if element.id in seen and element.id not in duplicates:
                duplicates.append(element.id)
            seen.add(element.id)
        return duplicates

    @property
    def is_bordered(self) -> bool:
        return self.layout_kind == LAYOUT_KIND_BORDERED


class TemplateLayouts(WireModel):
    front: CardLayout
    back: CardLayout


class PlayerInfo(WireModel):
    name: Optional[str] = None
    team: Optional[str] = None
    position: Optional[str] = None
    jersey_number: Optional[Union[int, str]] = None
    year: Optional[int] = None
    throws: Optional[str] = None


class CardData(WireModel):
    player: PlayerInfo = Field(default_factory=PlayerInfo)
    stats: Dict[str, StatValue] = Field(default_factory=dict)
    image_url: Optional[str] = None
    back_image_url: Optional[str] = None
    custom_fields: Dict[str, StatValue] = Field(default_factory=dict)

    def live_stat_keys(self) -> List[str]:
        """Stat keys with a non-empty value, in insertion order."""
        return [key for key, value in self.stats.items() if value is not None and value != ""]
