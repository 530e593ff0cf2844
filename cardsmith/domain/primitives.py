# cardsmith/domain/primitives.py
"""Positioned drawables produced by the composition pipeline.

Primitives carry resolved content only (no placeholders, no card data), so any
painter can draw them without knowing about templates.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

Length = Union[str, int, float]


@dataclass(frozen=True)
class Primitive:
    id: str
    x: float
    y: float
    width: Optional[float]
    height: Optional[float]
    z_index: int


@dataclass(frozen=True)
class TextBox(Primitive):
    text: str
    font_size: float
    font_family: str
    font_weight: Union[str, int]
    color: str
    text_align: str
    white_space: str = "nowrap"
    text_shadow: Optional[str] = None
    text_stroke: Optional[str] = None
    background_color: Optional[str] = None
    padding: Optional[Length] = None
    border_radius: Optional[Length] = None
    overflow: Optional[str] = None


@dataclass(frozen=True)
class ImageBox(Primitive):
    src: str
    object_fit: str = "cover"
    # A source that fails to load must leave no broken-image glyph behind.
    hide_on_error: bool = True


@dataclass(frozen=True)
class Box(Primitive):
    background_color: str = "#FFFFFF"
    border_color: Optional[str] = None
    border_width: Optional[float] = None
    border_radius: Optional[float] = None


@dataclass(frozen=True)
class BannerLabel:
    text: str
    font_size: float
    font_weight: Union[str, int]
    color: str
    background_color: Optional[str] = None
    padding: Optional[Length] = None
    border_radius: Optional[Length] = None


@dataclass(frozen=True)
class BorderedFrontPanel(Primitive):
    """Bordered card front: outer border, inner panel, photo and diagonal banner."""

    border_color: str
    border_width: float
    inner_padding: float
    inner_background_color: str
    photo_src: Optional[str]
    name: BannerLabel
    position: BannerLabel
    photo_height_ratio: float = 0.78
    banner_height_ratio: float = 0.22
    banner_colors: Tuple[str, str] = ("#b4463f", "#4a90a6")
    photo_placeholder_color: str = "#cccccc"


@dataclass(frozen=True)
class Surface:
    side: str
    width: float
    height: float
    background_color: str
    background_image: Optional[str] = None
    primitives: Tuple[Primitive, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ComposedCard:
    front: Surface
    back: Surface

    @property
    def faces(self) -> Tuple[Surface, Surface]:
        return (self.front, self.back)
