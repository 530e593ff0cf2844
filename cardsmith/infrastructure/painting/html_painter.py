# cardsmith/infrastructure/painting/html_painter.py
"""HTML painter shared by the live preview and the rasterizer.

``screen`` mode lays both faces out side by side the way the editor preview
shows them; ``print`` mode puts each face on its own page for PDF export.
"""
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from cardsmith.domain.painter import SurfacePainter
from cardsmith.domain.primitives import (
    BorderedFrontPanel,
    Box,
    ComposedCard,
    ImageBox,
    Primitive,
    Surface,
    TextBox,
)

TEMPLATES_DIR = Path(__file__).parent / "templates"

SCREEN = "screen"
PRINT = "print"
MODES = (SCREEN, PRINT)

PAGE_PADDING = 20
FACE_GAP = 20
SCREEN_BACKGROUND = "#f0f0f0"
PRINT_BACKGROUND = "#FFFFFF"

Declaration = Tuple[str, Optional[str]]


@lru_cache(maxsize=1)
def template_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(enabled_extensions=("html", "j2")),
        trim_blocks=False,
        lstrip_blocks=False,
    )


def css_number(value) -> str:
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return f"{value:.4f}".rstrip("0").rstrip(".")
    return str(value)


def css_length(value) -> Optional[str]:
    """Numbers become px; strings (``"2px 8px"``, ``"50%"``) pass through."""
    if value is None or value == "":
        return None
    if isinstance(value, str):
        return value
    return f"{css_number(value)}px"


def css_url(src: str) -> str:
    return "url('{}')".format(src.replace("'", "%27"))


def style(declarations: Iterable[Declaration]) -> str:
    return "; ".join(f"{prop}: {value}" for prop, value in declarations if value not in (None, ""))


def _position(primitive: Primitive) -> List[Declaration]:
    return [
        ("position", "absolute"),
        ("left", css_length(primitive.x)),
        ("top", css_length(primitive.y)),
        ("width", css_length(primitive.width)),
        ("height", css_length(primitive.height)),
        ("z-index", str(primitive.z_index)),
    ]


def face_pages(card: ComposedCard) -> List[dict]:
    """One named print page per face, sized to that face."""
    return [
        {
            "name": f"card-{face.side}",
            "side": face.side,
            "width": css_length(face.width),
            "height": css_length(face.height),
        }
        for face in card.faces
    ]


@dataclass(frozen=True)
class HtmlDocument:
    # page_width/page_height size the first PDF page; later faces carry their own @page size.
    html: str
    viewport_width: int
    viewport_height: int
    page_width: float
    page_height: float


class HtmlPainter(SurfacePainter):
    def __init__(self, environment: Optional[Environment] = None):
        self._env = environment or template_environment()
        self._macros = self._env.get_template("primitives.html.j2").module
        self._document = self._env.get_template("document.html.j2")

    def paint_text(self, primitive: TextBox) -> Markup:
        declarations = _position(primitive) + [
            ("font-size", css_length(primitive.font_size)),
            ("font-family", primitive.font_family),
            ("font-weight", str(primitive.font_weight)),
            ("color", primitive.color),
            ("text-align", primitive.text_align),
            ("white-space", primitive.white_space),
            ("text-shadow", primitive.text_shadow),
            ("-webkit-text-stroke", primitive.text_stroke),
            ("background-color", primitive.background_color),
            ("padding", css_length(primitive.padding)),
            ("border-radius", css_length(primitive.border_radius)),
            ("overflow", primitive.overflow),
            ("box-sizing", "border-box"),
        ]
        return self._macros.text_box(primitive, style(declarations))

    def paint_image(self, primitive: ImageBox) -> Markup:
        declarations = _position(primitive) + [("object-fit", primitive.object_fit)]
        return self._macros.image_box(primitive, style(declarations))

    def paint_box(self, primitive: Box) -> Markup:
        border = None
        if primitive.border_color:
            border = f"{css_length(primitive.border_width or 1)} solid {primitive.border_color}"
        declarations = _position(primitive) + [
            ("background-color", primitive.background_color),
            ("border", border),
            ("border-radius", css_length(primitive.border_radius)),
            ("box-sizing", "border-box"),
        ]
        return self._macros.box(primitive, style(declarations))

    def paint_bordered_front(self, primitive: BorderedFrontPanel) -> Markup:
        padding = css_length(primitive.inner_padding)
        photo = [
            ("width", "100%"),
            ("height", f"{css_number(primitive.photo_height_ratio * 100)}%"),
            ("background-color", primitive.photo_placeholder_color),
            ("border-radius", "2px"),
        ]
        if primitive.photo_src:
            photo += [
                ("background-image", css_url(primitive.photo_src)),
                ("background-size", "cover"),
                ("background-position", "center"),
                ("background-repeat", "no-repeat"),
            ]
        first, second = primitive.banner_colors
        name, position = primitive.name, primitive.position
        styles = {
            "outer": style(_position(primitive) + [
                ("background-color", primitive.border_color),
                ("padding", css_length(primitive.border_width)),
                ("box-sizing", "border-box"),
                ("border-radius", "4px"),
            ]),
            "inner": style([
                ("position", "relative"),
                ("width", "100%"),
                ("height", "100%"),
                ("background-color", primitive.inner_background_color),
                ("padding", padding),
                ("box-sizing", "border-box"),
                ("border-radius", "3px"),
                ("overflow", "hidden"),
            ]),
            "photo": style(photo),
            "banner": style([
                ("position", "absolute"),
                ("left", padding),
                ("bottom", padding),
                ("width", f"calc(100% - 2 * {padding})"),
                ("height", f"{css_number(primitive.banner_height_ratio * 100)}%"),
                ("pointer-events", "none"),
            ]),
            "stripe": style([
                ("position", "absolute"),
                ("left", "0"),
                ("bottom", "0"),
                ("width", "100%"),
                ("height", "100%"),
                ("background", f"linear-gradient(10deg, {first} 60%, {second} 60%)"),
                ("transform", "skewY(-10deg)"),
                ("transform-origin", "bottom left"),
                ("z-index", "1"),
            ]),
            "name": style([
                ("position", "absolute"),
                ("left", "20px"),
                ("bottom", "40px"),
                ("z-index", "2"),
                ("font-size", css_length(name.font_size)),
                ("font-weight", str(name.font_weight)),
                ("color", name.color),
                ("white-space", "nowrap"),
            ]),
            "position": style([
                ("position", "absolute"),
                ("right", "20px"),
                ("bottom", "20px"),
                ("z-index", "2"),
                ("font-size", css_length(position.font_size)),
                ("font-weight", str(position.font_weight)),
                ("color", position.color),
                ("background-color", position.background_color),
                ("padding", css_length(position.padding)),
                ("border-radius", css_length(position.border_radius)),
            ]),
        }
        return self._macros.bordered_front(primitive, styles)

    def paint_surface(self, surface: Surface) -> Markup:
        declarations = [
            ("position", "relative"),
            ("width", css_length(surface.width)),
            ("height", css_length(surface.height)),
            ("overflow", "hidden"),
            ("background-color", surface.background_color),
        ]
        if surface.background_image:
            declarations += [
                ("background-image", css_url(surface.background_image)),
                ("background-size", "cover"),
                ("background-position", "center"),
                ("background-repeat", "no-repeat"),
            ]
        return self._macros.surface(surface, style(declarations), self.paint_primitives(surface))

    def render_document(self, card: ComposedCard, mode: str = SCREEN, title: str = "Card") -> HtmlDocument:
        if mode not in MODES:
            raise ValueError(f"Unknown document mode: {mode}")
        front, back = card.faces

        if mode == PRINT:
            padding, background = 0, PRINT_BACKGROUND
            viewport_width = max(front.width, back.width)
            viewport_height = front.height
        else:
            padding, background = PAGE_PADDING, SCREEN_BACKGROUND
            viewport_width = front.width + FACE_GAP + back.width + 2 * PAGE_PADDING
            viewport_height = max(front.height, back.height) + 2 * PAGE_PADDING

        html = self._document.render(
            title=title,
            mode=mode,
            padding=padding,
            gap=FACE_GAP,
            page_background=background,
            faces=[self.paint_surface(face) for face in card.faces],
            pages=face_pages(card),
        )
        return HtmlDocument(
            html=html,
            viewport_width=int(round(viewport_width)),
            viewport_height=int(round(viewport_height)),
            page_width=front.width,
            page_height=front.height,
        )
