# cardsmith/infrastructure/painting/scene_painter.py
"""Serializes composed faces as plain JSON scenes for canvas-style clients."""
from dataclasses import asdict
from typing import Any, Dict

from pydantic.alias_generators import to_camel

from cardsmith.domain.painter import SurfacePainter
from cardsmith.domain.primitives import BorderedFrontPanel, Box, ComposedCard, ImageBox, Surface, TextBox


def camelize(value: Any) -> Any:
    if isinstance(value, dict):
        return {to_camel(key): camelize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [camelize(item) for item in value]
    return value


class ScenePainter(SurfacePainter):
    def _describe(self, kind: str, primitive) -> Dict[str, Any]:
        scene = camelize(asdict(primitive))
        scene["kind"] = kind
        return scene

    def paint_text(self, primitive: TextBox) -> Dict[str, Any]:
        return self._describe("text", primitive)

    def paint_image(self, primitive: ImageBox) -> Dict[str, Any]:
        return self._describe("image", primitive)

    def paint_box(self, primitive: Box) -> Dict[str, Any]:
        return self._describe("box", primitive)

    def paint_bordered_front(self, primitive: BorderedFrontPanel) -> Dict[str, Any]:
        return self._describe("borderedFront", primitive)

    def paint_surface(self, surface: Surface) -> Dict[str, Any]:
        return {
            "side": surface.side,
            "width": surface.width,
            "height": surface.height,
            "backgroundColor": surface.background_color,
            "backgroundImage": surface.background_image,
            "primitives": self.paint_primitives(surface),
        }

    def render_scene(self, card: ComposedCard) -> Dict[str, Any]:
        return {face.side: self.paint_surface(face) for face in card.faces}
