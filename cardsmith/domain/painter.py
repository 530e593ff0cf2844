# cardsmith/domain/painter.py
from typing import Any, Callable, Dict, List

from cardsmith.domain.primitives import (
    BorderedFrontPanel,
    Box,
    ImageBox,
    Primitive,
    Surface,
    TextBox,
)


class SurfacePainter:
    """Paints one positioned primitive at a time onto some output medium.

    Subclasses implement the ``paint_*`` hooks; ``paint_surface`` wraps the
    painted primitives for one card face.
    """

    def _handlers(self) -> Dict[type, Callable[[Any], Any]]:
        return {
            TextBox: self.paint_text,
            ImageBox: self.paint_image,
            Box: self.paint_box,
            BorderedFrontPanel: self.paint_bordered_front,
        }

    def paint_primitive(self, primitive: Primitive) -> Any:
        handler = self._handlers().get(type(primitive))
        if handler is None:
            raise TypeError(f"{type(self).__name__} cannot paint {type(primitive).__name__}")
        return handler(primitive)

    def paint_primitives(self, surface: Surface) -> List[Any]:
        return [self.paint_primitive(primitive) for primitive in surface.primitives]

    def paint_surface(self, surface: Surface) -> Any:
        raise NotImplementedError

    def paint_text(self, primitive: TextBox) -> Any:
        raise NotImplementedError

    def paint_image(self, primitive: ImageBox) -> Any:
        raise NotImplementedError

    def paint_box(self, primitive: Box) -> Any:
        raise NotImplementedError

    def paint_bordered_front(self, primitive: BorderedFrontPanel) -> Any:
        raise NotImplementedError
