# cardsmith/domain/export_service.py
import logging
import time
from dataclasses import dataclass

from cardsmith.domain.card_service import CardService, template_source
from cardsmith.domain.composition import compose_card
from cardsmith.domain.formats import validate_format
from cardsmith.infrastructure.database.models import User
from cardsmith.infrastructure.painting.html_painter import HtmlPainter
from cardsmith.infrastructure.rendering.client import RenderClient

# --- LOGGER ---
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s', '%Y-%m-%d %H:%M:%S')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False


@dataclass(frozen=True)
class ExportedFile:
    content: bytes
    media_type: str
    filename: str

    @property
    def size(self) -> int:
        return len(self.content)


def export_filename(card_id, extension: str) -> str:
    return f"card-{card_id}-{int(time.time() * 1000)}.{extension}"


class ExportService:
    def __init__(self, cards: CardService, render_client: RenderClient, painter: HtmlPainter = None):
        self.cards = cards
        self.render_client = render_client
        self.painter = painter or HtmlPainter()

    async def export_card(self, user: User, card_id, fmt) -> ExportedFile:
        # Format is checked before any lookup or rendering work.
        export_format = validate_format(fmt)
        start = time.perf_counter()
        logger.info(f"Export start: card={card_id}, user={user.id}, format={export_format.name}")

        try:
            card = await self.cards.get_card(user, card_id)
            composed = compose_card(template_source(card.template), card.card_data_json)
            document = self.painter.render_document(composed, mode=export_format.document_mode)
            content = await self.render_client.render_document(document, export_format)
        except Exception as e:
            logger.error(f"Export failed: card={card_id}, format={export_format.name}: {e}")
            raise

        exported = ExportedFile(
            content=content,
            media_type=export_format.media_type,
            filename=export_filename(card.id, export_format.extension),
        )
        logger.info(
            f"Export success: card={card_id}, file={exported.filename}, "
            f"{exported.size} bytes in {time.perf_counter() - start:.2f}s"
        )
        return exported
