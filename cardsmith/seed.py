# cardsmith/seed.py
"""Default templates, upserted by name. Run directly with ``python -m cardsmith.seed``."""
import asyncio
import copy
import logging
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from cardsmith.config.database import create_engine_and_sessions, init_db
from cardsmith.infrastructure.database.models import Template
from cardsmith.infrastructure.database.repository import Repository

logger = logging.getLogger("uvicorn.error")

FONT = "Arial, sans-serif"
GREEN = "#3f7f4f"
WHITE = "#FFFFFF"


def _text(element_id: str, x, y, width, content: str, font_size, **style) -> Dict[str, Any]:
    element = {
        "id": element_id,
        "type": "text",
        "x": x,
        "y": y,
        "width": width,
        "zIndex": 10,
        "visible": True,
        "content": content,
        "fontSize": font_size,
        "fontFamily": FONT,
        "fontWeight": "normal",
        "color": WHITE,
        "textAlign": "center",
    }
    element.update(style)
    return element


SHARED_FRONT: Dict[str, Any] = {
    "width": 350,
    "height": 490,
    "backgroundColor": GREEN,
    "borderWidth": 12,
    "innerPadding": 6,
    "innerBackgroundColor": WHITE,
    "elements": [
        {
            "id": "player-photo",
            "type": "image",
            "x": 18,
            "y": 18,
            "width": 314,
            "height": 382,
            "zIndex": 1,
            "visible": True,
            "src": "",
            "objectFit": "cover",
        },
        _text("player-name", 38, 420, 200, "{{player.name}}", 20, fontWeight="bold", textAlign="left"),
        _text(
            "player-position", 250, 440, 100, "{{player.position}}", 14,
            color="#000000", backgroundColor="#86a8b8", padding="2px 8px", borderRadius="2px",
        ),
    ],
}

SHARED_BACK: Dict[str, Any] = {
    "width": 490,
    "height": 350,
    "backgroundColor": GREEN,
    "elements": [
        {
            "id": "stats-rectangle",
            "type": "rectangle",
            "x": 20,
            "y": 100,
            "width": 450,
            "height": 180,
            "backgroundColor": WHITE,
            "borderColor": GREEN,
            "borderWidth": 2,
            "borderRadius": 8,
            "zIndex": 1,
            "visible": True,
        },
        _text("bio-title", 20, 10, 450, "PLAYER BIO", 18, fontWeight="bold"),
        _text("bio-name", 20, 35, 140, "Name: {{player.name}}", 12),
        _text("bio-position", 20, 55, 140, "Position: {{player.position}}", 12),
        _text("bio-team", 175, 35, 140, "Team: {{player.team}}", 12),
        _text("bio-jersey", 175, 55, 140, "Jersey: #{{player.jerseyNumber}}", 12),
        _text("bio-year", 330, 35, 140, "Year: {{player.year}}", 12),
        _text("bio-throws", 330, 55, 140, "Throws: {{player.throws}}", 12),
        _text("stats-title", 20, 110, 450, "SEASON STATISTICS", 16, fontWeight="bold", color=GREEN),
        _text("highlights-title", 20, 290, 450, "CAREER HIGHLIGHTS", 16, fontWeight="bold"),
        _text(
            "highlights-text", 20, 310, 450, "{{customFields.careerHighlights}}", 11,
            whiteSpace="normal",
        ),
    ],
}

DEFAULT_TEMPLATES: List[Dict[str, str]] = [
    {"name": "Topps 1990 Style", "description": "Classic Topps design inspired by 1990s baseball cards"},
    {"name": "Donruss 1991 Style", "description": "Authentic Donruss 1991 design with green border and diagonal banner"},
    {"name": "Score 1992 Style", "description": "Clean Score design with modern layout"},
    {"name": "Upper Deck 1990 Style", "description": "Premium Upper Deck design with elegant styling"},
    {
        "name": "Fleer 1990 Yankees Style",
        "description": "Classic Fleer 1990 design with navy and red accents, inspired by Yankees cards",
    },
]


async def seed_default_templates(session: AsyncSession) -> int:
    """Create or refresh every default template; returns how many were written."""
    repo = Repository(session)
    existing = {template.name: template for template in await repo.list_default_templates()}
    written = []
    for default in DEFAULT_TEMPLATES:
        template = existing.get(default["name"]) or Template(name=default["name"], is_default=True, user_id=None)
        template.description = default["description"]
        template.front_json = copy.deepcopy(SHARED_FRONT)
        template.back_json = copy.deepcopy(SHARED_BACK)
        written.append(template)
    await repo.save(*written)
    return len(written)


async def main() -> None:
    engine, session_factory = create_engine_and_sessions()
    try:
        await init_db(engine)
        async with session_factory() as session:
            count = await seed_default_templates(session)
        logger.info(f"Seeded {count} default templates.")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
