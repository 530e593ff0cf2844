# cardsmith/domain/placeholders.py
"""Placeholder resolution for authored text content.

Content may embed ``{{path.to.field}}`` tokens and, in older templates, the
literal sentinels ``Player Name`` and ``Team • Position``. Tokens outside the
known vocabulary are left untouched.
"""
import re
from typing import Callable, Dict, Optional

from cardsmith.domain.layout import CardData

TOKEN_PATTERN = re.compile(r"\{\{([A-Za-z_][\w.]*)\}\}")

NO_HIGHLIGHTS = "No highlights available"
PLAYER_NAME_SENTINEL = "Player Name"
TEAM_POSITION_SENTINEL = "Team • Position"
TEAM_POSITION_SEPARATOR = " • "


def display_value(value) -> str:
    """Render a scalar the way it reads on a card: 500 not 500.0, '' for None."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def _career_highlights(data: CardData) -> str:
    value = data.custom_fields.get("careerHighlights")
    if value is None:
        return NO_HIGHLIGHTS
    return display_value(value)


TOKEN_RESOLVERS: Dict[str, Callable[[CardData], str]] = {
    "player.name": lambda data: data.player.name or "",
    "player.team": lambda data: data.player.team or "",
    "player.position": lambda data: data.player.position or "",
    "player.jerseyNumber": lambda data: display_value(data.player.jersey_number),
    "player.year": lambda data: display_value(data.player.year),
    "player.throws": lambda data: _capitalize_first(data.player.throws or ""),
    "customFields.careerHighlights": _career_highlights,
}


def _team_position(data: CardData) -> Optional[str]:
    parts = [part for part in (data.player.team, data.player.position) if part]
    return TEAM_POSITION_SEPARATOR.join(parts) if parts else None


# Sentinel -> replacement, or None to leave the sentinel in place.
SENTINEL_RESOLVERS: Dict[str, Callable[[CardData], Optional[str]]] = {
    PLAYER_NAME_SENTINEL: lambda data: data.player.name or None,
    TEAM_POSITION_SENTINEL: _team_position,
}


def resolve_placeholders(content: str, data: CardData) -> str:
    if not content:
        return ""

    def substitute(match: re.Match) -> str:
        resolver = TOKEN_RESOLVERS.get(match.group(1))
        return resolver(data) if resolver else match.group(0)

    resolved = TOKEN_PATTERN.sub(substitute, content)

    for sentinel, resolver in SENTINEL_RESOLVERS.items():
        if sentinel in resolved:
            replacement = resolver(data)
            if replacement is not None:
                resolved = resolved.replace(sentinel, replacement)
    return resolved
