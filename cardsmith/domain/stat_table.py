# cardsmith/domain/stat_table.py
"""Season statistics table for the back of bordered cards.

The table is not authored; it is laid out from whichever stats the card
carries and spliced into the back layout as ordinary text and stat elements,
so it flows through the same element renderer as everything else.
"""
import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from cardsmith.domain.layout import (
    CardData,
    CardLayout,
    RectangleElement,
    StatElement,
    TemplateElement,
    TextElement,
)
from cardsmith.domain.stat_abbreviations import abbreviate

logger = logging.getLogger(__name__)

MAX_STATS = 10
ID_PREFIX = "dynamic-stat-"
STATS_ANCHOR_ID = "stats-title"
STATS_PANEL_ID = "stats-rectangle"

PANEL_PADDING = 20
YEAR_COLUMN_WIDTH = 50
HEADER_OFFSET = 50
ROW_SPACING = 25
COLUMN_FILL = 0.95

CHAR_WIDTH_RATIO = 0.6
FONT_SAFETY = 0.85
MIN_ABBREVIATION_LENGTH = 4
MIN_HEADER_FONT = 12
MIN_VALUE_FONT = 14
MAX_FONT = 18
MAX_FONT_SLOT_RATIO = 0.3
HEADER_FONT_RATIO = 0.9

TABLE_FONT_FAMILY = "Arial, sans-serif"
THEME_COLOR = "#3f7f4f"
VALUE_COLOR = "#000000"
TABLE_Z_INDEX = 10


@dataclass(frozen=True)
class PanelBox:
    x: float
    y: float
    width: float
    height: float


DEFAULT_PANEL = PanelBox(x=140, y=180, width=600, height=280)


@dataclass(frozen=True)
class TableMetrics:
    column_spacing: float
    column_width: float
    header_font_size: int
    value_font_size: int


def find_stats_panel(layout: CardLayout) -> PanelBox:
    """The authored stats rectangle when the layout has one, else the stock box."""
    panel = layout.find_element(STATS_PANEL_ID)
    if isinstance(panel, RectangleElement) and panel.width and panel.height:
        return PanelBox(panel.x, panel.y, panel.width, panel.height)
    return DEFAULT_PANEL


def table_metrics(stat_keys: Sequence[str], panel: PanelBox) -> TableMetrics:
    available_width = max(panel.width - PANEL_PADDING * 2 - YEAR_COLUMN_WIDTH, 0)
    columns = min(len(stat_keys), MAX_STATS)
    column_spacing = available_width / columns
    full_capacity_slot = available_width / MAX_STATS

    # Sized for a full table so adding stats never shrinks the existing ones.
    longest = max([len(abbreviate(key)) for key in stat_keys] + [MIN_ABBREVIATION_LENGTH])
    estimated_char_width = longest * CHAR_WIDTH_RATIO
    fitted = (full_capacity_slot * COLUMN_FILL / estimated_char_width) * FONT_SAFETY
    font_size = min(fitted, MAX_FONT, full_capacity_slot * MAX_FONT_SLOT_RATIO)

    return TableMetrics(
        column_spacing=column_spacing,
        column_width=column_spacing * COLUMN_FILL,
        header_font_size=max(MIN_HEADER_FONT, math.floor(font_size * HEADER_FONT_RATIO)),
        value_font_size=max(MIN_VALUE_FONT, math.floor(font_size)),
    )


def synthesize_stat_table(
    data: CardData, panel: PanelBox = DEFAULT_PANEL
) -> List[TemplateElement]:
    stat_keys = data.live_stat_keys()
    if not stat_keys:
        return []
    if len(stat_keys) > MAX_STATS:
        logger.warning(
            "Card carries %d stats; the table shows the first %d.", len(stat_keys), MAX_STATS
        )
        stat_keys = stat_keys[:MAX_STATS]

    metrics = table_metrics(stat_keys, panel)
    header_y = panel.y + HEADER_OFFSET
    value_y = header_y + ROW_SPACING
    table_x = panel.x + PANEL_PADDING + YEAR_COLUMN_WIDTH

    headers, values = [], []
    for column, stat_key in enumerate(stat_keys):
        x = table_x + column * metrics.column_spacing
        headers.append(TextElement(
            id=f"{ID_PREFIX}header-{stat_key}",
            content=abbreviate(stat_key),
            x=x,
            y=header_y,
            width=metrics.column_width,
            z_index=TABLE_Z_INDEX,
            font_size=metrics.header_font_size,
            font_family=TABLE_FONT_FAMILY,
            font_weight="bold",
            color=THEME_COLOR,
            text_align="center",
        ))
        values.append(StatElement(
            id=f"{ID_PREFIX}value-{stat_key}",
            stat_key=stat_key,
            label="",
            format="value-only",
            x=x,
            y=value_y,
            width=metrics.column_width,
            z_index=TABLE_Z_INDEX,
            font_size=metrics.value_font_size,
            font_family=TABLE_FONT_FAMILY,
            font_weight="normal",
            color=VALUE_COLOR,
            text_align="center",
        ))

    synthesized = headers + values
    if data.player.year is not None:
        synthesized.append(TextElement(
            id=f"{ID_PREFIX}year-label",
            content=str(data.player.year),
            x=panel.x + PANEL_PADDING,
            y=value_y,
            width=YEAR_COLUMN_WIDTH,
            z_index=TABLE_Z_INDEX,
            font_size=metrics.value_font_size,
            font_family=TABLE_FONT_FAMILY,
            font_weight="bold",
            color=VALUE_COLOR,
            text_align="right",
        ))
    return synthesized


def splice_after_anchor(
    elements: Sequence[TemplateElement],
    synthesized: Sequence[TemplateElement],
    anchor_id: Optional[str] = STATS_ANCHOR_ID,
) -> List[TemplateElement]:
    """Insert right after the anchor element, or append when there is none."""
    elements = list(elements)
    for index, element in enumerate(elements):
        if element.id == anchor_id:
            return elements[: index + 1] + list(synthesized) + elements[index + 1 :]
    return elements + list(synthesized)


def inject_stat_table(layout: CardLayout, data: CardData) -> List[TemplateElement]:
    synthesized = synthesize_stat_table(data, find_stats_panel(layout))
    if not synthesized:
        return list(layout.elements)
    return splice_after_anchor(layout.elements, synthesized)
