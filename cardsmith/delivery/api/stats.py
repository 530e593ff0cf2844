# cardsmith/delivery/api/stats.py
from fastapi import APIRouter

from cardsmith.delivery.schemas.body import StatsCalculation
from cardsmith.domain.errors import InvalidRequestError
from cardsmith.domain.stat_abbreviations import STAT_ABBREVIATIONS
from cardsmith.domain.stats_calculator import (
    OFFENSIVE_STAT_DEFINITIONS,
    PITCHING_STAT_DEFINITIONS,
    calculate_stats,
)

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/definitions")
async def stat_definitions():
    return {
        "offensive": OFFENSIVE_STAT_DEFINITIONS,
        "pitching": PITCHING_STAT_DEFINITIONS,
        "abbreviations": STAT_ABBREVIATIONS,
    }


@router.post("/calculate")
async def calculate(body: StatsCalculation):
    try:
        stats = calculate_stats(body.category, body.stats)
    except ValueError as e:
        raise InvalidRequestError(str(e)) from e
    return {"category": body.category, "stats": stats}
