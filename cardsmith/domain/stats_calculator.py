# cardsmith/domain/stats_calculator.py
"""Derived baseball stats, computed from whatever raw counts were entered."""
from typing import Dict, Mapping, Optional, Union

Number = Union[int, float]

OFFENSIVE_STAT_DEFINITIONS: Dict[str, Dict[str, str]] = {
    "atBats": {"label": "At Bats", "abbrev": "AB", "category": "basic"},
    "hits": {"label": "Hits", "abbrev": "H", "category": "basic"},
    "runs": {"label": "Runs", "abbrev": "R", "category": "basic"},
    "doubles": {"label": "Doubles", "abbrev": "2B", "category": "basic"},
    "triples": {"label": "Triples", "abbrev": "3B", "category": "basic"},
    "homeRuns": {"label": "Home Runs", "abbrev": "HR", "category": "basic"},
    "runsBattedIn": {"label": "RBI", "abbrev": "RBI", "category": "basic"},
    "stolenBases": {"label": "Stolen Bases", "abbrev": "SB", "category": "basic"},
    "walks": {"label": "Walks", "abbrev": "BB", "category": "basic"},
    "strikeouts": {"label": "Strikeouts", "abbrev": "SO", "category": "basic"},
    "battingAverage": {"label": "Batting Average", "abbrev": "AVG", "category": "calculated"},
    "onBasePercentage": {"label": "On-Base %", "abbrev": "OBP", "category": "calculated"},
    "sluggingPercentage": {"label": "Slugging %", "abbrev": "SLG", "category": "calculated"},
    "onBasePlusSlugging": {"label": "OPS", "abbrev": "OPS", "category": "calculated"},
    "totalBases": {"label": "Total Bases", "abbrev": "TB", "category": "calculated"},
}

PITCHING_STAT_DEFINITIONS: Dict[str, Dict[str, str]] = {
    "wins": {"label": "Wins", "abbrev": "W", "category": "basic"},
    "losses": {"label": "Losses", "abbrev": "L", "category": "basic"},
    "games": {"label": "Games", "abbrev": "G", "category": "basic"},
    "gamesStarted": {"label": "Games Started", "abbrev": "GS", "category": "basic"},
    "completeGames": {"label": "Complete Games", "abbrev": "CG", "category": "basic"},
    "shutouts": {"label": "Shutouts", "abbrev": "SHO", "category": "basic"},
    "saves": {"label": "Saves", "abbrev": "SV", "category": "basic"},
    "inningsPitched": {"label": "Innings Pitched", "abbrev": "IP", "category": "basic"},
    "hits": {"label": "Hits Allowed", "abbrev": "H", "category": "basic"},
    "runs": {"label": "Runs Allowed", "abbrev": "R", "category": "basic"},
    "earnedRuns": {"label": "Earned Runs", "abbrev": "ER", "category": "basic"},
    "walks": {"label": "Walks", "abbrev": "BB", "category": "basic"},
    "strikeouts": {"label": "Strikeouts", "abbrev": "SO", "category": "basic"},
    "homeRuns": {"label": "Home Runs Allowed", "abbrev": "HR", "category": "basic"},
    "era": {"label": "ERA", "abbrev": "ERA", "category": "calculated"},
    "whip": {"label": "WHIP", "abbrev": "WHIP", "category": "calculated"},
    "strikeoutsPer9": {"label": "K/9", "abbrev": "K/9", "category": "calculated"},
    "walksPer9": {"label": "BB/9", "abbrev": "BB/9", "category": "calculated"},
    "hitsPer9": {"label": "H/9", "abbrev": "H/9", "category": "calculated"},
    "winPercentage": {"label": "Win %", "abbrev": "W%", "category": "calculated"},
}


def _positive(value: Optional[Number]) -> bool:
    return value is not None and value > 0


def calculate_offensive_stats(stats: Mapping[str, Number]) -> Dict[str, Number]:
    calculated = dict(stats)
    at_bats = calculated.get("atBats")
    hits = calculated.get("hits")
    walks = calculated.get("walks") or 0
    hit_by_pitch = calculated.get("hitByPitch") or 0

    if _positive(at_bats) and hits is not None:
        calculated["battingAverage"] = round(hits / at_bats, 3)

    if hits is not None:
        doubles = calculated.get("doubles") or 0
        triples = calculated.get("triples") or 0
        home_runs = calculated.get("homeRuns") or 0
        singles = hits - doubles - triples - home_runs
        calculated["totalBases"] = singles + doubles * 2 + triples * 3 + home_runs * 4

    if _positive(at_bats) and "totalBases" in calculated:
        calculated["sluggingPercentage"] = round(calculated["totalBases"] / at_bats, 3)

    on_base = (hits or 0) + walks + hit_by_pitch
    plate_appearances = calculated.get("plateAppearances")
    if _positive(plate_appearances):
        calculated["onBasePercentage"] = round(on_base / plate_appearances, 3)
    elif _positive(at_bats):
        denominator = at_bats + walks + hit_by_pitch + (calculated.get("sacrificeFlies") or 0)
        calculated["onBasePercentage"] = round(on_base / denominator, 3)

    if "onBasePercentage" in calculated and "sluggingPercentage" in calculated:
        calculated["onBasePlusSlugging"] = round(
            calculated["onBasePercentage"] + calculated["sluggingPercentage"], 3
        )
    return calculated


def calculate_pitching_stats(stats: Mapping[str, Number]) -> Dict[str, Number]:
    calculated = dict(stats)
    innings = calculated.get("inningsPitched")

    if _positive(innings):
        if calculated.get("earnedRuns") is not None:
            calculated["era"] = round(calculated["earnedRuns"] * 9 / innings, 2)
        walks_and_hits = (calculated.get("walks") or 0) + (calculated.get("hits") or 0)
        calculated["whip"] = round(walks_and_hits / innings, 2)
        for source, target in (("strikeouts", "strikeoutsPer9"), ("walks", "walksPer9"), ("hits", "hitsPer9")):
            if calculated.get(source) is not None:
                calculated[target] = round(calculated[source] * 9 / innings, 2)

    wins, losses = calculated.get("wins"), calculated.get("losses")
    if wins is not None and losses is not None and wins + losses > 0:
        calculated["winPercentage"] = round(wins / (wins + losses), 3)
    return calculated


STAT_CALCULATORS = {
    "offensive": calculate_offensive_stats,
    "pitching": calculate_pitching_stats,
}


def calculate_stats(kind: str, stats: Mapping[str, Number]) -> Dict[str, Number]:
    try:
        calculator = STAT_CALCULATORS[kind]
    except KeyError:
        raise ValueError(f"Unknown stat category '{kind}'") from None
    return calculator(stats)
