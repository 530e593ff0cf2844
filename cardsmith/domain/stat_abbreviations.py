# cardsmith/domain/stat_abbreviations.py
from typing import Dict

STAT_ABBREVIATIONS: Dict[str, str] = {
    # Offense
    "atBats": "AB",
    "hits": "H",
    "runs": "R",
    "doubles": "2B",
    "triples": "3B",
    "homeRuns": "HR",
    "runsBattedIn": "RBI",
    "stolenBases": "SB",
    "walks": "BB",
    "strikeouts": "SO",
    "battingAverage": "AVG",
    "onBasePercentage": "OBP",
    "sluggingPercentage": "SLG",
    "onBasePlusSlugging": "OPS",
    "totalBases": "TB",
    "hitByPitch": "HBP",
    "sacrificeFlies": "SF",
    "plateAppearances": "PA",
    # Pitching
    "wins": "W",
    "losses": "L",
    "games": "G",
    "gamesStarted": "GS",
    "completeGames": "CG",
    "shutouts": "SHO",
    "saves": "SV",
    "inningsPitched": "IP",
    "earnedRuns": "ER",
    "era": "ERA",
    "whip": "WHIP",
    "strikeoutsPer9": "K/9",
    "walksPer9": "BB/9",
    "hitsPer9": "H/9",
    "winPercentage": "W%",
    "hitBatters": "HBP",
    "wildPitches": "WP",
}

_CASE_INSENSITIVE = {key.lower(): abbrev for key, abbrev in STAT_ABBREVIATIONS.items()}


def abbreviate(stat_key: str) -> str:
    """Short column label for a stat key; unknown keys are returned unchanged."""
    if stat_key in STAT_ABBREVIATIONS:
        return STAT_ABBREVIATIONS[stat_key]
    return _CASE_INSENSITIVE.get(stat_key.lower(), stat_key)
