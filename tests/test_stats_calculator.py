"""Tests for derived offensive and pitching stats."""

import pytest

from cardsmith.domain.stats_calculator import (
    calculate_offensive_stats,
    calculate_pitching_stats,
    calculate_stats,
)


class TestOffensive:
    def test_full_line(self):
        stats = calculate_offensive_stats(
            {"atBats": 500, "hits": 150, "doubles": 30, "triples": 5, "homeRuns": 25, "walks": 60}
        )
        assert stats["battingAverage"] == 0.3
        assert stats["totalBases"] == 90 + 60 + 15 + 100
        assert stats["sluggingPercentage"] == 0.53
        # At-bat fallback: (150 + 60) / (500 + 60)
        assert stats["onBasePercentage"] == 0.375
        assert stats["onBasePlusSlugging"] == 0.905

    def test_plate_appearances_preferred(self):
        stats = calculate_offensive_stats({"atBats": 10, "hits": 3, "walks": 1, "plateAppearances": 12})
        assert stats["onBasePercentage"] == pytest.approx(0.333)

    def test_inputs_are_preserved(self):
        stats = calculate_offensive_stats({"hits": 3, "runs": 2})
        assert stats["runs"] == 2
        assert "battingAverage" not in stats
        assert stats["totalBases"] == 3

    def test_zero_at_bats(self):
        stats = calculate_offensive_stats({"atBats": 0, "hits": 0})
        assert "battingAverage" not in stats
        assert "onBasePercentage" not in stats


class TestPitching:
    def test_rates(self):
        stats = calculate_pitching_stats(
            {"inningsPitched": 200, "earnedRuns": 60, "walks": 50, "hits": 170, "strikeouts": 220, "wins": 18, "losses": 6}
        )
        assert stats["era"] == 2.7
        assert stats["whip"] == 1.1
        assert stats["strikeoutsPer9"] == 9.9
        assert stats["walksPer9"] == 2.25
        assert stats["hitsPer9"] == 7.65
        assert stats["winPercentage"] == 0.75

    def test_no_innings(self):
        stats = calculate_pitching_stats({"earnedRuns": 3, "wins": 0, "losses": 0})
        assert "era" not in stats and "whip" not in stats and "winPercentage" not in stats


class TestDispatch:
    def test_unknown_category(self):
        with pytest.raises(ValueError):
            calculate_stats("fielding", {})
