import pytest

from gravdash.stats import HighScoreMode, LocalStats, Stats


def sample_json():
    return {
        "min": [10, 30, 20],
        "rush": [1, 2, 3],
        "coop": [0, 0, 5],
        "gamesPlayed": 4,
        "jumps": 120,
        "specialJumps": 7,
        "combos": 2,
        "hits": 9,
    }


def test_defaults_are_zero():
    stats = Stats()
    assert stats.min_high_scores == [0, 0, 0]
    assert stats.rush_high_scores == [0, 0, 0]
    assert stats.coop_high_scores == [0, 0, 0]
    assert (stats.games_played, stats.jumps, stats.special_jumps, stats.combos, stats.hits) == (
        0, 0, 0, 0, 0,
    )


def test_from_json_sorts_scores_descending():
    stats = Stats.from_json(sample_json())
    assert stats.min_high_scores == [30, 20, 10]
    assert stats.rush_high_scores == [3, 2, 1]
    assert stats.coop_high_scores == [5, 0, 0]
    assert stats.special_jumps == 7


def test_round_trip():
    stats = Stats.from_json(sample_json())
    again = Stats.from_json(stats.to_json())
    assert again == stats


def test_to_json_keys():
    assert set(Stats().to_json()) == {
        "min", "rush", "coop", "gamesPlayed", "jumps", "specialJumps", "combos", "hits",
    }


def test_missing_key_raises():
    data = sample_json()
    del data["hits"]
    with pytest.raises(ValueError):
        Stats.from_json(data)


def test_short_table_raises():
    data = sample_json()
    data["rush"] = [1, 2]
    with pytest.raises(ValueError):
        Stats.from_json(data)


def test_non_numeric_raises():
    data = sample_json()
    data["jumps"] = "many"
    with pytest.raises(ValueError):
        Stats.from_json(data)


def test_insert_in_middle():
    stats = Stats(rush_high_scores=[30, 20, 10])
    stats.insert_high_score(HighScoreMode.RUSH, 25)
    assert stats.rush_high_scores == [30, 25, 20]


def test_insert_at_top():
    stats = Stats(min_high_scores=[30, 20, 10])
    stats.insert_high_score(HighScoreMode.ONE_MINUTE, 40)
    assert stats.min_high_scores == [40, 30, 20]


def test_low_score_is_ignored():
    stats = Stats(coop_high_scores=[30, 20, 10])
    stats.insert_high_score(HighScoreMode.COOP, 5)
    assert stats.coop_high_scores == [30, 20, 10]


def test_insert_only_touches_its_mode():
    stats = Stats()
    stats.insert_high_score(HighScoreMode.RUSH, 50)
    assert stats.rush_high_scores[0] == 50
    assert stats.min_high_scores == [0, 0, 0]


def test_local_stats_time_boosts_unused_by_default():
    assert LocalStats().time_boosts == -1