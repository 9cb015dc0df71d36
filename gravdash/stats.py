"""Persistent player statistics and the figures of the last game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

HIGH_SCORE_COUNT = 3


class HighScoreMode(Enum):
    """Game modes that keep a high-score table."""

    ONE_MINUTE = auto()
    RUSH = auto()
    COOP = auto()


@dataclass
class LocalStats:
    """Figures from the most recent game; ``time_boosts`` is -1 when unused."""

    jumps: int = 0
    hits: int = 0
    specials: int = 0
    combos: int = 0
    time_boosts: int = -1


def _zero_scores() -> list[int]:
    return [0] * HIGH_SCORE_COUNT


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    return int(value)


@dataclass
class Stats:
    """Lifetime statistics and the top three scores of each mode."""

    min_high_scores: list[int] = field(default_factory=_zero_scores)
    rush_high_scores: list[int] = field(default_factory=_zero_scores)
    coop_high_scores: list[int] = field(default_factory=_zero_scores)
    games_played: int = 0
    jumps: int = 0
    special_jumps: int = 0
    combos: int = 0
    hits: int = 0

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Stats":
        """Build statistics from a decoded JSON object; raise ValueError if malformed."""
        try:
            def scores(key: str) -> list[int]:
                table = data[key]
                values = [_as_int(table[i]) for i in range(HIGH_SCORE_COUNT)]
                return sorted(values, reverse=True)

            return cls(
                min_high_scores=scores("min"),
                rush_high_scores=scores("rush"),
                coop_high_scores=scores("coop"),
                games_played=_as_int(data["gamesPlayed"]),
                jumps=_as_int(data["jumps"]),
                special_jumps=_as_int(data["specialJumps"]),
                combos=_as_int(data["combos"]),
                hits=_as_int(data["hits"]),
            )
        except (KeyError, IndexError, TypeError) as exc:
            raise ValueError("invalid statistics data") from exc

    def to_json(self) -> dict[str, Any]:
        """The statistics as a JSON-ready object."""
        return {
            "min": list(self.min_high_scores),
            "rush": list(self.rush_high_scores),
            "coop": list(self.coop_high_scores),
            "gamesPlayed": self.games_played,
            "jumps": self.jumps,
            "specialJumps": self.special_jumps,
            "combos": self.combos,
            "hits": self.hits,
        }

    def _table(self, mode: HighScoreMode) -> list[int]:
        return {
            HighScoreMode.ONE_MINUTE: self.min_high_scores,
            HighScoreMode.RUSH: self.rush_high_scores,
            HighScoreMode.COOP: self.coop_high_scores,
        }[mode]

    def insert_high_score(self, mode: HighScoreMode, score: int) -> None:
        """Place ``score`` in the mode's table, pushing lower scores down."""
        table = self._table(mode)
        for i, current in enumerate(table):
            if score > current:
                table[i], score = score, current