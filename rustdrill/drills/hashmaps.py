"""Dictionaries keyed by names and by enum members."""

from __future__ import annotations

import enum
from dataclasses import dataclass


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and five pieces."""
    return {"banana": 2, "apple": 2, "pear": 2}


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def complete_basket(basket: dict[Fruit, int]) -> dict[Fruit, int]:
    """Make sure every kind of fruit is present, leaving present ones untouched."""
    for fruit in Fruit:
        if not basket.get(fruit, 0):
            basket[fruit] = 1
    return basket


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0


def _goals(field: str) -> int:
    try:
        value = int(field)
    except ValueError as err:
        raise ValueError(f"invalid goal count: {field!r}") from err
    if not 0 <= value <= 255:
        raise ValueError(f"goal count out of range: {field!r}")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}

    def update(name: str, scored: int, conceded: int) -> None:
        team = scores.setdefault(name, Team())
        team.goals_scored += scored
        team.goals_conceded += conceded

    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        score_1, score_2 = _goals(fields[2]), _goals(fields[3])
        update(team_1, score_1, score_2)
        update(team_2, score_2, score_1)
    return scores