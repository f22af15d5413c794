"""Map drills: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
from dataclasses import dataclass


def make_basket() -> dict[str, int]:
    """A basket holding at least three kinds of fruit, five or more in total."""
    return {"banana": 2, "apple": 3, "mango": 4}


class Fruit(enum.Enum):
    """Kinds of fruit that can go in the cake basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_basket(basket: dict[Fruit, int]) -> None:
    """Add ten of every kind of fruit missing from the basket, in place."""
    for fruit in Fruit:
        basket.setdefault(fruit, 10)


@dataclass(frozen=True)
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int
    goals_conceded: int

    def __add__(self, other: Team) -> Team:
        return Team(
            self.goals_scored + other.goals_scored,
            self.goals_conceded + other.goals_conceded,
        )


def build_scores_table(results: str) -> dict[str, Team]:
    """Total goals per team from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score, team_2_score = int(fields[2]), int(fields[3])
        board_1 = Team(team_1_score, team_2_score)
        board_2 = Team(team_2_score, team_1_score)
        if team_1_name in scores:
            board_1 = board_1 + scores[team_1_name]
        if team_2_name in scores:
            board_2 = board_2 + scores[team_2_name]
        scores[team_1_name] = board_1
        scores[team_2_name] = board_2
    return scores