"""Mappings, generic wrappers, string extension and a recursive list."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

GOALS_LIMIT = 255


class Fruit(enum.Enum):
    """Kinds of fruit that can go in the basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every fruit kind missing from the basket, leaving present ones alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        """Add the result of one match."""
        self.goals_scored = _checked_goals(self.goals_scored + scored)
        self.goals_conceded = _checked_goals(self.goals_conceded + conceded)


def _checked_goals(total: int) -> int:
    if total > GOALS_LIMIT:
        raise OverflowError("attempt to add with overflow")
    return total


def _parse_goals(text: str) -> int:
    if not text.isascii() or not text.lstrip("+").isdigit() or text.count("+") > 1:
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > GOALS_LIMIT:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals per team from lines "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1, goals_2 = _parse_goals(fields[2]), _parse_goals(fields[3])
        scores.setdefault(team_1, Team()).record(goals_1, goals_2)
        scores.setdefault(team_2, Team()).record(goals_2, goals_1)
    return scores


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


def append_bar(text: str) -> str:
    """The text with "Bar" appended."""
    return text + "Bar"


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list; the list ends with None."""

    head: int
    tail: Cons | None = None


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons | None:
    """A cons list holding 1, 2, 3."""
    return Cons(1, Cons(2, Cons(3)))