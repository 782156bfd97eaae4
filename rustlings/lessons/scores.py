"""A scores table built from match results."""

from __future__ import annotations

import re
from dataclasses import dataclass

_GOALS = re.compile(r"\+?[0-9]+")
_U8_MAX = 255


@dataclass
class Team:
    """Goals a team scored and conceded over all its matches."""

    name: str
    goals_scored: int
    goals_conceded: int


def _parse_goals(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _GOALS.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def _add_goals(total: int, goals: int) -> int:
    result = total + goals
    if result > _U8_MAX:
        raise OverflowError("attempt to add with overflow")
    return result


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _record(scores: dict[str, Team], name: str, scored: int, conceded: int) -> None:
    team = scores.get(name)
    if team is None:
        scores[name] = Team(name=name, goals_scored=scored, goals_conceded=conceded)
    else:
        team.goals_scored = _add_goals(team.goals_scored, scored)
        team.goals_conceded = _add_goals(team.goals_conceded, conceded)


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table from lines of ``team1,team2,goals1,goals2``."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        score_1 = _parse_goals(fields[2])
        score_2 = _parse_goals(fields[3])
        _record(scores, team_1, score_1, score_2)
        _record(scores, team_2, score_2, score_1)
    return scores