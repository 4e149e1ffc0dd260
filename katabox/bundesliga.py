"""League table built from a list of match results."""

import re
from dataclasses import dataclass

_RESULT = re.compile(r"\s*([+-]?\d+):([+-]?\d+)\s*([^-]+)-\s*([^-]+)")
_NAME_WIDTH = 30


@dataclass
class _Standing:
    name: str
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    points: int = 0

    def sort_key(self):
        name = self.name.lower()
        return (
            -self.points,
            -(self.goals_for - self.goals_against),
            -self.goals_for,
            not name.startswith("1"),
            name,
        )

    def same_record(self, other):
        return (self.goals_for, self.goals_against, self.points) == (
            other.goals_for,
            other.goals_against,
            other.points,
        )


def _parse(line):
    """Return ``(home, away, home_goals, away_goals, played)`` for one result."""
    played = not line.startswith("-")
    if not played:
        line = "0" + line[1:2] + "0" + line[3:]
    match = _RESULT.match(line)
    if match is None:
        raise ValueError(f"malformed result: {line!r}")
    home_goals, away_goals, home, away = match.groups()
    return home.strip(), away.strip(), int(home_goals), int(away_goals), played


def _points(scored, conceded, played):
    if not played:
        return 0
    if scored > conceded:
        return 3
    if scored == conceded:
        return 1
    return 0


class Bundesliga:
    """Accumulates match results and renders the league table."""

    def __init__(self):
        self._standings = {}

    def _record(self, name, scored, conceded, played):
        points = _points(scored, conceded, played)
        standing = self._standings.get(name)
        if standing is None:
            self._standings[name] = _Standing(
                name=name,
                played=int(played),
                won=int(played and points == 3),
                drawn=int(played and points == 1),
                lost=int(played and points == 0),
                goals_for=scored,
                goals_against=conceded,
                points=points,
            )
            return
        # Once a team is in the table, a pointless result (a postponed match
        # included) lands in the third column and a draw in the fourth.
        standing.played += int(played)
        if points == 3:
            standing.won += 1
        elif points == 0:
            standing.drawn += 1
        elif points == 1:
            standing.lost += 1
        standing.goals_for += scored
        standing.goals_against += conceded
        standing.points += points

    def add_result(self, line):
        """Record one result such as ``"6:0 Home - Away"`` or ``"-:- Home - Away"``."""
        home, away, home_goals, away_goals, played = _parse(line)
        self._record(home, home_goals, away_goals, played)
        self._record(away, away_goals, home_goals, played)

    def table(self, results):
        """Record ``results`` and return the formatted league table."""
        for line in results:
            self.add_result(line)
        rows = sorted(self._standings.values(), key=_Standing.sort_key)
        width = len(str(len(rows)))
        lines = []
        position = 1
        previous = None
        for index, standing in enumerate(rows):
            if previous is not None and not previous.same_record(standing):
                position = index + 1
            previous = standing
            lines.append(
                f"{position:>{width}}. {standing.name:<{_NAME_WIDTH}}"
                f"{standing.played}  {standing.won}  {standing.drawn}  {standing.lost}  "
                f"{standing.goals_for}:{standing.goals_against}  {standing.points}"
            )
        return "\n".join(lines)