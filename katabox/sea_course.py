"""A ship crossing a sea map while navy patrols move up and down."""

from dataclasses import dataclass
from enum import Enum


class GameResult(Enum):
    WIN = "win"
    LOSE = "lose"
    RUNNING = "running"


@dataclass
class _Navy:
    x: int
    y: int
    heading: int


class SeaMapGame:
    """Ship ``X`` sails right each turn; it loses when next to a navy ship ``N``."""

    def __init__(self, sea_map):
        self._grid = [list(row) for row in sea_map]
        self._navies = []
        self._ship = None
        if not self._grid or not self._grid[0]:
            self.state = GameResult.LOSE
            return
        self._x_max = len(self._grid[0]) - 1
        self._y_max = len(self._grid) - 1
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row[:self._x_max + 1]):
                if cell == "X":
                    self._ship = [x, y]
                elif cell == "N":
                    self._navies.append(_Navy(x, y, 1 if x == 0 else -1))
        if self._ship is None:
            raise ValueError("sea map has no ship 'X'")
        self.state = GameResult.RUNNING

    @property
    def sea_map(self):
        """The current map as a list of strings."""
        return ["".join(row) for row in self._grid]

    def __str__(self):
        return "\n".join(self.sea_map)

    def _neighbours(self):
        x, y = self._ship
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if (dx or dy) and 0 <= x + dx <= self._x_max and 0 <= y + dy <= self._y_max:
                    yield x + dx, y + dy

    def _move_navy(self, navy):
        if navy.y == 0:
            navy.y += 1
            navy.heading = 1
        elif navy.y == self._y_max:
            navy.y -= 1
            navy.heading = -1
        else:
            navy.y += navy.heading

    def _advance(self):
        x, y = self._ship
        self._grid[y][x] = "0"
        self._ship[0] += 1
        self._grid[y][x + 1] = "X"
        for navy in self._navies:
            self._grid[navy.y][navy.x] = "0"
            self._move_navy(navy)
            self._grid[navy.y][navy.x] = "N"

    def run(self):
        """Play until the ship reaches the last column (True) or is caught (False)."""
        while True:
            if self.state is GameResult.LOSE:
                return False
            if self.state is GameResult.WIN:
                return True
            if any(self._grid[y][x] == "N" for x, y in self._neighbours()):
                self.state = GameResult.LOSE
                return False
            if self._ship[0] == self._x_max:
                self.state = GameResult.WIN
                return True
            self._advance()


def check_course(sea_map):
    """Whether the ship on ``sea_map`` crosses to the last column uncaught."""
    return SeaMapGame(sea_map).run()