"""Peaks in a list of numbers and the height of an ASCII mountain."""

from typing import NamedTuple

_MAX_PASSES = 101


class PeakData(NamedTuple):
    pos: list
    peaks: list


def pick_peaks(values):
    """Positions and values of local maxima; a plateau reports its first position."""
    pos = []
    peaks = []
    plateau_start = None
    for i in range(1, len(values) - 1):
        current = values[i]
        if current > values[i - 1] and current > values[i + 1]:
            pos.append(i)
            peaks.append(current)
            plateau_start = None
        elif current > values[i - 1] and current == values[i + 1]:
            plateau_start = i
        elif plateau_start is not None and current > values[i + 1]:
            pos.append(plateau_start)
            peaks.append(current)
            plateau_start = None
    return PeakData(pos, peaks)


def _on_surface(grid, mountain, i, j):
    last_row = len(grid) - 1
    last_col = len(mountain[i]) - 1
    if i in (0, last_row) or j in (0, last_col):
        return True
    return " " in (grid[i - 1][j], grid[i + 1][j], grid[i][j - 1], grid[i][j + 1])


def peak_height(mountain):
    """Number of layers that can be peeled off the non-space cells of ``mountain``."""
    grid = [list(row) for row in mountain]
    height = 0
    marking = True
    for _ in range(_MAX_PASSES):
        changed = 0
        for i, row in enumerate(grid):
            for j in range(len(mountain[i])):
                if marking:
                    if row[j] != " " and _on_surface(grid, mountain, i, j):
                        row[j] = "X"
                        changed += 1
                elif row[j] == "X":
                    row[j] = " "
                    changed += 1
        if not changed:
            break
        if marking:
            height += 1
        marking = not marking
    return height