"""Puzzles built around chance: lottery picks, PIN variants, permutations, maze walks."""

import argparse
import random
import sys
from itertools import permutations as _permutations
from itertools import product

LOTTERY_MIN_SIZE = 6
LOTTERY_MAX_SIZE = 15
LOTTERY_HIGHEST = 60
_WALK_TRIALS = 1000

_ADJACENT = {
    "1": "124",
    "2": "1235",
    "3": "236",
    "4": "1457",
    "5": "24568",
    "6": "3569",
    "7": "478",
    "8": "05789",
    "9": "689",
    "0": "08",
}


def mega_sena_game(size, rng=None):
    """Draw ``size + 1`` distinct numbers from 1 to 60, sorted.

    ``size`` must lie between 6 and 15.
    """
    if not LOTTERY_MIN_SIZE <= size <= LOTTERY_MAX_SIZE:
        raise ValueError(
            f"size must be between {LOTTERY_MIN_SIZE} and {LOTTERY_MAX_SIZE}: {size}"
        )
    rng = rng or random.Random()
    game = set()
    while len(game) <= size:
        game.add(rng.randint(1, LOTTERY_HIGHEST))
    return sorted(game)


def observed_pins(observed):
    """Every PIN possible when each observed digit may be a keypad neighbour."""
    try:
        choices = [_ADJACENT[digit] for digit in observed]
    except KeyError as error:
        raise ValueError(f"not a digit: {error.args[0]!r}") from None
    return sorted("".join(combo) for combo in product(*choices))


def permutations(text):
    """All distinct orderings of the characters of ``text``, sorted."""
    return sorted({"".join(p) for p in _permutations(text)})


def _parse_maze(maze):
    grid = maze.split("\n")
    if not grid or not grid[0]:
        raise ValueError("the maze is empty")
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("maze rows differ in length")
    return grid


def path_finder(maze, rng=None):
    """Fewest steps found by random walks from the top-left to the bottom-right cell.

    ``maze`` holds rows of ``.`` (open) and ``W`` (wall) joined by newlines.
    Returns -1 when no walk reached the exit.
    """
    grid = _parse_maze(maze)
    rng = rng or random.Random()
    lines = len(grid)
    cols = len(grid[0])

    def coin():
        return bool(rng.getrandbits(1))

    def down(x, y):
        return x < lines - 1 and grid[x + 1][y] == "."

    def up(x, y):
        return x > 0 and grid[x - 1][y] == "."

    def right(x, y):
        return y < cols - 1 and grid[x][y + 1] == "."

    def left(x, y):
        return y > 0 and grid[x][y - 1] == "."

    found = []
    counter = 0
    xpos = ypos = xneg = yneg = False
    for _ in range(_WALK_TRIALS):
        x = y = 0
        for _ in range(lines * cols):
            if xpos and down(x, y):
                x += 1
                counter += 1
            else:
                xpos = False
                if ypos and right(x, y):
                    y += 1
                    counter += 1
                else:
                    ypos = False
                    if xneg and up(x, y):
                        x -= 1
                        counter += 1
                    else:
                        xneg = False
                        if yneg and left(x, y):
                            y -= 1
                            counter += 1
                        else:
                            yneg = False

            if down(x, y) and right(x, y):
                xpos, ypos = coin(), coin()
            elif up(x, y) and left(x, y):
                xneg, yneg = coin(), coin()
            if up(x, y) and right(x, y):
                xneg, ypos = coin(), coin()
            elif down(x, y) and left(x, y):
                xpos, yneg = coin(), coin()

            if not yneg and right(x, y):
                ypos = True
            elif not xpos and up(x, y):
                xneg = True
            elif not ypos and left(x, y):
                yneg = True
            elif not xneg and down(x, y):
                xpos = True

            if x == lines - 1 and y == cols - 1:
                found.append(counter)
                counter = 0
                break
    return min(found) if found else -1


def _build_parser():
    parser = argparse.ArgumentParser(prog="katabox")
    commands = parser.add_subparsers(dest="command", required=True)
    lottery = commands.add_parser("mega-sena", help="draw lottery numbers")
    lottery.add_argument("size", type=int)
    pins = commands.add_parser("pins", help="list PIN variants")
    pins.add_argument("observed")
    perms = commands.add_parser("permutations", help="list permutations")
    perms.add_argument("text")
    path = commands.add_parser("path", help="walk a maze")
    path.add_argument("maze")
    return parser


def main(argv=None):
    """Run one of the puzzles from the command line."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "mega-sena":
            print("Sequence: " + "   ".join(map(str, mega_sena_game(args.size))))
        elif args.command == "pins":
            print("  ".join(observed_pins(args.observed)))
        elif args.command == "permutations":
            for line in permutations(args.text):
                print(line)
        else:
            print(path_finder(args.maze.replace("\\n", "\n")))
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0