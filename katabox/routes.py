"""Travel puzzles: chaining flight legs and measuring a tour between towns."""

import math
from collections import Counter
from itertools import pairwise


def find_routes(routes):
    """Chain ``(origin, destination)`` legs into one itinerary, e.g. ``"A, B, C"``.

    The trip starts at the origin that is least often an airport of the
    trip, the alphabetically first one on ties. Returns ``""`` for no legs.
    """
    routes = list(routes)
    if not routes:
        return ""
    counts = Counter(origin for origin, _ in routes)
    for _, destination in routes:
        if counts[destination]:
            counts[destination] += 1
    start = min(sorted(counts), key=counts.__getitem__)

    following = {}
    for origin, destination in routes:
        following.setdefault(origin, destination)

    stops = [start]
    seen = {start}
    while (current := stops[-1]) in following:
        nxt = following[current]
        if nxt in seen:
            raise ValueError(f"the routes form a cycle through {nxt!r}")
        seen.add(nxt)
        stops.append(nxt)
    return ", ".join(stops)


def tour(friends, friend_towns, distances):
    """Length, truncated, of a tour from home through the friends' towns and back.

    ``friend_towns`` holds ``[friend, town]`` pairs and ``distances`` maps each
    town to its distance from home; towns missing from it count as 0.
    Friends without a town are skipped.
    """
    towns = {}
    for entry in friend_towns:
        towns.setdefault(entry[0], entry[1])
    path = [towns[friend] for friend in friends if friend in towns]
    if not path:
        raise ValueError("no friend has a known town")
    legs = [distances.get(town, 0.0) for town in path]
    between = sum(
        math.sqrt(abs(int(b * b) - int(a * a))) for a, b in pairwise(legs)
    )
    return int(legs[0] + between + legs[-1])