"""Shortest relationship path between two people."""

from dataclasses import dataclass, field
import heapq
import itertools
import logging

import networkx as nx

from errors import NoPathError
from graph import get_individual, neighbors
from models import Individual, NeighborKind, PersonId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathResult:
    path: list[Individual]  # start and end included
    distance: int  # number of links
    steps: list[NeighborKind] = field(default_factory=list)  # link kind of each hop

    @property
    def ids(self) -> list[PersonId]:
        return [person.id for person in self.path]


def find_shortest_path(
    G: nx.MultiDiGraph, start_id: PersonId, end_id: PersonId, strict: bool = False
) -> PathResult | None:
    """
    Find the shortest chain of parent, child and spouse links between two people.

    Every link costs 1 and can be followed in either direction. The frontier is a
    binary heap keyed on (distance, discovery order), so ties go to whichever node
    was reached first.

    Returns None when the two people are not connected, or raises NoPathError if
    `strict` is set.

    Raises:
        UnknownIndividualError: if either id is not in the graph
    """
    start = get_individual(G, start_id)
    get_individual(G, end_id)

    if start_id == end_id:
        return PathResult(path=[start], distance=0)

    order = itertools.count()
    distance = {start_id: 0}
    previous: dict[PersonId, tuple[PersonId, NeighborKind]] = {}
    settled: set[PersonId] = set()
    frontier = [(0, next(order), start_id)]

    while frontier:
        dist, _, node = heapq.heappop(frontier)
        if node in settled:
            continue
        settled.add(node)
        if node == end_id:
            break

        for neighbor, kind in neighbors(G, node):
            if neighbor in settled:
                continue
            alt = dist + 1
            if alt < distance.get(neighbor, float("inf")):
                distance[neighbor] = alt
                previous[neighbor] = (node, kind)
                heapq.heappush(frontier, (alt, next(order), neighbor))

    if end_id not in settled:
        logger.debug("No path from %s to %s", start_id, end_id)
        if strict:
            raise NoPathError(start_id, end_id)
        return None

    ids = [end_id]
    steps: list[NeighborKind] = []
    while ids[-1] != start_id:
        node, kind = previous[ids[-1]]
        ids.append(node)
        steps.append(kind)
    ids.reverse()
    steps.reverse()

    return PathResult(
        path=[get_individual(G, p) for p in ids],
        distance=distance[end_id],
        steps=steps,
    )
