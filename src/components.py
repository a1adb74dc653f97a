"""Partition a family into disconnected groups."""

from dataclasses import dataclass, field
import logging

import networkx as nx

from graph import get_individual, neighbors
from models import Individual, PersonId

logger = logging.getLogger(__name__)


@dataclass
class ComponentsResult:
    groups: list[list[Individual]]  # every person in exactly one group
    isolated: list[Individual] = field(default_factory=list)  # people with no links at all

    @property
    def count(self) -> int:
        """Number of groups with more than one person."""
        return sum(1 for group in self.groups if len(group) > 1)


def find_connected_components(G: nx.MultiDiGraph) -> ComponentsResult:
    """
    Group people connected by any chain of parent, child or spouse links.

    Depth-first from each unvisited person in input order, with an explicit stack, so
    groups come out ordered by their first member and cycles cannot loop.
    """
    visited: set[PersonId] = set()
    groups: list[list[Individual]] = []
    isolated: list[Individual] = []

    for start in G.nodes:
        if start in visited:
            continue

        group: list[Individual] = []
        visited.add(start)
        stack = [start]
        while stack:
            person_id = stack.pop()
            group.append(get_individual(G, person_id))
            for neighbor, _ in neighbors(G, person_id):
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)

        groups.append(group)
        if len(group) == 1:
            isolated.append(group[0])

    logger.debug("Found %d group(s), %d isolated", len(groups), len(isolated))
    return ComponentsResult(groups=groups, isolated=isolated)
