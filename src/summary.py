"""Family statistics derived from the graph."""

from dataclasses import dataclass

import networkx as nx

from components import find_connected_components
from config import FamGraphConfig
from graph import individuals
from levels import assign_levels


@dataclass
class FamilyStatistics:
    total: int
    male: int
    female: int
    unknown_sex: int
    living: int
    deceased: int
    generations: int
    unions: int
    family_groups: int
    isolated: int


def summarize(G: nx.MultiDiGraph, config: FamGraphConfig | None = None) -> FamilyStatistics:
    """Headline numbers for a family. Propagates level assignment errors."""
    people = individuals(G)
    generations = assign_levels(G, config)
    components = find_connected_components(G)

    male = sum(1 for p in people if p.sex == "M")
    female = sum(1 for p in people if p.sex == "F")
    living = sum(1 for p in people if p.living)

    return FamilyStatistics(
        total=len(people),
        male=male,
        female=female,
        unknown_sex=len(people) - male - female,
        living=living,
        deceased=len(people) - living,
        generations=generations.generation_count,
        unions=len(generations.unions),
        family_groups=components.count,
        isolated=len(components.isolated),
    )
