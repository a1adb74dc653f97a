"""Graph validation for family tree data."""

import networkx as nx

from graph import get_individual, parent_graph, parents_of, spouse_pairs
from kinship import ancestor_distances


def validate_graph(G: nx.MultiDiGraph) -> list[str]:
    """
    Validate the family tree graph for:
    - Cycles in parent-child relationships
    - More than two recorded parents
    - Impossible ages (child born before parent)
    - Date ordering issues
    - Spouses who are also each other's direct ancestor

    Returns a list of warning messages.
    """
    warnings: list[str] = []
    parents = parent_graph(G)

    # Check for cycles
    has_cycle = False
    try:
        cycle = nx.find_cycle(parents, orientation="original")
        cycle_nodes = [edge[0] for edge in cycle]
        warnings.append(f"Cycle detected in parent-child relationships: {cycle_nodes}")
        has_cycle = True
    except nx.NetworkXNoCycle:
        pass

    for person_id in G.nodes:
        recorded = parents_of(G, person_id)
        if len(recorded) > 2:
            warnings.append(
                f"Ambiguous: {_name(G, person_id)} has {len(recorded)} recorded parents"
            )

    # birth_date is ISO format (YYYY-MM-DD) which can be compared as strings
    for parent, child in parents.edges():
        parent_data = get_individual(G, parent)
        child_data = get_individual(G, child)

        parent_birth = parent_data.birth_date
        child_birth = child_data.birth_date

        if parent_birth and child_birth:
            if child_birth < parent_birth:
                warnings.append(
                    f"Impossible: {child_data.name} born before parent {parent_data.name}"
                )
            else:
                try:
                    parent_year = int(parent_birth[:4])
                    child_year = int(child_birth[:4])
                except ValueError:
                    continue
                if child_year - parent_year < 12:
                    warnings.append(
                        f"Suspicious: {parent_data.name} was less than 12 years "
                        f"old when {child_data.name} was born"
                    )

    # Check death before birth
    for person_id in G.nodes:
        person = get_individual(G, person_id)
        if person.birth_date and person.death_date and person.death_date < person.birth_date:
            warnings.append(f"Impossible: {person.name} died before being born")

    # Ancestor walks are only meaningful on acyclic parent links
    if not has_cycle:
        for a, b in spouse_pairs(G):
            if a in ancestor_distances(G, b) or b in ancestor_distances(G, a):
                warnings.append(
                    f"Suspicious: {_name(G, a)} and {_name(G, b)} are spouses "
                    f"and in a direct line of descent"
                )

    return warnings


def _name(G: nx.MultiDiGraph, person_id) -> str:
    return get_individual(G, person_id).name or str(person_id)
