"""NetworkX graph building and adjacency queries."""

from collections.abc import Iterable, Iterator
import logging

import networkx as nx

from errors import DuplicateIndividualError, UnknownIndividualError
from models import EdgeKind, Individual, NeighborKind, PersonId, RelationshipEdge, sort_key

logger = logging.getLogger(__name__)


def build_adjacency(
    individuals: Iterable[Individual], edges: Iterable[RelationshipEdge]
) -> nx.MultiDiGraph:
    """
    Build the typed adjacency structure for a family.

    Every person is a node carrying its Individual as the `individual` attribute. Each
    relationship is stored as a pair of out-edges keyed by NeighborKind, so that the
    out-edges of a node are exactly its adjacency entry:

    - PARENT edge P -> C: (C, child) on P and (P, parent) on C
    - SPOUSE edge A <-> B: (B, spouse) on A and (A, spouse) on B

    Edges that reference an unknown person are dropped with a warning; the rest of the
    graph still builds. SIBLING edges are not consumed.

    Raises:
        DuplicateIndividualError: if two individuals share an id
    """
    G = nx.MultiDiGraph()

    for person in individuals:
        if person.id in G:
            raise DuplicateIndividualError(person.id)
        G.add_node(person.id, individual=person)

    dropped = 0
    for edge in edges:
        source, target = edge.source_id, edge.target_id

        if edge.kind is EdgeKind.SIBLING:
            logger.debug("Ignoring sibling edge %s - %s", source, target)
            continue
        if source not in G or target not in G:
            missing = [p for p in (source, target) if p not in G]
            logger.warning(
                "Dropping %s edge %s -> %s: unknown person(s) %s",
                edge.kind.value,
                source,
                target,
                missing,
            )
            dropped += 1
            continue
        if source == target:
            logger.warning("Dropping %s edge from %s to itself", edge.kind.value, source)
            dropped += 1
            continue

        if edge.kind is EdgeKind.PARENT:
            G.add_edge(source, target, key=NeighborKind.CHILD)
            G.add_edge(target, source, key=NeighborKind.PARENT)
        else:
            G.add_edge(source, target, key=NeighborKind.SPOUSE)
            G.add_edge(target, source, key=NeighborKind.SPOUSE)

    logger.debug(
        "Built adjacency: %d people, %d entries, %d edges dropped",
        G.number_of_nodes(),
        G.number_of_edges(),
        dropped,
    )
    return G


def get_individual(G: nx.MultiDiGraph, person_id: PersonId) -> Individual:
    """Return the Individual for an id, or raise UnknownIndividualError."""
    if person_id not in G:
        raise UnknownIndividualError(person_id)
    return G.nodes[person_id]["individual"]


def individuals(G: nx.MultiDiGraph) -> list[Individual]:
    """All individuals in input order."""
    return [data["individual"] for _, data in G.nodes(data=True)]


def neighbors(G: nx.MultiDiGraph, person_id: PersonId) -> Iterator[tuple[PersonId, NeighborKind]]:
    """Yield the adjacency entry of a person as (neighbor id, kind) pairs."""
    for _, neighbor, kind in G.out_edges(person_id, keys=True):
        yield neighbor, kind


def _neighbors_of_kind(G, person_id, kind: NeighborKind) -> list[PersonId]:
    return [n for n, k in neighbors(G, person_id) if k is kind]


def parents_of(G: nx.MultiDiGraph, person_id: PersonId) -> list[PersonId]:
    return _neighbors_of_kind(G, person_id, NeighborKind.PARENT)


def children_of(G: nx.MultiDiGraph, person_id: PersonId) -> list[PersonId]:
    return _neighbors_of_kind(G, person_id, NeighborKind.CHILD)


def spouses_of(G: nx.MultiDiGraph, person_id: PersonId) -> list[PersonId]:
    return _neighbors_of_kind(G, person_id, NeighborKind.SPOUSE)


def spouse_pairs(G: nx.MultiDiGraph) -> list[tuple[PersonId, PersonId]]:
    """Unordered spouse pairs, each sorted and listed once."""
    pairs: set[tuple] = set()
    for u, v, kind in G.edges(keys=True):
        if kind is NeighborKind.SPOUSE:
            a, b = sorted((u, v), key=sort_key)
            pairs.add((a, b))
    return sorted(pairs, key=lambda pair: (sort_key(pair[0]), sort_key(pair[1])))


def parent_graph(G: nx.MultiDiGraph) -> nx.DiGraph:
    """Directed parent -> child graph over every person."""
    P = nx.DiGraph()
    P.add_nodes_from(G.nodes)
    P.add_edges_from(
        (u, v) for u, v, kind in G.edges(keys=True) if kind is NeighborKind.CHILD
    )
    return P
