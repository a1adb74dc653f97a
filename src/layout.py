"""Layout graph hand-off for hierarchical rendering."""

import networkx as nx
import pydot

from graph import children_of, get_individual, spouse_pairs
from levels import Generations
from models import PersonNode

SEX_COLORS = {"M": "lightblue", "F": "lightpink"}


def build_union_layout_graph(G: nx.MultiDiGraph, generations: Generations) -> nx.DiGraph:
    """
    Build a layout graph using the union-node model.

    Each union ("family") node connects a co-parenting couple to their shared children:
    - Co-parents and their union node share a level
    - All shared children hang from the union node, so siblings align
    - A child with a single recorded parent hangs directly from that parent
    - Couples without shared children are joined by a plain spouse edge

    Every node carries the `level` computed by assign_levels.

    Args:
        G: Adjacency graph from build_adjacency
        generations: Levels and unions from assign_levels on the same graph

    Returns:
        A new graph with family nodes suitable for hierarchical layout
    """
    H = nx.DiGraph()

    # Copy person nodes with their attributes
    # Note: use 'person_name' instead of 'name' to avoid conflict with pydot
    for person_id in G.nodes:
        person = get_individual(G, person_id)
        H.add_node(
            person_id,
            node_type="person",
            level=generations.level(person_id),
            person_name=person.name,
            given_name=person.given_name,
            surname=person.surname,
            sex=person.sex,
            birth_date=person.birth_date,
            death_date=person.death_date,
        )

    for union in generations.unions:
        H.add_node(
            union.id,
            node_type="family",
            level=generations.levels[union],
            spouses=union.parents,
        )
        for parent in union.parents:
            H.add_edge(parent, union.id, edge_type="spouse_to_family")
        for child in generations.children_of_union(union):
            H.add_edge(union.id, child, edge_type="family_to_child")

    for person_id in G.nodes:
        for child in children_of(G, person_id):
            if child not in generations.family_of:
                H.add_edge(person_id, child, edge_type="parent_to_child")

    for a, b in spouse_pairs(G):
        if generations.union_for(a, b) is None:
            H.add_edge(a, b, edge_type="spouse")

    return H


def to_dot(H: nx.DiGraph) -> pydot.Dot:
    """
    Describe a union layout graph in DOT for a Graphviz-style renderer.

    Parents appear above children, and every generation level becomes a `rank=same`
    subgraph so spouses and union nodes line up horizontally.
    """
    P = pydot.Dot(graph_type="digraph")
    P.set("rankdir", "TB")  # Top-to-bottom (ancestors at top)
    P.set("splines", "ortho")
    P.set("nodesep", "0.4")
    P.set("ranksep", "0.6")

    rows: dict[int, list[str]] = {}

    for node, data in H.nodes(data=True):
        rows.setdefault(data["level"], []).append(str(node))

        if data.get("node_type") == "family":
            # Family nodes are small invisible points
            P.add_node(pydot.Node(str(node), shape="point", width="0.1", height="0.1", label=""))
            continue

        birth_year = (data.get("birth_date") or "")[:4]
        death_year = (data.get("death_date") or "")[:4]
        if data.get("given_name") or data.get("surname"):
            name = f"{data.get('given_name') or ''}\n{data.get('surname') or ''}"
        else:
            name = data.get("person_name") or str(node)

        P.add_node(
            pydot.Node(
                str(node),
                label=f"{name}\n{birth_year}-{death_year}",
                shape="box",
                style="rounded,filled",
                fillcolor=SEX_COLORS.get(data.get("sex"), "lightgray"),
                fontsize="10",
            )
        )

    for u, v, data in H.edges(data=True):
        edge_type = data.get("edge_type")
        if edge_type in ("spouse_to_family", "spouse"):
            P.add_edge(pydot.Edge(str(u), str(v), dir="none", color="darkgray"))
        else:
            P.add_edge(pydot.Edge(str(u), str(v), color="darkgray"))

    for level, names in sorted(rows.items()):
        sg = pydot.Subgraph(f"generation_{level}", rank="same")
        for name in names:
            sg.add_node(pydot.Node(name))
        P.add_subgraph(sg)

    return P


def person_rows(generations: Generations) -> dict[int, list]:
    """Person ids grouped by level, for renderers that place rows themselves."""
    return {
        level: [node.id for node in nodes if isinstance(node, PersonNode)]
        for level, nodes in generations.rows().items()
    }
