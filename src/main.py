"""
Command line front end over a JSON family snapshot:

    {"individuals": [{"id": 1, "name": "...", "sex": "M", ...}, ...],
     "relationships": [{"source": 1, "target": 2, "type": "parent"}, ...]}

1) Load the snapshot into Individuals and RelationshipEdges.
2) Build the adjacency graph.
3) Run the requested computation and print the result.
"""

import argparse
import json
import logging
from pathlib import Path
import sys

import networkx as nx

from components import find_connected_components
from config import FamGraphConfig
from errors import FamilyGraphError, UnknownIndividualError
from graph import build_adjacency, get_individual
from kinship import find_relationship
from layout import build_union_layout_graph, person_rows, to_dot
from levels import assign_levels
from models import Individual, RelationshipEdge
from paths import find_shortest_path
from summary import summarize
from validation import validate_graph

logger = logging.getLogger(__name__)


def load_snapshot(path: Path) -> tuple[list[Individual], list[RelationshipEdge]]:
    """Read individuals and relationships from a JSON snapshot file."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    people = [Individual.from_record(rec) for rec in data.get("individuals", [])]
    edges = [RelationshipEdge.from_record(rec) for rec in data.get("relationships", [])]
    return people, edges


def resolve_id(G: nx.MultiDiGraph, raw: str):
    """Match a command line id against the graph, which may use int or str ids."""
    if raw in G:
        return raw
    try:
        as_int = int(raw)
    except ValueError:
        raise UnknownIndividualError(raw) from None
    if as_int in G:
        return as_int
    raise UnknownIndividualError(raw)


def cmd_levels(G, args, config):
    generations = assign_levels(G, config)
    for level, ids in person_rows(generations).items():
        names = ", ".join(get_individual(G, p).name for p in ids)
        print(f"Generation {level}: {names}")
    for union in generations.unions:
        print(f"  Union {union.id}: level {generations.levels[union]}")


def cmd_kinship(G, args, config):
    result = find_relationship(G, resolve_id(G, args.a), resolve_id(G, args.b), config)
    print(result.label)
    if result.common_ancestor is not None:
        print(f"  Common ancestor: {result.common_ancestor.name}")
        print(f"  Distances: {result.distance1}, {result.distance2}")


def cmd_path(G, args, config):
    result = find_shortest_path(G, resolve_id(G, args.a), resolve_id(G, args.b))
    if result is None:
        print("No path found")
        return
    print(f"Distance: {result.distance}")
    print(" -> ".join(person.name for person in result.path))


def cmd_components(G, args, config):
    result = find_connected_components(G)
    print(f"{len(result.groups)} group(s), {result.count} with more than one person")
    for i, group in enumerate(result.groups, start=1):
        print(f"  Group {i}: {', '.join(p.name for p in group)}")


def cmd_validate(G, args, config):
    warnings = validate_graph(G)
    if not warnings:
        print("No validation issues found")
        return
    print(f"Found {len(warnings)} validation warnings:")
    for w in warnings:
        print(f"  - {w}")


def cmd_stats(G, args, config):
    stats = summarize(G, config)
    for name, value in vars(stats).items():
        print(f"{name.replace('_', ' ').capitalize()}: {value}")


def cmd_dot(G, args, config):
    layout = build_union_layout_graph(G, assign_levels(G, config))
    print(to_dot(layout).to_string())


COMMANDS = {
    "levels": cmd_levels,
    "kinship": cmd_kinship,
    "path": cmd_path,
    "components": cmd_components,
    "validate": cmd_validate,
    "stats": cmd_stats,
    "dot": cmd_dot,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="famgraph", description=__doc__.splitlines()[1])
    parser.add_argument("snapshot", type=Path, help="JSON file with individuals and relationships")
    parser.add_argument("--log-level", help="Override FAMGRAPH_LOG_LEVEL")

    sub = parser.add_subparsers(dest="command", required=True)
    for name in ("levels", "components", "validate", "stats", "dot"):
        sub.add_parser(name)
    for name in ("kinship", "path"):
        p = sub.add_parser(name)
        p.add_argument("a", help="First person id")
        p.add_argument("b", help="Second person id")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = FamGraphConfig.from_env()
    if args.log_level:
        config.log_level = args.log_level.upper()
    config.configure_logging()

    try:
        people, edges = load_snapshot(args.snapshot)
        logger.info("Loaded %d people and %d relationships", len(people), len(edges))
        G = build_adjacency(people, edges)
        COMMANDS[args.command](G, args, config)
    except (FamilyGraphError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
