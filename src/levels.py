"""Generation levels and union (family) nodes for hierarchical layout."""

from dataclasses import dataclass, field, replace
import logging

import networkx as nx

from config import FamGraphConfig
from errors import AmbiguousParentageError, CyclicAncestryError, UnknownIndividualError
from graph import parents_of, spouse_pairs
from models import LayoutNode, PersonId, PersonNode, UnionNode, sort_key

logger = logging.getLogger(__name__)

_IN_PROGRESS = 1
_DONE = 2


@dataclass
class Generations:
    """Result of level assignment: a level for every person and union node."""

    levels: dict[LayoutNode, int]
    unions: list[UnionNode]
    # child id -> the union its two parents form
    family_of: dict[PersonId, UnionNode] = field(default_factory=dict)

    def level(self, person_id: PersonId) -> int:
        try:
            return self.levels[PersonNode(person_id)]
        except KeyError:
            raise UnknownIndividualError(person_id) from None

    def union_for(self, a: PersonId, b: PersonId) -> UnionNode | None:
        pair = tuple(sorted((a, b), key=sort_key))
        for union in self.unions:
            if union.parents == pair:
                return union
        return None

    def children_of_union(self, union: UnionNode) -> list[PersonId]:
        return [child for child, u in self.family_of.items() if u == union]

    @property
    def generation_count(self) -> int:
        """Number of distinct generation rows occupied by people."""
        return len({lvl for node, lvl in self.levels.items() if isinstance(node, PersonNode)})

    def rows(self) -> dict[int, list[LayoutNode]]:
        """Nodes grouped by level, top generation first."""
        rows: dict[int, list[LayoutNode]] = {}
        for node, lvl in self.levels.items():
            rows.setdefault(lvl, []).append(node)
        return dict(sorted(rows.items()))


def assign_levels(G: nx.MultiDiGraph, config: FamGraphConfig | None = None) -> Generations:
    """
    Compute a generation level for every person and the union nodes used for layout.

    - A person with no recorded parents is level 0.
    - A person with parents sits one level below the lowest of them; with two parents
      that is one level below their union node, whose level is the max of the two.
    - Spouses, and the two parents of every union, are then pulled down to the same
      row until no level changes.

    Raises:
        AmbiguousParentageError: if anyone has more than two recorded parents
        CyclicAncestryError: if parent links form a cycle
    """
    config = config or FamGraphConfig()

    parents: dict[PersonId, list[PersonId]] = {}
    for person_id in G.nodes:
        recorded = parents_of(G, person_id)
        if len(recorded) > 2:
            raise AmbiguousParentageError(person_id, sorted(recorded, key=sort_key))
        parents[person_id] = recorded

    unions: dict[tuple, UnionNode] = {}
    family_of: dict[PersonId, UnionNode] = {}
    taken: set = set(G.nodes)
    for child, recorded in parents.items():
        if len(recorded) == 2:
            union = UnionNode.for_parents(*recorded, prefix=config.union_prefix)
            if union.parents not in unions:
                unions[union.parents] = _with_free_id(union, taken)
            family_of[child] = unions[union.parents]

    depth = _ancestor_depths(parents)
    union_levels = {u: max(depth[u.parents[0]], depth[u.parents[1]]) for u in unions.values()}
    passes = _align_rows(depth, union_levels, spouse_pairs(G))
    logger.debug("Levels aligned after %d pass(es)", passes)

    levels: dict[LayoutNode, int] = {PersonNode(p): depth[p] for p in G.nodes}
    levels.update(union_levels)
    return Generations(levels=levels, unions=list(unions.values()), family_of=family_of)


def _ancestor_depths(parents: dict[PersonId, list[PersonId]]) -> dict[PersonId, int]:
    """
    Depth below the oldest recorded ancestor, by iterative post-order walk up the
    parent links. Nodes on the current walk are marked in-progress; meeting one
    again means the walk has looped.
    """
    depth: dict[PersonId, int] = {}
    state: dict[PersonId, int] = {}

    for start in parents:
        if start in state:
            continue
        state[start] = _IN_PROGRESS
        stack = [(start, iter(parents[start]))]

        while stack:
            person, pending = stack[-1]
            for parent in pending:
                seen = state.get(parent)
                if seen == _IN_PROGRESS:
                    walk = [p for p, _ in stack]
                    raise CyclicAncestryError(walk[walk.index(parent):] + [parent])
                if seen is None:
                    state[parent] = _IN_PROGRESS
                    stack.append((parent, iter(parents[parent])))
                    break
            else:
                stack.pop()
                recorded = parents[person]
                depth[person] = max(depth[p] for p in recorded) + 1 if recorded else 0
                state[person] = _DONE

    return depth


def _align_rows(
    depth: dict[PersonId, int],
    union_levels: dict[UnionNode, int],
    couples: list[tuple[PersonId, PersonId]],
) -> int:
    """Raise spouses and co-parents to a shared row; returns the number of passes."""
    passes = 0
    changed = True
    while changed:
        changed = False
        passes += 1

        for a, b in couples:
            row = max(depth[a], depth[b])
            if depth[a] != row or depth[b] != row:
                depth[a] = depth[b] = row
                changed = True

        for union in union_levels:
            a, b = union.parents
            row = max(depth[a], depth[b])
            if depth[a] != row or depth[b] != row or union_levels[union] != row:
                depth[a] = depth[b] = row
                union_levels[union] = row
                changed = True

    return passes


def _with_free_id(union: UnionNode, taken: set) -> UnionNode:
    """Give a union an id no person or earlier union uses, adding _2, _3... if needed."""
    candidate = union.id
    n = 1
    while candidate in taken:
        n += 1
        candidate = f"{union.id}_{n}"
    taken.add(candidate)
    if candidate != union.id:
        logger.debug("Union id %s already taken, using %s", union.id, candidate)
        return replace(union, id=candidate)
    return union
