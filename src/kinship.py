"""Kinship classification through the lowest common ancestor."""

from collections import deque
from dataclasses import dataclass
from enum import Enum
import logging

import networkx as nx

from config import FamGraphConfig
from graph import get_individual, parents_of, spouses_of
from models import Individual, PersonId, sort_key

logger = logging.getLogger(__name__)

ORDINAL_WORDS = [
    "first",
    "second",
    "third",
    "fourth",
    "fifth",
    "sixth",
    "seventh",
    "eighth",
    "ninth",
    "tenth",
]


class KinshipKind(str, Enum):
    """How the first person of a query relates to the second."""

    SAME_PERSON = "same_person"
    ANCESTOR = "ancestor"
    DESCENDANT = "descendant"
    SIBLINGS = "siblings"
    AUNT_UNCLE = "aunt_uncle"
    NIECE_NEPHEW = "niece_nephew"
    COUSINS = "cousins"
    SPOUSES = "spouses"
    UNRELATED = "unrelated"


@dataclass(frozen=True)
class KinshipResult:
    kind: KinshipKind
    label: str
    common_ancestor: Individual | None = None
    distance1: int | None = None  # generations from person 1 up to the common ancestor
    distance2: int | None = None  # generations from person 2 up to the common ancestor
    degree: int | None = None  # cousin degree, or 1 = aunt/uncle, 2 = great-aunt/uncle...
    removal: int | None = None  # generational gap between cousins


def ancestor_distances(G: nx.MultiDiGraph, person_id: PersonId) -> dict[PersonId, int]:
    """
    Map every ancestor of a person to its distance in generations, following parent
    links upward breadth-first. The person is included at distance 0.
    """
    get_individual(G, person_id)

    distances = {person_id: 0}
    queue = deque([person_id])
    while queue:
        current = queue.popleft()
        for parent in parents_of(G, current):
            if parent not in distances:
                distances[parent] = distances[current] + 1
                queue.append(parent)
    return distances


def find_relationship(
    G: nx.MultiDiGraph,
    person1_id: PersonId,
    person2_id: PersonId,
    config: FamGraphConfig | None = None,
) -> KinshipResult:
    """
    Classify how person 1 is related to person 2.

    The lowest common ancestor is the shared ancestor with the smallest summed distance
    from both people; ties go to the smallest id so results are reproducible. Because
    each person counts as their own ancestor at distance 0, direct lines are found the
    same way.

    Raises:
        UnknownIndividualError: if either id is not in the graph
    """
    config = config or FamGraphConfig()
    get_individual(G, person1_id)
    get_individual(G, person2_id)

    if person1_id == person2_id:
        return KinshipResult(kind=KinshipKind.SAME_PERSON, label="Same person")

    up1 = ancestor_distances(G, person1_id)
    up2 = ancestor_distances(G, person2_id)
    common = [anc for anc in up1 if anc in up2]

    if not common:
        if person2_id in spouses_of(G, person1_id):
            return KinshipResult(kind=KinshipKind.SPOUSES, label="Spouses")
        return KinshipResult(kind=KinshipKind.UNRELATED, label="Unrelated")

    lca = min(common, key=lambda anc: (up1[anc] + up2[anc], sort_key(anc)))
    d1, d2 = up1[lca], up2[lca]
    logger.debug("LCA of %s and %s is %s (%d, %d)", person1_id, person2_id, lca, d1, d2)

    kind, label, degree, removal = _classify(d1, d2, config)
    return KinshipResult(
        kind=kind,
        label=label,
        common_ancestor=get_individual(G, lca),
        distance1=d1,
        distance2=d2,
        degree=degree,
        removal=removal,
    )


def _classify(d1: int, d2: int, config: FamGraphConfig) -> tuple:
    if d1 == 0:
        return KinshipKind.ANCESTOR, f"Ancestor ({_generations(d2)})", None, None
    if d2 == 0:
        return KinshipKind.DESCENDANT, f"Descendant ({_generations(d1)})", None, None

    if d1 == 1 and d2 == 1:
        return KinshipKind.SIBLINGS, "Siblings", None, None

    if d1 == 1:
        degree = d2 - 1
        return KinshipKind.AUNT_UNCLE, _great(degree, "aunt", "uncle"), degree, None
    if d2 == 1:
        degree = d1 - 1
        return KinshipKind.NIECE_NEPHEW, _great(degree, "niece", "nephew"), degree, None

    degree = min(d1, d2) - 1
    removal = abs(d1 - d2)
    label = f"{ordinal(degree, config.cousin_ordinal_words).capitalize()} cousins"
    if removal > 0:
        label += f" ({_generations(removal)} removed)"
    return KinshipKind.COUSINS, label, degree, removal


def _generations(n: int) -> str:
    return f"{n} generation{'s' if n > 1 else ''}"


def _great(degree: int, female: str, male: str) -> str:
    """1 -> 'Aunt/Uncle', 2 -> 'Great-aunt/Great-uncle', 3 -> 'Great-great-aunt/...'."""
    if degree <= 1:
        return f"{female.capitalize()}/{male.capitalize()}"
    prefix = "Great-" + "great-" * (degree - 2)
    return f"{prefix}{female}/{prefix}{male}"


def ordinal(n: int, words: int = len(ORDINAL_WORDS)) -> str:
    """1 -> 'first', ..., 10 -> 'tenth', 11 -> '11th', 22 -> '22nd'."""
    if 1 <= n <= min(words, len(ORDINAL_WORDS)):
        return ORDINAL_WORDS[n - 1]
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"
