"""Data classes for family tree entities."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

PersonId = int | str

_SEX_ALIASES = {
    "M": "M",
    "MALE": "M",
    "F": "F",
    "FEMALE": "F",
}


def sort_key(person_id: PersonId) -> tuple:
    """Order mixed int/str ids: ints first (numerically), then strings."""
    if isinstance(person_id, int):
        return (0, person_id, "")
    return (1, 0, str(person_id))


class EdgeKind(str, Enum):
    """Relationship kinds as stored by the persistence layer."""

    PARENT = "parent"
    SPOUSE = "spouse"
    SIBLING = "sibling"


class NeighborKind(str, Enum):
    """Kind of link from an individual to one of its neighbors."""

    PARENT = "parent"
    CHILD = "child"
    SPOUSE = "spouse"


# GEDCOM-style spellings: (kind, swap source/target)
_EDGE_ALIASES = {
    "parent": (EdgeKind.PARENT, False),
    "parent_of": (EdgeKind.PARENT, False),
    "child_of": (EdgeKind.PARENT, True),
    "spouse": (EdgeKind.SPOUSE, False),
    "spouse_of": (EdgeKind.SPOUSE, False),
    "conjoint": (EdgeKind.SPOUSE, False),
    "sibling": (EdgeKind.SIBLING, False),
    "sibling_of": (EdgeKind.SIBLING, False),
}


@dataclass(frozen=True)
class Individual:
    id: PersonId
    name: str = ""
    given_name: str | None = None
    surname: str | None = None
    sex: str | None = None
    birth_date: str | None = None  # ISO format YYYY-MM-DD or None
    death_date: str | None = None  # ISO format YYYY-MM-DD or None

    @property
    def living(self) -> bool:
        return self.death_date is None

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Individual":
        """
        Build an Individual from a plain record.

        Accepts both the `sex` ("M"/"F") and `gender` ("male"/"female"/"other") spellings
        and falls back to `first_name`/`last_name` for the name parts.
        """
        given = record.get("given_name", record.get("first_name"))
        surname = record.get("surname", record.get("last_name"))
        name = record.get("name") or record.get("full_name")
        if not name:
            name = " ".join(p for p in (given, surname) if p) or "Unknown"

        raw_sex = record.get("sex", record.get("gender"))
        sex = _SEX_ALIASES.get(str(raw_sex).upper()) if raw_sex else None

        if "id" not in record:
            raise ValueError(f"Record is missing an id: {record!r}")

        return cls(
            id=record["id"],
            name=name,
            given_name=given or None,
            surname=surname or None,
            sex=sex,
            birth_date=record.get("birth_date") or None,
            death_date=record.get("death_date") or None,
        )


@dataclass(frozen=True)
class RelationshipEdge:
    source_id: PersonId
    target_id: PersonId
    kind: EdgeKind  # PARENT: source is parent of target; SPOUSE: symmetric

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "RelationshipEdge":
        """
        Build an edge from a plain record.

        The endpoints may be named `source`/`target`, `source_id`/`target_id` or
        `person1_id`/`person2_id`; the kind may be `type`, `kind` or
        `relationship_type`. CHILD_OF edges are turned around into parent edges.
        """
        source = _first_present(record, "source_id", "source", "person1_id", "from")
        target = _first_present(record, "target_id", "target", "person2_id", "to")
        raw_kind = _first_present(record, "kind", "type", "relationship_type")

        try:
            kind, swap = _EDGE_ALIASES[str(raw_kind).lower()]
        except KeyError:
            raise ValueError(f"Unknown relationship kind: {raw_kind!r}") from None

        if swap:
            source, target = target, source
        return cls(source_id=source, target_id=target, kind=kind)


def _first_present(record: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in record:
            return record[key]
    raise ValueError(f"Record is missing one of {keys}: {record!r}")


@dataclass(frozen=True)
class PersonNode:
    """A real individual placed in the layout."""

    id: PersonId


@dataclass(frozen=True)
class UnionNode:
    """A couple jointly parenting at least one child. Exists only for layout."""

    id: str
    parents: tuple[PersonId, PersonId]

    @classmethod
    def for_parents(cls, a: PersonId, b: PersonId, prefix: str = "FAM") -> "UnionNode":
        first, second = sorted((a, b), key=sort_key)
        return cls(id=f"{prefix}_{first}_{second}", parents=(first, second))


LayoutNode = PersonNode | UnionNode
