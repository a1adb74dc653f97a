"""Exceptions raised by the family graph computations."""


class FamilyGraphError(Exception):
    """Base class for all family graph errors."""


class UnknownIndividualError(FamilyGraphError, KeyError):
    """A queried individual id is not part of the population."""

    def __init__(self, person_id):
        self.person_id = person_id
        super().__init__(f"Person ID {person_id} not found in graph")

    def __str__(self) -> str:
        return self.args[0]


class CyclicAncestryError(FamilyGraphError):
    """Parent links loop back on themselves (someone is their own ancestor)."""

    def __init__(self, cycle: list):
        self.cycle = cycle
        super().__init__(f"Cycle detected in parent-child relationships: {cycle}")


class NoPathError(FamilyGraphError):
    """No chain of relationships connects two individuals."""

    def __init__(self, start_id, end_id):
        self.start_id = start_id
        self.end_id = end_id
        super().__init__(f"No relationship path between {start_id} and {end_id}")


class ValidationError(FamilyGraphError):
    """The input records are ambiguous and cannot be resolved without guessing."""


class DuplicateIndividualError(ValidationError):
    def __init__(self, person_id):
        self.person_id = person_id
        super().__init__(f"Person ID {person_id} appears more than once")


class AmbiguousParentageError(ValidationError):
    def __init__(self, person_id, parent_ids: list):
        self.person_id = person_id
        self.parent_ids = parent_ids
        super().__init__(
            f"Person ID {person_id} has {len(parent_ids)} recorded parents: {parent_ids}"
        )
