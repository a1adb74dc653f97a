"""Shared fixtures for family graph tests."""

import pytest

from graph import build_adjacency
from models import EdgeKind, Individual, RelationshipEdge


def parent(p, c):
    return RelationshipEdge(p, c, EdgeKind.PARENT)


def spouse(a, b):
    return RelationshipEdge(a, b, EdgeKind.SPOUSE)


def people(*ids):
    return [Individual(id=i, name=str(i)) for i in ids]


@pytest.fixture
def nuclear_family():
    """A and B are married and parents of C and D."""
    individuals = people("A", "B", "C", "D")
    edges = [
        parent("A", "C"),
        parent("B", "C"),
        parent("A", "D"),
        parent("B", "D"),
        spouse("A", "B"),
    ]
    return build_adjacency(individuals, edges)


@pytest.fixture
def extended_family():
    """
    Four generations descending from the couple G1/G2:

        G1 = G2
          |
      +---+---+
      P1      P2 = S2
      |          |
      C1        C2
      |          |
      K1        K2

    plus H, who has no relationships at all.
    """
    individuals = people("G1", "G2", "P1", "P2", "S2", "C1", "C2", "K1", "K2", "H")
    edges = [
        spouse("G1", "G2"),
        parent("G1", "P1"),
        parent("G2", "P1"),
        parent("G1", "P2"),
        parent("G2", "P2"),
        spouse("P2", "S2"),
        parent("P1", "C1"),
        parent("P2", "C2"),
        parent("S2", "C2"),
        parent("C1", "K1"),
        parent("C2", "K2"),
    ]
    return build_adjacency(individuals, edges)
