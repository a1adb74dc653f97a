"""Tests for shortest relationship paths."""

import itertools

import networkx as nx
import pytest

from conftest import parent, people
from errors import NoPathError, UnknownIndividualError
from graph import build_adjacency, neighbors
from models import NeighborKind
from paths import find_shortest_path


def test_siblings_through_a_parent(nuclear_family):
    result = find_shortest_path(nuclear_family, "C", "D")

    assert result.distance == 2
    assert result.ids[0] == "C"
    assert result.ids[-1] == "D"
    assert result.ids[1] in ("A", "B")
    assert result.steps == [NeighborKind.PARENT, NeighborKind.CHILD]


def test_ties_go_to_first_discovered(nuclear_family):
    # A is listed before B among C's parents
    assert find_shortest_path(nuclear_family, "C", "D").ids == ["C", "A", "D"]


def test_same_person_path(nuclear_family):
    result = find_shortest_path(nuclear_family, "A", "A")

    assert result.ids == ["A"]
    assert result.distance == 0
    assert result.steps == []


def test_spouse_link_is_one_step(nuclear_family):
    result = find_shortest_path(nuclear_family, "B", "A")

    assert result.ids == ["B", "A"]
    assert result.steps == [NeighborKind.SPOUSE]


def test_in_law_path(extended_family):
    result = find_shortest_path(extended_family, "S2", "P1")

    # S2 = P2, P2 -> G1, G1 -> P1
    assert result.distance == 3
    assert result.ids == ["S2", "P2", "G1", "P1"]


def test_disconnected_returns_none(extended_family):
    assert find_shortest_path(extended_family, "H", "K1") is None


def test_disconnected_strict_raises(extended_family):
    with pytest.raises(NoPathError):
        find_shortest_path(extended_family, "H", "K1", strict=True)


def test_unknown_person(extended_family):
    with pytest.raises(UnknownIndividualError):
        find_shortest_path(extended_family, "H", "nobody")


def test_paths_are_real_and_shortest(extended_family):
    undirected = nx.Graph(extended_family.to_undirected())

    for a, b in itertools.combinations(extended_family.nodes, 2):
        result = find_shortest_path(extended_family, a, b)
        if not nx.has_path(undirected, a, b):
            assert result is None
            continue

        assert len(result.path) == result.distance + 1
        assert result.distance == nx.shortest_path_length(undirected, a, b)
        for (u, v), kind in zip(itertools.pairwise(result.ids), result.steps):
            assert (v, kind) in list(neighbors(extended_family, u))


def test_cycle_in_data_still_terminates():
    G = build_adjacency(people(1, 2, 3), [parent(1, 2), parent(2, 3), parent(3, 1)])

    assert find_shortest_path(G, 1, 3).distance == 1
