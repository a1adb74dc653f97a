"""Tests for family group partitioning."""

from conftest import parent, people, spouse
from components import find_connected_components
from graph import build_adjacency


def test_extended_family_groups(extended_family):
    result = find_connected_components(extended_family)

    assert len(result.groups) == 2
    assert {p.id for p in result.groups[0]} == {
        "G1", "G2", "P1", "P2", "S2", "C1", "C2", "K1", "K2"
    }
    assert [p.id for p in result.groups[1]] == ["H"]
    assert [p.id for p in result.isolated] == ["H"]
    assert result.count == 1


def test_partition_covers_everyone_once(extended_family):
    result = find_connected_components(extended_family)
    ids = [p.id for group in result.groups for p in group]

    assert len(ids) == extended_family.number_of_nodes()
    assert set(ids) == set(extended_family.nodes)


def test_spouse_links_join_families():
    individuals = people(1, 2, 3, 4)
    G = build_adjacency(individuals, [parent(1, 2), parent(3, 4)])
    assert len(find_connected_components(G).groups) == 2

    G = build_adjacency(individuals, [parent(1, 2), parent(3, 4), spouse(2, 4)])
    assert len(find_connected_components(G).groups) == 1


def test_groups_follow_input_order():
    G = build_adjacency(people(5, 1, 2, 9), [parent(1, 9)])
    groups = find_connected_components(G).groups

    assert [group[0].id for group in groups] == [5, 1, 2]


def test_cycles_terminate():
    G = build_adjacency(people(1, 2), [parent(1, 2), parent(2, 1)])
    result = find_connected_components(G)

    assert len(result.groups) == 1
    assert result.isolated == []


def test_empty_population():
    result = find_connected_components(build_adjacency([], []))

    assert result.groups == []
    assert result.count == 0
