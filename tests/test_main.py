"""Tests for the command line front end."""

import json

import pytest

from errors import UnknownIndividualError
from graph import build_adjacency
from main import load_snapshot, main, resolve_id
from models import EdgeKind


@pytest.fixture
def snapshot(tmp_path):
    data = {
        "individuals": [
            {"id": 1, "first_name": "Alice", "last_name": "Smith", "gender": "female"},
            {"id": 2, "first_name": "Bob", "last_name": "Smith", "gender": "male"},
            {"id": 3, "first_name": "Carol", "last_name": "Smith", "gender": "female"},
            {"id": 4, "first_name": "Dan", "last_name": "Smith", "gender": "male"},
            {"id": 5, "name": "Hermit"},
        ],
        "relationships": [
            {"source": 1, "target": 3, "type": "parent"},
            {"source": 2, "target": 3, "type": "parent"},
            {"source": 1, "target": 4, "type": "parent"},
            {"source": 2, "target": 4, "type": "parent"},
            {"source": 1, "target": 2, "type": "spouse"},
            {"source": 3, "target": 4, "type": "sibling"},
        ],
    }
    path = tmp_path / "family.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_snapshot(snapshot):
    people, edges = load_snapshot(snapshot)

    assert [p.name for p in people][:2] == ["Alice Smith", "Bob Smith"]
    assert edges[-1].kind is EdgeKind.SIBLING


def test_resolve_id_accepts_numeric_strings(snapshot):
    G = build_adjacency(*load_snapshot(snapshot))

    assert resolve_id(G, "3") == 3
    with pytest.raises(UnknownIndividualError):
        resolve_id(G, "nobody")


def test_kinship_command(snapshot, capsys):
    assert main([str(snapshot), "kinship", "3", "4"]) == 0

    out = capsys.readouterr().out
    assert out.splitlines()[0] == "Siblings"
    assert "Common ancestor: Alice Smith" in out


def test_path_command(snapshot, capsys):
    assert main([str(snapshot), "path", "3", "4"]) == 0
    assert "Carol Smith -> Alice Smith -> Dan Smith" in capsys.readouterr().out

    assert main([str(snapshot), "path", "3", "5"]) == 0
    assert "No path found" in capsys.readouterr().out


def test_levels_command(snapshot, capsys):
    assert main([str(snapshot), "levels"]) == 0

    out = capsys.readouterr().out
    assert "Generation 0: Alice Smith, Bob Smith, Hermit" in out
    assert "Generation 1: Carol Smith, Dan Smith" in out
    assert "Union FAM_1_2: level 0" in out


def test_components_and_stats_commands(snapshot, capsys):
    assert main([str(snapshot), "components"]) == 0
    assert "2 group(s), 1 with more than one person" in capsys.readouterr().out

    assert main([str(snapshot), "stats"]) == 0
    out = capsys.readouterr().out
    assert "Total: 5" in out
    assert "Generations: 2" in out


def test_validate_and_dot_commands(snapshot, capsys):
    assert main([str(snapshot), "validate"]) == 0
    assert "No validation issues found" in capsys.readouterr().out

    assert main([str(snapshot), "dot"]) == 0
    assert "digraph" in capsys.readouterr().out


def test_unknown_person_exits_with_error(snapshot, capsys):
    assert main([str(snapshot), "kinship", "1", "99"]) == 1
    assert "Person ID 99 not found" in capsys.readouterr().err


def test_missing_snapshot_exits_with_error(tmp_path, capsys):
    assert main([str(tmp_path / "absent.json"), "levels"]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_record_without_id_exits_with_error(tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text(json.dumps({"individuals": [{"name": "Nobody"}]}), encoding="utf-8")

    assert main([str(path), "levels"]) == 1
    assert "missing an id" in capsys.readouterr().err
