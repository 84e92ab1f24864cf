"""Tests for structural roadmap checks."""

from datetime import datetime, timezone
from pathlib import Path

from roadmap_graph.parser.model import Node
from roadmap_graph.parser.validate import find_problems
from roadmap_graph.parser.workbook import parse_workbook

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
ROADMAP_JSON = EXAMPLES_DIR / "product_roadmap.json"

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _node(node_id, parents=()):
    return Node(id=node_id, date=T0, parent_ids=list(parents))


def test_example_roadmap_is_clean():
    for sheet in parse_workbook(ROADMAP_JSON.read_text()).sheets:
        assert find_problems(sheet.nodes) == []


def test_reports_dangling_parent():
    problems = find_problems([_node("a", ["ghost"])])
    assert problems == ["Node 'a' references unknown parent 'ghost'"]


def test_reports_self_reference():
    problems = find_problems([_node("a", ["a"])])
    assert problems == ["Node 'a' lists itself as a parent"]


def test_reports_repeated_parent():
    problems = find_problems([_node("a"), _node("b", ["a", "a"])])
    assert problems == ["Node 'b' lists parent 'a' more than once"]


def test_reports_duplicate_ids():
    problems = find_problems([_node("a"), _node("a")])
    assert problems == ["Duplicate node id 'a' (2 nodes)"]


def test_reports_cycles():
    nodes = [_node("r"), _node("x", ["r", "y"]), _node("y", ["x"])]
    problems = find_problems(nodes)
    assert problems == ["Parent cycle between: x, y"]
