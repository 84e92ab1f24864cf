"""Tests for the chronological timeline view."""

from pathlib import Path

from roadmap_graph.parser.workbook import parse_workbook
from roadmap_graph.render.constants import TIMELINE_EMPTY_MESSAGE, TIMELINE_HIDDEN_MESSAGE
from roadmap_graph.render.timeline import format_timeline, timeline_entries

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
ROADMAP_JSON = EXAMPLES_DIR / "product_roadmap.json"


def _main_nodes():
    return parse_workbook(ROADMAP_JSON.read_text()).sheet("main").nodes


def test_entries_newest_first():
    entries = timeline_entries(_main_nodes())
    assert [e.node.id for e in entries] == [
        "launch", "billing", "beta", "native", "research", "proto", "root",
    ]


def test_entries_resolve_parent_titles():
    entries = {e.node.id: e for e in timeline_entries(_main_nodes())}
    assert entries["beta"].parent_titles == ["Prototype", "User research"]
    assert entries["root"].parent_titles == []


def test_entries_respect_collapsed_branches():
    entries = timeline_entries(_main_nodes(), collapsed={"proto"})
    assert "native" not in [e.node.id for e in entries]


def test_format_timeline_lists_events():
    nodes = _main_nodes()
    text = format_timeline(timeline_entries(nodes), total=len(nodes))
    assert text.index("Public launch") < text.index("Project Kickoff")
    assert "[STANDBY]" in text
    assert "From: Prototype, User research" in text
    assert "April 01, 2024" in text
    # launch has an empty description
    assert "No description provided." in text


def test_format_timeline_empty_messages():
    assert format_timeline([], total=0) == TIMELINE_EMPTY_MESSAGE
    assert format_timeline([], total=4) == TIMELINE_HIDDEN_MESSAGE
