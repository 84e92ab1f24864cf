"""Chronological list view of a roadmap.

The timeline does not use the layout engine: it lists the visible nodes
newest first, each with the titles of the nodes it branched from.
"""

from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import dataclass, field

from roadmap_graph.layout.ranks import date_key
from roadmap_graph.layout.visibility import visible_nodes
from roadmap_graph.parser.model import Node
from roadmap_graph.render.constants import (
    TIMELINE_DATE_FORMAT,
    TIMELINE_EMPTY_MESSAGE,
    TIMELINE_HIDDEN_MESSAGE,
    TIMELINE_NO_DESCRIPTION,
)


@dataclass
class TimelineEntry:
    """One event in the timeline."""

    node: Node
    parent_titles: list[str] = field(default_factory=list)


def timeline_entries(
    nodes: Sequence[Node],
    collapsed: Collection[str] = (),
) -> list[TimelineEntry]:
    """Visible nodes, newest first, with resolved parent titles.

    Parent titles are looked up in the full node list, so a parent hidden
    by a collapsed branch is still named.
    """
    titles = {node.id: node.title for node in nodes}
    visible = visible_nodes(nodes, collapsed)
    newest_first = sorted(visible, key=date_key, reverse=True)
    return [
        TimelineEntry(
            node=node,
            parent_titles=[titles[pid] for pid in node.parent_ids if pid in titles],
        )
        for node in newest_first
    ]


def format_timeline(entries: Sequence[TimelineEntry], total: int) -> str:
    """Render timeline entries as plain text.

    *total* is the size of the full roadmap, used to tell an empty roadmap
    apart from one whose events are all collapsed away.
    """
    if not entries:
        return TIMELINE_HIDDEN_MESSAGE if total else TIMELINE_EMPTY_MESSAGE

    blocks = []
    for entry in entries:
        node = entry.node
        lines = [
            f"{node.date.strftime(TIMELINE_DATE_FORMAT)}  [{node.status.value.upper()}]",
            f"  {node.title}",
        ]
        for text in (node.description or TIMELINE_NO_DESCRIPTION).splitlines():
            lines.append(f"    {text}")
        if entry.parent_titles:
            lines.append(f"  From: {', '.join(entry.parent_titles)}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
