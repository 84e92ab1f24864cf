"""JSON reading and writing of roadmap workbooks.

Two layouts are accepted:

- the workbook format: an array of sheets, each ``{"id", "name", "nodes"}``;
- the legacy format: a bare array of nodes, wrapped into a single sheet.

Node objects use the keys ``id``, ``title``, ``description``, ``date``
(ISO 8601), ``status`` and ``parentIds``.
"""

from __future__ import annotations

import json
import logging
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from roadmap_graph.parser.model import Node, NodeStatus, Sheet, Workbook

logger = logging.getLogger(__name__)

DEFAULT_SHEET_ID = "default-sheet"
DEFAULT_SHEET_NAME = "Main Roadmap"
IMPORTED_SHEET_NAME = "Imported Roadmap"

ROOT_ID = "root"
ROOT_TITLE = "Project Kickoff"
ROOT_DESCRIPTION = "Initial brainstorming and requirement gathering (100% Focus)"


def initial_nodes(now: datetime | None = None) -> list[Node]:
    """The single kickoff node every new roadmap starts with."""
    return [
        Node(
            id=ROOT_ID,
            title=ROOT_TITLE,
            description=ROOT_DESCRIPTION,
            date=now or datetime.now(timezone.utc),
            status=NodeStatus.COMPLETED,
        )
    ]


def default_workbook(now: datetime | None = None) -> Workbook:
    """A fresh workbook holding one untouched sheet."""
    return Workbook(sheets=[
        Sheet(id=DEFAULT_SHEET_ID, name=DEFAULT_SHEET_NAME, nodes=initial_nodes(now)),
    ])


def parse_date(value: Any) -> datetime:
    """Parse an ISO 8601 timestamp; naive values are read as UTC."""
    if not isinstance(value, str):
        raise ValueError(f"Expected an ISO 8601 date string, got {value!r}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        date = datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Invalid date '{value}'") from None
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    return date


def format_date(date: datetime) -> str:
    """Format a timestamp the way browsers serialize dates (UTC, ms, ``Z``)."""
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    text = date.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def _parse_node(data: Any) -> Node:
    if not isinstance(data, dict):
        raise ValueError(f"Expected a node object, got {type(data).__name__}")
    node_id = data.get("id")
    if not isinstance(node_id, str) or not node_id:
        raise ValueError(f"Node is missing a string 'id': {data!r}")
    if "date" not in data:
        raise ValueError(f"Node '{node_id}' has no date")

    status_value = data.get("status") or NodeStatus.ACTIVE.value
    try:
        status = NodeStatus(status_value)
    except ValueError:
        valid = ", ".join(s.value for s in NodeStatus)
        raise ValueError(
            f"Node '{node_id}' has unknown status '{status_value}' "
            f"(expected one of: {valid})"
        ) from None

    parent_ids = data.get("parentIds") or []
    if not isinstance(parent_ids, list) or not all(isinstance(p, str) for p in parent_ids):
        raise ValueError(f"Node '{node_id}' has malformed parentIds: {parent_ids!r}")

    try:
        date = parse_date(data["date"])
    except ValueError as e:
        raise ValueError(f"Node '{node_id}': {e}") from None

    return Node(
        id=node_id,
        title=data.get("title") or "New Task",
        description=data.get("description") or "",
        date=date,
        status=status,
        parent_ids=list(parent_ids),
    )


def _parse_sheet(data: dict[str, Any]) -> Sheet:
    name = data.get("name")
    if not isinstance(name, str):
        raise ValueError(f"Sheet is missing a string 'name': {data.get('id')!r}")
    nodes = data.get("nodes")
    if not isinstance(nodes, list):
        raise ValueError(f"Sheet '{name}' has no node list")
    return Sheet(
        id=data.get("id") or str(uuid.uuid4()),
        name=name,
        nodes=[_parse_node(n) for n in nodes],
    )


def parse_workbook(text: str) -> Workbook:
    """Parse workbook JSON in either the sheet or the legacy node format."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from None

    if not isinstance(data, list) or not data or not isinstance(data[0], dict):
        raise ValueError(
            "Expected a non-empty JSON array of sheets or of nodes"
        )

    first = data[0]
    if "nodes" in first and "name" in first:
        if not all(isinstance(s, dict) for s in data):
            raise ValueError("Every sheet must be a JSON object")
        return Workbook(sheets=[_parse_sheet(s) for s in data])
    if "id" in first:
        logger.info("Reading legacy node array as a single sheet")
        return Workbook(sheets=[
            Sheet(
                id=str(uuid.uuid4()),
                name=IMPORTED_SHEET_NAME,
                nodes=[_parse_node(n) for n in data],
            )
        ])
    raise ValueError("JSON array holds neither sheets nor nodes")


def node_to_dict(node: Node) -> dict[str, Any]:
    return {
        "id": node.id,
        "title": node.title,
        "description": node.description,
        "date": format_date(node.date),
        "status": node.status.value,
        "parentIds": list(node.parent_ids),
    }


def dump_workbook(workbook: Workbook) -> str:
    """Serialize a workbook to indented JSON (sheet format)."""
    data = [
        {
            "id": sheet.id,
            "name": sheet.name,
            "nodes": [node_to_dict(n) for n in sheet.nodes],
        }
        for sheet in workbook.sheets
    ]
    return json.dumps(data, indent=2)


def is_pristine(workbook: Workbook) -> bool:
    """True if the workbook is still the untouched default one.

    The kickoff node's date is ignored since it is stamped at creation.
    """
    if len(workbook.sheets) != 1:
        return False
    sheet = workbook.sheets[0]
    if sheet.id != DEFAULT_SHEET_ID or len(sheet.nodes) != 1:
        return False
    node = sheet.nodes[0]
    return (
        node.id == ROOT_ID
        and node.title == ROOT_TITLE
        and node.description == ROOT_DESCRIPTION
        and node.status is NodeStatus.COMPLETED
        and not node.parent_ids
    )


def merge_workbooks(current: Workbook, imported: Workbook) -> Workbook:
    """Combine an imported workbook into the current one.

    An untouched default workbook is replaced outright. Otherwise imported
    sheets update the current sheet of the same name, and sheets with new
    names are appended.
    """
    if is_pristine(current):
        logger.info("Replacing default sheet with %d imported sheet(s)", len(imported.sheets))
        return Workbook(sheets=[
            replace(s, id=s.id or str(uuid.uuid4())) for s in imported.sheets
        ])

    sheets = list(current.sheets)
    for incoming in imported.sheets:
        for i, existing in enumerate(sheets):
            if existing.name == incoming.name:
                sheets[i] = replace(existing, nodes=list(incoming.nodes))
                break
        else:
            sheets.append(replace(incoming, id=incoming.id or str(uuid.uuid4())))
    logger.info("Merged %d imported sheet(s)", len(imported.sheets))
    return Workbook(sheets=sheets)


def replace_sheet(workbook: Workbook, sheet: Sheet) -> Workbook:
    """Return *workbook* with the sheet of the same id swapped for *sheet*."""
    if not any(s.id == sheet.id for s in workbook.sheets):
        raise ValueError(f"No sheet with id '{sheet.id}'")
    return Workbook(sheets=[sheet if s.id == sheet.id else s for s in workbook.sheets])


def add_sheet(
    workbook: Workbook,
    name: str | None = None,
    now: datetime | None = None,
) -> tuple[Workbook, Sheet]:
    """Append a new sheet seeded with the kickoff node.

    Unnamed sheets are called "Roadmap N", N being the new sheet count.
    """
    sheet = Sheet(
        id=str(uuid.uuid4()),
        name=name or f"Roadmap {len(workbook.sheets) + 1}",
        nodes=initial_nodes(now),
    )
    logger.info("Added sheet '%s' (%s)", sheet.name, sheet.id)
    return Workbook(sheets=[*workbook.sheets, sheet]), sheet


def rename_sheet(workbook: Workbook, key: str, name: str) -> Workbook:
    """Rename the sheet whose id or name is *key*."""
    if not name.strip():
        raise ValueError("Sheet name must not be empty")
    target = workbook.sheet(key)
    return replace_sheet(workbook, replace(target, name=name))


def delete_sheet(workbook: Workbook, key: str) -> Workbook:
    """Remove the sheet whose id or name is *key*.

    A workbook always keeps at least one sheet.
    """
    target = workbook.sheet(key)
    if len(workbook.sheets) <= 1:
        raise ValueError("Cannot delete the last sheet of a workbook")
    logger.info("Deleted sheet '%s' (%s)", target.name, target.id)
    return Workbook(sheets=[s for s in workbook.sheets if s is not target])


def _find_node(sheet: Sheet, node_id: str) -> Node:
    for node in sheet.nodes:
        if node.id == node_id:
            return node
    raise ValueError(f"No node '{node_id}' in sheet '{sheet.name}'")


def add_node(
    sheet: Sheet,
    parent_id: str | None = None,
    *,
    title: str | None = None,
    description: str = "",
    date: datetime | None = None,
    status: NodeStatus = NodeStatus.ACTIVE,
) -> tuple[Sheet, Node]:
    """Append a new node branching from *parent_id* (or a new root).

    Returns the updated sheet and the created node. The date defaults to
    the current time.
    """
    if parent_id is not None:
        _find_node(sheet, parent_id)
    node = Node(
        id=str(uuid.uuid4()),
        title=title or "New Task",
        description=description,
        date=date or datetime.now(timezone.utc),
        status=status,
        parent_ids=[parent_id] if parent_id else [],
    )
    return replace(sheet, nodes=[*sheet.nodes, node]), node


def update_node(
    sheet: Sheet,
    node_id: str,
    *,
    title: str | None = None,
    description: str | None = None,
    date: datetime | None = None,
    status: NodeStatus | None = None,
    parent_ids: list[str] | None = None,
) -> Sheet:
    """Change the given fields of one node; ``None`` leaves a field as is."""
    target = _find_node(sheet, node_id)
    changes: dict[str, Any] = {
        "title": title,
        "description": description,
        "date": date,
        "status": status,
        "parent_ids": None if parent_ids is None else list(parent_ids),
    }
    updated = replace(target, **{k: v for k, v in changes.items() if v is not None})
    return replace(sheet, nodes=[updated if n is target else n for n in sheet.nodes])


def delete_node(sheet: Sheet, node_id: str) -> Sheet:
    """Remove a node and drop it from every other node's parents.

    The kickoff node cannot be deleted. Children left without parents
    become roots.
    """
    if node_id == ROOT_ID:
        raise ValueError("The kickoff node cannot be deleted")
    _find_node(sheet, node_id)
    nodes = [
        replace(n, parent_ids=[pid for pid in n.parent_ids if pid != node_id])
        for n in sheet.nodes
        if n.id != node_id
    ]
    logger.info("Deleted node '%s' from sheet '%s'", node_id, sheet.name)
    return replace(sheet, nodes=nodes)


def reset_sheet(sheet: Sheet, now: datetime | None = None) -> Sheet:
    """Discard every node of a sheet, leaving only the kickoff node."""
    logger.info("Reset sheet '%s'", sheet.name)
    return replace(sheet, nodes=initial_nodes(now))
