"""CLI for roadmap-graph."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import click

from roadmap_graph import __version__
from roadmap_graph.layout import child_counts, compute_layout, visible_nodes
from roadmap_graph.layout.constants import VIEWPORT_HEIGHT, VIEWPORT_WIDTH
from roadmap_graph.parser import dump_workbook, parse_workbook
from roadmap_graph.parser.model import NodeStatus, Sheet, Workbook
from roadmap_graph.parser.validate import find_problems
from roadmap_graph.parser.workbook import (
    add_node,
    add_sheet,
    default_workbook,
    delete_node,
    delete_sheet,
    merge_workbooks,
    parse_date,
    rename_sheet,
    replace_sheet,
    reset_sheet,
    update_node,
)
from roadmap_graph.render import format_timeline, render_svg, timeline_entries
from roadmap_graph.themes import THEMES


def _load(input_file: Path) -> Workbook:
    """Read a workbook, turning parse errors into a clean exit."""
    try:
        return parse_workbook(input_file.read_text())
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


def _select_sheet(workbook: Workbook, key: str | None) -> Sheet:
    try:
        return workbook.sheet(key)
    except ValueError as e:
        _fail(e)


def _save(workbook: Workbook, input_file: Path, output: Path | None) -> Path:
    output = output or input_file
    output.write_text(dump_workbook(workbook) + "\n")
    return output


def _fail(e: ValueError) -> NoReturn:
    click.echo(f"Error: {e}", err=True)
    raise SystemExit(1)


sheet_option = click.option(
    "--sheet", default=None,
    help="Sheet id or name (default: first sheet)",
)
collapse_option = click.option(
    "--collapse", "collapsed", multiple=True, metavar="NODE_ID",
    help="Collapse the branch below a node (repeatable)",
)
edit_output_option = click.option(
    "-o", "--output", type=click.Path(path_type=Path), default=None,
    help="Output file path. Defaults to overwriting the input file",
)
status_option = click.option(
    "--status", type=click.Choice([s.value for s in NodeStatus]), default=None,
    help="Node status",
)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log layout details")
def cli(verbose: bool) -> None:
    """roadmap-graph: Lay out branching roadmaps as git-style diagrams."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@sheet_option
@click.option("--orientation", type=click.Choice(["vertical", "horizontal"]),
              default="vertical", help="Flow direction (default: vertical)")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="light",
              help="Visual theme (default: light)")
@collapse_option
@click.option("--viewport-width", type=float, default=VIEWPORT_WIDTH,
              help=f"Minimum canvas width (default: {VIEWPORT_WIDTH:g})")
@click.option("--viewport-height", type=float, default=VIEWPORT_HEIGHT,
              help=f"Minimum canvas height (default: {VIEWPORT_HEIGHT:g})")
def render(
    input_file: Path,
    output: Path | None,
    sheet: str | None,
    orientation: str,
    theme: str,
    collapsed: tuple[str, ...],
    viewport_width: float,
    viewport_height: float,
) -> None:
    """Render a roadmap sheet to SVG."""
    workbook = _load(input_file)
    selected = _select_sheet(workbook, sheet)

    nodes = visible_nodes(selected.nodes, collapsed)
    layout = compute_layout(
        nodes,
        orientation,
        viewport_width=viewport_width,
        viewport_height=viewport_height,
    )
    svg = render_svg(
        layout,
        THEMES[theme],
        collapsed=collapsed,
        child_counts=child_counts(selected.nodes),
    )

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg if svg.endswith("\n") else svg + "\n")
    click.echo(f"Rendered {len(layout.nodes)} nodes, "
               f"{len(layout.edges)} edges from '{selected.name}' -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@sheet_option
@collapse_option
def timeline(input_file: Path, sheet: str | None, collapsed: tuple[str, ...]) -> None:
    """Print a sheet as a chronological list, newest first."""
    workbook = _load(input_file)
    selected = _select_sheet(workbook, sheet)
    entries = timeline_entries(selected.nodes, collapsed)
    click.echo(format_timeline(entries, total=len(selected.nodes)))


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Check a roadmap file for dangling parents, cycles and duplicates."""
    workbook = _load(input_file)

    errors = []
    for sheet in workbook.sheets:
        for problem in find_problems(sheet.nodes):
            errors.append(f"[{sheet.name}] {problem}")

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    total_nodes = sum(len(s.nodes) for s in workbook.sheets)
    click.echo(f"Valid: {len(workbook.sheets)} sheets, {total_nodes} nodes")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about each sheet of a roadmap file."""
    workbook = _load(input_file)

    click.echo(f"Sheets: {len(workbook.sheets)}")
    for sheet in workbook.sheets:
        layout = compute_layout(sheet.nodes)
        roots = sum(1 for n in sheet.nodes if not n.parent_ids)
        ranks = len({n.rank for n in layout.nodes})
        lanes = len({n.lane for n in layout.nodes})
        click.echo(f"  {sheet.name} ({sheet.id}): "
                   f"{len(sheet.nodes)} nodes, {roots} roots, "
                   f"{len(layout.edges)} edges, {ranks} ranks, "
                   f"{lanes} lanes")


@cli.command()
@click.argument("current_file", type=click.Path(exists=True, path_type=Path))
@click.argument("imported_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output file path. Defaults to overwriting CURRENT_FILE")
def merge(current_file: Path, imported_file: Path, output: Path | None) -> None:
    """Import the sheets of IMPORTED_FILE into CURRENT_FILE.

    Sheets with a matching name are replaced, others are appended. An
    untouched default roadmap is replaced entirely.
    """
    current = _load(current_file)
    imported = _load(imported_file)
    merged = merge_workbooks(current, imported)

    if output is None:
        output = current_file

    output.write_text(dump_workbook(merged) + "\n")
    click.echo(f"Merged {len(imported.sheets)} sheet(s) -> {output} "
               f"({len(merged.sheets)} sheets)")


@cli.command()
@click.argument("output", type=click.Path(path_type=Path))
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init(output: Path, force: bool) -> None:
    """Create a new roadmap file holding a single kickoff node."""
    if output.exists() and not force:
        click.echo(f"Error: {output} already exists (use --force)", err=True)
        raise SystemExit(1)
    output.write_text(dump_workbook(default_workbook()) + "\n")
    click.echo(f"Created {output}")


@cli.command("add-node")
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@sheet_option
@click.option("--parent", default=None, metavar="NODE_ID",
              help="Node to branch from (default: start a new root)")
@click.option("--title", default=None, help="Node title (default: New Task)")
@click.option("--description", default="", help="Node description")
@click.option("--date", default=None, help="ISO 8601 date (default: now)")
@status_option
@edit_output_option
def add_node_command(
    input_file: Path,
    sheet: str | None,
    parent: str | None,
    title: str | None,
    description: str,
    date: str | None,
    status: str | None,
    output: Path | None,
) -> None:
    """Add a node to a sheet and print its id."""
    workbook = _load(input_file)
    selected = _select_sheet(workbook, sheet)
    try:
        edited, node = add_node(
            selected,
            parent,
            title=title,
            description=description,
            date=parse_date(date) if date else None,
            status=NodeStatus(status or NodeStatus.ACTIVE.value),
        )
    except ValueError as e:
        _fail(e)
    _save(replace_sheet(workbook, edited), input_file, output)
    click.echo(node.id)


@cli.command("update-node")
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.argument("node_id")
@sheet_option
@click.option("--title", default=None, help="New title")
@click.option("--description", default=None, help="New description")
@click.option("--date", default=None, help="New ISO 8601 date")
@status_option
@click.option("--parent", "parents", multiple=True, metavar="NODE_ID",
              help="Replace the parent list (repeatable)")
@edit_output_option
def update_node_command(
    input_file: Path,
    node_id: str,
    sheet: str | None,
    title: str | None,
    description: str | None,
    date: str | None,
    status: str | None,
    parents: tuple[str, ...],
    output: Path | None,
) -> None:
    """Change fields of an existing node."""
    workbook = _load(input_file)
    selected = _select_sheet(workbook, sheet)
    try:
        edited = update_node(
            selected,
            node_id,
            title=title,
            description=description,
            date=parse_date(date) if date else None,
            status=NodeStatus(status) if status else None,
            parent_ids=list(parents) if parents else None,
        )
    except ValueError as e:
        _fail(e)
    written = _save(replace_sheet(workbook, edited), input_file, output)
    click.echo(f"Updated '{node_id}' -> {written}")


@cli.command("delete-node")
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.argument("node_id")
@sheet_option
@edit_output_option
def delete_node_command(
    input_file: Path,
    node_id: str,
    sheet: str | None,
    output: Path | None,
) -> None:
    """Delete a node; its children lose it as a parent."""
    workbook = _load(input_file)
    selected = _select_sheet(workbook, sheet)
    try:
        edited = delete_node(selected, node_id)
    except ValueError as e:
        _fail(e)
    written = _save(replace_sheet(workbook, edited), input_file, output)
    click.echo(f"Deleted '{node_id}' -> {written}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@sheet_option
@edit_output_option
def reset(input_file: Path, sheet: str | None, output: Path | None) -> None:
    """Clear a sheet back to its kickoff node."""
    workbook = _load(input_file)
    selected = _select_sheet(workbook, sheet)
    written = _save(replace_sheet(workbook, reset_sheet(selected)), input_file, output)
    click.echo(f"Reset '{selected.name}' -> {written}")


@cli.command("add-sheet")
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--name", default=None, help="Sheet name (default: Roadmap N)")
@edit_output_option
def add_sheet_command(input_file: Path, name: str | None, output: Path | None) -> None:
    """Append a new sheet holding a kickoff node."""
    workbook, sheet = add_sheet(_load(input_file), name)
    written = _save(workbook, input_file, output)
    click.echo(f"Added '{sheet.name}' ({sheet.id}) -> {written}")


@cli.command("rename-sheet")
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.argument("sheet")
@click.argument("name")
@edit_output_option
def rename_sheet_command(
    input_file: Path,
    sheet: str,
    name: str,
    output: Path | None,
) -> None:
    """Rename the sheet with id or name SHEET."""
    try:
        workbook = rename_sheet(_load(input_file), sheet, name)
    except ValueError as e:
        _fail(e)
    written = _save(workbook, input_file, output)
    click.echo(f"Renamed '{sheet}' to '{name}' -> {written}")


@cli.command("delete-sheet")
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.argument("sheet")
@edit_output_option
def delete_sheet_command(input_file: Path, sheet: str, output: Path | None) -> None:
    """Delete the sheet with id or name SHEET."""
    try:
        workbook = delete_sheet(_load(input_file), sheet)
    except ValueError as e:
        _fail(e)
    written = _save(workbook, input_file, output)
    click.echo(f"Deleted '{sheet}' -> {written}")
