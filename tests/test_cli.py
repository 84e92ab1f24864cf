"""Tests for the CLI entry points."""

import json
from pathlib import Path

from click.testing import CliRunner

from roadmap_graph.cli import cli
from roadmap_graph.parser.workbook import parse_workbook

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
ROADMAP_JSON = EXAMPLES_DIR / "product_roadmap.json"


def test_render_produces_svg(tmp_path):
    """render command produces an SVG file."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(ROADMAP_JSON), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert out.exists()
    content = out.read_text()
    assert "<svg" in content
    assert content.endswith("\n")
    assert "Rendered 7 nodes, 7 edges" in result.output


def test_render_default_output(tmp_path):
    """render command uses input stem + .svg when no -o given."""
    data = tmp_path / "roadmap.json"
    data.write_text(ROADMAP_JSON.read_text())
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(data)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "roadmap.svg").exists()


def test_render_options(tmp_path):
    """render accepts sheet, orientation, theme and collapse options."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, [
        "render", str(ROADMAP_JSON), "-o", str(out),
        "--sheet", "Main Roadmap",
        "--orientation", "horizontal",
        "--theme", "dark",
        "--collapse", "proto",
    ])
    assert result.exit_code == 0, result.output
    assert "Rendered 6 nodes, 6 edges" in result.output


def test_render_viewport(tmp_path):
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, [
        "render", str(ROADMAP_JSON), "-o", str(out),
        "--viewport-width", "3000", "--viewport-height", "2000",
    ])
    assert result.exit_code == 0, result.output
    content = out.read_text()
    assert 'width="3000"' in content
    assert 'height="2000"' in content


def test_render_unknown_sheet(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, [
        "render", str(ROADMAP_JSON), "-o", str(tmp_path / "x.svg"), "--sheet", "nope",
    ])
    assert result.exit_code == 1
    assert "No sheet" in result.output


def test_render_rejects_timeline_orientation():
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(ROADMAP_JSON), "--orientation", "timeline"])
    assert result.exit_code != 0


def test_render_nonexistent_file():
    """render command fails gracefully on missing input."""
    runner = CliRunner()
    result = runner.invoke(cli, ["render", "/nonexistent/roadmap.json"])
    assert result.exit_code != 0


def test_render_parse_error(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("not json")
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(bad)])
    assert result.exit_code == 1
    assert "Parse error" in result.output


def test_timeline_output():
    runner = CliRunner()
    result = runner.invoke(cli, ["timeline", str(ROADMAP_JSON)])
    assert result.exit_code == 0, result.output
    assert result.output.index("Public launch") < result.output.index("Project Kickoff")


def test_timeline_other_sheet():
    runner = CliRunner()
    result = runner.invoke(cli, ["timeline", str(ROADMAP_JSON), "--sheet", "ops"])
    assert result.exit_code == 0, result.output
    assert "CI pipeline" in result.output
    assert "Public launch" not in result.output


def test_validate_success():
    """validate command succeeds on valid input."""
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(ROADMAP_JSON)])
    assert result.exit_code == 0
    assert "Valid: 2 sheets, 9 nodes" in result.output


def test_validate_reports_problems(tmp_path):
    data = tmp_path / "cycle.json"
    data.write_text(json.dumps([
        {"id": "x", "date": "2024-01-01T00:00:00Z", "parentIds": ["y"]},
        {"id": "y", "date": "2024-01-02T00:00:00Z", "parentIds": ["x", "ghost"]},
    ]))
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(data)])
    assert result.exit_code == 1
    assert "Parent cycle between: x, y" in result.output
    assert "unknown parent 'ghost'" in result.output


def test_info_output():
    """info command prints per-sheet metadata."""
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(ROADMAP_JSON)])
    assert result.exit_code == 0, result.output
    assert "Sheets: 2" in result.output
    assert "Main Roadmap (main): 7 nodes, 1 roots, 7 edges, 4 ranks, 4 lanes" in result.output
    assert "Operations (ops): 2 nodes, 1 roots, 1 edges, 2 ranks, 1 lanes" in result.output


def test_merge_appends_new_sheets(tmp_path):
    current = tmp_path / "current.json"
    current.write_text(json.dumps([
        {"id": "mine", "name": "Personal", "nodes": [
            {"id": "p", "date": "2024-01-01T00:00:00Z"},
        ]},
    ]))
    out = tmp_path / "merged.json"
    runner = CliRunner()
    result = runner.invoke(cli, ["merge", str(current), str(ROADMAP_JSON), "-o", str(out)])
    assert result.exit_code == 0, result.output
    merged = parse_workbook(out.read_text())
    assert [s.name for s in merged.sheets] == ["Personal", "Main Roadmap", "Operations"]


def test_init_creates_default_roadmap(tmp_path):
    out = tmp_path / "new.json"
    runner = CliRunner()
    result = runner.invoke(cli, ["init", str(out)])
    assert result.exit_code == 0, result.output
    sheet = parse_workbook(out.read_text()).sheet()
    assert [n.id for n in sheet.nodes] == ["root"]

    result = runner.invoke(cli, ["init", str(out)])
    assert result.exit_code == 1


def test_version():
    """--version flag prints version string."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output.lower()


def test_verbose_flag(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, ["-v", "info", str(ROADMAP_JSON)])
    assert result.exit_code == 0, result.output


def _copy_roadmap(tmp_path):
    data = tmp_path / "roadmap.json"
    data.write_text(ROADMAP_JSON.read_text())
    return data


def test_add_node_writes_in_place(tmp_path):
    data = _copy_roadmap(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, [
        "add-node", str(data), "--parent", "launch", "--title", "Retro",
        "--date", "2024-06-01T09:00:00Z", "--status", "standby",
    ])
    assert result.exit_code == 0, result.output
    new_id = result.output.strip()
    node = next(n for n in parse_workbook(data.read_text()).sheet().nodes if n.id == new_id)
    assert node.title == "Retro"
    assert node.parent_ids == ["launch"]
    assert node.status.value == "standby"


def test_add_node_unknown_parent(tmp_path):
    data = _copy_roadmap(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, ["add-node", str(data), "--parent", "ghost"])
    assert result.exit_code == 1
    assert "No node 'ghost'" in result.output


def test_update_node(tmp_path):
    data = _copy_roadmap(tmp_path)
    out = tmp_path / "updated.json"
    runner = CliRunner()
    result = runner.invoke(cli, [
        "update-node", str(data), "beta", "--title", "Public beta",
        "--parent", "proto", "-o", str(out),
    ])
    assert result.exit_code == 0, result.output
    beta = next(n for n in parse_workbook(out.read_text()).sheet().nodes if n.id == "beta")
    assert beta.title == "Public beta"
    assert beta.parent_ids == ["proto"]


def test_delete_node_scrubs_parents(tmp_path):
    data = _copy_roadmap(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, ["delete-node", str(data), "research"])
    assert result.exit_code == 0, result.output
    nodes = parse_workbook(data.read_text()).sheet().nodes
    assert all("research" not in n.parent_ids for n in nodes)


def test_delete_node_refuses_root(tmp_path):
    data = _copy_roadmap(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, ["delete-node", str(data), "root"])
    assert result.exit_code == 1
    assert "kickoff node" in result.output


def test_reset_sheet(tmp_path):
    data = _copy_roadmap(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, ["reset", str(data), "--sheet", "ops"])
    assert result.exit_code == 0, result.output
    workbook = parse_workbook(data.read_text())
    assert [n.id for n in workbook.sheet("ops").nodes] == ["root"]
    assert len(workbook.sheet("main").nodes) == 7


def test_sheet_management(tmp_path):
    data = _copy_roadmap(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, ["add-sheet", str(data)])
    assert result.exit_code == 0, result.output
    assert "Added 'Roadmap 3'" in result.output

    result = runner.invoke(cli, ["rename-sheet", str(data), "Roadmap 3", "Hiring"])
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli, ["delete-sheet", str(data), "ops"])
    assert result.exit_code == 0, result.output
    workbook = parse_workbook(data.read_text())
    assert [s.name for s in workbook.sheets] == ["Main Roadmap", "Hiring"]


def test_delete_last_sheet_fails(tmp_path):
    data = tmp_path / "new.json"
    runner = CliRunner()
    runner.invoke(cli, ["init", str(data)])
    result = runner.invoke(cli, ["delete-sheet", str(data), "default-sheet"])
    assert result.exit_code == 1
    assert "last sheet" in result.output
