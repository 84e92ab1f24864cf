"""Workbook parsing and data model."""

from roadmap_graph.parser.workbook import dump_workbook, parse_workbook

__all__ = ["dump_workbook", "parse_workbook"]
