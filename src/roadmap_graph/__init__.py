"""roadmap-graph: lay out branching roadmaps as git-style DAG diagrams."""

__version__ = "0.1.0"
