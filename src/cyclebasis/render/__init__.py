"""Text and Graphviz output for cycle bases."""

from cyclebasis.render.dot import to_dot
from cyclebasis.render.report import format_report

__all__ = ["format_report", "to_dot"]
