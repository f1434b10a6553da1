"""Renderers. compare_card (matplotlib) is imported lazily by callers that need a PNG."""

from superheroengine.viz.text import final_result_line, format_comparison, format_superhero_markdown

__all__ = ["format_superhero_markdown", "format_comparison", "final_result_line"]
