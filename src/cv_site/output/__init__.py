"""Printable CV outputs."""

from cv_site.output.markdown import format_cv, save_markdown

__all__ = ["format_cv", "save_markdown"]
