"""Report renderers."""

from zenreport.renderers.text import render_outcomes, render_report, render_repositories

__all__ = ["render_outcomes", "render_report", "render_repositories"]
