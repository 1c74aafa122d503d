"""CLI progress displays."""

from zenreport.cli.progress.rich import RichReportProgress

__all__ = ["RichReportProgress"]
