"""Report pipeline: filtering, aggregation, assembly and orchestration."""

from zenreport.engine.engine import ReportEngine
from zenreport.engine.filtering import apply_filter, matches
from zenreport.engine.progress import NullReportProgress, ReportProgress
from zenreport.engine.report import build_report, report_title

__all__ = [
    "NullReportProgress",
    "ReportEngine",
    "ReportProgress",
    "apply_filter",
    "build_report",
    "matches",
    "report_title",
]
