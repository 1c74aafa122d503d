"""Contracts-domain exports."""

from zenreport.contracts.client import ZenHubClientBase
from zenreport.contracts.config import ZenReportConfig
from zenreport.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    DecodeError,
    FetchError,
    TransportError,
    ZenReportError,
)
from zenreport.contracts.models import Assignee, CurrentUser, Issue, Label, Milestone, Pipeline, Repository
from zenreport.contracts.report import (
    DEFAULT_REPORT_TITLE,
    FilterResult,
    IssueFilter,
    PipelineOutcome,
    PipelineReport,
    ReportRun,
)

__all__ = [
    "DEFAULT_REPORT_TITLE",
    "Assignee",
    "AuthenticationError",
    "ConfigError",
    "CurrentUser",
    "DecodeError",
    "FetchError",
    "FilterResult",
    "Issue",
    "IssueFilter",
    "Label",
    "Milestone",
    "Pipeline",
    "PipelineOutcome",
    "PipelineReport",
    "Repository",
    "ReportRun",
    "TransportError",
    "ZenHubClientBase",
    "ZenReportConfig",
    "ZenReportError",
]
