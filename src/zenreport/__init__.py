"""Public API surface for zenreport."""

__version__ = "0.1.0"

from zenreport.contracts.config import ZenReportConfig
from zenreport.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    DecodeError,
    FetchError,
    TransportError,
    ZenReportError,
)
from zenreport.contracts.models import Assignee, CurrentUser, Issue, Pipeline, Repository
from zenreport.contracts.report import FilterResult, IssueFilter, PipelineOutcome, PipelineReport, ReportRun
from zenreport.engine import ReportEngine, apply_filter, build_report
from zenreport.sdk import ZenReport, load_config
from zenreport.zenhub import ZenHubClient, build_repo_scope

__all__ = [
    "Assignee",
    "AuthenticationError",
    "ConfigError",
    "CurrentUser",
    "DecodeError",
    "FetchError",
    "FilterResult",
    "Issue",
    "IssueFilter",
    "Pipeline",
    "PipelineOutcome",
    "PipelineReport",
    "ReportEngine",
    "ReportRun",
    "Repository",
    "TransportError",
    "ZenHubClient",
    "ZenReport",
    "ZenReportConfig",
    "ZenReportError",
    "__version__",
    "apply_filter",
    "build_report",
    "build_repo_scope",
    "load_config",
]
