"""Filter and report contracts."""

from __future__ import annotations

from pydantic import BaseModel

from zenreport.contracts.exceptions import FetchError
from zenreport.contracts.models import CurrentUser, Issue, Repository

DEFAULT_REPORT_TITLE = "Issues"


class IssueFilter(BaseModel):
    """Equality predicates over an issue; *None* fields impose no constraint."""

    by_assignee: str | None = None
    by_pipeline_name: str | None = None

    model_config = {"frozen": True}


class FilterResult(BaseModel):
    matched: tuple[Issue, ...] = ()
    total_estimate: float = 0.0
    unestimated_count: int = 0

    model_config = {"frozen": True}


class PipelineReport(BaseModel):
    title: str
    issues: tuple[Issue, ...] = ()
    total_estimate: float = 0.0
    unestimated_count: int = 0

    model_config = {"frozen": True}


class PipelineOutcome(BaseModel):
    """Result of one requested pipeline: either a report or the error that stopped it."""

    pipeline_name: str | None
    report: PipelineReport | None = None
    error: FetchError | None = None

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def ok(self) -> bool:
        return self.error is None


class ReportRun(BaseModel):
    user: CurrentUser
    repositories: tuple[Repository, ...] = ()
    outcomes: tuple[PipelineOutcome, ...] = ()

    model_config = {"frozen": True}

    @property
    def failed(self) -> tuple[PipelineOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.ok)
