"""Report assembly."""

from __future__ import annotations

from zenreport.contracts.report import DEFAULT_REPORT_TITLE, FilterResult, IssueFilter, PipelineReport


def report_title(issue_filter: IssueFilter) -> str:
    if issue_filter.by_pipeline_name is not None:
        return issue_filter.by_pipeline_name
    return DEFAULT_REPORT_TITLE


def build_report(issue_filter: IssueFilter, result: FilterResult) -> PipelineReport:
    return PipelineReport(
        title=report_title(issue_filter),
        issues=result.matched,
        total_estimate=result.total_estimate,
        unestimated_count=result.unestimated_count,
    )
