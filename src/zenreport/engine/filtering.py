"""Issue filtering and estimate aggregation."""

from __future__ import annotations

from collections.abc import Iterable

from zenreport.contracts.models import Issue
from zenreport.contracts.report import FilterResult, IssueFilter


def matches(issue: Issue, issue_filter: IssueFilter) -> bool:
    """Return whether *issue* satisfies every predicate present on *issue_filter*.

    A predicate fails when the field it inspects is absent on the issue. Only
    the singular ``assignee`` is checked; ``assignees`` is ignored.
    """
    if issue_filter.by_assignee is not None:
        if issue.assignee is None or issue.assignee.login != issue_filter.by_assignee:
            return False
    if issue_filter.by_pipeline_name is not None:
        if issue.pipeline is None or issue.pipeline.name != issue_filter.by_pipeline_name:
            return False
    return True


def apply_filter(issues: Iterable[Issue], issue_filter: IssueFilter) -> FilterResult:
    """Select the issues matching *issue_filter* and fold their estimates.

    Matched issues keep their input order. Estimated matches add to
    ``total_estimate``; unestimated ones increment ``unestimated_count``.
    """
    matched: list[Issue] = []
    total_estimate = 0.0
    unestimated_count = 0
    for issue in issues:
        if not matches(issue, issue_filter):
            continue
        matched.append(issue)
        if issue.estimate is None:
            unestimated_count += 1
        else:
            total_estimate += issue.estimate
    return FilterResult(matched=tuple(matched), total_estimate=total_estimate, unestimated_count=unestimated_count)
