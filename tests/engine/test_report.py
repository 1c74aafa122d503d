"""Tests for report assembly."""

from __future__ import annotations

from zenreport.contracts.report import DEFAULT_REPORT_TITLE, FilterResult, IssueFilter
from zenreport.engine.report import build_report, report_title


def test_title_is_pipeline_name_when_filtering_by_pipeline() -> None:
    assert report_title(IssueFilter(by_assignee="alice", by_pipeline_name="In Progress")) == "In Progress"


def test_title_falls_back_to_generic_label() -> None:
    assert report_title(IssueFilter(by_assignee="alice")) == DEFAULT_REPORT_TITLE == "Issues"


def test_build_report_with_zero_matches_keeps_pipeline_title() -> None:
    report = build_report(IssueFilter(by_pipeline_name="Done"), FilterResult())

    assert report.title == "Done"
    assert report.issues == ()
    assert report.total_estimate == 0.0
    assert report.unestimated_count == 0


def test_build_report_copies_aggregates(make_issue) -> None:
    issues = (make_issue(estimate=3.0), make_issue())
    result = FilterResult(matched=issues, total_estimate=3.0, unestimated_count=1)

    report = build_report(IssueFilter(), result)

    assert report.title == "Issues"
    assert report.issues == issues
    assert report.total_estimate == 3.0
    assert report.unestimated_count == 1
