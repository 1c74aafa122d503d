"""Plain-text rendering of pipeline reports."""

from __future__ import annotations

from collections.abc import Iterable

from zenreport.contracts.models import Issue, Repository
from zenreport.contracts.report import DEFAULT_REPORT_TITLE, PipelineOutcome, PipelineReport

TITLE_WIDTH = 72


def format_estimate(estimate: float | None) -> str:
    if estimate is None:
        return ""
    return f"{estimate:.10f}".rstrip("0").rstrip(".")


def trim_title(title: str, width: int = TITLE_WIDTH) -> str:
    trimmed = " ".join(title.split())
    if len(trimmed) <= width:
        return trimmed
    return trimmed[: width - 3].rstrip() + "..."


def format_issue_line(issue: Issue) -> str:
    ref = f"{issue.repo_name}#{issue.issue_number}"
    return f"  {ref:<28}  {format_estimate(issue.estimate):>6}  {issue.state:<6}  {trim_title(issue.title)}"


def format_summary_line(report: PipelineReport) -> str:
    return (
        f"  {report.title}: {len(report.issues)} issue{'s' if len(report.issues) != 1 else ''}, "
        f"{format_estimate(report.total_estimate)} estimated, {report.unestimated_count} unestimated"
    )


def render_report(report: PipelineReport) -> str:
    lines = ["", report.title, ""]
    if report.issues:
        lines.extend(format_issue_line(issue) for issue in report.issues)
    else:
        lines.append("  (no matching issues)")
    lines.append("")
    lines.append(format_summary_line(report))
    return "\n".join(lines)


def render_outcome(outcome: PipelineOutcome) -> str:
    if outcome.report is not None:
        return render_report(outcome.report)
    title = outcome.pipeline_name or DEFAULT_REPORT_TITLE
    return "\n".join(["", title, "", f"  error: {outcome.error}"])


def render_outcomes(outcomes: Iterable[PipelineOutcome]) -> str:
    return "\n".join(render_outcome(outcome) for outcome in outcomes) + "\n"


def render_repositories(repositories: Iterable[Repository]) -> str:
    lines = [f"  {repo.id:>12}  {repo.owner}/{repo.name}" for repo in repositories]
    if not lines:
        lines.append("  (no repositories)")
    return "\n".join(["", *lines, ""])
