"""Tests for the report pipeline engine."""

from __future__ import annotations

import pytest

from tests.fakes.client import FakeZenHubClient
from zenreport.contracts.config import ZenReportConfig
from zenreport.contracts.exceptions import AuthenticationError, DecodeError, TransportError
from zenreport.contracts.models import CurrentUser
from zenreport.contracts.report import PipelineOutcome
from zenreport.engine.engine import ReportEngine, issue_operation
from zenreport.engine.progress import ReportProgress


class RecordingProgress(ReportProgress):
    def __init__(self) -> None:
        self.events: list[tuple[object, ...]] = []

    def lookup_started(self, lookup: str) -> None:
        self.events.append(("lookup", lookup))

    def lookup_finished(self, lookup: str, summary: str) -> None:
        self.events.append(("found", lookup, summary))

    def lookup_failed(self, lookup: str, error: BaseException) -> None:
        self.events.append(("failed", lookup))

    def pipeline_started(self, index: int, title: str) -> None:
        self.events.append(("started", index, title))

    def pipeline_finished(self, index: int, outcome: PipelineOutcome) -> None:
        self.events.append(("finished", index, outcome.ok))


def _config(**overrides: object) -> ZenReportConfig:
    values: dict[str, object] = {"workspace_id": "ws-1", "api_token": "secret-token"}
    values.update(overrides)
    return ZenReportConfig.model_validate(values)


@pytest.mark.asyncio
async def test_run_reports_each_pipeline_for_current_user(make_issue, repositories) -> None:
    issues = [
        make_issue(assignee="alice", pipeline="Backlog", estimate=2.5),
        make_issue(assignee="alice", pipeline="Backlog"),
        make_issue(assignee="bob", pipeline="Backlog", estimate=1.0),
        make_issue(assignee="alice", pipeline="In Progress", estimate=3.0),
    ]
    client = FakeZenHubClient(repositories=repositories, issues=issues)
    engine = ReportEngine(client, _config(pipelines=("Backlog", "In Progress")))

    run = await engine.run()

    assert run.user.login == "alice"
    assert [outcome.pipeline_name for outcome in run.outcomes] == ["Backlog", "In Progress"]
    backlog, in_progress = (outcome.report for outcome in run.outcomes)
    assert backlog is not None and in_progress is not None
    assert backlog.title == "Backlog"
    assert list(backlog.issues) == issues[:2]
    assert backlog.total_estimate == 2.5
    assert backlog.unestimated_count == 1
    assert list(in_progress.issues) == [issues[3]]
    assert in_progress.total_estimate == 3.0
    assert run.failed == ()


@pytest.mark.asyncio
async def test_run_fetches_in_dependency_order_with_deduplicated_scope(repositories) -> None:
    client = FakeZenHubClient(repositories=repositories)
    engine = ReportEngine(client, _config(pipelines=("Backlog", "Done")))

    await engine.run()

    assert client.calls[0] == ("user",)
    assert client.calls[1] == ("repositories", "ws-1")
    assert client.calls[2:] == [("issues", "ws-1", "10,20"), ("issues", "ws-1", "10,20")]


@pytest.mark.asyncio
async def test_run_without_pipelines_produces_single_generic_report(make_issue) -> None:
    issues = [make_issue(assignee="alice", pipeline="Backlog", estimate=1.0), make_issue(assignee="bob")]
    client = FakeZenHubClient(issues=issues)

    run = await ReportEngine(client, _config()).run()

    assert len(run.outcomes) == 1
    report = run.outcomes[0].report
    assert report is not None
    assert report.title == "Issues"
    assert list(report.issues) == [issues[0]]


@pytest.mark.asyncio
async def test_assignee_override_replaces_current_user(make_issue) -> None:
    issues = [make_issue(assignee="alice"), make_issue(assignee="bob")]
    client = FakeZenHubClient(issues=issues)

    run = await ReportEngine(client, _config(assignee="bob")).run()

    report = run.outcomes[0].report
    assert report is not None
    assert list(report.issues) == [issues[1]]


@pytest.mark.asyncio
async def test_any_assignee_drops_assignee_predicate(make_issue) -> None:
    issues = [make_issue(assignee="alice", pipeline="Done"), make_issue(pipeline="Done"), make_issue()]
    client = FakeZenHubClient(issues=issues)

    run = await ReportEngine(client, _config(any_assignee=True, pipelines=("Done",))).run()

    report = run.outcomes[0].report
    assert report is not None
    assert list(report.issues) == issues[:2]


@pytest.mark.asyncio
async def test_output_order_follows_request_order_not_completion_order(make_issue) -> None:
    client = FakeZenHubClient(issues=[make_issue(assignee="alice", pipeline="A")])
    client.issue_delays = [0.05, 0.0, 0.02]

    run = await ReportEngine(client, _config(pipelines=("A", "B", "C"))).run()

    assert [outcome.pipeline_name for outcome in run.outcomes] == ["A", "B", "C"]
    assert [outcome.report.title for outcome in run.outcomes if outcome.report] == ["A", "B", "C"]


@pytest.mark.asyncio
async def test_pipeline_failure_is_reported_without_aborting_others(make_issue) -> None:
    client = FakeZenHubClient(issues=[make_issue(assignee="alice", pipeline="B", estimate=1.0)])
    client.issue_errors = [DecodeError("expected a list of issues", operation="issue lookup"), None]
    progress = RecordingProgress()

    run = await ReportEngine(client, _config(pipelines=("A", "B")), progress=progress).run()

    failed, succeeded = run.outcomes
    assert not failed.ok
    assert isinstance(failed.error, DecodeError)
    assert str(failed.error) == "issue lookup for pipeline 'A' failed: expected a list of issues"
    assert succeeded.ok
    assert succeeded.report is not None
    assert succeeded.report.total_estimate == 1.0
    assert run.failed == (failed,)
    assert ("finished", 0, False) in progress.events
    assert ("finished", 1, True) in progress.events


@pytest.mark.asyncio
async def test_pipeline_timeout_becomes_transport_error() -> None:
    client = FakeZenHubClient()
    client.issue_delays = [1.0, 0.0]

    run = await ReportEngine(client, _config(pipelines=("Slow", "Fast"), timeout=0.01)).run()

    slow, fast = run.outcomes
    assert isinstance(slow.error, TransportError)
    assert "issue lookup for pipeline 'Slow'" in str(slow.error)
    assert "timed out" in str(slow.error)
    assert fast.ok


@pytest.mark.asyncio
async def test_user_lookup_failure_aborts_run() -> None:
    client = FakeZenHubClient()
    client.user_error = AuthenticationError("ZenHub rejected the API token (HTTP 401)", operation="user lookup")
    progress = RecordingProgress()

    with pytest.raises(AuthenticationError, match="user lookup failed"):
        await ReportEngine(client, _config(pipelines=("A",)), progress=progress).run()

    assert client.calls == [("user",)]
    assert progress.events == [("lookup", "user"), ("failed", "user")]


@pytest.mark.asyncio
async def test_repository_lookup_failure_aborts_run() -> None:
    client = FakeZenHubClient()
    client.repositories_error = TransportError("HTTP 500 from POST /v1/graphql", operation="repository lookup")

    with pytest.raises(TransportError, match="repository lookup failed"):
        await ReportEngine(client, _config(pipelines=("A",))).run()

    assert all(call[0] != "issues" for call in client.calls)


@pytest.mark.asyncio
async def test_concurrency_is_bounded_by_max_concurrent() -> None:
    client = FakeZenHubClient(user=CurrentUser(login="alice"))
    client.issue_delays = [0.01] * 4
    engine = ReportEngine(client, _config(pipelines=("A", "B", "C", "D"), max_concurrent=2))
    in_flight = {"now": 0, "peak": 0}
    original = client.fetch_issues

    async def tracking_fetch(workspace_id: str, scope: str):
        in_flight["now"] += 1
        in_flight["peak"] = max(in_flight["peak"], in_flight["now"])
        try:
            return await original(workspace_id, scope)
        finally:
            in_flight["now"] -= 1

    client.fetch_issues = tracking_fetch  # type: ignore[method-assign]

    run = await engine.run()

    assert len(run.outcomes) == 4
    assert in_flight["peak"] == 2


@pytest.mark.asyncio
async def test_progress_reports_lookups_then_one_row_per_pipeline(repositories) -> None:
    progress = RecordingProgress()
    client = FakeZenHubClient(repositories=repositories)

    await ReportEngine(client, _config(pipelines=("A", "B")), progress=progress).run()

    assert progress.events[:4] == [
        ("lookup", "user"),
        ("found", "user", "alice"),
        ("lookup", "repositories"),
        ("found", "repositories", "3 repositories"),
    ]
    assert sorted(progress.events[4:]) == [
        ("finished", 0, True),
        ("finished", 1, True),
        ("started", 0, "A"),
        ("started", 1, "B"),
    ]


@pytest.mark.asyncio
async def test_queued_pipeline_starts_only_when_a_slot_frees() -> None:
    progress = RecordingProgress()
    client = FakeZenHubClient()
    client.issue_delays = [0.01, 0.0]

    await ReportEngine(client, _config(pipelines=("A", "B"), max_concurrent=1), progress=progress).run()

    assert progress.events[4:] == [
        ("started", 0, "A"),
        ("finished", 0, True),
        ("started", 1, "B"),
        ("finished", 1, True),
    ]


@pytest.mark.asyncio
async def test_unnamed_pipeline_row_uses_default_title() -> None:
    progress = RecordingProgress()

    await ReportEngine(FakeZenHubClient(), _config(), progress=progress).run()

    assert ("started", 0, "Issues") in progress.events


def test_issue_operation_names_pipeline() -> None:
    assert issue_operation(None) == "issue lookup"
    assert issue_operation("Backlog") == "issue lookup for pipeline 'Backlog'"
