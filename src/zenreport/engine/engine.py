"""Report pipeline engine."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from zenreport.contracts.client import ZenHubClientBase
from zenreport.contracts.config import ZenReportConfig
from zenreport.contracts.exceptions import FetchError, TransportError
from zenreport.contracts.models import CurrentUser, Issue, Repository
from zenreport.contracts.report import IssueFilter, PipelineOutcome, ReportRun
from zenreport.engine.filtering import apply_filter
from zenreport.engine.progress import NullReportProgress, ReportProgress
from zenreport.engine.report import build_report, report_title
from zenreport.zenhub.mapper import build_repo_scope

logger = logging.getLogger(__name__)

T = TypeVar("T")


def issue_operation(pipeline_name: str | None) -> str:
    if pipeline_name is None:
        return "issue lookup"
    return f"issue lookup for pipeline {pipeline_name!r}"


class ReportEngine:
    """Runs user lookup, repository lookup, then one fetch-filter-aggregate cycle per pipeline.

    Pipeline cycles run concurrently up to ``config.max_concurrent``. A failed
    cycle is recorded on its :class:`PipelineOutcome`; user and repository
    failures propagate and abort the run.
    """

    def __init__(
        self,
        client: ZenHubClientBase,
        config: ZenReportConfig,
        *,
        progress: ReportProgress | None = None,
    ) -> None:
        self._client = client
        self._config = config
        self._semaphore = asyncio.Semaphore(config.max_concurrent)
        self._progress: ReportProgress = progress or NullReportProgress()

    async def run(self) -> ReportRun:
        user = await self._lookup("user", self._client.fetch_current_user(), lambda found: found.login)
        repositories = await self.repositories()
        scope = build_repo_scope(repositories)
        logger.debug("Repository scope for workspace %s: %s", self._config.workspace_id, scope or "<empty>")

        assignee = self._resolve_assignee(user)
        pipeline_names: tuple[str | None, ...] = self._config.pipelines or (None,)
        outcomes: list[PipelineOutcome | None] = [None] * len(pipeline_names)

        async with asyncio.TaskGroup() as tg:
            for index, pipeline_name in enumerate(pipeline_names):
                tg.create_task(self._report_pipeline(index, pipeline_name, assignee, scope, outcomes))

        collected = tuple(outcome for outcome in outcomes if outcome is not None)
        return ReportRun(user=user, repositories=tuple(repositories), outcomes=collected)

    async def repositories(self) -> list[Repository]:
        return await self._lookup(
            "repositories",
            self._client.fetch_repositories(self._config.workspace_id),
            lambda found: f"{len(found)} repositories",
        )

    def _resolve_assignee(self, user: CurrentUser) -> str | None:
        if self._config.any_assignee:
            return None
        return self._config.assignee or user.login

    async def _report_pipeline(
        self,
        index: int,
        pipeline_name: str | None,
        assignee: str | None,
        scope: str,
        outcomes: list[PipelineOutcome | None],
    ) -> None:
        issue_filter = IssueFilter(by_assignee=assignee, by_pipeline_name=pipeline_name)
        async with self._semaphore:
            self._progress.pipeline_started(index, report_title(issue_filter))
            outcome = await self._run_pipeline(issue_filter, scope)
        outcomes[index] = outcome
        self._progress.pipeline_finished(index, outcome)

    async def _run_pipeline(self, issue_filter: IssueFilter, scope: str) -> PipelineOutcome:
        pipeline_name = issue_filter.by_pipeline_name
        try:
            issues = await self._fetch_issues(pipeline_name, scope)
        except FetchError as exc:
            logger.warning("%s", exc)
            return PipelineOutcome(pipeline_name=pipeline_name, error=exc)

        result = apply_filter(issues, issue_filter)
        logger.debug(
            "%s: %d of %d issues matched",
            issue_operation(pipeline_name),
            len(result.matched),
            len(issues),
        )
        return PipelineOutcome(pipeline_name=pipeline_name, report=build_report(issue_filter, result))

    async def _fetch_issues(self, pipeline_name: str | None, scope: str) -> list[Issue]:
        operation = issue_operation(pipeline_name)
        try:
            return await asyncio.wait_for(
                self._client.fetch_issues(self._config.workspace_id, scope),
                timeout=self._config.timeout,
            )
        except TimeoutError as exc:
            raise TransportError(f"timed out after {self._config.timeout:g}s", operation=operation) from exc
        except FetchError as exc:
            exc.operation = operation
            raise

    async def _lookup(self, lookup: str, awaitable: Awaitable[T], summarize: Callable[[T], str]) -> T:
        self._progress.lookup_started(lookup)
        try:
            result = await awaitable
        except BaseException as exc:
            self._progress.lookup_failed(lookup, exc)
            raise
        self._progress.lookup_finished(lookup, summarize(result))
        return result
