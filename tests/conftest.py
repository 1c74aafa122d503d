"""Shared test fixtures for zenreport tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from zenreport.contracts.config import ZenReportConfig
from zenreport.contracts.models import Assignee, Issue, Pipeline, Repository

IssueFactory = Callable[..., Issue]


@pytest.fixture
def make_issue() -> IssueFactory:
    """Build an Issue; *assignee* and *pipeline* are given by login/name."""
    counter = {"value": 0}

    def factory(
        *,
        assignee: str | None = None,
        pipeline: str | None = None,
        estimate: float | None = None,
        repo_name: str = "web",
        title: str | None = None,
        **extra: Any,
    ) -> Issue:
        counter["value"] += 1
        number = extra.pop("issue_number", counter["value"])
        return Issue(
            repo_name=repo_name,
            issue_number=number,
            title=title if title is not None else f"Issue {number}",
            state=extra.pop("state", "open"),
            assignee=Assignee(id=counter["value"], login=assignee) if assignee is not None else None,
            pipeline=Pipeline(id=f"p-{pipeline}", name=pipeline) if pipeline is not None else None,
            estimate=estimate,
            **extra,
        )

    return factory


@pytest.fixture
def repositories() -> list[Repository]:
    return [
        Repository(id=10, name="web", owner="acme"),
        Repository(id=10, name="web", owner="acme"),
        Repository(id=20, name="api", owner="acme"),
    ]


@pytest.fixture
def sample_config() -> ZenReportConfig:
    return ZenReportConfig(
        workspace_id="ws-1",
        api_token="secret-token",
        pipelines=("Backlog", "In Progress"),
    )
