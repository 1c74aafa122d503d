"""Mapping helpers between zenreport records and ZenHub request/response shapes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any
from urllib.parse import urlencode

from zenreport.contracts.models import Repository

# Fixed flags sent with every issue listing request.
ISSUE_QUERY_FLAGS: dict[str, str] = {
    "epics": "1",
    "estimates": "1",
    "connections": "1",
    "forceUpdate": "0",
    "pipelines": "1",
    "priorities": "1",
    "releases": "1",
}


def repository_ids(repositories: Iterable[Repository]) -> list[str]:
    """Return the distinct repository ids as decimal strings, in first-seen order."""
    return list(dict.fromkeys(str(repo.id) for repo in repositories))


def build_repo_scope(repositories: Iterable[Repository]) -> str:
    return ",".join(repository_ids(repositories))


def build_issue_params(scope: str) -> dict[str, str]:
    return {"repo_ids": scope, **ISSUE_QUERY_FLAGS}


def build_issue_query(scope: str) -> str:
    """Encode the issue listing query string, leaving the commas in ``repo_ids`` literal."""
    return urlencode(build_issue_params(scope), safe=",")


def extract_repositories(data: dict[str, Any]) -> list[dict[str, Any]]:
    """Pull the repository nodes out of a workspace query payload.

    Raises:
        ValueError: If the payload does not have the expected shape.
    """
    workspace = data.get("workspace")
    if not isinstance(workspace, dict):
        raise ValueError("response missing workspace")
    repositories = workspace.get("repositories")
    if not isinstance(repositories, list):
        raise ValueError("workspace missing repositories")
    return repositories
