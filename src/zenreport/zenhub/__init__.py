"""ZenHub API adapter."""

from zenreport.zenhub.client import ZenHubClient
from zenreport.zenhub.mapper import (
    ISSUE_QUERY_FLAGS,
    build_issue_params,
    build_issue_query,
    build_repo_scope,
    repository_ids,
)

__all__ = [
    "ISSUE_QUERY_FLAGS",
    "ZenHubClient",
    "build_issue_params",
    "build_issue_query",
    "build_repo_scope",
    "repository_ids",
]
