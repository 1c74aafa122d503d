"""httpx-backed ZenHub API client."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from zenreport.contracts.client import ZenHubClientBase
from zenreport.contracts.exceptions import AuthenticationError, DecodeError, TransportError
from zenreport.contracts.models import CurrentUser, Issue, Repository
from zenreport.zenhub.mapper import build_issue_query, extract_repositories
from zenreport.zenhub.queries import WORKSPACE_REPOSITORIES_QUERY

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)

_AUTH_FAILURE_STATUS_CODES = frozenset({401, 403})


class ZenHubClient(ZenHubClientBase):
    """Async client for the three ZenHub endpoints zenreport needs.

    Use as an async context manager so the underlying connection pool is
    opened and closed around a run::

        async with ZenHubClient(api_root=..., token=..., agent=...) as client:
            repos = await client.fetch_repositories(workspace_id)
    """

    def __init__(
        self,
        *,
        api_root: str,
        token: str,
        agent: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_root = api_root
        self._token = token
        self._agent = agent
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def __repr__(self) -> str:
        return f"ZenHubClient(api_root={self._api_root!r}, agent={self._agent!r})"

    async def __aenter__(self) -> ZenHubClient:
        self._client = httpx.AsyncClient(
            base_url=self._api_root,
            headers={
                "X-Authentication-Token": self._token,
                "X-Zenhub-Agent": self._agent,
                "Content-Type": "application/json",
            },
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch_current_user(self) -> CurrentUser:
        operation = "user lookup"
        payload = await self._request(operation, "GET", "/v1/user")
        return _decode(CurrentUser, payload, operation)

    async def fetch_repositories(self, workspace_id: str) -> list[Repository]:
        operation = "repository lookup"
        data = await self._graphql(operation, WORKSPACE_REPOSITORIES_QUERY, {"workspaceId": workspace_id})
        try:
            nodes = extract_repositories(data)
        except ValueError as exc:
            raise DecodeError(str(exc), operation=operation) from exc
        return [_decode(Repository, node, operation) for node in nodes]

    async def fetch_issues(self, workspace_id: str, scope: str) -> list[Issue]:
        operation = "issue lookup"
        url = f"/v5/workspaces/{workspace_id}/issues?{build_issue_query(scope)}"
        payload = await self._request(operation, "GET", url)
        if not isinstance(payload, list):
            raise DecodeError("expected a list of issues", operation=operation)
        return [_decode(Issue, item, operation) for item in payload]

    async def _graphql(self, operation: str, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        payload = await self._request(operation, "POST", "/v1/graphql", json={"query": query, "variables": variables})
        if not isinstance(payload, dict):
            raise DecodeError("GraphQL response is not an object", operation=operation)

        errors = payload.get("errors") or []
        if errors:
            messages = ", ".join(
                str(error.get("message", error)) if isinstance(error, dict) else str(error) for error in errors
            )
            raise DecodeError(f"GraphQL returned errors: {messages}", operation=operation)

        data = payload.get("data")
        if not isinstance(data, dict):
            raise DecodeError("GraphQL response missing data payload", operation=operation)
        return data

    async def _request(self, operation: str, method: str, url: str, **kwargs: Any) -> Any:
        if self._client is None:
            raise TransportError("client is not open. Use 'async with'.", operation=operation)

        logger.debug("%s %s", method, url)
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            raise TransportError(f"request timed out after {self._timeout:g}s", operation=operation) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"{type(exc).__name__}: {exc}", operation=operation) from exc

        if response.status_code in _AUTH_FAILURE_STATUS_CODES:
            raise AuthenticationError(
                f"ZenHub rejected the API token (HTTP {response.status_code})",
                operation=operation,
            )
        if response.is_error:
            raise TransportError(f"HTTP {response.status_code} from {method} {url}", operation=operation)

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError("response body is not valid JSON", operation=operation) from exc


def _decode(model: type[_ModelT], payload: Any, operation: str) -> _ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(
            f"unexpected {model.__name__} shape: {exc.error_count()} validation error(s)",
            operation=operation,
        ) from exc
