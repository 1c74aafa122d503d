"""SDK composition root for zenreport."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from typing import Any

import httpx
from pydantic import ValidationError

from zenreport.auth import create_token_resolver
from zenreport.contracts.client import ZenHubClientBase
from zenreport.contracts.config import ZenReportConfig
from zenreport.contracts.exceptions import ConfigError
from zenreport.contracts.models import Repository
from zenreport.contracts.report import ReportRun
from zenreport.engine import ReportEngine
from zenreport.engine.progress import ReportProgress
from zenreport.zenhub import ZenHubClient

API_ROOT_ENV_VAR = "ZENHUB_API_ROOT"
WORKSPACE_ENV_VAR = "ZENHUB_WORKSPACE_ID"
AGENT_ENV_VAR = "ZENHUB_AGENT"
PIPELINES_ENV_VAR = "ZENHUB_PIPELINES"


def _split_names(raw: str) -> tuple[str, ...]:
    return tuple(name.strip() for name in raw.split(",") if name.strip())


def load_config(
    *,
    api_root: str | None = None,
    workspace_id: str | None = None,
    api_token: str | None = None,
    agent: str | None = None,
    pipelines: Sequence[str] | None = None,
    assignee: str | None = None,
    any_assignee: bool = False,
    timeout: float | None = None,
    max_concurrent: int | None = None,
    environ: Mapping[str, str] | None = None,
) -> ZenReportConfig:
    """Merge explicit settings over ``ZENHUB_*`` environment variables and defaults."""
    env = os.environ if environ is None else environ

    resolved_workspace = workspace_id or env.get(WORKSPACE_ENV_VAR)
    if not resolved_workspace:
        raise ConfigError(f"workspace id is required (--workspace-id or {WORKSPACE_ENV_VAR})")
    token = create_token_resolver(token=api_token, environ=env).resolve()

    if pipelines is None:
        pipelines = _split_names(env.get(PIPELINES_ENV_VAR, ""))

    payload: dict[str, Any] = {
        "workspace_id": resolved_workspace,
        "api_token": token,
        "pipelines": tuple(pipelines),
        "assignee": assignee,
        "any_assignee": any_assignee,
    }
    optional = {
        "api_root": api_root or env.get(API_ROOT_ENV_VAR),
        "agent": agent or env.get(AGENT_ENV_VAR),
        "timeout": timeout,
        "max_concurrent": max_concurrent,
    }
    payload.update({key: value for key, value in optional.items() if value is not None})

    try:
        return ZenReportConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc


class ZenReport:
    """zenreport SDK public API."""

    def __init__(
        self,
        *,
        client: ZenHubClientBase,
        config: ZenReportConfig,
        progress: ReportProgress | None = None,
    ) -> None:
        self._client = client
        self._config = config
        self._progress = progress

    @classmethod
    def from_config(
        cls,
        config: ZenReportConfig,
        *,
        progress: ReportProgress | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> ZenReport:
        client = ZenHubClient(
            api_root=config.api_root,
            token=config.api_token.get_secret_value(),
            agent=config.agent,
            timeout=config.timeout,
            transport=transport,
        )
        return cls(client=client, config=config, progress=progress)

    async def report(self) -> ReportRun:
        async with self._client:
            return await self._engine().run()

    async def repositories(self) -> list[Repository]:
        async with self._client:
            return await self._engine().repositories()

    def _engine(self) -> ReportEngine:
        return ReportEngine(self._client, self._config, progress=self._progress)
