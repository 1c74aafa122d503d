"""Configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, SecretStr, field_validator, model_validator

DEFAULT_API_ROOT = "https://api.zenhub.com"
DEFAULT_AGENT = "zenreport"


class ZenReportConfig(BaseModel):
    """Resolved settings for one zenreport run.

    Attributes:
        api_root: Base URL of the ZenHub API.
        workspace_id: ZenHub workspace to report on.
        api_token: API token; kept as a secret so it never shows up in reprs.
        agent: Value sent in the agent-identifier header.
        pipelines: Pipeline names to report on, in output order.
        assignee: Login to filter by instead of the current user's.
        any_assignee: When *True*, no assignee predicate is applied.
        timeout: Seconds allowed for each request and each pipeline cycle.
        max_concurrent: Upper bound on pipelines fetched at the same time.
    """

    api_root: str = DEFAULT_API_ROOT
    workspace_id: str
    api_token: SecretStr
    agent: str = DEFAULT_AGENT
    pipelines: tuple[str, ...] = ()
    assignee: str | None = None
    any_assignee: bool = False
    timeout: float = Field(default=30.0, gt=0)
    max_concurrent: int = Field(default=4, ge=1, le=10)

    model_config = {"frozen": True}

    @field_validator("api_root")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        root = value.strip().rstrip("/")
        if not root:
            raise ValueError("api_root must not be empty")
        return root

    @field_validator("workspace_id")
    @classmethod
    def require_workspace_id(cls, value: str) -> str:
        workspace_id = value.strip()
        if not workspace_id:
            raise ValueError("workspace_id must not be empty")
        return workspace_id

    @field_validator("api_token")
    @classmethod
    def require_token(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("api_token must not be empty")
        return value

    @model_validator(mode="after")
    def validate_assignee_mode(self) -> ZenReportConfig:
        if self.any_assignee and self.assignee is not None:
            raise ValueError("assignee cannot be combined with any_assignee")
        return self
