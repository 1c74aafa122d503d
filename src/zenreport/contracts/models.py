"""Records fetched from the ZenHub API.

Every model is an immutable snapshot. Wire payloads are accepted with either
camelCase or snake_case keys; optional nested records are modelled as
``X | None`` so that "absent" stays distinct from any present value.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_RECORD_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
    coerce_numbers_to_str=True,
)


class CurrentUser(BaseModel):
    """Identity of the token owner."""

    model_config = _RECORD_CONFIG

    login: str
    email: str | None = None


class Repository(BaseModel):
    """A source-control repository that belongs to a workspace."""

    model_config = _RECORD_CONFIG

    id: int = Field(alias="ghId")
    name: str
    owner: str = Field(alias="ownerName")


class Assignee(BaseModel):
    model_config = _RECORD_CONFIG

    id: int
    login: str
    html_url: str | None = None
    avatar_url: str | None = None


class Pipeline(BaseModel):
    """A board column an issue may sit in."""

    model_config = _RECORD_CONFIG

    id: str
    name: str
    description: str | None = None


class Label(BaseModel):
    model_config = _RECORD_CONFIG

    name: str
    color: str | None = None


class Milestone(BaseModel):
    model_config = _RECORD_CONFIG

    title: str = ""
    state: str | None = None
    due_on: str | None = None


class Issue(BaseModel):
    """A workspace issue as returned by the issue listing endpoint.

    ``estimate`` is *None* when the issue has not been estimated, which is not
    the same as an estimate of ``0``.
    """

    model_config = _RECORD_CONFIG

    repo_name: str
    issue_number: int
    title: str
    state: str
    html_url: str = ""
    is_epic: bool = False
    assignee: Assignee | None = None
    assignees: tuple[Assignee, ...] = ()
    pipeline: Pipeline | None = None
    estimate: float | None = None
    labels: tuple[Label, ...] = ()
    milestone: Milestone | None = None
    created_at: str | None = None
    closed_at: str | None = None
    updated_at: str | None = None

    @field_validator("estimate", mode="before")
    @classmethod
    def unwrap_estimate(cls, value: Any) -> Any:
        # Estimates may arrive as {"value": n}.
        if isinstance(value, dict):
            return value.get("value")
        return value

    @field_validator("assignees", "labels", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        if value is None:
            return ()
        return value

    @field_validator("labels", mode="before")
    @classmethod
    def labels_from_names(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [{"name": label} if isinstance(label, str) else label for label in value]
        return value
