"""ZenHub client contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from zenreport.contracts.models import CurrentUser, Issue, Repository


class ZenHubClientBase(ABC):
    @abstractmethod
    async def __aenter__(self) -> ZenHubClientBase: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @abstractmethod
    async def fetch_current_user(self) -> CurrentUser: ...  # pragma: no cover

    @abstractmethod
    async def fetch_repositories(self, workspace_id: str) -> list[Repository]: ...  # pragma: no cover

    @abstractmethod
    async def fetch_issues(self, workspace_id: str, scope: str) -> list[Issue]: ...  # pragma: no cover
