"""Auth resolver interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TokenResolver(ABC):
    @abstractmethod
    def resolve(self) -> str:
        """Resolve and return a ZenHub API token."""
