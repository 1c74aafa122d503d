"""Static token resolver."""

from __future__ import annotations

from dataclasses import dataclass, field

from zenreport.auth.base import TokenResolver
from zenreport.contracts.exceptions import ConfigError


@dataclass(frozen=True)
class StaticTokenResolver(TokenResolver):
    token: str = field(repr=False)

    def resolve(self) -> str:
        resolved = self.token.strip()
        if not resolved:
            raise ConfigError("--api-token is empty")
        return resolved
