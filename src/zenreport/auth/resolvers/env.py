"""Environment token resolver."""

from __future__ import annotations

import os
from collections.abc import Mapping

from zenreport.auth.base import TokenResolver
from zenreport.contracts.exceptions import ConfigError

TOKEN_ENV_VAR = "ZENHUB_API_TOKEN"


class EnvTokenResolver(TokenResolver):
    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def resolve(self) -> str:
        token = (self._environ.get(TOKEN_ENV_VAR) or "").strip()
        if not token:
            raise ConfigError(f"{TOKEN_ENV_VAR} is not set or empty")
        return token
