"""Token resolver factory."""

from __future__ import annotations

from collections.abc import Mapping

from zenreport.auth.base import TokenResolver
from zenreport.auth.resolvers.env import EnvTokenResolver
from zenreport.auth.resolvers.static import StaticTokenResolver


def create_token_resolver(*, token: str | None, environ: Mapping[str, str] | None = None) -> TokenResolver:
    """Pick the resolver for an explicit ``--api-token`` value, falling back to the environment."""
    if token is not None:
        return StaticTokenResolver(token=token)
    return EnvTokenResolver(environ=environ)
