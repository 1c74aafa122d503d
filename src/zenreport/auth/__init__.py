"""Token resolution."""

from zenreport.auth.base import TokenResolver
from zenreport.auth.factory import create_token_resolver
from zenreport.auth.resolvers import EnvTokenResolver, StaticTokenResolver

__all__ = ["EnvTokenResolver", "StaticTokenResolver", "TokenResolver", "create_token_resolver"]
