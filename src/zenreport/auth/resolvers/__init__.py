"""Built-in token resolvers."""

from zenreport.auth.resolvers.env import TOKEN_ENV_VAR, EnvTokenResolver
from zenreport.auth.resolvers.static import StaticTokenResolver

__all__ = ["TOKEN_ENV_VAR", "EnvTokenResolver", "StaticTokenResolver"]
