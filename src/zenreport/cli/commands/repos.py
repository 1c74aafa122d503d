"""Repository listing command."""

from __future__ import annotations

import argparse

from zenreport.cli.common import config_from_args
from zenreport.contracts.models import Repository
from zenreport.renderers.text import render_repositories
from zenreport.sdk import ZenReport


async def run_repos(args: argparse.Namespace) -> list[Repository]:
    config = config_from_args(args)
    repositories = await ZenReport.from_config(config).repositories()
    print(render_repositories(repositories))
    return repositories


__all__ = ["run_repos"]
