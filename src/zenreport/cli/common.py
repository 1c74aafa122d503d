"""Shared CLI helpers."""

from __future__ import annotations

import argparse
import logging
import sys

from zenreport.contracts.config import ZenReportConfig
from zenreport.sdk import load_config


def configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)


def config_from_args(args: argparse.Namespace) -> ZenReportConfig:
    return load_config(
        api_root=args.api_root,
        workspace_id=args.workspace_id,
        api_token=args.api_token,
        agent=args.agent,
        pipelines=getattr(args, "pipelines", None),
        assignee=getattr(args, "assignee", None),
        any_assignee=getattr(args, "any_assignee", False),
        timeout=getattr(args, "timeout", None),
        max_concurrent=getattr(args, "max_concurrent", None),
    )
