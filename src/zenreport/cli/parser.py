"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("zenreport")
    except PackageNotFoundError:
        return "0.0.0"


def _connection_parser() -> argparse.ArgumentParser:
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument("--api-root", default=None, help="ZenHub API root (env: ZENHUB_API_ROOT)")
    parent.add_argument("--workspace-id", default=None, help="ZenHub workspace ID (env: ZENHUB_WORKSPACE_ID)")
    parent.add_argument("--api-token", default=None, help="ZenHub API token (env: ZENHUB_API_TOKEN)")
    parent.add_argument("--agent", default=None, help="Agent identifier sent with requests (env: ZENHUB_AGENT)")
    parent.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parent


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zenreport")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)
    connection = _connection_parser()

    report_parser = subparsers.add_parser("report", parents=[connection], help="Report issues per pipeline")
    report_parser.add_argument(
        "--pipeline",
        "-p",
        dest="pipelines",
        action="append",
        default=None,
        metavar="NAME",
        help="Pipeline to report on; repeat for several (env: ZENHUB_PIPELINES, comma-separated)",
    )
    assignee = report_parser.add_mutually_exclusive_group()
    assignee.add_argument("--assignee", default=None, metavar="LOGIN", help="Filter by this login instead of yours")
    assignee.add_argument("--any-assignee", action="store_true", help="Do not filter by assignee")
    report_parser.add_argument("--timeout", type=float, default=None, help="Seconds allowed per request (default: 30)")
    report_parser.add_argument(
        "--max-concurrent",
        type=int,
        default=None,
        help="Pipelines fetched at the same time (default: 4)",
    )

    subparsers.add_parser("repos", parents=[connection], help="List the workspace's repositories")

    return parser


__all__ = ["build_parser"]
