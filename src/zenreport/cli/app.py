"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import asyncio
import sys

from zenreport.cli.commands.report import run_report
from zenreport.cli.commands.repos import run_repos
from zenreport.cli.common import configure_logging
from zenreport.cli.parser import build_parser
from zenreport.contracts.exceptions import ConfigError, FetchError


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        if args.command == "repos":
            asyncio.run(run_repos(args))
            return 0
        run = asyncio.run(run_report(args))
        return 4 if run.failed else 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except FetchError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
