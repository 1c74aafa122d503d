"""Report command."""

from __future__ import annotations

import argparse

from zenreport.cli.common import config_from_args
from zenreport.cli.progress.rich import RichReportProgress
from zenreport.contracts.report import ReportRun
from zenreport.renderers.text import render_outcomes
from zenreport.sdk import ZenReport


async def run_report(args: argparse.Namespace) -> ReportRun:
    config = config_from_args(args)

    if not args.verbose:
        with RichReportProgress() as progress:
            run = await ZenReport.from_config(config, progress=progress).report()
    else:
        run = await ZenReport.from_config(config).report()

    print(render_outcomes(run.outcomes), end="")
    return run


__all__ = ["run_report"]
