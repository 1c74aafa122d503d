"""Rich-based report progress display."""

from __future__ import annotations

from types import TracebackType
from typing import ClassVar

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.progress import TaskID as RichTaskID

from zenreport.contracts.report import DEFAULT_REPORT_TITLE, PipelineOutcome
from zenreport.engine.progress import ReportProgress
from zenreport.renderers.text import format_estimate


def _reason(error: BaseException) -> str:
    return str(error.args[0]) if error.args and error.args[0] else type(error).__name__


class RichReportProgress(ReportProgress):
    """Live stderr display with one row per lookup and one row per requested pipeline.

    Pipeline rows are named after the pipeline and end with a ✓ and the
    pipeline's totals, or a ✗ and the reason it failed::

        with RichReportProgress() as progress:
            run = await ZenReport.from_config(config, progress=progress).report()
    """

    _LOOKUP_LABELS: ClassVar[dict[str, str]] = {
        "user": "User",
        "repositories": "Repositories",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._progress = Progress(
            SpinnerColumn(finished_text=" "),
            TextColumn("{task.description}"),
            TimeElapsedColumn(),
            console=self._console,
            transient=True,
        )
        self._lookups: dict[str, RichTaskID] = {}
        self._pipelines: dict[int, RichTaskID] = {}

    def __enter__(self) -> RichReportProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    def lookup_started(self, lookup: str) -> None:
        self._lookups[lookup] = self._progress.add_task(f"[cyan]{self._label(lookup)}[/]", total=1)

    def lookup_finished(self, lookup: str, summary: str) -> None:
        self._finish(self._lookups.get(lookup), f"[green]✓[/green] {self._label(lookup)}: {escape(summary)}")

    def lookup_failed(self, lookup: str, error: BaseException) -> None:
        self._finish(self._lookups.get(lookup), f"[red]✗[/red] {self._label(lookup)}: {escape(_reason(error))}")

    def pipeline_started(self, index: int, title: str) -> None:
        self._pipelines[index] = self._progress.add_task(f"[bold]{escape(title)}[/]", total=1)

    def pipeline_finished(self, index: int, outcome: PipelineOutcome) -> None:
        report = outcome.report
        if report is not None:
            description = (
                f"[green]✓[/green] {escape(report.title)}: {len(report.issues)} issue(s), "
                f"{format_estimate(report.total_estimate)} estimated"
            )
        else:
            title = outcome.pipeline_name or DEFAULT_REPORT_TITLE
            reason = _reason(outcome.error) if outcome.error is not None else "no report"
            description = f"[red]✗[/red] {escape(title)}: {escape(reason)}"
        self._finish(self._pipelines.get(index), description)

    def _label(self, lookup: str) -> str:
        return self._LOOKUP_LABELS.get(lookup, lookup)

    def _finish(self, task_id: RichTaskID | None, description: str) -> None:
        if task_id is None:
            return
        self._progress.update(task_id, completed=1, description=description)
