"""Progress events emitted by the report engine."""

from __future__ import annotations

from abc import ABC, abstractmethod

from zenreport.contracts.report import PipelineOutcome


class ReportProgress(ABC):
    """Receives lookup and per-pipeline events from :class:`~zenreport.engine.ReportEngine`.

    The ``"user"`` and ``"repositories"`` lookups run one after the other. Each
    requested pipeline then gets a started/finished pair keyed by its request
    index, so concurrent pipelines can be told apart.
    """

    @abstractmethod
    def lookup_started(self, lookup: str) -> None: ...  # pragma: no cover

    @abstractmethod
    def lookup_finished(self, lookup: str, summary: str) -> None: ...  # pragma: no cover

    @abstractmethod
    def lookup_failed(self, lookup: str, error: BaseException) -> None: ...  # pragma: no cover

    @abstractmethod
    def pipeline_started(self, index: int, title: str) -> None: ...  # pragma: no cover

    @abstractmethod
    def pipeline_finished(self, index: int, outcome: PipelineOutcome) -> None: ...  # pragma: no cover


class NullReportProgress(ReportProgress):
    def lookup_started(self, lookup: str) -> None:
        pass

    def lookup_finished(self, lookup: str, summary: str) -> None:
        pass

    def lookup_failed(self, lookup: str, error: BaseException) -> None:
        pass

    def pipeline_started(self, index: int, title: str) -> None:
        pass

    def pipeline_finished(self, index: int, outcome: PipelineOutcome) -> None:
        pass
