"""
Job dispatching.

Runs jobs through an import engine one at a time. A batch run derives one
configuration per entry from an immutable base configuration and keeps going
when an entry fails.
"""

from dataclasses import replace
from typing import Callable, List, Optional, Sequence

from ..engines.base import BaseImportEngine
from ..models.configuration import JobConfiguration, ReaderConfiguration
from ..models.report import BatchEntry, JobReport
from ..utils.logger import get_logger, LoggerContext


ReportCallback = Callable[[JobReport], None]


def derive_batch_configuration(base_config: JobConfiguration, entry: BatchEntry) -> JobConfiguration:
    """
    Derive the configuration of one batch entry.

    The entry's job type replaces the import type and its source location
    replaces the reader file name. ``base_config`` is left untouched.
    """
    reader_config = base_config.reader_config or ReaderConfiguration()

    return replace(
        base_config,
        import_type=entry.job_type,
        reader_config=replace(reader_config, file_name=entry.source_location)
    )


class Dispatcher:
    """
    Runs jobs through an import engine.

    ``on_report`` is called with each report as soon as its job finishes, so
    the reports of earlier jobs are delivered even when a later job aborts.
    """

    def __init__(self, engine: BaseImportEngine, on_report: Optional[ReportCallback] = None):
        self.engine = engine
        self.on_report = on_report
        self.logger = get_logger(__name__)

    async def run_one(self, config: JobConfiguration) -> JobReport:
        """
        Run one job.

        Args:
            config: Job configuration

        Returns:
            The engine's report, unmodified
        """
        with LoggerContext(self.logger, import_type=config.import_type):
            self.logger.info(f"Starting import {config.import_type}", extra={"job_config": config.to_dict()})

            report = await self.engine.run_import(config)

            log = self.logger.info if report.is_fully_successful() else self.logger.warning
            log(
                f"Finished import {config.import_type}",
                extra={
                    "is_success": report.is_success,
                    "expected_count": report.expected_count,
                    "imported_count": report.imported_count,
                    "elapsed_millis": report.elapsed_millis,
                    "sub_reports": len(report.sub_reports)
                }
            )

        if self.on_report is not None:
            self.on_report(report)

        return report

    async def run_batch(self, base_config: JobConfiguration, entries: Sequence[BatchEntry]) -> List[JobReport]:
        """
        Run every batch entry in order.

        Args:
            base_config: Configuration built from the command line options
            entries: Batch entries in execution order

        Returns:
            One report per entry, in entry order
        """
        reports = []
        for position, entry in enumerate(entries, start=1):
            self.logger.debug(
                f"Batch entry {position}/{len(entries)}: {entry.job_type}",
                extra={"source_location": entry.source_location}
            )
            report = await self.run_one(derive_batch_configuration(base_config, entry))
            if not report.is_fully_successful():
                self.logger.warning(f"Batch entry {entry.job_type} failed, continuing with remaining entries")
            reports.append(report)

        return reports
