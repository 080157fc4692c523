"""
Main DataImportOrchestrator class that coordinates one import invocation

Sequences conflict validation, configuration building or batch loading,
dispatching and report aggregation, and maps the outcome to an exit code.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from ..engines.base import BaseImportEngine
from ..models.command import CommandSpec
from ..models.configuration import ImportOptions
from ..models.report import JobReport
from ..models.validation import ValidationResult
from ..services.batch_source import BaseBatchSource, YamlBatchSource
from ..services.dispatcher import Dispatcher, ReportCallback
from ..services.report_aggregator import ReportAggregator
from ..utils.logger import get_logger
from .configuration import NameResolver, ConfigurationBuilder
from .validator import ConflictValidator


CODE_SUCCESS = 0
CODE_ERROR = 1


@dataclass
class ImportRunResult:
    """Outcome of one orchestrated invocation."""

    exit_code: int
    overall_success: bool
    reports: List[JobReport] = field(default_factory=list)
    summary_lines: List[str] = field(default_factory=list)
    validation: Optional[ValidationResult] = None

    @property
    def error_message(self) -> Optional[str]:
        if self.validation is not None and not self.validation.is_valid:
            return self.validation.message
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "exit_code": self.exit_code,
            "overall_success": self.overall_success,
            "reports": [report.to_dict() for report in self.reports],
            "validation": self.validation.to_dict() if self.validation else None
        }


class DataImportOrchestrator:
    """
    Coordinates one import invocation.

    Jobs run strictly one after another. Validation failures and failed jobs
    map to CODE_ERROR; ConfigLoadError and ImportAbortedError are not caught
    here and end the invocation.
    """

    def __init__(
        self,
        engine: BaseImportEngine,
        batch_source: Optional[BaseBatchSource] = None,
        name_resolver: Optional[NameResolver] = None,
        configuration_builder: Optional[ConfigurationBuilder] = None,
        validator: Optional[ConflictValidator] = None,
        aggregator: Optional[ReportAggregator] = None,
        on_report: Optional[ReportCallback] = None
    ):
        """
        Initialize the DataImportOrchestrator.

        Args:
            engine: Import engine that runs the jobs
            batch_source: Loader for batch definition files
            name_resolver: Resolves the requested import type
            configuration_builder: Builds job configurations from options
            validator: Rejects conflicting invocation modes
            aggregator: Folds reports into one outcome
            on_report: Called with each job report as soon as the job finishes
        """
        self.dispatcher = Dispatcher(engine, on_report=on_report)
        self.batch_source = batch_source or YamlBatchSource()
        self.name_resolver = name_resolver or NameResolver()
        self.configuration_builder = configuration_builder or ConfigurationBuilder()
        self.validator = validator or ConflictValidator()
        self.aggregator = aggregator or ReportAggregator()

        self.logger = get_logger(__name__)

    async def execute(self, options: ImportOptions, command: CommandSpec) -> ImportRunResult:
        """
        Run the import requested by one command invocation.

        Args:
            options: Raw option values of the invocation
            command: Identity of the invoked command

        Returns:
            ImportRunResult with exit code, reports and summary
        """
        mode_check = self.validator.check_mode(options)
        if not mode_check.is_valid:
            return self._reject(mode_check)

        import_type = self.name_resolver.resolve(command.name, options.importer)
        config = self.configuration_builder.build(options, import_type)

        if options.has_batch_config:
            entries = self.batch_source.load(options.config)
            self.logger.info(f"Start configured import from {options.config}", extra={"entries": len(entries)})
            reports = await self.dispatcher.run_batch(config, entries)
            return self._finish(reports)

        group_check = self.validator.check_group_and_type(config)
        if not group_check.is_valid:
            return self._reject(group_check)

        self.logger.info(f"Start \"{import_type}\" import", extra={"command": command.name})
        report = await self.dispatcher.run_one(config)
        return self._finish([report])

    def _reject(self, validation: ValidationResult) -> ImportRunResult:
        self.logger.error(validation.message, extra={"error_code": validation.error_code.value})
        return ImportRunResult(
            exit_code=CODE_ERROR,
            overall_success=False,
            validation=validation
        )

    def _finish(self, reports: List[JobReport]) -> ImportRunResult:
        overall_success, summary_lines = self.aggregator.aggregate(reports)
        return ImportRunResult(
            exit_code=CODE_SUCCESS if overall_success else CODE_ERROR,
            overall_success=overall_success,
            reports=reports,
            summary_lines=summary_lines
        )
