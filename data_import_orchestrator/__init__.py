"""
Data Import Orchestrator

A command-line orchestrator that runs one or more data import jobs against an
import engine and reports a single aggregated outcome.

The orchestrator reconciles a positional importer argument, discrete command
line options and an optional batch definition file into normalized job
configurations, rejects conflicting invocation modes, runs the jobs one after
another and folds their reports into one exit status.

Usage:
    from data_import_orchestrator import (
        DataImportOrchestrator, ImportOptions, ImporterResult, LocalImportEngine,
        default_command_spec
    )

    def import_categories(reader_config):
        ...
        return ImporterResult(expected_count=120, imported_count=120)

    engine = LocalImportEngine()
    engine.register_importer("category", import_categories, groups=["catalog"])
    await engine.initialize()

    orchestrator = DataImportOrchestrator(engine)
    result = await orchestrator.execute(ImportOptions(importer="category"), default_command_spec())
    print(result.exit_code)
"""

__version__ = "1.0.0"
__author__ = "Data Import Orchestrator Team"
__license__ = "MIT"

# Core orchestrator
from .core.orchestrator import DataImportOrchestrator, ImportRunResult, CODE_SUCCESS, CODE_ERROR
from .core.configuration import NameResolver, ConfigurationBuilder
from .core.validator import ConflictValidator

# Data models
from .models.configuration import JobConfiguration, ReaderConfiguration, ImportOptions
from .models.command import CommandSpec, default_command_spec, named_command_spec
from .models.report import JobReport, BatchEntry, ImporterResult
from .models.validation import ValidationResult, ValidationErrorCode

# Engines and services
from .engines import BaseImportEngine, LocalImportEngine, create_engine
from .services.batch_source import BaseBatchSource, YamlBatchSource
from .services.dispatcher import Dispatcher
from .services.report_aggregator import ReportAggregator

# Utilities
from .utils.logger import setup_logger, get_logger
from .utils.settings import OrchestratorSettings, load_settings

# Exceptions
from .core.exceptions import (
    DataImportError,
    ConfigLoadError,
    ImportAbortedError,
    ImporterNotFoundError,
    ConfigurationError
)

__all__ = [
    # Core
    "DataImportOrchestrator",
    "ImportRunResult",
    "CODE_SUCCESS",
    "CODE_ERROR",
    "NameResolver",
    "ConfigurationBuilder",
    "ConflictValidator",

    # Models
    "JobConfiguration",
    "ReaderConfiguration",
    "ImportOptions",
    "CommandSpec",
    "default_command_spec",
    "named_command_spec",
    "JobReport",
    "BatchEntry",
    "ImporterResult",
    "ValidationResult",
    "ValidationErrorCode",

    # Engines and services
    "BaseImportEngine",
    "LocalImportEngine",
    "create_engine",
    "BaseBatchSource",
    "YamlBatchSource",
    "Dispatcher",
    "ReportAggregator",

    # Utilities
    "setup_logger",
    "get_logger",
    "OrchestratorSettings",
    "load_settings",

    # Exceptions
    "DataImportError",
    "ConfigLoadError",
    "ImportAbortedError",
    "ImporterNotFoundError",
    "ConfigurationError",

    # Package metadata
    "__version__",
    "__author__",
    "__license__"
]

# Package-level configuration
import logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
