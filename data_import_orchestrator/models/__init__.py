"""
Data models for the Data Import Orchestrator

This module contains the value objects passed between the command line, the
orchestrator and the import engines: job and reader configurations, command
identities, reports, batch entries and validation results.
"""

# Configuration models
from .configuration import (
    JobConfiguration,
    ReaderConfiguration,
    ImportOptions,
    DEFAULT_IMPORT_TYPE,
    IMPORT_GROUP_FULL
)

# Command identity
from .command import (
    CommandSpec,
    default_command_spec,
    named_command_spec,
    DEFAULT_COMMAND_NAME
)

# Report models
from .report import (
    JobReport,
    BatchEntry,
    ImporterResult
)

# Validation models
from .validation import (
    ValidationResult,
    ValidationErrorCode
)

__all__ = [
    # Configuration models
    "JobConfiguration",
    "ReaderConfiguration",
    "ImportOptions",
    "DEFAULT_IMPORT_TYPE",
    "IMPORT_GROUP_FULL",

    # Command identity
    "CommandSpec",
    "default_command_spec",
    "named_command_spec",
    "DEFAULT_COMMAND_NAME",

    # Report models
    "JobReport",
    "BatchEntry",
    "ImporterResult",

    # Validation models
    "ValidationResult",
    "ValidationErrorCode"
]
