"""
Core package for the Data Import Orchestrator

Contains the orchestrator, configuration resolution, conflict validation and
the exception hierarchy.
"""

from .orchestrator import DataImportOrchestrator, ImportRunResult, CODE_SUCCESS, CODE_ERROR
from .configuration import NameResolver, ConfigurationBuilder
from .validator import ConflictValidator
from .exceptions import (
    DataImportError,
    ConfigLoadError,
    ImportAbortedError,
    ImporterNotFoundError,
    ConfigurationError
)

__all__ = [
    "DataImportOrchestrator",
    "ImportRunResult",
    "CODE_SUCCESS",
    "CODE_ERROR",
    "NameResolver",
    "ConfigurationBuilder",
    "ConflictValidator",
    "DataImportError",
    "ConfigLoadError",
    "ImportAbortedError",
    "ImporterNotFoundError",
    "ConfigurationError"
]
