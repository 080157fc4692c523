"""
Exception classes for the Data Import Orchestrator

Provides the hierarchy of exceptions for fatal conditions. Conflicting
invocation modes are not exceptions, they are reported as ValidationResults.
"""

from typing import Optional, Dict, Any


class DataImportError(Exception):
    """Base exception for all data import orchestrator errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details
        }


class ConfigLoadError(DataImportError):
    """Raised when a batch definition file is unreadable or malformed."""

    def __init__(self, path: str, message: str):
        super().__init__(
            f"Could not load import configuration {path}: {message}",
            error_code="CONFIG_LOAD_ERROR",
            details={"path": path}
        )


class ImportAbortedError(DataImportError):
    """Raised by an engine that aborts the run because throw-on-error was requested."""

    def __init__(self, import_type: str, message: str):
        super().__init__(
            f"Import \"{import_type}\" aborted: {message}",
            error_code="IMPORT_ABORTED",
            details={"import_type": import_type}
        )


class ImporterNotFoundError(DataImportError):
    """Raised when no importer is registered for an import type."""

    def __init__(self, import_type: str):
        super().__init__(
            f"No importer registered for import type \"{import_type}\"",
            error_code="IMPORTER_NOT_FOUND",
            details={"import_type": import_type}
        )


class ConfigurationError(DataImportError):
    """Raised when there's an error in orchestrator or engine configuration."""

    def __init__(self, config_key: str, message: str):
        super().__init__(
            f"Configuration error for {config_key}: {message}",
            error_code="CONFIGURATION_ERROR",
            details={"config_key": config_key}
        )
