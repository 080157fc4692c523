"""
Local import engine running registered importer handlers in-process.

Each import type maps to one handler callable. A handler receives the
ReaderConfiguration of the job (or None for an unscoped run) and returns an
ImporterResult. Handlers may be plain functions, which run in the default
executor, or anything whose call returns an awaitable.
"""

import asyncio
import inspect
import time
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Callable, Union, Mapping

from .base import BaseImportEngine
from .loader import load_object
from ..models.configuration import JobConfiguration, ReaderConfiguration, IMPORT_GROUP_FULL
from ..models.report import JobReport, ImporterResult
from ..utils.logger import get_logger
from ..core.exceptions import (
    ConfigurationError,
    ImportAbortedError,
    ImporterNotFoundError
)


ImporterHandler = Callable[[Optional[ReaderConfiguration]], Any]


@dataclass
class RegisteredImporter:
    """An importer handler bound to one import type."""

    import_type: str
    handler: ImporterHandler
    groups: List[str] = field(default_factory=list)

    def belongs_to(self, import_group: str) -> bool:
        """Check if the importer is part of an import group."""
        return import_group == IMPORT_GROUP_FULL or import_group in self.groups


class LocalImportEngine(BaseImportEngine):
    """
    Local import engine for in-process importers.

    Config format::

        importers:
          category:
            handler: myshop.importers:import_categories
            groups: [catalog]
          product: myshop.importers:import_products

    A ``full`` job runs every importer of the requested group in registration
    order and returns a composite report with one sub-report per importer.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize local import engine.

        Args:
            config: Local engine configuration
        """
        super().__init__(config or {})
        self.importers: Dict[str, RegisteredImporter] = {}
        self.logger = get_logger(__name__)

    async def initialize(self) -> bool:
        """Load the importer handlers named in the engine configuration."""
        try:
            importers = self.config.get("importers") or {}
            if not isinstance(importers, Mapping):
                raise ConfigurationError("importers", "expected a mapping of import types to handlers")

            for import_type, importer_config in importers.items():
                self._register_from_config(import_type, importer_config)

            self._is_initialized = True
            self.logger.info(f"Local import engine initialized with {len(self.importers)} importers")
            return True
        except ConfigurationError as e:
            self.logger.error(f"Failed to initialize local import engine: {e.message}")
            return False

    async def shutdown(self) -> bool:
        """Shutdown the engine."""
        self._is_initialized = False
        self.logger.info("Local import engine shut down successfully")
        return True

    def _register_from_config(self, import_type: str, importer_config: Union[str, Mapping[str, Any]]):
        config_key = f"importers.{import_type}"

        if isinstance(importer_config, str):
            handler_path, groups = importer_config, []
        elif isinstance(importer_config, Mapping) and "handler" in importer_config:
            handler_path = importer_config["handler"]
            groups = importer_config.get("groups") or []
            if not isinstance(groups, list) or not all(isinstance(group, str) for group in groups):
                raise ConfigurationError(f"{config_key}.groups", "expected a list of group names")
        else:
            raise ConfigurationError(config_key, "expected a handler path or a mapping with a 'handler' key")

        handler = load_object(handler_path, f"{config_key}.handler")
        if not callable(handler):
            raise ConfigurationError(f"{config_key}.handler", f"{handler_path!r} is not callable")

        self.register_importer(import_type, handler, groups)

    def register_importer(self, import_type: str, handler: ImporterHandler,
                          groups: Optional[List[str]] = None) -> RegisteredImporter:
        """
        Register an importer handler for an import type.

        Args:
            import_type: Import type served by the handler
            handler: Callable taking an optional ReaderConfiguration
            groups: Import groups the importer belongs to

        Returns:
            The registered importer
        """
        importer = RegisteredImporter(import_type=import_type, handler=handler, groups=list(groups or []))
        self.importers[import_type] = importer
        self.logger.debug(f"Registered importer {import_type}", extra={"groups": importer.groups})
        return importer

    def get_importer(self, import_type: str) -> RegisteredImporter:
        """Get the importer registered for an import type."""
        if import_type not in self.importers:
            raise ImporterNotFoundError(import_type)
        return self.importers[import_type]

    def get_importers_by_group(self, import_group: str) -> List[RegisteredImporter]:
        """Get the importers of a group in registration order."""
        return [importer for importer in self.importers.values() if importer.belongs_to(import_group)]

    def list_import_types(self) -> List[str]:
        return list(self.importers)

    async def run_import(self, config: JobConfiguration) -> JobReport:
        """Run a single importer, or a whole group for a ``full`` job."""
        if not self._is_initialized:
            raise ConfigurationError(self.engine_name, "engine not initialized")

        if config.is_full_import:
            return await self._run_group(config)

        return await self._run_importer(config.import_type, config)

    async def _run_group(self, config: JobConfiguration) -> JobReport:
        start = time.perf_counter()

        sub_reports = []
        for importer in self.get_importers_by_group(config.import_group):
            sub_reports.append(await self._run_importer(importer.import_type, config))

        return JobReport(
            job_type=config.import_type,
            expected_count=sum(report.expected_count for report in sub_reports),
            imported_count=sum(report.imported_count for report in sub_reports),
            elapsed_millis=_elapsed_millis(start),
            is_success=all(report.is_success for report in sub_reports),
            sub_reports=sub_reports
        )

    async def _run_importer(self, import_type: str, config: JobConfiguration) -> JobReport:
        start = time.perf_counter()

        try:
            importer = self.get_importer(import_type)
            result = await self._call_handler(importer.handler, config.reader_config)
        except Exception as e:
            message = str(e)
            if config.throw_on_error:
                raise ImportAbortedError(import_type, message) from e

            self.logger.error(f"Importer {import_type} failed: {message}", exc_info=True)
            return JobReport(
                job_type=import_type,
                elapsed_millis=_elapsed_millis(start),
                is_success=False,
                error_message=message
            )

        if not result.is_success and config.throw_on_error:
            raise ImportAbortedError(import_type, result.error_message or "importer reported failure")

        return JobReport(
            job_type=import_type,
            expected_count=result.expected_count,
            imported_count=result.imported_count,
            elapsed_millis=_elapsed_millis(start),
            is_success=result.is_success,
            error_message=result.error_message
        )

    async def _call_handler(self, handler: ImporterHandler,
                            reader_config: Optional[ReaderConfiguration]) -> ImporterResult:
        if inspect.iscoroutinefunction(handler):
            result = await handler(reader_config)
        else:
            loop = asyncio.get_running_loop()
            result = await loop.run_in_executor(None, handler, reader_config)
            if inspect.isawaitable(result):
                result = await result

        if isinstance(result, ImporterResult):
            return result
        if isinstance(result, Mapping):
            return ImporterResult.from_dict(result)

        raise TypeError(f"importer handler returned {type(result).__name__}, expected ImporterResult")


def _elapsed_millis(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0
