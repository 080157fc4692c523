"""
Base import engine interface.

Defines the common interface that all import engines must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List

from ..models.configuration import JobConfiguration
from ..models.report import JobReport


class BaseImportEngine(ABC):
    """
    Abstract base class for all import engines.

    The orchestrator only ever calls ``run_import`` once per job and reads
    the returned report, no other engine state is inspected.
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize the import engine.

        Args:
            config: Engine-specific configuration
        """
        self.config = config
        self._is_initialized = False

    @abstractmethod
    async def initialize(self) -> bool:
        """
        Initialize the import engine.

        Returns:
            True if initialization successful
        """
        pass

    @abstractmethod
    async def shutdown(self) -> bool:
        """
        Shutdown the import engine and clean up resources.

        Returns:
            True if shutdown successful
        """
        pass

    @abstractmethod
    async def run_import(self, config: JobConfiguration) -> JobReport:
        """
        Run one import job.

        Args:
            config: Job configuration

        Returns:
            JobReport with the job outcome

        Raises:
            ImportAbortedError: If the job fails and ``config.throw_on_error`` is set
        """
        pass

    @abstractmethod
    def list_import_types(self) -> List[str]:
        """
        List the import types this engine can run.

        Returns:
            Import type names
        """
        pass

    @property
    def is_initialized(self) -> bool:
        """Check if engine is initialized."""
        return self._is_initialized

    @property
    def engine_name(self) -> str:
        """Get the name of this engine."""
        return self.__class__.__name__
