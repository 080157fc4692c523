"""
Utilities package for the Data Import Orchestrator

Contains utility modules for logging and settings.
"""

from .logger import setup_logger, get_logger, set_log_context, clear_log_context, LoggerContext
from .settings import OrchestratorSettings, load_settings

__all__ = [
    "setup_logger",
    "get_logger",
    "set_log_context",
    "clear_log_context",
    "LoggerContext",
    "OrchestratorSettings",
    "load_settings"
]
