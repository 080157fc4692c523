"""
CLI package for the Data Import Orchestrator

Provides the command-line interface for running data import jobs.
"""

from .main import main, cli, create_import_command

__all__ = ["main", "cli", "create_import_command"]
