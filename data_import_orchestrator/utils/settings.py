"""
Settings for the Data Import Orchestrator

Settings are read from an optional YAML file and validated with pydantic.
Example::

    engine: data_import_orchestrator.engines.local_engine:LocalImportEngine
    engine_config:
      importers:
        category:
          handler: myshop.importers:import_categories
          groups: [catalog]
    log_level: INFO
    structured_logging: true
"""

from pathlib import Path
from typing import Optional, Dict, Any, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..core.exceptions import ConfigurationError


DEFAULT_ENGINE = "data_import_orchestrator.engines.local_engine:LocalImportEngine"
SETTINGS_ENV_VAR = "DATA_IMPORT_SETTINGS"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class OrchestratorSettings(BaseModel):
    """Validated orchestrator settings."""

    engine: str = DEFAULT_ENGINE
    engine_config: Dict[str, Any] = Field(default_factory=dict)
    log_level: str = "INFO"
    structured_logging: bool = True
    log_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level


def load_settings(path: Optional[Union[str, Path]] = None) -> OrchestratorSettings:
    """
    Load orchestrator settings.

    Args:
        path: YAML settings file, defaults are used when omitted

    Returns:
        Validated OrchestratorSettings

    Raises:
        ConfigurationError: If the file cannot be read or is invalid
    """
    if path is None:
        return OrchestratorSettings()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(str(path), f"cannot read settings file: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(str(path), f"invalid YAML: {e}") from e

    if data is None:
        return OrchestratorSettings()
    if not isinstance(data, dict):
        raise ConfigurationError(str(path), "settings file must contain a mapping")

    try:
        return OrchestratorSettings(**data)
    except ValidationError as e:
        raise ConfigurationError(str(path), str(e)) from e
