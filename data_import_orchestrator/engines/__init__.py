"""
Import engines.

The orchestrator talks to engines only through BaseImportEngine. The local
engine runs in-process importer handlers; other engines are plugged in by
dotted path through the ``engine`` setting.
"""

from typing import Dict, Any, Optional

from .base import BaseImportEngine
from .local_engine import LocalImportEngine, RegisteredImporter
from .loader import load_object
from ..core.exceptions import ConfigurationError


def create_engine(engine_path: str, engine_config: Optional[Dict[str, Any]] = None) -> BaseImportEngine:
    """
    Instantiate the engine class a dotted path points to.

    Args:
        engine_path: ``package.module:EngineClass`` path
        engine_config: Engine-specific configuration

    Returns:
        An uninitialized engine instance
    """
    engine_class = load_object(engine_path, "engine")

    if not isinstance(engine_class, type) or not issubclass(engine_class, BaseImportEngine):
        raise ConfigurationError("engine", f"{engine_path!r} is not a BaseImportEngine subclass")

    return engine_class(engine_config or {})


__all__ = [
    'BaseImportEngine',
    'LocalImportEngine',
    'RegisteredImporter',
    'create_engine',
    'load_object'
]
