"""
Loading of engines and importer handlers from dotted paths.

Paths use the ``package.module:attribute`` form, a plain
``package.module.attribute`` is accepted as well.
"""

import importlib
from typing import Any

from ..core.exceptions import ConfigurationError


def load_object(path: str, config_key: str) -> Any:
    """
    Import the object a dotted path points to.

    Args:
        path: ``package.module:attribute`` path
        config_key: Settings key reported on failure

    Returns:
        The imported object

    Raises:
        ConfigurationError: If the module or attribute cannot be found
    """
    if ":" in path:
        module_name, _, attribute = path.partition(":")
    else:
        module_name, _, attribute = path.rpartition(".")

    if not module_name or not attribute:
        raise ConfigurationError(config_key, f"invalid import path {path!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(config_key, f"cannot import module {module_name!r}: {e}") from e

    obj = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ConfigurationError(config_key, f"{module_name!r} has no attribute {attribute!r}") from e

    return obj
