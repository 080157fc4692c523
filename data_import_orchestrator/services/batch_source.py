"""
Batch definition loading.

A batch definition file lists the jobs of one invocation in execution order::

    version: 0
    actions:
      - data_entity: category
        source: data/import/category.csv
      - data_entity: product-abstract
        source: data/import/product_abstract.csv
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from ..models.report import BatchEntry
from ..utils.logger import get_logger
from ..core.exceptions import ConfigLoadError


class BatchAction(BaseModel):
    """One action of a batch definition file."""

    data_entity: str = Field(min_length=1)
    source: str = Field(min_length=1)

    def to_entry(self) -> BatchEntry:
        return BatchEntry(job_type=self.data_entity, source_location=self.source)


class BatchDefinition(BaseModel):
    """Schema of a batch definition file."""

    version: Optional[Union[int, str]] = 0
    actions: List[BatchAction]


class BaseBatchSource(ABC):
    """Produces the ordered entries of a batch plan."""

    @abstractmethod
    def load(self, path: str) -> List[BatchEntry]:
        """
        Load a batch plan.

        Args:
            path: Location of the batch definition

        Returns:
            Batch entries in execution order

        Raises:
            ConfigLoadError: If the definition is unreadable or malformed
        """
        pass


class YamlBatchSource(BaseBatchSource):
    """Loads batch plans from YAML batch definition files."""

    def __init__(self):
        self.logger = get_logger(__name__)

    def load(self, path: str) -> List[BatchEntry]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigLoadError(path, f"file is not readable ({e.strerror or e})") from e
        except yaml.YAMLError as e:
            raise ConfigLoadError(path, f"invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ConfigLoadError(path, "expected a mapping with an 'actions' list")

        try:
            definition = BatchDefinition(**data)
        except ValidationError as e:
            raise ConfigLoadError(path, str(e)) from e

        entries = [action.to_entry() for action in definition.actions]
        self.logger.info(f"Loaded {len(entries)} batch entries from {path}")
        return entries
