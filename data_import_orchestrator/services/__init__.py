"""
Services package for the Data Import Orchestrator

Contains the batch source loader, the job dispatcher and the report aggregator.
"""

from .batch_source import BaseBatchSource, YamlBatchSource
from .dispatcher import Dispatcher, derive_batch_configuration
from .report_aggregator import ReportAggregator, status_label, overall_status_line

__all__ = [
    "BaseBatchSource",
    "YamlBatchSource",
    "Dispatcher",
    "derive_batch_configuration",
    "ReportAggregator",
    "status_label",
    "overall_status_line"
]
