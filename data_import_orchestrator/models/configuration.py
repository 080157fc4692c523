"""
Configuration data models for the Data Import Orchestrator

Defines the normalized job configuration handed to an import engine, the
reader configuration describing one input source, and the raw option values
collected from the command line.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any


DEFAULT_IMPORT_TYPE = "full"
IMPORT_GROUP_FULL = "full"


def _check_non_negative(field_name: str, value: Optional[int]):
    if value is not None and value < 0:
        raise ValueError(f"{field_name} must be >= 0, got {value}")


def _check_single_character(field_name: str, value: Optional[str]):
    if value is not None and len(value) != 1:
        raise ValueError(f"{field_name} must be a single character, got {value!r}")


@dataclass(frozen=True)
class ReaderConfiguration:
    """Describes how to read one input source."""

    file_name: Optional[str] = None
    offset: Optional[int] = None
    limit: Optional[int] = None

    # Defaults for these are supplied by the reader itself
    delimiter: Optional[str] = None
    enclosure: Optional[str] = None
    escape: Optional[str] = None

    has_header: bool = True

    def __post_init__(self):
        _check_non_negative("offset", self.offset)
        _check_non_negative("limit", self.limit)
        _check_single_character("delimiter", self.delimiter)
        _check_single_character("enclosure", self.enclosure)
        _check_single_character("escape", self.escape)

    def to_dict(self) -> Dict[str, Any]:
        """Convert reader configuration to dictionary."""
        return {
            "file_name": self.file_name,
            "offset": self.offset,
            "limit": self.limit,
            "delimiter": self.delimiter,
            "enclosure": self.enclosure,
            "escape": self.escape,
            "has_header": self.has_header
        }


@dataclass(frozen=True)
class JobConfiguration:
    """
    One job request passed to the import engine.

    ``reader_config`` is only set when a concrete data source was requested,
    an engine treats its presence as "import exactly this source".
    """

    import_type: str = DEFAULT_IMPORT_TYPE
    import_group: str = IMPORT_GROUP_FULL
    throw_on_error: bool = False
    reader_config: Optional[ReaderConfiguration] = None

    def __post_init__(self):
        if not self.import_type:
            raise ValueError("import_type must be a non-empty string")

    @property
    def is_full_import(self) -> bool:
        return self.import_type == DEFAULT_IMPORT_TYPE

    @property
    def has_explicit_source(self) -> bool:
        return self.reader_config is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert job configuration to dictionary."""
        return {
            "import_type": self.import_type,
            "import_group": self.import_group,
            "throw_on_error": self.throw_on_error,
            "reader_config": self.reader_config.to_dict() if self.reader_config else None
        }


@dataclass(frozen=True)
class ImportOptions:
    """Raw option values of one import command invocation."""

    importer: Optional[str] = None
    throw_exception: bool = False
    file_name: Optional[str] = None
    offset: Optional[int] = None
    limit: Optional[int] = None
    delimiter: Optional[str] = None
    enclosure: Optional[str] = None
    escape: Optional[str] = None
    has_header: bool = True
    group: str = IMPORT_GROUP_FULL
    config: Optional[str] = None

    @property
    def has_importer(self) -> bool:
        """Check if a non-empty positional importer was given."""
        return bool(self.importer)

    @property
    def has_batch_config(self) -> bool:
        """Check if a batch definition file was requested."""
        return self.config is not None
