"""
Conflict validation for import invocations
"""

from ..models.configuration import (
    DEFAULT_IMPORT_TYPE,
    IMPORT_GROUP_FULL,
    ImportOptions,
    JobConfiguration
)
from ..models.validation import ValidationResult, ValidationErrorCode


MODE_CONFLICT_MESSAGE = "Config can not be used when an importer is specified"
GROUP_TYPE_CONFLICT_MESSAGE = (
    f'No import group (except "{IMPORT_GROUP_FULL}") can be used when an import type is specified'
)


class ConflictValidator:
    """Rejects contradictory combinations of invocation modes before any job runs."""

    def check_mode(self, options: ImportOptions) -> ValidationResult:
        """A named importer and a batch definition file are alternative requests."""
        if options.has_importer and options.has_batch_config:
            return ValidationResult.invalid(ValidationErrorCode.MODE_CONFLICT, MODE_CONFLICT_MESSAGE)
        return ValidationResult.valid()

    def check_group_and_type(self, config: JobConfiguration) -> ValidationResult:
        """Only the ``full`` sentinel on either axis combines with a specific value on the other."""
        if config.import_type != DEFAULT_IMPORT_TYPE and config.import_group != IMPORT_GROUP_FULL:
            return ValidationResult.invalid(ValidationErrorCode.GROUP_TYPE_CONFLICT, GROUP_TYPE_CONFLICT_MESSAGE)
        return ValidationResult.valid()
