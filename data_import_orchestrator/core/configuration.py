"""
Job configuration resolution

Turns the identity of the invoked command plus the raw option values of one
invocation into a normalized JobConfiguration.
"""

from typing import Optional

from ..models.command import DEFAULT_COMMAND_NAME, COMMAND_NAME_SEPARATOR
from ..models.configuration import (
    DEFAULT_IMPORT_TYPE,
    ImportOptions,
    JobConfiguration,
    ReaderConfiguration
)


class NameResolver:
    """
    Decides which import type an invocation requests.

    Precedence:
    1. a non-empty positional importer argument
    2. the default ``full`` type for the bare ``data:import`` command
    3. the last ``:`` segment of a bound command name (``data:import:category``)
    """

    def __init__(self, default_command_name: str = DEFAULT_COMMAND_NAME,
                 default_import_type: str = DEFAULT_IMPORT_TYPE):
        self.default_command_name = default_command_name
        self.default_import_type = default_import_type

    def resolve(self, invocation_name: str, positional_arg: Optional[str] = None) -> str:
        """
        Resolve the requested import type.

        Args:
            invocation_name: Name of the command that was invoked
            positional_arg: Optional positional importer argument

        Returns:
            The import type, never empty
        """
        if positional_arg:
            return positional_arg

        if invocation_name == self.default_command_name:
            return self.default_import_type

        import_type = invocation_name.split(COMMAND_NAME_SEPARATOR)[-1]
        return import_type or self.default_import_type


class ConfigurationBuilder:
    """Builds JobConfigurations from raw import options."""

    def build(self, options: ImportOptions, resolved_import_type: str) -> JobConfiguration:
        """
        Build the job configuration of one invocation.

        Args:
            options: Raw option values
            resolved_import_type: Import type from the NameResolver

        Returns:
            Immutable JobConfiguration
        """
        reader_config = None
        if options.importer is not None or options.file_name:
            reader_config = self.build_reader_configuration(options)

        return JobConfiguration(
            import_type=resolved_import_type,
            import_group=options.group,
            throw_on_error=options.throw_exception,
            reader_config=reader_config
        )

    def build_reader_configuration(self, options: ImportOptions) -> ReaderConfiguration:
        """Build the reader configuration from the source related options."""
        return ReaderConfiguration(
            file_name=options.file_name,
            offset=options.offset,
            limit=options.limit,
            delimiter=options.delimiter,
            enclosure=options.enclosure,
            escape=options.escape,
            has_header=options.has_header
        )
