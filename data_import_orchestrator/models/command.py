"""
Command identity models

A command is bound either as the default ``data:import`` command or as a
job-specific ``data:import:<type>`` command. The identity is fixed when the
command is bound.
"""

from dataclasses import dataclass


DEFAULT_COMMAND_NAME = "data:import"
COMMAND_NAME_SEPARATOR = ":"

DEFAULT_COMMAND_DESCRIPTION = (
    "This command executes your importers (full-import). Bind it under another "
    "name, e.g. \"data:import:category\", to run the single importer mapped to "
    "the latter part of the command name."
)
NAMED_COMMAND_DESCRIPTION = 'This command executes your "{import_type}" importer.'


@dataclass(frozen=True)
class CommandSpec:
    """Name and description of a bound import command."""

    name: str
    description: str

    @property
    def is_default(self) -> bool:
        return self.name == DEFAULT_COMMAND_NAME


def default_command_spec() -> CommandSpec:
    """Create the spec of the bare ``data:import`` command."""
    return CommandSpec(name=DEFAULT_COMMAND_NAME, description=DEFAULT_COMMAND_DESCRIPTION)


def named_command_spec(import_type: str) -> CommandSpec:
    """
    Create the spec of a command bound to one import type.

    Args:
        import_type: Import type the command runs, e.g. ``category``

    Returns:
        CommandSpec named ``data:import:<import_type>``
    """
    if not import_type:
        raise ValueError("import_type must be a non-empty string")

    return CommandSpec(
        name=f"{DEFAULT_COMMAND_NAME}{COMMAND_NAME_SEPARATOR}{import_type}",
        description=NAMED_COMMAND_DESCRIPTION.format(import_type=import_type)
    )
