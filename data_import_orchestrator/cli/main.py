"""
Main CLI entry point for the Data Import Orchestrator

Provides the ``data:import`` command, any job-specific ``data:import:<type>``
command and ``data:import:dump``.
"""

import asyncio
import sys
from typing import Optional, List, Tuple

import click

from .. import __version__
from ..core.exceptions import DataImportError, ConfigurationError
from ..core.orchestrator import DataImportOrchestrator, ImportRunResult, CODE_ERROR
from ..engines import BaseImportEngine, create_engine
from ..models.command import (
    CommandSpec,
    DEFAULT_COMMAND_NAME,
    COMMAND_NAME_SEPARATOR,
    default_command_spec,
    named_command_spec
)
from ..models.configuration import ImportOptions, IMPORT_GROUP_FULL
from ..models.report import JobReport
from ..services.report_aggregator import ReportAggregator, overall_status_line, STATUS_SUCCESSFUL
from ..utils.logger import setup_logger
from ..utils.settings import load_settings, SETTINGS_ENV_VAR


PACKAGE_LOGGER = "data_import_orchestrator"
DUMP_COMMAND_NAME = f"{DEFAULT_COMMAND_NAME}{COMMAND_NAME_SEPARATOR}dump"
SEPARATOR_LINE = "-" * 33


class SingleCharParamType(click.ParamType):
    """A command line value of exactly one character."""

    name = "char"

    def convert(self, value, param, ctx):
        if isinstance(value, str) and len(value) == 1:
            return value
        self.fail(f"{value!r} is not a single character", param, ctx)


SINGLE_CHAR = SingleCharParamType()


class DataImportGroup(click.Group):
    """Command group that binds ``data:import:<type>`` commands on demand."""

    def get_command(self, ctx, cmd_name):
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command

        prefix = DEFAULT_COMMAND_NAME + COMMAND_NAME_SEPARATOR
        if not cmd_name.startswith(prefix):
            return None

        import_type = cmd_name[len(prefix):]
        if not import_type or COMMAND_NAME_SEPARATOR in import_type:
            return None

        return create_import_command(named_command_spec(import_type))


@click.group(cls=DataImportGroup)
@click.option('--settings', 'settings_path', type=click.Path(exists=True, dir_okay=False),
              envvar=SETTINGS_ENV_VAR, help='Orchestrator settings file (YAML)')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                                               case_sensitive=False),
              help='Log level, overrides the settings file')
@click.option('--verbose', '-v', is_flag=True, help='Plain-text instead of JSON log output')
@click.version_option(__version__, prog_name='data-import')
@click.pass_context
def cli(ctx, settings_path, log_level, verbose):
    """Data Import Orchestrator CLI"""

    # Ensure context object exists
    ctx.ensure_object(dict)

    try:
        settings = load_settings(settings_path)
    except ConfigurationError as e:
        raise click.ClickException(e.message)

    logger = setup_logger(
        PACKAGE_LOGGER,
        level=log_level or settings.log_level,
        structured=settings.structured_logging and not verbose,
        log_file=settings.log_file
    )
    ctx.obj['logger'] = logger
    ctx.obj['settings'] = settings
    ctx.obj['verbose'] = verbose


def create_import_command(spec: CommandSpec) -> click.Command:
    """
    Create the click command bound to a command identity.

    Args:
        spec: Name and description of the command

    Returns:
        click.Command running the import for ``spec``
    """

    @click.command(name=spec.name, help=spec.description)
    @click.argument('importer', required=False)
    @click.option('--throw-exception', '-t', is_flag=False, flag_value='1', default=None,
                  help='Set this option to throw exceptions when they occur.')
    @click.option('--file-name', '-f', help='Defines which file to use for data import.')
    @click.option('--offset', '-o', type=click.IntRange(min=0),
                  help='Defines from where an import should start.')
    @click.option('--limit', '-l', type=click.IntRange(min=0),
                  help='Defines where an import should end. If not set the import runs until '
                       'the end of the data sets.')
    @click.option('--delimiter', '-d', type=SINGLE_CHAR, help='Sets the csv delimiter.')
    @click.option('--enclosure', '-e', type=SINGLE_CHAR, help='Sets the csv enclosure.')
    @click.option('--escape', '-s', type=SINGLE_CHAR, help='Sets the csv escape.')
    @click.option('--has-header', '-r', type=click.BOOL, default=True, show_default=True,
                  help='Set this option to 0 (zero) to disable that the first row of the csv '
                       'file is used as keys for the data sets.')
    @click.option('--group', '-g', default=IMPORT_GROUP_FULL, show_default=True,
                  help='Defines the import group. An import group determines a specific subset '
                       'of data importers to be used.')
    @click.option('--config', '-c', help='Defines the import configuration .yml file.')
    @click.pass_context
    def import_command(ctx, importer, throw_exception, file_name, offset, limit, delimiter,
                       enclosure, escape, has_header, group, config):
        options = ImportOptions(
            importer=importer,
            throw_exception=throw_exception is not None,
            file_name=file_name,
            offset=offset,
            limit=limit,
            delimiter=delimiter,
            enclosure=enclosure,
            escape=escape,
            has_header=has_header,
            group=group,
            config=config
        )
        _run_import(ctx, spec, options)

    return import_command


cli.add_command(create_import_command(default_command_spec()))


@cli.command(DUMP_COMMAND_NAME)
@click.pass_context
def dump_importers(ctx):
    """List the import types known to the import engine"""

    async def _dump() -> List[str]:
        engine, owns_engine = await _initialize_engine(ctx)
        try:
            return engine.list_import_types()
        finally:
            if owns_engine:
                await engine.shutdown()

    try:
        import_types = asyncio.run(_dump())
    except DataImportError as e:
        _fail(ctx, e)

    if not import_types:
        click.echo("No importers found")
        return

    click.echo("Available importers:")
    for import_type in import_types:
        click.echo(f"  {import_type}")


# Helper Functions
def _run_import(ctx, spec: CommandSpec, options: ImportOptions):
    """Run one import invocation and exit with its exit code"""

    aggregator = ReportAggregator()
    displayed_reports: List[JobReport] = []

    def _on_report(report: JobReport):
        for nested_report in report.iter_reports():
            if displayed_reports:
                click.echo()
            _display_report(aggregator, nested_report)
            displayed_reports.append(nested_report)

    async def _execute() -> ImportRunResult:
        engine, owns_engine = await _initialize_engine(ctx)
        try:
            orchestrator = DataImportOrchestrator(engine, aggregator=aggregator, on_report=_on_report)
            return await orchestrator.execute(options, spec)
        finally:
            if owns_engine:
                await engine.shutdown()

    try:
        result = asyncio.run(_execute())
    except DataImportError as e:
        _fail(ctx, e)

    _display_result(result, ctx.obj['verbose'])
    sys.exit(result.exit_code)


async def _initialize_engine(ctx) -> Tuple[BaseImportEngine, bool]:
    """Return the import engine, creating it from the settings unless one was injected"""
    engine: Optional[BaseImportEngine] = ctx.obj.get('engine')
    owns_engine = engine is None

    if engine is None:
        settings = ctx.obj['settings']
        engine = create_engine(settings.engine, settings.engine_config)

    if not engine.is_initialized and not await engine.initialize():
        raise ConfigurationError("engine", f"{engine.engine_name} failed to initialize")

    return engine, owns_engine


def _fail(ctx, error: DataImportError):
    """Report a fatal error and exit"""
    ctx.obj['logger'].error(error.message, exc_info=True, extra={"error_code": error.error_code})
    click.echo(click.style(f"Error: {error.message}", fg='red'), err=True)
    sys.exit(CODE_ERROR)


def _display_report(aggregator: ReportAggregator, report: JobReport):
    """Display the summary of one report, without its sub-reports"""
    for line in aggregator.format_report(report):
        if line.startswith("Import status: "):
            status = line[len("Import status: "):]
            color = 'green' if status == STATUS_SUCCESSFUL else 'red'
            click.echo("Import status: " + click.style(status, fg=color))
        else:
            click.echo(line)


def _display_result(result: ImportRunResult, verbose: bool):
    """Display the outcome of an import invocation, after its reports"""
    if result.error_message:
        click.echo(click.style(result.error_message, fg='red'), err=True)
        return

    click.echo(SEPARATOR_LINE)

    if verbose:
        for report in result.reports:
            for nested_report in report.iter_reports():
                if nested_report.error_message:
                    click.echo(f"{nested_report.job_type}: {nested_report.error_message}", err=True)

    color = 'green' if result.overall_success else 'red'
    click.echo(click.style(overall_status_line(result.overall_success), fg=color, bold=True))


def main():
    """Main CLI entry point"""
    cli()


if __name__ == '__main__':
    main()
