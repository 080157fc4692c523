import textwrap

import pytest
from click.testing import CliRunner

from data_import_orchestrator.cli.main import cli
from data_import_orchestrator.models.report import JobReport

from .stubs import StubImportEngine, received_reader_configs


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, engine, args):
    return runner.invoke(cli, args, obj={"engine": engine})


def test_bound_command_runs_named_importer(runner, stub_engine):
    result = invoke(runner, stub_engine, ["data:import:category"])

    assert result.exit_code == 0, result.output
    assert "Importer type: category" in result.output
    assert "Import Time Used: 12.35 ms" in result.output
    assert "Overall Import status: Successful" in result.output
    (config,) = stub_engine.calls
    assert config.import_type == "category"
    assert config.reader_config is None
    assert not stub_engine.shutdown_called


def test_default_command_runs_full_import(runner, stub_engine):
    result = invoke(runner, stub_engine, ["data:import"])

    assert result.exit_code == 0, result.output
    assert stub_engine.calls[0].import_type == "full"


def test_reader_options_are_parsed(runner, stub_engine):
    result = invoke(runner, stub_engine, [
        "data:import", "category",
        "-f", "category.csv", "-o", "10", "-l", "5",
        "-d", ";", "-e", '"', "-s", "\\", "-r", "0",
    ])

    assert result.exit_code == 0, result.output
    reader_config = stub_engine.calls[0].reader_config
    assert reader_config.file_name == "category.csv"
    assert (reader_config.offset, reader_config.limit) == (10, 5)
    assert (reader_config.delimiter, reader_config.enclosure, reader_config.escape) == (";", '"', "\\")
    assert reader_config.has_header is False


@pytest.mark.parametrize("args", [
    ["data:import", "-t"],
    ["data:import", "--throw-exception"],
    ["data:import", "-t", "0", "category"],
    ["data:import", "--throw-exception=false"],
])
def test_throw_exception_presence_enables_throw_on_error(runner, stub_engine, args):
    result = invoke(runner, stub_engine, args)

    assert result.exit_code == 0, result.output
    assert stub_engine.calls[0].throw_on_error is True


def test_throw_exception_absent(runner, stub_engine):
    invoke(runner, stub_engine, ["data:import", "category"])

    assert stub_engine.calls[0].throw_on_error is False


@pytest.mark.parametrize("args", [
    ["data:import", "-d", ";;"],
    ["data:import", "-o", "-1"],
    ["data:import", "-l", "many"],
])
def test_invalid_option_values_are_usage_errors(runner, stub_engine, args):
    result = invoke(runner, stub_engine, args)

    assert result.exit_code == 2
    assert stub_engine.calls == []


def test_mode_conflict_exits_with_error(runner, stub_engine, tmp_path):
    result = invoke(runner, stub_engine, ["data:import", "category", "-c", str(tmp_path / "data_import.yml")])

    assert result.exit_code == 1
    assert "Config can not be used when an importer is specified" in result.output
    assert stub_engine.calls == []


def test_group_type_conflict_exits_with_error(runner, stub_engine):
    result = invoke(runner, stub_engine, ["data:import:category", "-g", "partners"])

    assert result.exit_code == 1
    assert 'No import group (except "full") can be used when an import type is specified' in result.output
    assert stub_engine.calls == []


def test_failed_job_exits_with_error(runner, stub_engine):
    result = invoke(runner, stub_engine, ["data:import", "broken"])

    assert result.exit_code == 1
    assert "Import status: Failed" in result.output
    assert "Overall Import status: Failed" in result.output


def test_batch_runs_every_entry_and_fails_overall(runner, write_batch_file):
    engine = StubImportEngine({
        "reports": {
            "A": JobReport(job_type="A", expected_count=1, imported_count=1),
            "B": JobReport(job_type="B", expected_count=1, imported_count=0, is_success=False),
        }
    })
    path = write_batch_file("""
        actions:
          - data_entity: A
            source: a.csv
          - data_entity: B
            source: b.csv
    """)

    result = invoke(runner, engine, ["data:import", "-c", path])

    assert result.exit_code == 1
    assert result.output.index("Importer type: A") < result.output.index("Importer type: B")
    assert "Overall Import status: Failed" in result.output
    assert [call.import_type for call in engine.calls] == ["A", "B"]


def test_unreadable_batch_file_is_fatal(runner, stub_engine, tmp_path):
    result = invoke(runner, stub_engine, ["data:import", "-c", str(tmp_path / "missing.yml")])

    assert result.exit_code == 1
    assert "Error: Could not load import configuration" in result.output
    assert stub_engine.calls == []


def test_engine_abort_exits_with_error(runner):
    engine = StubImportEngine({"reports": {"category": RuntimeError("constraint violation")}})

    result = invoke(runner, engine, ["data:import", "category", "-t"])

    assert result.exit_code == 1
    assert 'Import "category" aborted: constraint violation' in result.output
    assert "Overall Import status" not in result.output


def test_batch_abort_keeps_reports_of_finished_entries(runner, write_batch_file):
    engine = StubImportEngine({
        "reports": {
            "A": JobReport(job_type="A", expected_count=2, imported_count=2),
            "B": RuntimeError("constraint violation"),
        }
    })
    path = write_batch_file("""
        actions:
          - data_entity: A
            source: a.csv
          - data_entity: B
            source: b.csv
          - data_entity: C
            source: c.csv
    """)

    result = invoke(runner, engine, ["data:import", "-t", "1", "-c", path])

    assert result.exit_code == 1
    assert "Importer type: A" in result.output
    assert "Importable DataSets: 2" in result.output
    assert result.output.index("Importer type: A") < result.output.index('Import "B" aborted: constraint violation')
    assert "Importer type: B" not in result.output
    assert [call.import_type for call in engine.calls] == ["A", "B"]


def test_empty_group_with_named_importer_is_rejected(runner, stub_engine):
    result = invoke(runner, stub_engine, ["data:import:category", "-g", ""])

    assert result.exit_code == 1
    assert 'No import group (except "full")' in result.output
    assert stub_engine.calls == []


def test_dump_lists_import_types(runner, stub_engine):
    result = invoke(runner, stub_engine, ["data:import:dump"])

    assert result.exit_code == 0, result.output
    assert "  broken" in result.output
    assert "  category" in result.output


def test_dump_without_importers(runner):
    result = invoke(runner, StubImportEngine(), ["data:import:dump"])

    assert "No importers found" in result.output


def test_nested_command_names_are_not_bound(runner, stub_engine):
    result = invoke(runner, stub_engine, ["data:import:category:extra"])

    assert result.exit_code == 2
    assert stub_engine.calls == []


def test_bound_command_help_describes_importer(runner, stub_engine):
    result = invoke(runner, stub_engine, ["data:import:category", "--help"])

    assert result.exit_code == 0
    assert 'This command executes your "category" importer.' in result.output


def test_settings_file_configures_local_engine(runner, tmp_path):
    settings_path = tmp_path / "settings.yml"
    settings_path.write_text(textwrap.dedent("""
        engine_config:
          importers:
            category:
              handler: tests.stubs:import_categories
              groups: [catalog]
            product:
              handler: tests.stubs:import_products
              groups: [catalog]
            stock: tests.stubs:import_categories
        log_level: debug
        structured_logging: false
    """), encoding="utf-8")

    result = runner.invoke(cli, ["--settings", str(settings_path), "data:import", "-g", "catalog"])

    assert result.exit_code == 1
    assert "Importer type: full" in result.output
    assert "Importable DataSets: 8" in result.output
    assert "Importer type: product" in result.output
    assert "Importer type: stock" not in result.output


def test_settings_with_empty_importers_section_runs_nothing(runner, tmp_path):
    settings_path = tmp_path / "settings.yml"
    settings_path.write_text(textwrap.dedent("""
        engine_config:
          importers:
    """), encoding="utf-8")

    result = runner.invoke(cli, ["--settings", str(settings_path), "data:import"])

    assert result.exit_code == 0, result.output
    assert "Importer type: full" in result.output
    assert "Overall Import status: Successful" in result.output


def test_settings_with_scalar_importer_groups_fails(runner, tmp_path):
    settings_path = tmp_path / "settings.yml"
    settings_path.write_text(textwrap.dedent("""
        engine_config:
          importers:
            category:
              handler: tests.stubs:import_categories
              groups: catalog
    """), encoding="utf-8")

    result = runner.invoke(cli, ["--settings", str(settings_path), "data:import", "-g", "catalog"])

    assert result.exit_code == 1
    assert "Error: Configuration error for engine" in result.output
    assert received_reader_configs == []


def test_settings_with_broken_engine_fails(runner, tmp_path):
    settings_path = tmp_path / "settings.yml"
    settings_path.write_text("engine: tests.stubs:does_not_exist\n", encoding="utf-8")

    result = runner.invoke(cli, ["--settings", str(settings_path), "data:import"])

    assert result.exit_code == 1
    assert "Configuration error for engine" in result.output


def test_invalid_settings_file_fails(runner, tmp_path):
    settings_path = tmp_path / "settings.yml"
    settings_path.write_text("log_level: LOUD\n", encoding="utf-8")

    result = runner.invoke(cli, ["--settings", str(settings_path), "data:import"])

    assert result.exit_code == 1
    assert "Configuration error" in result.output
