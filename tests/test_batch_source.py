import pytest

from data_import_orchestrator.core.exceptions import ConfigLoadError
from data_import_orchestrator.models.report import BatchEntry
from data_import_orchestrator.services.batch_source import YamlBatchSource


def test_loads_entries_in_order(write_batch_file):
    path = write_batch_file("""
        version: 0
        actions:
          - data_entity: category
            source: data/import/category.csv
          - data_entity: product-abstract
            source: data/import/product_abstract.csv
    """)

    assert YamlBatchSource().load(path) == [
        BatchEntry("category", "data/import/category.csv"),
        BatchEntry("product-abstract", "data/import/product_abstract.csv"),
    ]


def test_version_is_optional(write_batch_file):
    path = write_batch_file("""
        actions:
          - data_entity: glossary
            source: glossary.csv
    """)

    assert YamlBatchSource().load(path) == [BatchEntry("glossary", "glossary.csv")]


def test_missing_file_raises_config_load_error(tmp_path):
    with pytest.raises(ConfigLoadError) as exc_info:
        YamlBatchSource().load(str(tmp_path / "missing.yml"))

    assert exc_info.value.error_code == "CONFIG_LOAD_ERROR"
    assert exc_info.value.details["path"].endswith("missing.yml")


@pytest.mark.parametrize("content", [
    "actions: [unclosed",
    "just a string",
    "",
    "version: 0\n",
    "actions:\n  - data_entity: category\n",
    "actions:\n  - data_entity: ''\n    source: a.csv\n",
])
def test_malformed_definition_raises_config_load_error(write_batch_file, content):
    with pytest.raises(ConfigLoadError):
        YamlBatchSource().load(write_batch_file(content))
