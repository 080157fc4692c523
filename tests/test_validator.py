import pytest

from data_import_orchestrator.core.validator import ConflictValidator
from data_import_orchestrator.models.configuration import ImportOptions, JobConfiguration
from data_import_orchestrator.models.validation import ValidationErrorCode


@pytest.fixture
def validator():
    return ConflictValidator()


def test_importer_with_batch_config_is_a_mode_conflict(validator):
    result = validator.check_mode(ImportOptions(importer="category", config="data_import.yml"))

    assert not result.is_valid
    assert result.error_code is ValidationErrorCode.MODE_CONFLICT
    assert result.message == "Config can not be used when an importer is specified"


@pytest.mark.parametrize("options", [
    ImportOptions(importer="category"),
    ImportOptions(config="data_import.yml"),
    ImportOptions(importer="", config="data_import.yml"),
    ImportOptions(),
])
def test_single_mode_is_valid(validator, options):
    assert validator.check_mode(options).is_valid


def test_specific_type_with_specific_group_is_rejected(validator):
    result = validator.check_group_and_type(JobConfiguration(import_type="category", import_group="partners"))

    assert not result.is_valid
    assert result.error_code is ValidationErrorCode.GROUP_TYPE_CONFLICT
    assert 'except "full"' in result.message


@pytest.mark.parametrize("import_type, import_group", [
    ("full", "full"),
    ("full", "partners"),
    ("category", "full"),
])
def test_full_sentinel_on_either_axis_is_valid(validator, import_type, import_group):
    config = JobConfiguration(import_type=import_type, import_group=import_group)

    assert validator.check_group_and_type(config).is_valid


def test_validation_result_to_dict(validator):
    result = validator.check_mode(ImportOptions(importer="category", config="x.yml"))

    assert result.to_dict()["error_code"] == "mode_conflict"
