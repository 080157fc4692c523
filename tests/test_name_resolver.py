import pytest

from data_import_orchestrator.core.configuration import NameResolver
from data_import_orchestrator.models.command import default_command_spec, named_command_spec


@pytest.fixture
def resolver():
    return NameResolver()


def test_bound_command_resolves_last_name_segment(resolver):
    assert resolver.resolve("data:import:category") == "category"


def test_default_command_resolves_full(resolver):
    assert resolver.resolve("data:import") == "full"


@pytest.mark.parametrize("invocation_name", ["data:import", "data:import:category"])
def test_positional_argument_wins(resolver, invocation_name):
    assert resolver.resolve(invocation_name, "orders") == "orders"


def test_empty_positional_argument_is_ignored(resolver):
    assert resolver.resolve("data:import:category", "") == "category"


def test_command_spec_factories_round_trip_through_resolver(resolver):
    assert resolver.resolve(default_command_spec().name) == "full"
    assert resolver.resolve(named_command_spec("product-abstract").name) == "product-abstract"


def test_named_command_spec_describes_import_type():
    spec = named_command_spec("category")

    assert spec.name == "data:import:category"
    assert spec.description == 'This command executes your "category" importer.'
    assert not spec.is_default
    assert default_command_spec().is_default


def test_named_command_spec_requires_import_type():
    with pytest.raises(ValueError):
        named_command_spec("")
