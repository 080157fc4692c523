import logging
import textwrap

import pytest

from data_import_orchestrator.models.report import JobReport

from .stubs import StubImportEngine, received_reader_configs


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("data_import_orchestrator")
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    if hasattr(logger, "context_filter"):
        del logger.context_filter
    received_reader_configs.clear()


@pytest.fixture
def stub_engine():
    return StubImportEngine({
        "reports": {
            "category": JobReport(job_type="category", expected_count=3, imported_count=3, elapsed_millis=12.346),
            "broken": JobReport(job_type="broken", expected_count=4, imported_count=1, elapsed_millis=2.0,
                                is_success=False),
        }
    })


@pytest.fixture
def write_batch_file(tmp_path):
    def _write(content: str, name: str = "data_import.yml") -> str:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return str(path)
    return _write
