import logging

import pytest

from hpi_core.log_setup import LabeledFormatter, get_logger, reset_logging, setup_logging


@pytest.fixture(autouse=True)
def _reset():
    reset_logging()
    yield
    reset_logging()


def test_setup_logging_is_idempotent():
    a = setup_logging("DEBUG")
    b = setup_logging("INFO")
    assert a is b
    assert a.name == "hpi_core"
    assert len(a.handlers) == 1
    assert a.propagate is False
    assert a.level == logging.DEBUG


def test_get_logger_sets_up_on_first_use():
    logger = get_logger()
    assert logger is setup_logging()


def test_labeled_formatter():
    fmt = LabeledFormatter()
    rec = logging.LogRecord("hpi_core.normalize.schema", logging.WARNING, __file__, 1, "odd header %s", ("x",), None)
    assert fmt.format(rec) == "WARN hpi_core.normalize.schema: odd header x"


def test_reset_restores_propagation():
    logger = setup_logging()
    reset_logging()
    assert logger.handlers == []
    assert logger.propagate is True


def test_module_is_documented():
    import hpi_core.log_setup as log_setup

    assert log_setup.__doc__ and log_setup.__doc__.startswith("Logging setup")


def test_child_of_shared_logger_uses_its_handler(capsys):
    setup_logging("INFO")
    get_logger().getChild("pages.home").info("loaded %s", "sample.csv")
    assert "INFO hpi_core.pages.home: loaded sample.csv" in capsys.readouterr().out
