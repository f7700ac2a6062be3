"""Tests for logging setup."""

import json
import logging

import pytest

from ghin.config.logging import JsonFormatter, setup_logging
from ghin.config.logging_filters import MASK, SensitiveDataFilter
from ghin.utils.logging_utils import LoggerMixin


def make_record(extra_fields=None):
    record = logging.LogRecord("ghin.test", logging.INFO, __file__, 1, "hello", None, None)
    if extra_fields is not None:
        record.extra_fields = extra_fields
    return record

@pytest.fixture(autouse=True)
def reset_ghin_logger():
    yield
    logger = logging.getLogger("ghin")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True

def test_sensitive_fields_are_masked():
    record = make_record({
        "username": "jane",
        "password": "secret",
        "body": {"user": {"Password": "secret"}, "token": "abc"},
        "params": [{"authorization": "Bearer abc"}],
    })

    assert SensitiveDataFilter().filter(record) is True
    assert record.extra_fields == {
        "username": "jane",
        "password": MASK,
        "body": {"user": {"Password": MASK}, "token": MASK},
        "params": [{"authorization": MASK}],
    }

def test_json_formatter_includes_extra_fields():
    output = json.loads(JsonFormatter(include_timestamp=False).format(make_record({"entity": "scores"})))
    assert output == {"level": "INFO", "logger": "ghin.test", "message": "hello", "entity": "scores"}

def test_setup_logging_levels(tmp_path):
    log_file = tmp_path / "logs" / "ghin.log"
    logger = setup_logging(verbose=False, log_file=log_file)

    console, file_handler = logger.handlers
    assert console.level == logging.WARNING
    assert file_handler.level == logging.DEBUG
    assert log_file.parent.exists()

    assert setup_logging(verbose=True).handlers[0].level == logging.DEBUG

def test_logger_mixin_attaches_context(caplog):
    class Service(LoggerMixin):
        pass

    service = Service()
    service.set_log_context(username="jane")

    with caplog.at_level(logging.DEBUG, logger=__name__):
        service.debug("fetching", entity="scores")

    [record] = caplog.records
    assert record.name == __name__
    assert record.extra_fields == {"username": "jane", "entity": "scores"}
