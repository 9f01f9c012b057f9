import logging
from unittest.mock import patch

import pytest
from environs import Env

from unitmath.log_filters import TruncatingFilter
from unitmath.logging_config import get_logger, setup_logging


def make_record(msg, args=()):
    return logging.LogRecord("unitmath.test", logging.DEBUG, __file__, 1, msg, args, None)


class TestTruncatingFilter:
    def test_long_message_truncated(self):
        record = make_record("x" * 20)
        assert TruncatingFilter(max_length=5).filter(record)
        assert record.msg == "xxxxx..."

    def test_long_args_truncated(self):
        record = make_record("%s %s", ("a" * 10, 3))
        TruncatingFilter(max_length=4).filter(record)
        assert record.args == ("aaaa...", 3)
        assert record.getMessage() == "aaaa... 3"

    def test_short_message_untouched(self):
        record = make_record("short")
        TruncatingFilter(max_length=50).filter(record)
        assert record.msg == "short"


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    level = root.level
    package_levels = {
        name: logging.getLogger(name).level
        for name in list(logging.Logger.manager.loggerDict)
        if name == "unitmath" or name.startswith("unitmath.")
    }
    package_levels.setdefault("unitmath", logging.NOTSET)
    with patch.object(root, "handlers", []):
        yield root
    root.setLevel(level)
    for name, package_level in package_levels.items():
        logging.getLogger(name).setLevel(package_level)


def test_setup_logging_reads_env(monkeypatch, clean_root_logger):
    monkeypatch.setenv("LOGGING_LEVEL", "warning")
    monkeypatch.setenv("LOG_MAX_LENGTH", "40")
    monkeypatch.delenv("DEBUG", raising=False)

    setup_logging(Env())

    assert clean_root_logger.level == logging.WARNING
    assert logging.getLogger("unitmath").level == logging.WARNING
    filters = [f for h in clean_root_logger.handlers for f in h.filters]
    assert any(isinstance(f, TruncatingFilter) and f.max_length == 40 for f in filters)


def test_debug_flag_overrides_level(monkeypatch, clean_root_logger):
    monkeypatch.setenv("LOGGING_LEVEL", "ERROR")
    monkeypatch.setenv("DEBUG", "true")

    setup_logging(Env())

    assert clean_root_logger.level == logging.DEBUG


def test_invalid_level_raises(monkeypatch, clean_root_logger):
    monkeypatch.setenv("LOGGING_LEVEL", "LOUD")
    monkeypatch.delenv("DEBUG", raising=False)

    with pytest.raises(ValueError, match="Invalid log level: LOUD"):
        setup_logging(Env())


def test_already_configured_is_left_alone(monkeypatch):
    monkeypatch.setenv("LOGGING_LEVEL", "CRITICAL")
    root = logging.getLogger()
    level = root.level
    handler = logging.NullHandler()
    with patch.object(root, "handlers", [handler]):
        setup_logging(Env())
        assert root.handlers == [handler]
    assert root.level == level


def test_get_logger():
    assert get_logger("unitmath.domain.angle") is logging.getLogger("unitmath.domain.angle")


def test_rejected_index_is_logged(caplog):
    from unitmath.domain.bool_vector import BoolVector2

    with caplog.at_level(logging.DEBUG, logger="unitmath"):
        with pytest.raises(IndexError):
            BoolVector2().get(5)
    assert "Rejected bit index 5 for BoolVector2" in caplog.text


def test_mapping_args_truncated():
    record = make_record("%(bits)s of %(size)d", ({"bits": "1" * 12, "size": 12},))
    TruncatingFilter(max_length=4).filter(record)
    assert record.getMessage() == "1111... of 12"


def test_child_logger_records_truncated_by_handlers(monkeypatch, clean_root_logger):
    monkeypatch.setenv("LOGGING_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_MAX_LENGTH", "10")
    monkeypatch.delenv("DEBUG", raising=False)
    setup_logging(Env())

    seen = []

    class Collect(logging.Handler):
        def emit(self, record):
            seen.append(record.getMessage())

    collector = Collect()
    for f in clean_root_logger.handlers[0].filters:
        collector.addFilter(f)
    clean_root_logger.addHandler(collector)

    logging.getLogger("unitmath.domain.bool_vector").warning("x" * 30)

    assert seen == ["x" * 10 + "..."]
