"""Unit tests for settings and logging setup."""

import importlib
import json
import logging
from contextlib import contextmanager

import pytest
from pydantic import ValidationError

import pagelinks
from pagelinks.core import logging as pagelinks_logging
from pagelinks.core.config import Environment, LogLevel, Settings, get_settings
from pagelinks.core.logging import (CustomJsonFormatter, get_logger, log_event,
                                    setup_logging)


@contextmanager
def preserved_package_logger():
    """Put the package logger back the way it was."""
    logger = logging.getLogger("pagelinks")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate

    try:
        yield logger
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        for handler in handlers:
            logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = propagate


@pytest.mark.unit
class TestSettings:
    """Test Settings defaults and environment parsing."""

    def test_default_values(self):
        config = Settings()

        assert config.app_name == "pagelinks"
        assert config.environment is Environment.DEVELOPMENT
        assert config.log_level is LogLevel.INFO
        assert config.page_param == "page"
        assert config.excluded_query_params == ["url"]
        assert config.max_numbers == 10
        assert config.paging_wrapper == "<ul>{content}</ul>"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("PAGELINKS_MAX_NUMBERS", "7")
        monkeypatch.setenv("PAGELINKS_SHOW_FIRST_LAST", "false")
        monkeypatch.setenv("PAGELINKS_PAGE_PARAM", "p")

        config = Settings()

        assert config.max_numbers == 7
        assert config.show_first_last is False
        assert config.page_param == "p"

    def test_excluded_query_params_from_comma_string(self, monkeypatch):
        monkeypatch.setenv("PAGELINKS_EXCLUDED_QUERY_PARAMS", "url, session")

        assert Settings().excluded_query_params == ["url", "session"]

    def test_wrapper_requires_content_slot(self):
        with pytest.raises(ValidationError):
            Settings(paging_wrapper="<ul></ul>")

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


@pytest.mark.unit
class TestLogging:
    """Test logging helpers."""

    def test_get_logger(self):
        assert get_logger("pagelinks.test").name == "pagelinks.test"

    def test_log_event_formats_kwargs(self, caplog):
        logger = get_logger("pagelinks.test")

        with caplog.at_level("INFO", logger="pagelinks.test"):
            log_event(logger, "info", "window_built", page=3, page_size=10)

        record = caplog.records[-1]
        assert record.message == 'window_built: {"page": 3, "page_size": 10}'
        assert record.event == "window_built"
        assert record.page == 3

    def test_log_event_without_kwargs(self, caplog):
        logger = get_logger("pagelinks.test")

        with caplog.at_level("WARNING", logger="pagelinks.test"):
            log_event(logger, "warning", "bare_event")

        assert caplog.records[-1].message == "bare_event"
        assert caplog.records[-1].levelname == "WARNING"

    def test_json_formatter_adds_context(self):
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
        record = logging.LogRecord(
            "pagelinks.test", logging.INFO, __file__, 1, "rendered", None, None
        )
        record.page = 4
        record.total_items = 95

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "rendered"
        assert payload["app_name"] == "pagelinks"
        assert payload["environment"] == "development"
        assert payload["level"] == "INFO"
        assert payload["page"] == 4
        assert payload["total_items"] == 95
        assert "page_size" not in payload

    def test_setup_logging_plain(self):
        root_handlers = list(logging.getLogger().handlers)

        with preserved_package_logger() as package_logger:
            configured = setup_logging()
            handlers = list(package_logger.handlers)
            propagate = package_logger.propagate

        assert configured is package_logger
        assert len(handlers) == 1
        assert not isinstance(handlers[0].formatter, CustomJsonFormatter)
        assert propagate is False
        assert logging.getLogger().handlers == root_handlers

    def test_setup_logging_json(self, monkeypatch):
        monkeypatch.setattr(pagelinks_logging.settings, "log_json", True)

        with preserved_package_logger() as package_logger:
            setup_logging()
            handlers = list(package_logger.handlers)

        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, CustomJsonFormatter)

    def test_setup_logging_replaces_its_handler(self):
        with preserved_package_logger() as package_logger:
            setup_logging()
            setup_logging()
            handlers = list(package_logger.handlers)

        assert len(handlers) == 1

    def test_package_import_configures_logging_when_enabled(self, monkeypatch):
        monkeypatch.setattr(pagelinks_logging.settings, "configure_logging", True)

        with preserved_package_logger() as package_logger:
            importlib.reload(pagelinks)
            handlers = list(package_logger.handlers)

        assert len(handlers) == 1

    def test_package_import_leaves_logging_alone_by_default(self):
        with preserved_package_logger() as package_logger:
            before = list(package_logger.handlers)
            importlib.reload(pagelinks)
            after = list(package_logger.handlers)

        assert after == before
