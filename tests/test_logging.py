"""Tests for package logging."""

import json
import logging

import pytest

from bladeview.logging import JSONFormatter, LoggerConfig, getLogger


@pytest.fixture
def isolated_logger():
    """Configure a throwaway logger and release its handlers afterwards."""
    names = []

    def setup(name, **kwargs):
        names.append(name)
        return LoggerConfig.setup_logger(name, **kwargs)

    yield setup

    for name in names:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


class TestGetLogger:
    def test_names_are_scoped_to_the_package(self):
        assert getLogger("view.finder").name == "bladeview.view.finder"
        assert getLogger("bladeview.container").name == "bladeview.container"
        assert getLogger().name == "bladeview"


class TestJSONFormatter:
    def test_formats_record_with_extra_fields(self):
        record = logging.LogRecord(
            "bladeview.tests", logging.INFO, __file__, 10, "compiled %s", ("home",), None
        )
        record.path = "/views/home.tpl"

        data = json.loads(JSONFormatter().format(record))

        assert data["message"] == "compiled home"
        assert data["level"] == "INFO"
        assert data["logger"] == "bladeview.tests"
        assert data["path"] == "/views/home.tpl"


class TestLoggerConfig:
    def test_json_logger_with_rotating_file(self, isolated_logger, tmp_path):
        log_file = tmp_path / "logs" / "bladeview.log"

        logger = isolated_logger(
            "bladeview.tests.json", format_type="json", level=logging.DEBUG, log_file=log_file
        )
        logger.debug("hello", extra={"view": "home"})
        for handler in logger.handlers:
            handler.flush()

        assert logger.propagate is False
        assert len(logger.handlers) == 2
        assert all(isinstance(h.formatter, JSONFormatter) for h in logger.handlers)

        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[0])
        assert entry["message"] == "hello"
        assert entry["view"] == "home"

    def test_level_from_environment(self, isolated_logger):
        logger = isolated_logger("bladeview.tests.env", environment="development")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    @pytest.mark.parametrize(
        "environment,level",
        [("production", logging.WARNING), ("testing", logging.ERROR), ("unknown", logging.INFO)],
    )
    def test_get_level_by_environment(self, environment, level):
        assert LoggerConfig.get_level_by_environment(environment) == level


class TestPipelineLogging:
    def test_compile_and_cache_hit_are_logged(self, blade, write_view, caplog):
        caplog.set_level(logging.DEBUG, logger="bladeview")
        write_view("page.tpl", "ok")

        blade.render("page")
        blade.get_factory().get_finder().flush()
        blade.render("page")

        messages = [record.getMessage() for record in caplog.records]
        assert any(message.startswith("Compiled ") for message in messages)
        assert any("is fresh" in message for message in messages)

    def test_finder_miss_is_logged(self, blade, caplog):
        caplog.set_level(logging.DEBUG, logger="bladeview")

        assert not blade.exists("missing")
        assert any("View [missing] not found" in record.getMessage() for record in caplog.records)
