"""test_config: settings from the environment and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from charpass.config import LOGGER_NAME, Settings, configure_logging, settings


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.MAX_TRIALS == 200
        assert s.FAILURE_TOLERANCE == 1e-9
        assert s.RANDOM_REFILL_BYTES == 256

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CHARPASS_MAX_TRIALS", "50")
        monkeypatch.setenv("CHARPASS_FAILURE_TOLERANCE", "1e-6")
        s = Settings(_env_file=None)
        assert s.MAX_TRIALS == 50
        assert s.FAILURE_TOLERANCE == 1e-6

    def test_invalid_values(self, monkeypatch):
        monkeypatch.setenv("CHARPASS_FAILURE_TOLERANCE", "2")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_module_instance(self):
        assert isinstance(settings, Settings)


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_logger(self):
        logger = logging.getLogger(LOGGER_NAME)
        handlers, level = list(logger.handlers), logger.level
        yield
        logger.handlers = handlers
        logger.setLevel(level)

    def test_adds_one_handler(self):
        logger = configure_logging("debug")
        configure_logging("INFO")
        assert logger.name == "charpass"
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_child_loggers_inherit(self):
        configure_logging(logging.DEBUG)
        assert logging.getLogger("charpass.generator").getEffectiveLevel() == logging.DEBUG
