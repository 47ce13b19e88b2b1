"""Tests for the shared logging setup."""

import logging

import pytest
import structlog
from shared.logging import add_context, clear_context, configure_logging, current_environment, get_log_level


@pytest.fixture()
def environment(monkeypatch):
    for name in ("ENVIRONMENT", "PROTEAN_ENV", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLogLevel:
    @pytest.mark.parametrize(
        "env, level",
        [("production", "INFO"), ("staging", "INFO"), ("development", "DEBUG"), ("test", "WARNING")],
    )
    def test_level_follows_environment(self, environment, env, level):
        environment.setenv("ENVIRONMENT", env)
        assert get_log_level() == level

    def test_protean_env_is_used_when_environment_is_unset(self, environment):
        environment.setenv("PROTEAN_ENV", "test")
        assert current_environment() == "test"
        assert get_log_level() == "WARNING"

    def test_log_level_overrides(self, environment):
        environment.setenv("PROTEAN_ENV", "test")
        environment.setenv("LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"

    def test_unknown_environment_defaults_to_info(self, environment):
        environment.setenv("ENVIRONMENT", "qa")
        assert get_log_level() == "INFO"


@pytest.fixture()
def root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers, root.level = handlers, level


class TestConfigureLogging:
    def test_handlers_are_replaced_on_repeat(self, environment, tmp_path, root_logger):
        environment.setenv("PROTEAN_ENV", "test")

        configure_logging(log_dir=str(tmp_path), log_file_prefix="unit")
        configure_logging(log_dir=str(tmp_path), log_file_prefix="unit")

        assert len(root_logger.handlers) == 3
        assert root_logger.level == logging.WARNING
        assert (tmp_path / "unit.log").exists()
        assert (tmp_path / "unit_error.log").exists()


class TestContext:
    def test_bound_context_is_merged_and_cleared(self):
        clear_context()
        add_context(domain="reviews", path="/reviews")
        assert structlog.contextvars.get_contextvars() == {"domain": "reviews", "path": "/reviews"}

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}
