"""
Unit Tests for Logging Setup
"""
import json
import logging
from decimal import Decimal

import pytest

from core.config import settings
from core.exceptions import ConfigurationException
from core.logging import (
    ColoredFormatter,
    JSONFormatter,
    LoggerAdapter,
    TEXT_FORMAT,
    _apply_dict_config,
    get_logger,
    get_logger_with_context,
    setup_logging,
)


def make_record(message="report ready", **extra):
    record = logging.LogRecord(
        name="domain.services", level=logging.INFO, pathname=__file__, lineno=10,
        msg=message, args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Test structured log output."""

    def test_core_fields(self):
        payload = json.loads(JSONFormatter().format(make_record()))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "domain.services"
        assert payload["message"] == "report ready"

    def test_extra_fields_included(self):
        """Context from adapters ends up as top-level keys."""
        payload = json.loads(JSONFormatter().format(make_record(shop_id="shop-1")))

        assert payload["shop_id"] == "shop-1"

    def test_non_serializable_values_stringified(self):
        payload = json.loads(JSONFormatter().format(make_record(revenue=Decimal("1.50"))))

        assert payload["revenue"] == "1.50"


class TestColoredFormatter:
    """Test console coloring."""

    def test_levelname_restored(self):
        record = make_record()

        output = ColoredFormatter(TEXT_FORMAT).format(record)

        assert "\033[32m" in output
        assert record.levelname == "INFO"


class TestLoggerFactories:
    """Test logger creation helpers."""

    def test_get_logger_is_cached(self):
        assert get_logger("tests.cached") is get_logger("tests.cached")

    def test_context_adapter_merges_extra(self):
        adapter = get_logger_with_context("tests.context", shop_id="shop-1")

        msg, kwargs = adapter.process("hello", {"extra": {"resource": "sales"}})

        assert isinstance(adapter, LoggerAdapter)
        assert msg == "hello"
        assert kwargs["extra"] == {"resource": "sales", "shop_id": "shop-1"}

    def test_invalid_dict_config(self, tmp_path):
        cfg = tmp_path / "logging.yaml"
        cfg.write_text("version: 99\n", encoding="utf-8")

        with pytest.raises(ConfigurationException) as exc_info:
            _apply_dict_config(cfg)

        assert exc_info.value.details["path"] == str(cfg)

    def test_valid_dict_config(self, tmp_path):
        cfg = tmp_path / "logging.yaml"
        cfg.write_text(
            "version: 1\n"
            "disable_existing_loggers: false\n"
            "loggers:\n"
            "  tests.yaml_configured:\n"
            "    level: WARNING\n",
            encoding="utf-8",
        )

        _apply_dict_config(cfg)

        assert logging.getLogger("tests.yaml_configured").level == logging.WARNING


class TestFileConfiguration:
    """Module loggers created under a logging.yaml stay usable."""

    def setup_method(self):
        _apply_dict_config.cache_clear()

    def teardown_method(self):
        _apply_dict_config.cache_clear()

    def test_earlier_module_loggers_stay_enabled(self, tmp_path, monkeypatch):
        """Each module logger is created without disabling those before it."""
        cfg = tmp_path / "logging.yaml"
        cfg.write_text(
            "version: 1\n"
            "root:\n"
            "  level: INFO\n",
            encoding="utf-8",
        )
        monkeypatch.setattr(settings, "logging_config_path", cfg)

        validators_logger = setup_logging("tests.file_config.validators")
        aggregator_logger = setup_logging("tests.file_config.aggregator")

        assert not validators_logger.disabled
        assert not aggregator_logger.disabled

    def test_loggers_created_before_config_stay_enabled(self, tmp_path):
        """A file without disable_existing_loggers keeps existing loggers."""
        existing = logging.getLogger("tests.file_config.existing")
        cfg = tmp_path / "logging.yaml"
        cfg.write_text("version: 1\n", encoding="utf-8")

        _apply_dict_config(cfg)

        assert not existing.disabled

    def test_non_mapping_config_rejected(self, tmp_path):
        cfg = tmp_path / "logging.yaml"
        cfg.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ConfigurationException):
            _apply_dict_config(cfg)
