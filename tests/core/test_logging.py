from __future__ import annotations

import json
import logging
from types import ModuleType

import pytest

from tg_init_data.core import logging as logging_module


@pytest.fixture()
def fresh_logging_module(monkeypatch: pytest.MonkeyPatch) -> ModuleType:
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level

    monkeypatch.setattr(logging_module, "_LOGGING_CONFIGURED", False)

    yield logging_module

    root_logger.handlers = original_handlers
    root_logger.setLevel(original_level)
    logging_module._LOGGING_CONFIGURED = False


def test_configure_logging_installs_json_formatter(fresh_logging_module: ModuleType) -> None:
    fresh_logging_module.configure_logging("debug")

    root_logger = logging.getLogger()
    assert root_logger.level == logging.DEBUG
    assert any(
        isinstance(handler.formatter, logging_module.JsonLogFormatter)
        for handler in root_logger.handlers
    )


def test_configure_logging_is_idempotent(fresh_logging_module: ModuleType) -> None:
    fresh_logging_module.configure_logging("info")
    root_logger = logging.getLogger()
    first_handlers = list(root_logger.handlers)

    fresh_logging_module.configure_logging("warning")

    assert list(root_logger.handlers) == first_handlers
    assert root_logger.level == logging.INFO


def test_configure_logging_falls_back_to_info(fresh_logging_module: ModuleType) -> None:
    fresh_logging_module.configure_logging("chatty")

    assert logging.getLogger().level == logging.INFO


def test_json_formatter_includes_extra_fields() -> None:
    logger = logging.getLogger("test-extra")
    record = logger.makeRecord(
        name="test-extra",
        level=logging.WARNING,
        fn="test_logging.py",
        lno=42,
        msg="Rejected Telegram initData: %s",
        args=("EXPIRED",),
        exc_info=None,
        func="test_json_formatter_includes_extra_fields",
        extra={
            "error_details": {"auth_date": 1, "now": 2},
            "telegram_user_id": 123,
            "non_serializable": object(),
        },
    )

    payload = json.loads(logging_module.JsonLogFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "test-extra"
    assert payload["message"] == "Rejected Telegram initData: EXPIRED"
    assert payload["error_details"] == {"auth_date": 1, "now": 2}
    assert payload["telegram_user_id"] == 123
    assert isinstance(payload["non_serializable"], str)


def test_get_logger_returns_named_logger() -> None:
    assert logging_module.get_logger("tg_init_data.core.signature").name == "tg_init_data.core.signature"
