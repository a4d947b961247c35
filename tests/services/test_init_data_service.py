"""Tests for the configured initData service."""

from __future__ import annotations

import logging
from datetime import timedelta

import pytest

from tests.helpers import TEST_AUTH_DATE, TEST_BOT_TOKEN, generate_init_data
from tg_init_data.core.freshness import FixedClock
from tg_init_data.exceptions import ExpiredError, SignatureInvalidError, SignatureMissingError
from tg_init_data.services import init_data_service as init_data_service_module
from tg_init_data.services.init_data_service import InitDataService, get_init_data_service


@pytest.fixture()
def configured_log_levels(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    levels: list[str] = []
    monkeypatch.setattr(init_data_service_module, "configure_logging", levels.append)
    return levels


@pytest.fixture()
def service() -> InitDataService:
    return InitDataService(
        bot_token=TEST_BOT_TOKEN,
        ttl_seconds=3600,
        clock=FixedClock.at_epoch(TEST_AUTH_DATE + 60),
    )


def test_is_valid_accepts_fresh_signed_payload(service: InitDataService) -> None:
    assert service.is_valid(generate_init_data()) is True


def test_is_valid_rejects_wrong_signature(service: InitDataService) -> None:
    assert service.is_valid(generate_init_data(bot_token="other:token")) is False


def test_authenticate_returns_user(service: InitDataService) -> None:
    decoded = service.authenticate(generate_init_data())

    assert decoded.user is not None
    assert decoded.user.id == 123456
    assert decoded.user.username == "john_doe"


def test_authenticate_logs_and_reraises_rejection(
    service: InitDataService, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="tg_init_data.services.init_data_service"):
        with pytest.raises(SignatureInvalidError):
            service.authenticate(generate_init_data(bot_token="other:token"))

    assert "SIGNATURE_INVALID" in caplog.text
    assert TEST_BOT_TOKEN not in caplog.text


def test_authenticate_rejects_expired_payload() -> None:
    service = InitDataService(
        bot_token=TEST_BOT_TOKEN,
        ttl_seconds=60,
        clock=FixedClock.at_epoch(TEST_AUTH_DATE + 61),
    )

    with pytest.raises(ExpiredError):
        service.authenticate(generate_init_data())


def test_zero_ttl_disables_freshness_check() -> None:
    service = InitDataService(
        bot_token=TEST_BOT_TOKEN,
        ttl_seconds=0,
        clock=FixedClock.at_epoch(TEST_AUTH_DATE + 10**9),
    )

    assert service.valid_for is None
    assert service.is_valid(generate_init_data()) is True


def test_parse_skips_signature_check(service: InitDataService) -> None:
    decoded = service.parse("auth_date=1749945600&hash=not-a-real-signature")

    assert decoded.hash == "not-a-real-signature"


def test_parse_still_requires_hash(service: InitDataService) -> None:
    with pytest.raises(SignatureMissingError):
        service.parse("auth_date=1749945600")


def test_get_init_data_service_reads_settings(
    monkeypatch: pytest.MonkeyPatch, configured_log_levels: list[str]
) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", TEST_BOT_TOKEN)
    monkeypatch.setenv("INIT_DATA_TTL_SECONDS", "120")

    service = get_init_data_service()

    assert service.valid_for == timedelta(seconds=120)
    assert service.parse(generate_init_data()).query_id == "test-query"


def test_get_init_data_service_configures_logging_from_settings(
    monkeypatch: pytest.MonkeyPatch, configured_log_levels: list[str]
) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", TEST_BOT_TOKEN)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    get_init_data_service()

    assert configured_log_levels == ["DEBUG"]
