"""initData service bound to the configured bot token and validity window."""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

from tg_init_data.core.config import get_settings
from tg_init_data.core.freshness import Clock
from tg_init_data.core.logging import configure_logging, get_logger
from tg_init_data.core.telegram import decode_init_data, validate_and_decode, verify_init_data
from tg_init_data.exceptions.init_data_error import InitDataError
from tg_init_data.models.init_data import InitData
from tg_init_data.services.json_types import JsonObjectDecoder

logger = get_logger(__name__)


class InitDataService:
    """Verification and decoding with a fixed token, TTL and collaborators."""

    def __init__(
        self,
        *,
        bot_token: str,
        ttl_seconds: int,
        json_decoder: Optional[JsonObjectDecoder] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._bot_token = bot_token
        self._valid_for = timedelta(seconds=ttl_seconds) if ttl_seconds > 0 else None
        self._json_decoder = json_decoder
        self._clock = clock

    @property
    def valid_for(self) -> Optional[timedelta]:
        return self._valid_for

    def is_valid(self, init_data: str) -> bool:
        return verify_init_data(init_data, self._bot_token, self._valid_for, self._clock)

    def parse(self, init_data: str) -> InitData:
        """Decode without checking the signature."""

        return decode_init_data(init_data, self._json_decoder)

    def authenticate(self, init_data: str) -> InitData:
        """Validate the signature and freshness, then decode."""

        try:
            return validate_and_decode(
                init_data,
                self._bot_token,
                self._valid_for,
                self._clock,
                self._json_decoder,
            )
        except InitDataError as exc:
            logger.warning(
                "Rejected Telegram initData: %s",
                exc.error_code,
                extra={"error_details": exc.details},
            )
            raise


def get_init_data_service() -> InitDataService:
    """Factory returning an InitDataService configured from current settings."""

    settings = get_settings()
    configure_logging(settings.log_level)
    return InitDataService(
        bot_token=settings.telegram_bot_token.get_secret_value(),
        ttl_seconds=settings.init_data_ttl_seconds,
    )
