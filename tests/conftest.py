from __future__ import annotations

import os
from typing import Final

import pytest

from tg_init_data.core.config import get_settings

_TEST_ENV_VARS: Final[dict[str, str]] = {
    "TELEGRAM_BOT_TOKEN": "000000:test",
    "INIT_DATA_TTL_SECONDS": "3600",
}

for key, value in _TEST_ENV_VARS.items():
    os.environ.setdefault(key, value)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
