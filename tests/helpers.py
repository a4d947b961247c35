"""Shared helpers for tests."""

from __future__ import annotations

import hashlib
import hmac
import json
from typing import Dict, Optional
from urllib.parse import urlencode

TEST_BOT_TOKEN = "999999:TEST_TOKEN"
TEST_AUTH_DATE = 1749945600

# Example published in the Telegram Mini Apps documentation.
DOCS_BOT_TOKEN = "5768337691:AAH5YkoiEuPk8-FZa32hStHTqXiLPtAEhx8"
DOCS_INIT_DATA = (
    "query_id=AAHdF6IQAAAAAN0XohDhrOrc"
    "&user=%7B%22id%22%3A279058397%2C%22first_name%22%3A%22Vladislav%22%2C"
    "%22last_name%22%3A%22Kibenko%22%2C%22username%22%3A%22vdkfrost%22%2C"
    "%22language_code%22%3A%22ru%22%2C%22is_premium%22%3Atrue%7D"
    "&auth_date=1662771648"
    "&hash=c501b71e775f74ce10e377dea85a7ea24ecd640b223ea86dfe453e0eaed2e2b2"
)


def sign(payload: Dict[str, str], bot_token: str) -> str:
    """Reference signature computed independently of the library."""

    data_check_string = "\n".join(f"{k}={v}" for k, v in sorted(payload.items()))
    secret_key = hmac.new(
        key="WebAppData".encode(),
        msg=bot_token.encode(),
        digestmod=hashlib.sha256,
    ).digest()
    return hmac.new(
        key=secret_key,
        msg=data_check_string.encode(),
        digestmod=hashlib.sha256,
    ).hexdigest()


def generate_init_data(
    bot_token: str = TEST_BOT_TOKEN,
    overrides: Optional[Dict[str, str]] = None,
    auth_date: int = TEST_AUTH_DATE,
) -> str:
    """Create signed initData payload resembling Telegram WebApp data."""

    payload = {
        "query_id": "test-query",
        "user": json.dumps(
            {
                "id": 123456,
                "first_name": "John",
                "last_name": "Doe",
                "username": "john_doe",
            },
            separators=(",", ":"),
        ),
        "auth_date": str(auth_date),
    }
    if overrides:
        payload.update(overrides)

    payload["hash"] = sign(payload, bot_token)
    return urlencode(payload)
