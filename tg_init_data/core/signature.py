"""Check-string canonicalization and HMAC-SHA256 signature verification."""

from __future__ import annotations

import binascii
import hashlib
import hmac
from typing import Mapping, Optional

from tg_init_data.core.logging import get_logger

logger = get_logger(__name__)

SECRET_SEED = "WebAppData".encode("utf-8")
HASH_PARAM = "hash"


def build_check_string(params: Mapping[str, Optional[str]]) -> str:
    """Render ``params`` as sorted ``key=value`` lines, ``hash`` excluded.

    Keys are ordered by their UTF-8 bytes; absent values render as ``""``.
    """

    items = sorted(
        ((key, value) for key, value in params.items() if key != HASH_PARAM),
        key=lambda item: item[0].encode("utf-8"),
    )
    return "\n".join(f"{key}={value if value is not None else ''}" for key, value in items)


def derive_secret_key(bot_token: str) -> bytes:
    return hmac.new(
        key=SECRET_SEED,
        msg=bot_token.encode("utf-8"),
        digestmod=hashlib.sha256,
    ).digest()


def compute_signature(check_string: str, bot_token: str) -> bytes:
    """Return the raw HMAC-SHA256 digest of ``check_string``."""

    return hmac.new(
        key=derive_secret_key(bot_token),
        msg=check_string.encode("utf-8"),
        digestmod=hashlib.sha256,
    ).digest()


def sign_init_data(params: Mapping[str, Optional[str]], bot_token: str) -> str:
    """Return the lowercase hex signature Telegram would attach to ``params``."""

    return compute_signature(build_check_string(params), bot_token).hex()


def verify_signature(
    params: Mapping[str, Optional[str]],
    bot_token: str,
    expected_hex_hash: str,
) -> bool:
    """Compare the computed digest with ``expected_hex_hash`` in constant time.

    Only the lowercase hex form is accepted, matching what Telegram emits.
    """

    computed = compute_signature(build_check_string(params), bot_token)
    if expected_hex_hash != expected_hex_hash.lower():
        logger.debug("initData hash is not lowercase hex")
        return False
    try:
        expected = binascii.unhexlify(expected_hex_hash)
    except (binascii.Error, ValueError):
        logger.debug("initData hash is not valid hex")
        return False

    matches = hmac.compare_digest(computed, expected)
    logger.debug("initData signature %s", "matched" if matches else "mismatched")
    return matches
