"""Telegram Mini App initData verification and decoding."""

from __future__ import annotations

from datetime import timedelta
from typing import Callable, Optional, TypeVar

from tg_init_data.core.freshness import Clock, check_fresh, parse_auth_date
from tg_init_data.core.logging import get_logger
from tg_init_data.core.query import ParameterMap, parse_int64, parse_query_string
from tg_init_data.core.signature import verify_signature
from tg_init_data.exceptions.init_data_error import (
    ArgumentMissingError,
    NumberFormatError,
    SignatureInvalidError,
    SignatureMissingError,
)
from tg_init_data.models.chat import ChatType
from tg_init_data.models.init_data import KNOWN_PARAMS, InitData, InitDataParam
from tg_init_data.services.json_types import DEFAULT_JSON_DECODER, JsonObjectDecoder

logger = get_logger(__name__)

NestedT = TypeVar("NestedT")


def verify_init_data(
    init_data: str,
    bot_token: str,
    valid_for: Optional[timedelta] = None,
    clock: Optional[Clock] = None,
) -> bool:
    """Check the ``hash`` signature of ``init_data`` against ``bot_token``.

    When ``valid_for`` is given, ``auth_date`` must also lie within that window
    of the current time (taken from ``clock``, the UTC wall clock by default).

    Returns ``False`` when the signature is well-formed but does not match.
    Raises ``ArgumentMissingError`` for blank arguments, ``SignatureMissingError``
    if ``hash`` is absent, and ``AuthDateMissingError`` / ``AuthDateInvalidError``
    / ``ExpiredError`` when the freshness check is requested and fails.
    """

    _require(init_data, "init_data")
    _require(bot_token, "bot_token")

    params = parse_query_string(init_data)

    received_hash = params.pop(InitDataParam.HASH.value, None)
    if received_hash is None:
        raise SignatureMissingError()

    if valid_for is not None:
        auth_date = parse_auth_date(params.get(InitDataParam.AUTH_DATE.value))
        check_fresh(auth_date, valid_for, clock)

    return verify_signature(params, bot_token, received_hash)


def decode_init_data(
    init_data: str,
    json_decoder: Optional[JsonObjectDecoder] = None,
) -> InitData:
    """Decode ``init_data`` into :class:`InitData` without checking the signature.

    ``auth_date`` is validated before ``hash`` presence. Parameters outside the
    known set end up in ``InitData.extra``.
    """

    _require(init_data, "init_data")
    decoder = json_decoder or DEFAULT_JSON_DECODER

    params = parse_query_string(init_data)
    present = KNOWN_PARAMS.intersection(params)

    auth_date = parse_auth_date(params.pop(InitDataParam.AUTH_DATE.value, None))
    can_send_after = _pop_int(params, InitDataParam.CAN_SEND_AFTER)
    chat = _pop_nested(params, InitDataParam.CHAT, decoder.decode_chat)
    chat_type = ChatType.from_value(params.pop(InitDataParam.CHAT_TYPE.value, None))
    chat_instance = params.pop(InitDataParam.CHAT_INSTANCE.value, None)
    query_id = params.pop(InitDataParam.QUERY_ID.value, None)
    start_param = params.pop(InitDataParam.START_PARAM.value, None)

    received_hash = params.pop(InitDataParam.HASH.value, None)
    if received_hash is None:
        raise SignatureMissingError()

    receiver = _pop_nested(params, InitDataParam.RECEIVER, decoder.decode_user)
    user = _pop_nested(params, InitDataParam.USER, decoder.decode_user)

    return InitData(
        auth_date=auth_date,
        can_send_after=can_send_after,
        chat=chat,
        chat_type=chat_type,
        chat_instance=chat_instance,
        hash=received_hash,
        query_id=query_id,
        receiver=receiver,
        start_param=start_param,
        user=user,
        extra=params,
        present_params=present,
    )


def validate_and_decode(
    init_data: str,
    bot_token: str,
    valid_for: Optional[timedelta] = None,
    clock: Optional[Clock] = None,
    json_decoder: Optional[JsonObjectDecoder] = None,
) -> InitData:
    """Verify ``init_data`` and decode it, raising ``SignatureInvalidError`` on mismatch."""

    if not verify_init_data(init_data, bot_token, valid_for, clock):
        raise SignatureInvalidError()

    decoded = decode_init_data(init_data, json_decoder)
    logger.debug(
        "Validated Telegram initData",
        extra={"telegram_user_id": decoded.user.id if decoded.user else None},
    )
    return decoded


def _require(value: Optional[str], name: str) -> None:
    if value is None or not value.strip():
        raise ArgumentMissingError(name)


def _pop_int(params: ParameterMap, param: InitDataParam) -> Optional[int]:
    raw = params.pop(param.value, None)
    if raw is None:
        return None
    try:
        return parse_int64(raw)
    except ValueError as exc:
        raise NumberFormatError(param.value, raw) from exc


def _pop_nested(
    params: ParameterMap,
    param: InitDataParam,
    decode: Callable[[str], NestedT],
) -> Optional[NestedT]:
    raw = params.pop(param.value, None)
    if raw is None or not raw.strip():
        return None
    return decode(raw)
