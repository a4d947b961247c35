"""
Verification and decoding of Telegram Mini App initData.

``verify_init_data`` checks the HMAC-SHA256 signature (and optionally the
auth_date window); ``decode_init_data`` turns the payload into typed,
immutable records while keeping unknown parameters in ``extra``.
"""

from tg_init_data.core.freshness import Clock, FixedClock, SystemClock
from tg_init_data.core.query import parse_query_string
from tg_init_data.core.signature import build_check_string, sign_init_data
from tg_init_data.core.telegram import decode_init_data, validate_and_decode, verify_init_data
from tg_init_data.exceptions import (
    ArgumentMissingError,
    AuthDateInvalidError,
    AuthDateMissingError,
    ExpiredError,
    InitDataError,
    JsonParseError,
    JsonPropertyMissingError,
    MalformedPercentEncodingError,
    NumberFormatError,
    PropertyMissingError,
    SignatureInvalidError,
    SignatureMissingError,
    UnknownEnumValueError,
)
from tg_init_data.models import Chat, ChatType, InitData, InitDataParam, User
from tg_init_data.services.init_data_service import InitDataService, get_init_data_service
from tg_init_data.services.json_types import (
    DEFAULT_JSON_DECODER,
    JsonObjectDecoder,
    PydanticJsonObjectDecoder,
)

__all__ = [
    "ArgumentMissingError",
    "AuthDateInvalidError",
    "AuthDateMissingError",
    "Chat",
    "ChatType",
    "Clock",
    "DEFAULT_JSON_DECODER",
    "ExpiredError",
    "FixedClock",
    "InitData",
    "InitDataError",
    "InitDataParam",
    "InitDataService",
    "JsonObjectDecoder",
    "JsonParseError",
    "JsonPropertyMissingError",
    "MalformedPercentEncodingError",
    "NumberFormatError",
    "PropertyMissingError",
    "PydanticJsonObjectDecoder",
    "SignatureInvalidError",
    "SignatureMissingError",
    "SystemClock",
    "UnknownEnumValueError",
    "User",
    "build_check_string",
    "decode_init_data",
    "get_init_data_service",
    "parse_query_string",
    "sign_init_data",
    "validate_and_decode",
    "verify_init_data",
]
