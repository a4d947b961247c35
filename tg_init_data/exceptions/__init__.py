"""Error taxonomy for initData verification and decoding."""

from tg_init_data.exceptions.init_data_error import (
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

__all__ = [
    "ArgumentMissingError",
    "AuthDateInvalidError",
    "AuthDateMissingError",
    "ExpiredError",
    "InitDataError",
    "JsonParseError",
    "JsonPropertyMissingError",
    "MalformedPercentEncodingError",
    "NumberFormatError",
    "PropertyMissingError",
    "SignatureInvalidError",
    "SignatureMissingError",
    "UnknownEnumValueError",
]
