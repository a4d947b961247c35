"""Exceptions related to Telegram WebApp initData validation and decoding."""

from __future__ import annotations

from typing import Any, Dict, Optional


class InitDataError(Exception):
    """Raised when Telegram initData fails validation or decoding."""

    def __init__(
        self,
        message: str,
        *,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class ArgumentMissingError(InitDataError, ValueError):
    """A required argument is empty or blank."""

    def __init__(self, argument: str) -> None:
        super().__init__(
            f'Argument "{argument}" is null or empty',
            error_code="ARGUMENT_MISSING",
            details={"argument": argument},
        )


class MalformedPercentEncodingError(InitDataError, ValueError):
    """A query segment is not valid UTF-8 percent-encoding."""

    def __init__(self, segment: str) -> None:
        super().__init__(
            f"Malformed percent-encoding in initData segment: {segment!r}",
            error_code="MALFORMED_PERCENT_ENCODING",
            details={"segment": segment},
        )


class PropertyMissingError(InitDataError):
    """A required property is absent."""

    def __init__(self, message: str, *, error_code: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, error_code=error_code, details=details)


class SignatureMissingError(PropertyMissingError):
    def __init__(self) -> None:
        super().__init__(
            "Property 'hash' is missing",
            error_code="SIGNATURE_MISSING",
            details={"property": "hash"},
        )


class SignatureInvalidError(InitDataError):
    """Signature is present but does not match the payload."""

    def __init__(self) -> None:
        super().__init__("initData signature mismatch", error_code="SIGNATURE_INVALID")


class AuthDateMissingError(PropertyMissingError):
    def __init__(self) -> None:
        super().__init__(
            "Property 'auth_date' is missing",
            error_code="AUTH_DATE_MISSING",
            details={"property": "auth_date"},
        )


class AuthDateInvalidError(InitDataError):
    def __init__(self, value: str) -> None:
        super().__init__(
            f"auth_date is invalid: {value}",
            error_code="AUTH_DATE_INVALID",
            details={"value": value},
        )


class ExpiredError(InitDataError):
    """auth_date is outside of the allowed validity window."""

    def __init__(self, auth_date: int, now: int) -> None:
        super().__init__(
            f"initData expired: auth_date={auth_date}, now={now}",
            error_code="EXPIRED",
            details={"auth_date": auth_date, "now": now},
        )
        self.auth_date = auth_date
        self.now = now


class NumberFormatError(InitDataError, ValueError):
    def __init__(self, key: str, value: str) -> None:
        super().__init__(
            f"Unable to parse {key}: {value}",
            error_code="NUMBER_FORMAT",
            details={"key": key, "value": value},
        )


class UnknownEnumValueError(InitDataError, ValueError):
    def __init__(self, enum_name: str, value: str) -> None:
        super().__init__(
            f'Unknown {enum_name} value "{value}"',
            error_code="UNKNOWN_ENUM_VALUE",
            details={"enum": enum_name, "value": value},
        )


class JsonParseError(InitDataError):
    """Nested JSON object could not be parsed into its type."""

    def __init__(self, type_name: str) -> None:
        super().__init__(
            f"Unable to parse: {type_name}",
            error_code="JSON_PARSE_FAILURE",
            details={"type": type_name},
        )
        self.type_name = type_name


class JsonPropertyMissingError(PropertyMissingError):
    def __init__(self, type_name: str, property_name: str) -> None:
        super().__init__(
            f'Required property "{property_name}" is not provided or null! Type: {type_name}',
            error_code="JSON_PROPERTY_MISSING",
            details={"type": type_name, "property": property_name},
        )
        self.type_name = type_name
        self.property_name = property_name
