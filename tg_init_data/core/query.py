"""Decoding of ``application/x-www-form-urlencoded`` initData strings."""

from __future__ import annotations

import re
from typing import Dict, Optional
from urllib.parse import unquote_plus

from tg_init_data.exceptions.init_data_error import MalformedPercentEncodingError

ParameterMap = Dict[str, Optional[str]]

_BROKEN_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_INT64 = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


def parse_int64(raw: str) -> int:
    """Parse a signed 64-bit decimal integer, rejecting padding and separators."""

    if not _INT64.fullmatch(raw):
        raise ValueError(f"not an integer: {raw!r}")
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer out of range: {raw!r}")
    return value


def parse_query_string(raw: str) -> ParameterMap:
    """Split ``raw`` into a key -> value mapping.

    A segment without ``=`` or with nothing after it maps to ``None``.
    Duplicate keys keep the last value. Empty segments are skipped.
    """

    parameters: ParameterMap = {}
    for segment in raw.split("&"):
        if not segment:
            continue
        key, separator, value = segment.partition("=")
        decoded_key = _decode_component(key, segment)
        parameters[decoded_key] = _decode_component(value, decoded_key) if separator and value else None
    return parameters


def _decode_component(component: str, context: str) -> str:
    # unquote_plus leaves stray '%' untouched, so reject them explicitly
    if _BROKEN_ESCAPE.search(component):
        raise MalformedPercentEncodingError(context)
    try:
        return unquote_plus(component, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as exc:
        raise MalformedPercentEncodingError(context) from exc
