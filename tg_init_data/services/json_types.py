"""Decoding of the JSON objects embedded in initData (``user``, ``receiver``, ``chat``)."""

from __future__ import annotations

from typing import Any, Protocol, Type, TypeVar

from pydantic import ValidationError

from tg_init_data.core.logging import get_logger
from tg_init_data.exceptions.init_data_error import (
    InitDataError,
    JsonParseError,
    JsonPropertyMissingError,
    UnknownEnumValueError,
)
from tg_init_data.models.base import TelegramObject
from tg_init_data.models.chat import Chat, ChatType
from tg_init_data.models.user import User

logger = get_logger(__name__)

ObjectT = TypeVar("ObjectT", bound=TelegramObject)


class JsonObjectDecoder(Protocol):
    """Capability that turns a JSON object string into a typed record."""

    def decode_user(self, text: str) -> User: ...

    def decode_chat(self, text: str) -> Chat: ...


class PydanticJsonObjectDecoder:
    """Default decoder backed by pydantic model validation.

    Holds no mutable state, so a single instance can be shared freely.
    """

    def decode_user(self, text: str) -> User:
        return self._decode(User, text)

    def decode_chat(self, text: str) -> Chat:
        return self._decode(Chat, text)

    @staticmethod
    def _decode(model: Type[ObjectT], text: str) -> ObjectT:
        try:
            return model.model_validate_json(text)
        except ValidationError as exc:
            error = _translate_validation_error(model, exc)
            logger.debug(
                "Failed to decode %s from initData: %s",
                model.type_name,
                error.error_code,
            )
            raise error from exc


def _translate_validation_error(model: Type[TelegramObject], exc: ValidationError) -> InitDataError:
    known = model.known_properties()
    for detail in exc.errors():
        error_type = detail["type"]
        loc = detail["loc"]
        if error_type == "json_invalid":
            return JsonParseError(model.type_name)
        if len(loc) != 1 or loc[0] not in known:
            continue
        field = str(loc[0])
        if error_type == "missing" or detail.get("input") is None:
            return JsonPropertyMissingError(model.type_name, field)
        if error_type == "enum" and model is Chat and field == "type":
            return UnknownEnumValueError(ChatType.__name__, _as_text(detail.get("input")))
    return JsonParseError(model.type_name)


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


DEFAULT_JSON_DECODER: JsonObjectDecoder = PydanticJsonObjectDecoder()
