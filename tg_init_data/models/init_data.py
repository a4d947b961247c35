"""Decoded representation of a Telegram Mini App initData payload."""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from tg_init_data.models.chat import Chat, ChatType
from tg_init_data.models.user import User


class InitDataParam(str, enum.Enum):
    """Top-level initData parameter names."""

    AUTH_DATE = "auth_date"
    CAN_SEND_AFTER = "can_send_after"
    CHAT = "chat"
    CHAT_TYPE = "chat_type"
    CHAT_INSTANCE = "chat_instance"
    HASH = "hash"
    QUERY_ID = "query_id"
    RECEIVER = "receiver"
    START_PARAM = "start_param"
    USER = "user"


KNOWN_PARAMS: frozenset[str] = frozenset(param.value for param in InitDataParam)


class InitData(BaseModel):
    """Typed initData with every unrecognised parameter kept in ``extra``."""

    auth_date: int
    can_send_after: Optional[int] = None
    chat: Optional[Chat] = None
    chat_type: Optional[ChatType] = None
    chat_instance: Optional[str] = None
    hash: str
    query_id: Optional[str] = None
    receiver: Optional[User] = None
    start_param: Optional[str] = None
    user: Optional[User] = None
    extra: Mapping[str, Optional[str]] = Field(default_factory=dict, validate_default=True)
    present_params: FrozenSet[str] = Field(default_factory=frozenset, exclude=True, repr=False)
    """Known parameter names seen in the source payload, including valueless ones."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("extra", mode="after")
    @classmethod
    def _freeze_extra(cls, value: Mapping[str, Optional[str]]) -> Mapping[str, Optional[str]]:
        return MappingProxyType(dict(value))

    @field_serializer("extra")
    def _serialize_extra(self, value: Mapping[str, Optional[str]]) -> Dict[str, Optional[str]]:
        return dict(value)

    @model_validator(mode="after")
    def _validate_extra_keys(self) -> "InitData":
        clashing = sorted(KNOWN_PARAMS.intersection(self.extra))
        if clashing:
            raise ValueError(f"extra must not contain known parameters: {', '.join(clashing)}")
        unknown = sorted(self.present_params - KNOWN_PARAMS)
        if unknown:
            raise ValueError(f"present_params must name known parameters: {', '.join(unknown)}")
        return self

    def __hash__(self) -> int:
        fields: tuple[Any, ...] = tuple(
            getattr(self, name) for name in type(self).model_fields if name != "extra"
        )
        return hash((type(self), fields, tuple(sorted(self.extra.items()))))

    def to_params(self) -> Dict[str, Optional[str]]:
        """Re-encode known fields as query parameters and merge ``extra``.

        Nested objects are rendered as compact JSON. Known parameters listed in
        ``present_params`` without a value are emitted as ``None``, so the result
        has the same key set as the payload this record was decoded from.
        """

        params: Dict[str, Optional[str]] = dict(self.extra)
        params[InitDataParam.AUTH_DATE.value] = str(self.auth_date)
        params[InitDataParam.HASH.value] = self.hash
        if self.can_send_after is not None:
            params[InitDataParam.CAN_SEND_AFTER.value] = str(self.can_send_after)
        if self.chat is not None:
            params[InitDataParam.CHAT.value] = self.chat.model_dump_json(exclude_none=True)
        if self.chat_type is not None:
            params[InitDataParam.CHAT_TYPE.value] = self.chat_type.value
        if self.chat_instance is not None:
            params[InitDataParam.CHAT_INSTANCE.value] = self.chat_instance
        if self.query_id is not None:
            params[InitDataParam.QUERY_ID.value] = self.query_id
        if self.receiver is not None:
            params[InitDataParam.RECEIVER.value] = self.receiver.model_dump_json(exclude_none=True)
        if self.start_param is not None:
            params[InitDataParam.START_PARAM.value] = self.start_param
        if self.user is not None:
            params[InitDataParam.USER.value] = self.user.model_dump_json(exclude_none=True)
        for name in self.present_params:
            params.setdefault(name, None)
        return params
