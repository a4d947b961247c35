"""Shared pydantic base for nested Telegram objects carried in initData."""

from __future__ import annotations

from types import MappingProxyType
from typing import Annotated, Any, ClassVar, Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictInt

Int64 = Annotated[StrictInt, Field(ge=-(2**63), le=2**63 - 1)]
"""Signed 64-bit identifier; JSON booleans and floats are rejected."""


class TelegramObject(BaseModel):
    """Immutable JSON object that keeps keys unknown to its schema.

    Unrecognised keys are stored with their decoded JSON values and exposed
    read-only through :attr:`extra`.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    type_name: ClassVar[str] = "TelegramObject"

    @property
    def extra(self) -> Mapping[str, Any]:
        return MappingProxyType(dict(self.model_extra or {}))

    @classmethod
    def known_properties(cls) -> frozenset[str]:
        return frozenset(cls.model_fields)
