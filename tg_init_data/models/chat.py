"""Telegram chat payload and chat type enumeration."""

from __future__ import annotations

import enum
from typing import ClassVar, Optional

from tg_init_data.exceptions.init_data_error import UnknownEnumValueError
from tg_init_data.models.base import Int64, TelegramObject


class ChatType(str, enum.Enum):
    """Chat types a Mini App can be launched from."""

    SENDER = "sender"
    PRIVATE = "private"
    GROUP = "group"
    SUPERGROUP = "supergroup"
    CHANNEL = "channel"

    @classmethod
    def from_value(cls, value: Optional[str]) -> Optional["ChatType"]:
        """Map a raw parameter to a member; ``None`` passes through."""

        if value is None:
            return None
        try:
            return cls(value)
        except ValueError as exc:
            raise UnknownEnumValueError(cls.__name__, value) from exc


class Chat(TelegramObject):
    """Chat the Mini App was opened from (``chat`` parameter)."""

    type_name: ClassVar[str] = "Chat"

    id: Int64
    type: ChatType
    title: str
    photo_url: Optional[str] = None
    username: Optional[str] = None
