"""Typed records decoded from initData."""

from tg_init_data.models.base import TelegramObject
from tg_init_data.models.chat import Chat, ChatType
from tg_init_data.models.init_data import KNOWN_PARAMS, InitData, InitDataParam
from tg_init_data.models.user import User

__all__ = [
    "Chat",
    "ChatType",
    "InitData",
    "InitDataParam",
    "KNOWN_PARAMS",
    "TelegramObject",
    "User",
]
