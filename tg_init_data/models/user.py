"""Telegram WebApp user payload (``user`` and ``receiver`` parameters)."""

from __future__ import annotations

from typing import ClassVar, Optional

from tg_init_data.models.base import Int64, TelegramObject


class User(TelegramObject):
    """User or bot described in initData."""

    type_name: ClassVar[str] = "User"

    id: Int64
    first_name: str
    is_bot: Optional[bool] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    is_premium: Optional[bool] = None
    allows_write_to_pm: Optional[bool] = None
    added_to_attachment_menu: Optional[bool] = None
    photo_url: Optional[str] = None
