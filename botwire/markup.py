"""Keyboard buttons and reply markup builders.

Button constructors return plain dicts carrying a ``hide`` flag, which lets
keyboards be declared conditionally::

    from botwire import markup

    kb = markup.inline_keyboard([
        markup.callback("Approve", "approve"),
        markup.callback("Delete", "delete", hide=not is_admin),
    ])
    await bot.send_message(chat_id, "Pick one", {"reply_markup": kb})

The markup builders drop hidden buttons and strip the flag before the
buttons reach the wire.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Sequence, Union

from botwire.models import ForceReply, InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove

Button = Dict[str, Any]
Buttons = Union[Sequence[Button], Sequence[Sequence[Button]]]


# ── Reply keyboard buttons ───────────────────────────────────────────────────


def text(text: str, hide: bool = False, **extra: Any) -> Button:
    return {"text": text, "hide": hide, **extra}


def contact_request(text: str, hide: bool = False) -> Button:
    return {"text": text, "request_contact": True, "hide": hide}


def location_request(text: str, hide: bool = False) -> Button:
    return {"text": text, "request_location": True, "hide": hide}


def poll_request(text: str, type: Optional[Literal["quiz", "regular"]] = None, hide: bool = False) -> Button:
    """Ask the user to create a poll; *type* restricts the kind allowed."""
    request: Dict[str, Any] = {} if type is None else {"type": type}
    return {"text": text, "request_poll": request, "hide": hide}


def user_request(text: str, request_id: int, hide: bool = False, **extra: Any) -> Button:
    """Ask the user to pick users; *request_id* must fit in a signed 32-bit int."""
    return {"text": text, "request_users": {"request_id": request_id, **extra}, "hide": hide}


def bot_request(text: str, request_id: int, hide: bool = False, **extra: Any) -> Button:
    return {
        "text": text,
        "request_users": {"request_id": request_id, "user_is_bot": True, **extra},
        "hide": hide,
    }


def group_request(text: str, request_id: int, hide: bool = False, **extra: Any) -> Button:
    return {
        "text": text,
        "request_chat": {"request_id": request_id, "chat_is_channel": False, **extra},
        "hide": hide,
    }


def channel_request(text: str, request_id: int, hide: bool = False, **extra: Any) -> Button:
    return {
        "text": text,
        "request_chat": {"request_id": request_id, "chat_is_channel": True, **extra},
        "hide": hide,
    }


# ── Inline keyboard buttons ──────────────────────────────────────────────────


def url(text: str, url: str, hide: bool = False, **extra: Any) -> Button:
    return {"text": text, "url": url, "hide": hide, **extra}


def callback(text: str, data: str, hide: bool = False, **extra: Any) -> Button:
    return {"text": text, "callback_data": data, "hide": hide, **extra}


def switch_to_chat(text: str, value: str, hide: bool = False, **extra: Any) -> Button:
    return {"text": text, "switch_inline_query": value, "hide": hide, **extra}


def switch_to_current_chat(text: str, value: str, hide: bool = False, **extra: Any) -> Button:
    return {"text": text, "switch_inline_query_current_chat": value, "hide": hide, **extra}


def game(text: str, hide: bool = False, **extra: Any) -> Button:
    """Launch button for a game; must be the first button of the first row."""
    return {"text": text, "callback_game": {}, "hide": hide, **extra}


def pay(text: str, hide: bool = False, **extra: Any) -> Button:
    """Pay button; must be the first button of the first row."""
    return {"text": text, "pay": True, "hide": hide, **extra}


def login(
    text: str,
    url: str,
    forward_text: Optional[str] = None,
    bot_username: Optional[str] = None,
    request_write_access: Optional[bool] = None,
    hide: bool = False,
    **extra: Any,
) -> Button:
    options = {
        "forward_text": forward_text,
        "bot_username": bot_username,
        "request_write_access": request_write_access,
    }
    login_url = {key: value for key, value in options.items() if value is not None}
    login_url["url"] = url
    return {"text": text, "hide": hide, "login_url": login_url, **extra}


def web_app(text: str, url: str, hide: bool = False, **extra: Any) -> Button:
    """Web App button; valid on both inline and reply keyboards."""
    return {"text": text, "hide": hide, "web_app": {"url": url}, **extra}


# ── Markup builders ──────────────────────────────────────────────────────────


def inline_keyboard(buttons: Buttons, columns: Optional[int] = None) -> InlineKeyboardMarkup:
    """Build an inline keyboard from a flat list or from explicit rows."""
    return InlineKeyboardMarkup(inline_keyboard=_layout(buttons, columns))


def keyboard(
    buttons: Buttons,
    columns: Optional[int] = None,
    resize: Optional[bool] = None,
    one_time: Optional[bool] = None,
    persistent: Optional[bool] = None,
    placeholder: Optional[str] = None,
    selective: Optional[bool] = None,
) -> ReplyKeyboardMarkup:
    """Build a custom reply keyboard."""
    return ReplyKeyboardMarkup(
        keyboard=_layout(buttons, columns),
        resize_keyboard=resize,
        one_time_keyboard=one_time,
        is_persistent=persistent,
        input_field_placeholder=placeholder,
        selective=selective,
    )


def remove_keyboard(selective: Optional[bool] = None) -> ReplyKeyboardRemove:
    return ReplyKeyboardRemove(selective=selective)


def force_reply(placeholder: Optional[str] = None, selective: Optional[bool] = None) -> ForceReply:
    return ForceReply(input_field_placeholder=placeholder, selective=selective)


def _layout(buttons: Buttons, columns: Optional[int]) -> List[List[Button]]:
    """Split *buttons* into rows, dropping hidden ones and their ``hide`` flag.

    Explicit rows are kept as given; a flat list is laid out *columns*
    buttons per row (a single row when *columns* is omitted).  Rows left
    empty after hiding are removed.
    """
    if buttons and all(isinstance(row, (list, tuple)) for row in buttons):
        rows = [_visible(row) for row in buttons]
        return [row for row in rows if row]

    visible = _visible(buttons)
    if not visible:
        return []
    if columns is None or columns <= 0:
        columns = len(visible)
    return [visible[start:start + columns] for start in range(0, len(visible), columns)]


def _visible(buttons: Sequence[Button]) -> List[Button]:
    return [
        {key: value for key, value in button.items() if key != "hide"}
        for button in buttons
        if not button.get("hide")
    ]
