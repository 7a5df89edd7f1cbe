"""Pydantic data models for the Telegram Bot API payloads this client touches.

Only the objects the client builds, inspects or returns are modelled here;
every other API object travels as a plain ``dict``.  Models are serialised by
the transport with ``model_dump(by_alias=True, exclude_none=True)``.
"""

from __future__ import annotations

import os
from typing import IO, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


# ── Upload descriptors ───────────────────────────────────────────────────────


class InputFile:
    """Contents of a file to be uploaded with ``multipart/form-data``.

    Build one with :meth:`from_path`, :meth:`from_bytes`, :meth:`from_stream`
    or :meth:`from_url`.  A plain ``str`` passed where a file is expected is
    a ``file_id`` or an HTTP URL that Telegram downloads itself and never
    needs an ``InputFile``.
    """

    def __init__(
        self,
        path: Optional[str] = None,
        data: Optional[bytes] = None,
        stream: Optional[IO[bytes]] = None,
        filename: Optional[str] = None,
    ) -> None:
        if sum(source is not None for source in (path, data, stream)) != 1:
            raise ValueError("InputFile needs exactly one of path, data or stream")
        self.path = path
        self.data = data
        self.stream = stream
        if filename is None and path is not None:
            filename = os.path.basename(path)
        self.filename = filename or "file"

    @classmethod
    def from_path(cls, path: str, filename: Optional[str] = None) -> "InputFile":
        return cls(path=path, filename=filename)

    @classmethod
    def from_bytes(cls, data: bytes, filename: str) -> "InputFile":
        return cls(data=data, filename=filename)

    @classmethod
    def from_stream(cls, stream: IO[bytes], filename: str) -> "InputFile":
        return cls(stream=stream, filename=filename)

    @classmethod
    def from_url(cls, url: str, filename: Optional[str] = None) -> "InputFileByURL":
        return InputFileByURL(url, filename)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(filename={self.filename!r})"


class InputFileByURL(InputFile):
    """An upload whose bytes are fetched from *url* by the client before sending.

    Telegram cannot take video notes this way, so ``send_video_note`` refuses it.
    """

    def __init__(self, url: str, filename: Optional[str] = None) -> None:
        self.url = url
        self.path = None
        self.data = None
        self.stream = None
        self.filename = filename or os.path.basename(url.split("?", 1)[0]) or "file"


# ── Formatted text ───────────────────────────────────────────────────────────


class MessageEntity(BaseModel):
    """One special entity in a text message: hashtag, bold, link, ….

    ``offset`` and ``length`` are measured in UTF-16 code units.
    """

    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional["User"] = None
    language: Optional[str] = None
    custom_emoji_id: Optional[str] = None

    model_config = {"populate_by_name": True}


class FmtString(BaseModel):
    """Text together with the entity spans that format it.

    The same value is used for message text and for media captions; the
    operation it is passed to decides which wire fields it fills.
    """

    text: str
    entities: List[MessageEntity] = Field(default_factory=list)
    parse_mode: Optional[str] = None

    model_config = {"populate_by_name": True}

    def __str__(self) -> str:
        return self.text

    def __add__(self, other: Union["FmtString", str]) -> "FmtString":
        from botwire.fmt import join

        return join([self, other])

    def __radd__(self, other: str) -> "FmtString":
        from botwire.fmt import join

        return join([other, self])


# ── Returned objects ─────────────────────────────────────────────────────────


class User(BaseModel):
    """A Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    is_premium: Optional[bool] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None

    model_config = {"populate_by_name": True}


class Chat(BaseModel):
    """A chat."""

    id: int
    type: str
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_forum: Optional[bool] = None

    model_config = {"populate_by_name": True}


class Message(BaseModel):
    """A message.  Only the fields the client reads are declared."""

    message_id: int
    date: int
    chat: Chat
    from_field: Optional[User] = Field(None, alias="from")
    message_thread_id: Optional[int] = None
    text: Optional[str] = None
    entities: Optional[List[MessageEntity]] = None
    caption: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None

    model_config = {"populate_by_name": True, "extra": "allow"}


class MessageId(BaseModel):
    """A unique message identifier."""

    message_id: int

    model_config = {"populate_by_name": True}


class File(BaseModel):
    """A file ready to be downloaded.

    ``file_path`` is only filled in by ``getFile``.  The hosted API returns a
    path relative to the file endpoint; a local Bot API server returns an
    absolute filesystem path.
    """

    file_id: str
    file_unique_id: str
    file_size: Optional[int] = None
    file_path: Optional[str] = None

    model_config = {"populate_by_name": True}


class WebhookInfo(BaseModel):
    """Current status of a webhook."""

    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: Optional[str] = None
    last_error_date: Optional[int] = None
    last_error_message: Optional[str] = None
    last_synchronization_error_date: Optional[int] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None

    model_config = {"populate_by_name": True}


# ── Request objects ──────────────────────────────────────────────────────────


class ChatPermissions(BaseModel):
    """Actions a non-administrator user is allowed to take in a chat."""

    can_send_messages: Optional[bool] = None
    can_send_audios: Optional[bool] = None
    can_send_documents: Optional[bool] = None
    can_send_photos: Optional[bool] = None
    can_send_videos: Optional[bool] = None
    can_send_video_notes: Optional[bool] = None
    can_send_voice_notes: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    can_manage_topics: Optional[bool] = None

    model_config = {"populate_by_name": True}


class BotCommand(BaseModel):
    """A bot command shown in the client's command menu."""

    command: str
    description: str

    model_config = {"populate_by_name": True}


class LabeledPrice(BaseModel):
    """A portion of the price for goods or services, in the smallest currency unit."""

    label: str
    amount: int

    model_config = {"populate_by_name": True}


class ShippingOption(BaseModel):
    """One shipping option."""

    id: str
    title: str
    prices: List[LabeledPrice]

    model_config = {"populate_by_name": True}


class MaskPosition(BaseModel):
    """Position on faces where a mask sticker should be placed by default."""

    point: Literal["forehead", "eyes", "mouth", "chin"]
    x_shift: float
    y_shift: float
    scale: float

    model_config = {"populate_by_name": True}


class InlineKeyboardButton(BaseModel):
    """One button of an inline keyboard.  Exactly one optional action field must be set."""

    text: str
    url: Optional[str] = None
    callback_data: Optional[str] = None
    web_app: Optional[Dict[str, str]] = None
    login_url: Optional[Dict[str, Any]] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    callback_game: Optional[Dict[str, Any]] = None
    pay: Optional[bool] = None
    style: Optional[str] = None
    icon_custom_emoji_id: Optional[str] = None

    model_config = {"populate_by_name": True, "extra": "allow"}


class InlineKeyboardMarkup(BaseModel):
    """An inline keyboard that appears right next to the message it belongs to."""

    inline_keyboard: List[List[InlineKeyboardButton]]

    model_config = {"populate_by_name": True}


class KeyboardButton(BaseModel):
    """One button of a reply keyboard."""

    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None
    request_poll: Optional[Dict[str, Any]] = None
    request_users: Optional[Dict[str, Any]] = None
    request_chat: Optional[Dict[str, Any]] = None
    web_app: Optional[Dict[str, str]] = None
    style: Optional[str] = None
    icon_custom_emoji_id: Optional[str] = None

    model_config = {"populate_by_name": True, "extra": "allow"}


class ReplyKeyboardMarkup(BaseModel):
    """A custom keyboard with reply options."""

    keyboard: List[List[KeyboardButton]]
    is_persistent: Optional[bool] = None
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None

    model_config = {"populate_by_name": True}


class ReplyKeyboardRemove(BaseModel):
    """Asks clients to remove the custom keyboard."""

    remove_keyboard: Literal[True] = True
    selective: Optional[bool] = None

    model_config = {"populate_by_name": True}


class ForceReply(BaseModel):
    """Asks clients to display a reply interface to the user."""

    force_reply: Literal[True] = True
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None

    model_config = {"populate_by_name": True}


ReplyMarkup = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply]


class _InputMediaBase(BaseModel):
    media: Union[str, InputFile]
    caption: Optional[Union[str, FmtString]] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None

    model_config = {"populate_by_name": True, "arbitrary_types_allowed": True}


class InputMediaPhoto(_InputMediaBase):
    """A photo to be sent as part of an album or an edit."""

    type: Literal["photo"] = "photo"
    show_caption_above_media: Optional[bool] = None
    has_spoiler: Optional[bool] = None


class InputMediaVideo(_InputMediaBase):
    """A video to be sent."""

    type: Literal["video"] = "video"
    thumbnail: Optional[Union[str, InputFile]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None
    has_spoiler: Optional[bool] = None


class InputMediaAnimation(_InputMediaBase):
    """An animation (GIF or H.264/MPEG-4 AVC video without sound) to be sent."""

    type: Literal["animation"] = "animation"
    thumbnail: Optional[Union[str, InputFile]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    has_spoiler: Optional[bool] = None


class InputMediaAudio(_InputMediaBase):
    """An audio file to be treated as music."""

    type: Literal["audio"] = "audio"
    thumbnail: Optional[Union[str, InputFile]] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None


class InputMediaDocument(_InputMediaBase):
    """A general file."""

    type: Literal["document"] = "document"
    thumbnail: Optional[Union[str, InputFile]] = None
    disable_content_type_detection: Optional[bool] = None


InputMedia = Union[InputMediaPhoto, InputMediaVideo, InputMediaAnimation, InputMediaAudio, InputMediaDocument]


MessageEntity.model_rebuild()
FmtString.model_rebuild()
Message.model_rebuild()
