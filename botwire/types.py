"""Typed optional-field bags (``extra``) for the most used request builders.

Every key is optional.  Builders accept any ``Mapping[str, Any]`` as well,
so fields added to the Bot API later can be passed without waiting for a
new release; these ``TypedDict``s document the common ones for type checkers.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Mapping, TypedDict, Union

from botwire.models import FmtString, InputFile, MessageEntity, ReplyMarkup

Extra = Mapping[str, Any]

ParseMode = Literal["HTML", "Markdown", "MarkdownV2"]

ChatAction = Literal[
    "typing",
    "upload_photo",
    "record_video",
    "upload_video",
    "record_voice",
    "upload_voice",
    "upload_document",
    "choose_sticker",
    "find_location",
    "record_video_note",
    "upload_video_note",
]


class ExtraSend(TypedDict, total=False):
    """Fields shared by every ``send*`` method."""

    business_connection_id: str
    message_thread_id: int
    direct_messages_topic_id: int
    disable_notification: bool
    protect_content: bool
    allow_paid_broadcast: bool
    message_effect_id: str
    reply_parameters: Dict[str, Any]
    reply_markup: Union[ReplyMarkup, Dict[str, Any]]


class ExtraReplyMessage(ExtraSend, total=False):
    """``sendMessage`` options."""

    parse_mode: ParseMode
    entities: List[MessageEntity]
    link_preview_options: Dict[str, Any]


class ExtraEditMessageText(TypedDict, total=False):
    business_connection_id: str
    parse_mode: ParseMode
    entities: List[MessageEntity]
    link_preview_options: Dict[str, Any]
    reply_markup: Union[ReplyMarkup, Dict[str, Any]]


class ExtraCaption(TypedDict, total=False):
    """Caption fields; ``caption`` may be formatted."""

    caption: Union[str, FmtString]
    parse_mode: ParseMode
    caption_entities: List[MessageEntity]
    show_caption_above_media: bool


class ExtraPhoto(ExtraSend, ExtraCaption, total=False):
    has_spoiler: bool


class ExtraDocument(ExtraSend, ExtraCaption, total=False):
    thumbnail: Union[str, InputFile]
    disable_content_type_detection: bool


class ExtraAudio(ExtraSend, ExtraCaption, total=False):
    duration: int
    performer: str
    title: str
    thumbnail: Union[str, InputFile]


class ExtraVideo(ExtraSend, ExtraCaption, total=False):
    duration: int
    width: int
    height: int
    thumbnail: Union[str, InputFile]
    cover: Union[str, InputFile]
    start_timestamp: int
    has_spoiler: bool
    supports_streaming: bool


class ExtraAnimation(ExtraSend, ExtraCaption, total=False):
    duration: int
    width: int
    height: int
    thumbnail: Union[str, InputFile]
    has_spoiler: bool


class ExtraVoice(ExtraSend, ExtraCaption, total=False):
    duration: int


class ExtraVideoNote(ExtraSend, total=False):
    duration: int
    length: int
    thumbnail: Union[str, InputFile]


class ExtraCopyMessage(ExtraSend, ExtraCaption, total=False):
    video_start_timestamp: int


class ExtraEditMessageCaption(TypedDict, total=False):
    business_connection_id: str
    parse_mode: ParseMode
    caption_entities: List[MessageEntity]
    show_caption_above_media: bool
    reply_markup: Union[ReplyMarkup, Dict[str, Any]]


class ExtraPoll(ExtraSend, total=False):
    question_parse_mode: ParseMode
    question_entities: List[MessageEntity]
    is_anonymous: bool
    allows_multiple_answers: bool
    correct_option_id: int
    explanation: str
    explanation_parse_mode: ParseMode
    explanation_entities: List[MessageEntity]
    open_period: int
    close_date: int
    is_closed: bool


class ExtraSetWebhook(TypedDict, total=False):
    certificate: InputFile
    ip_address: str
    max_connections: int
    allowed_updates: List[str]
    drop_pending_updates: bool
    secret_token: str


class ExtraAnswerCbQuery(TypedDict, total=False):
    show_alert: bool
    url: str
    cache_time: int


class ExtraAnswerInlineQuery(TypedDict, total=False):
    cache_time: int
    is_personal: bool
    next_offset: str
    button: Dict[str, Any]
