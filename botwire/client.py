"""Telegram -- request builders for every Telegram Bot API method.

Each public coroutine maps to one remote method.  Required parameters are
positional; every other documented field goes into the trailing ``extra``
mapping.  Requests are assembled by :func:`_payload` in a fixed layer order
and handed to :meth:`~botwire.transport.ApiClient.call_api`, whose result is
returned as is (or validated into a model where one exists).

Usage::

    from botwire import Telegram, fmt

    bot = Telegram(token)
    await bot.send_message(chat_id, fmt.bold("hello"), {"disable_notification": True})
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Literal, Mapping, Optional, Sequence, Union

from botwire.files import FileRef, local_path, resolve_download_location
from botwire.fmt import FormattedText, TextContext, fmt_caption, has_entities, normalise_text
from botwire.models import (
    BotCommand,
    ChatPermissions,
    File,
    InlineKeyboardMarkup,
    InputFile,
    InputFileByURL,
    InputMedia,
    MaskPosition,
    Message,
    MessageId,
    ShippingOption,
    User,
    WebhookInfo,
)
from botwire.options import DeploymentContext
from botwire.transport import ApiClient
from botwire.types import (
    ChatAction,
    Extra,
    ExtraAnimation,
    ExtraAnswerCbQuery,
    ExtraAnswerInlineQuery,
    ExtraAudio,
    ExtraCopyMessage,
    ExtraDocument,
    ExtraEditMessageCaption,
    ExtraEditMessageText,
    ExtraPhoto,
    ExtraPoll,
    ExtraReplyMessage,
    ExtraSend,
    ExtraSetWebhook,
    ExtraVideo,
    ExtraVideoNote,
    ExtraVoice,
)

ChatId = Union[int, str]
FileInput = Union[InputFile, str]
StoryActivePeriod = Literal[21600, 43200, 86400, 172800]

# Fixed subscription period (30 days) the Bot API currently accepts.
SUBSCRIPTION_PERIOD = 2592000


def _payload(
    fields: Mapping[str, Any],
    extra: Optional[Mapping[str, Any]] = None,
    injected: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Assemble one request: positional *fields*, then *extra*, then *injected*.

    Absent (``None``) values are left out.  Each layer overrides the one
    before it for the same key.  When *injected* carries entities, any
    ``parse_mode`` is removed since the API rejects both together.
    """
    payload = {key: value for key, value in fields.items() if value is not None}
    if extra:
        payload.update((key, value) for key, value in extra.items() if value is not None)
    if injected:
        if has_entities(injected):
            payload.pop("parse_mode", None)
        payload.update(injected)
    return payload


class Telegram(ApiClient):
    """Client-side surface of the Telegram Bot API.

    Every public coroutine corresponds to a Telegram Bot API method.  Errors
    reported by the API surface as :class:`~botwire.exceptions.APIException`,
    network failures as :class:`~botwire.exceptions.TransportError`.
    """

    # ------------------------------------------------------------------
    #  Bot & updates
    # ------------------------------------------------------------------

    async def get_me(self) -> User:
        """A simple method for testing your bot's auth token. Returns basic information about the bot."""
        return User.model_validate(await self.call_api("getMe", {}))

    async def log_out(self) -> bool:
        """Log out from the cloud Bot API server before launching the bot locally."""
        return await self.call_api("logOut", {})

    async def close(self) -> bool:
        """Close the bot instance before moving it from one local server to another."""
        return await self.call_api("close", {})

    async def get_updates(
        self,
        timeout: Optional[int] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        allowed_updates: Optional[Sequence[str]] = None,
    ) -> List[Dict[str, Any]]:
        """Receive incoming updates using long polling."""
        return await self.call_api("getUpdates", _payload({
            "allowed_updates": list(allowed_updates) if allowed_updates is not None else None,
            "limit": limit,
            "offset": offset,
            "timeout": timeout,
        }))

    async def set_webhook(self, url: str, extra: Optional[ExtraSetWebhook] = None) -> bool:
        """Specify a url to receive incoming updates via an outgoing webhook.

        Pass an empty string as *url* to remove webhook integration.
        """
        return await self.call_api("setWebhook", _payload({"url": url}, extra))

    async def delete_webhook(self, extra: Optional[Extra] = None) -> bool:
        """Remove webhook integration (``drop_pending_updates`` in *extra*)."""
        return await self.call_api("deleteWebhook", _payload({}, extra))

    async def get_webhook_info(self) -> WebhookInfo:
        """Get current webhook status."""
        return WebhookInfo.model_validate(await self.call_api("getWebhookInfo", {}))

    # ------------------------------------------------------------------
    #  Files
    # ------------------------------------------------------------------

    async def get_file(self, file_id: str) -> File:
        """Get basic info about a file and prepare it for downloading."""
        return File.model_validate(await self.call_api("getFile", {"file_id": file_id}))

    async def get_file_link(self, file_ref: FileRef) -> str:
        """Get the download location of a file.

        *file_ref* is a ``file_id`` or a :class:`~botwire.models.File`; a
        lookup is made unless the ``File`` already carries its ``file_path``.
        Returns an ``https://`` URL for the hosted API and a ``file://`` URI
        when a local Bot API server reports an absolute path.
        """
        return await resolve_download_location(file_ref, self.options, self.get_file)

    async def download_file(self, file_ref: FileRef) -> bytes:
        """Fetch the contents of a file, from disk for a local server or over HTTP."""
        location = await self.get_file_link(file_ref)
        path = local_path(location)
        if path is not None:
            return await asyncio.to_thread(_read_bytes, path)
        return await self.fetch(location)

    # ------------------------------------------------------------------
    #  Sending messages
    # ------------------------------------------------------------------

    async def send_message(
        self, chat_id: ChatId, text: FormattedText, extra: Optional[ExtraReplyMessage] = None
    ) -> Dict[str, Any]:
        """Send a text message. On success, the sent Message is returned."""
        return await self.call_api("sendMessage", _payload(
            {"chat_id": chat_id}, extra, normalise_text(text, TextContext.MESSAGE)
        ))

    async def send_message_draft(
        self, chat_id: int, draft_id: int, text: str, extra: Optional[Extra] = None
    ) -> bool:
        """Stream a partial message to a user while the message is being generated."""
        return await self.call_api("sendMessageDraft", _payload(
            {"text": text, "chat_id": chat_id, "draft_id": draft_id}, extra
        ))

    async def forward_message(
        self, chat_id: ChatId, from_chat_id: ChatId, message_id: int, extra: Optional[ExtraSend] = None
    ) -> Dict[str, Any]:
        """Forward a message of any kind."""
        return await self.call_api("forwardMessage", _payload(
            {"chat_id": chat_id, "from_chat_id": from_chat_id, "message_id": message_id}, extra
        ))

    async def forward_messages(
        self, chat_id: ChatId, from_chat_id: ChatId, message_ids: Sequence[int], extra: Optional[Extra] = None
    ) -> List[MessageId]:
        """Forward multiple messages; identifiers must be strictly increasing."""
        result = await self.call_api("forwardMessages", _payload(
            {"chat_id": chat_id, "from_chat_id": from_chat_id, "message_ids": list(message_ids)}, extra
        ))
        return [MessageId.model_validate(item) for item in result]

    async def copy_message(
        self, chat_id: ChatId, from_chat_id: ChatId, message_id: int, extra: Optional[ExtraCopyMessage] = None
    ) -> MessageId:
        """Copy a message of any kind; the copy has no link to the original.

        A formatted ``caption`` in *extra* replaces the original caption.
        """
        result = await self.call_api("copyMessage", _payload(
            {"chat_id": chat_id, "from_chat_id": from_chat_id, "message_id": message_id},
            fmt_caption(extra),
        ))
        return MessageId.model_validate(result)

    async def send_copy(
        self, chat_id: ChatId, message: Message, extra: Optional[ExtraCopyMessage] = None
    ) -> MessageId:
        """Copy *message* into *chat_id*."""
        return await self.copy_message(chat_id, message.chat.id, message.message_id, extra)

    async def copy_messages(
        self, chat_id: ChatId, from_chat_id: ChatId, message_ids: Sequence[int], extra: Optional[Extra] = None
    ) -> List[MessageId]:
        """Copy messages of any kind; album grouping is kept."""
        result = await self.call_api("copyMessages", _payload(
            {"chat_id": chat_id, "from_chat_id": from_chat_id, "message_ids": list(message_ids)}, extra
        ))
        return [MessageId.model_validate(item) for item in result]

    async def send_photo(self, chat_id: ChatId, photo: FileInput, extra: Optional[ExtraPhoto] = None) -> Dict[str, Any]:
        """Send a photo."""
        return await self.call_api("sendPhoto", _payload({"chat_id": chat_id, "photo": photo}, fmt_caption(extra)))

    async def send_document(
        self, chat_id: ChatId, document: FileInput, extra: Optional[ExtraDocument] = None
    ) -> Dict[str, Any]:
        """Send a general file."""
        return await self.call_api("sendDocument", _payload(
            {"chat_id": chat_id, "document": document}, fmt_caption(extra)
        ))

    async def send_audio(self, chat_id: ChatId, audio: FileInput, extra: Optional[ExtraAudio] = None) -> Dict[str, Any]:
        """Send an audio file to be displayed in the music player (.MP3 or .M4A)."""
        return await self.call_api("sendAudio", _payload({"chat_id": chat_id, "audio": audio}, fmt_caption(extra)))

    async def send_video(self, chat_id: ChatId, video: FileInput, extra: Optional[ExtraVideo] = None) -> Dict[str, Any]:
        """Send a video file (mp4)."""
        return await self.call_api("sendVideo", _payload({"chat_id": chat_id, "video": video}, fmt_caption(extra)))

    async def send_animation(
        self, chat_id: ChatId, animation: FileInput, extra: Optional[ExtraAnimation] = None
    ) -> Dict[str, Any]:
        """Send an animation (GIF or H.264/MPEG-4 AVC video without sound)."""
        return await self.call_api("sendAnimation", _payload(
            {"chat_id": chat_id, "animation": animation}, fmt_caption(extra)
        ))

    async def send_voice(self, chat_id: ChatId, voice: FileInput, extra: Optional[ExtraVoice] = None) -> Dict[str, Any]:
        """Send an audio file to be displayed as a playable voice message (.OGG with OPUS)."""
        return await self.call_api("sendVoice", _payload({"chat_id": chat_id, "voice": voice}, fmt_caption(extra)))

    async def send_video_note(
        self, chat_id: ChatId, video_note: FileInput, extra: Optional[ExtraVideoNote] = None
    ) -> Dict[str, Any]:
        """Send a rounded square video message of up to 1 minute.

        Video notes cannot be sent from a URL, so an ``InputFile.from_url``
        upload is refused.

        Raises:
            TypeError: *video_note* is a URL-sourced upload.
        """
        if isinstance(video_note, InputFileByURL):
            raise TypeError("video notes cannot be sent from a URL; upload the file or pass a file_id")
        return await self.call_api("sendVideoNote", _payload({"chat_id": chat_id, "video_note": video_note}, extra))

    async def send_sticker(self, chat_id: ChatId, sticker: FileInput, extra: Optional[ExtraSend] = None) -> Dict[str, Any]:
        """Send a static .WEBP, animated .TGS, or video .WEBM sticker."""
        return await self.call_api("sendSticker", _payload({"chat_id": chat_id, "sticker": sticker}, extra))

    async def send_paid_media(
        self, chat_id: ChatId, star_count: int, media: Sequence[Union[Mapping[str, Any], Any]], extra: Optional[Extra] = None
    ) -> Dict[str, Any]:
        """Send paid media unlocked for *star_count* Telegram Stars."""
        return await self.call_api("sendPaidMedia", _payload(
            {"media": list(media), "chat_id": chat_id, "star_count": star_count}, fmt_caption(extra)
        ))

    async def send_media_group(
        self, chat_id: ChatId, media: Sequence[Union[InputMedia, Mapping[str, Any]]], extra: Optional[ExtraSend] = None
    ) -> List[Dict[str, Any]]:
        """Send a group of photos, videos, documents or audios as an album."""
        return await self.call_api("sendMediaGroup", _payload(
            {"chat_id": chat_id, "media": [fmt_caption(item) for item in media]}, extra
        ))

    async def send_location(
        self, chat_id: ChatId, latitude: float, longitude: float, extra: Optional[ExtraSend] = None
    ) -> Dict[str, Any]:
        """Send a point on the map."""
        return await self.call_api("sendLocation", _payload(
            {"chat_id": chat_id, "latitude": latitude, "longitude": longitude}, extra
        ))

    async def send_venue(
        self,
        chat_id: ChatId,
        latitude: float,
        longitude: float,
        title: str,
        address: str,
        extra: Optional[ExtraSend] = None,
    ) -> Dict[str, Any]:
        """Send information about a venue."""
        return await self.call_api("sendVenue", _payload({
            "latitude": latitude,
            "longitude": longitude,
            "title": title,
            "address": address,
            "chat_id": chat_id,
        }, extra))

    async def send_contact(
        self, chat_id: ChatId, phone_number: str, first_name: str, extra: Optional[ExtraSend] = None
    ) -> Dict[str, Any]:
        """Send a phone contact."""
        return await self.call_api("sendContact", _payload(
            {"chat_id": chat_id, "phone_number": phone_number, "first_name": first_name}, extra
        ))

    async def send_dice(self, chat_id: ChatId, extra: Optional[ExtraSend] = None) -> Dict[str, Any]:
        """Send an animated emoji that will display a random value."""
        return await self.call_api("sendDice", _payload({"chat_id": chat_id}, extra))

    async def send_chat_action(self, chat_id: ChatId, action: ChatAction, extra: Optional[Extra] = None) -> bool:
        """Tell the user that something is happening on the bot's side."""
        return await self.call_api("sendChatAction", _payload({"chat_id": chat_id, "action": action}, extra))

    async def send_game(self, chat_id: int, game_short_name: str, extra: Optional[ExtraSend] = None) -> Dict[str, Any]:
        """Send a game."""
        return await self.call_api("sendGame", _payload(
            {"chat_id": chat_id, "game_short_name": game_short_name}, extra
        ))

    async def send_invoice(
        self, chat_id: ChatId, invoice: Mapping[str, Any], extra: Optional[ExtraSend] = None
    ) -> Dict[str, Any]:
        """Send an invoice.

        *invoice* holds the required invoice parameters (``title``,
        ``description``, ``payload``, ``currency``, ``prices``, …).
        """
        return await self.call_api("sendInvoice", _payload({"chat_id": chat_id, **invoice}, extra))

    async def send_poll(
        self, chat_id: ChatId, question: str, options: Sequence[Union[str, Mapping[str, Any]]], extra: Optional[ExtraPoll] = None
    ) -> Dict[str, Any]:
        """Send a native regular poll."""
        return await self.call_api("sendPoll", _payload(
            {"chat_id": chat_id, "type": "regular", "question": question, "options": _poll_options(options)}, extra
        ))

    async def send_quiz(
        self, chat_id: ChatId, question: str, options: Sequence[Union[str, Mapping[str, Any]]], extra: Optional[ExtraPoll] = None
    ) -> Dict[str, Any]:
        """Send a quiz poll; ``correct_option_id`` goes into *extra*."""
        return await self.call_api("sendPoll", _payload(
            {"chat_id": chat_id, "type": "quiz", "question": question, "options": _poll_options(options)}, extra
        ))

    async def stop_poll(self, chat_id: ChatId, message_id: int, extra: Optional[Extra] = None) -> Dict[str, Any]:
        """Stop a poll which was sent by the bot."""
        return await self.call_api("stopPoll", _payload({"chat_id": chat_id, "message_id": message_id}, extra))

    async def send_checklist(
        self, business_connection_id: str, chat_id: int, checklist: Mapping[str, Any], extra: Optional[Extra] = None
    ) -> Dict[str, Any]:
        """Send a checklist on behalf of a connected business account."""
        return await self.call_api("sendChecklist", _payload({
            "checklist": checklist,
            "chat_id": chat_id,
            "business_connection_id": business_connection_id,
        }, extra))

    async def set_message_reaction(
        self,
        chat_id: ChatId,
        message_id: int,
        reaction: Optional[Sequence[Mapping[str, Any]]] = None,
        is_big: Optional[bool] = None,
    ) -> bool:
        """Change the chosen reactions on a message."""
        return await self.call_api("setMessageReaction", _payload({
            "chat_id": chat_id,
            "message_id": message_id,
            "reaction": list(reaction) if reaction is not None else None,
            "is_big": is_big,
        }))

    async def approve_suggested_post(self, chat_id: int, message_id: int, extra: Optional[Extra] = None) -> bool:
        """Approve a suggested post in a direct messages chat."""
        return await self.call_api("approveSuggestedPost", _payload({"chat_id": chat_id, "message_id": message_id}, extra))

    async def decline_suggested_post(self, chat_id: int, message_id: int, extra: Optional[Extra] = None) -> bool:
        """Decline a suggested post in a direct messages chat."""
        return await self.call_api("declineSuggestedPost", _payload({"chat_id": chat_id, "message_id": message_id}, extra))

    # ------------------------------------------------------------------
    #  Editing messages
    # ------------------------------------------------------------------

    async def edit_message_text(
        self,
        chat_id: Optional[ChatId],
        message_id: Optional[int],
        inline_message_id: Optional[str],
        text: FormattedText,
        extra: Optional[ExtraEditMessageText] = None,
    ) -> Union[Dict[str, Any], bool]:
        """Edit text and game messages."""
        return await self.call_api("editMessageText", _payload(
            {"chat_id": chat_id, "message_id": message_id, "inline_message_id": inline_message_id},
            extra,
            normalise_text(text, TextContext.MESSAGE),
        ))

    async def edit_message_caption(
        self,
        chat_id: Optional[ChatId],
        message_id: Optional[int],
        inline_message_id: Optional[str],
        caption: Optional[FormattedText],
        extra: Optional[ExtraEditMessageCaption] = None,
    ) -> Union[Dict[str, Any], bool]:
        """Edit captions of messages; a ``None`` caption removes it."""
        return await self.call_api("editMessageCaption", _payload(
            {"chat_id": chat_id, "message_id": message_id, "inline_message_id": inline_message_id},
            extra,
            normalise_text(caption, TextContext.CAPTION) if caption is not None else None,
        ))

    async def edit_message_media(
        self,
        chat_id: Optional[ChatId],
        message_id: Optional[int],
        inline_message_id: Optional[str],
        media: Union[InputMedia, Mapping[str, Any]],
        extra: Optional[Extra] = None,
    ) -> Union[Dict[str, Any], bool]:
        """Edit animation, audio, document, photo, or video messages."""
        return await self.call_api("editMessageMedia", _payload({
            "chat_id": chat_id,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
            "media": fmt_caption(media),
        }, extra))

    async def edit_message_reply_markup(
        self,
        chat_id: Optional[ChatId],
        message_id: Optional[int],
        inline_message_id: Optional[str],
        markup: Optional[Union[InlineKeyboardMarkup, Mapping[str, Any]]],
    ) -> Union[Dict[str, Any], bool]:
        """Edit only the reply markup of messages; ``None`` removes it."""
        return await self.call_api("editMessageReplyMarkup", _payload({
            "chat_id": chat_id,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
            "reply_markup": markup,
        }))

    async def edit_message_live_location(
        self,
        chat_id: Optional[ChatId],
        message_id: Optional[int],
        inline_message_id: Optional[str],
        latitude: float,
        longitude: float,
        extra: Optional[Extra] = None,
    ) -> Union[Dict[str, Any], bool]:
        """Edit a live location message until its ``live_period`` expires."""
        return await self.call_api("editMessageLiveLocation", _payload({
            "latitude": latitude,
            "longitude": longitude,
            "chat_id": chat_id,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
        }, extra))

    async def stop_message_live_location(
        self,
        chat_id: Optional[ChatId],
        message_id: Optional[int],
        inline_message_id: Optional[str],
        markup: Optional[Union[InlineKeyboardMarkup, Mapping[str, Any]]] = None,
    ) -> Union[Dict[str, Any], bool]:
        """Stop updating a live location message before ``live_period`` expires."""
        return await self.call_api("stopMessageLiveLocation", _payload({
            "chat_id": chat_id,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
            "reply_markup": markup,
        }))

    async def edit_message_checklist(
        self,
        business_connection_id: str,
        chat_id: int,
        message_id: int,
        checklist: Mapping[str, Any],
        extra: Optional[Extra] = None,
    ) -> Dict[str, Any]:
        """Edit a checklist on behalf of a connected business account."""
        return await self.call_api("editMessageChecklist", _payload({
            "checklist": checklist,
            "chat_id": chat_id,
            "message_id": message_id,
            "business_connection_id": business_connection_id,
        }, extra))

    async def delete_message(self, chat_id: ChatId, message_id: int) -> bool:
        """Delete a message, including service messages."""
        return await self.call_api("deleteMessage", {"chat_id": chat_id, "message_id": message_id})

    async def delete_messages(self, chat_id: ChatId, message_ids: Sequence[int]) -> bool:
        """Delete 1-100 messages simultaneously; messages that can't be found are skipped."""
        return await self.call_api("deleteMessages", {"chat_id": chat_id, "message_ids": list(message_ids)})

    # ------------------------------------------------------------------
    #  Users
    # ------------------------------------------------------------------

    async def get_user_profile_photos(
        self, user_id: int, offset: Optional[int] = None, limit: Optional[int] = None
    ) -> Dict[str, Any]:
        """Get a list of profile pictures for a user."""
        return await self.call_api("getUserProfilePhotos", _payload(
            {"user_id": user_id, "offset": offset, "limit": limit}
        ))

    async def get_user_profile_audios(self, user_id: int, extra: Optional[Extra] = None) -> Dict[str, Any]:
        """Get the audio files shown on a user's profile."""
        return await self.call_api("getUserProfileAudios", _payload({"user_id": user_id}, extra))

    async def set_user_emoji_status(self, user_id: int, extra: Optional[Extra] = None) -> bool:
        """Change the emoji status of a user who allowed the bot to do so."""
        return await self.call_api("setUserEmojiStatus", _payload({"user_id": user_id}, extra))

    async def get_user_chat_boosts(self, chat_id: ChatId, user_id: int) -> Dict[str, Any]:
        """Get the list of boosts added to a chat by a user."""
        return await self.call_api("getUserChatBoosts", {"chat_id": chat_id, "user_id": user_id})

    # ------------------------------------------------------------------
    #  Chat management
    # ------------------------------------------------------------------

    async def get_chat(self, chat_id: ChatId) -> Dict[str, Any]:
        """Get up to date information about the chat."""
        return await self.call_api("getChat", {"chat_id": chat_id})

    async def get_chat_administrators(self, chat_id: ChatId) -> List[Dict[str, Any]]:
        """Get a list of administrators in a chat, which aren't bots."""
        return await self.call_api("getChatAdministrators", {"chat_id": chat_id})

    async def get_chat_member(self, chat_id: ChatId, user_id: int) -> Dict[str, Any]:
        """Get information about a member of a chat."""
        return await self.call_api("getChatMember", {"chat_id": chat_id, "user_id": user_id})

    async def get_chat_members_count(self, chat_id: ChatId) -> int:
        """Get the number of members in a chat."""
        return await self.call_api("getChatMembersCount", {"chat_id": chat_id})

    async def set_chat_permissions(
        self, chat_id: ChatId, permissions: Union[ChatPermissions, Mapping[str, Any]], extra: Optional[Extra] = None
    ) -> bool:
        """Set default chat permissions for all members."""
        return await self.call_api("setChatPermissions", _payload(
            {"chat_id": chat_id, "permissions": permissions}, extra
        ))

    async def ban_chat_member(
        self, chat_id: ChatId, user_id: int, until_date: Optional[int] = None, extra: Optional[Extra] = None
    ) -> bool:
        """Ban a user in a group, a supergroup or a channel."""
        return await self.call_api("banChatMember", _payload(
            {"chat_id": chat_id, "user_id": user_id, "until_date": until_date}, extra
        ))

    @property
    def kick_chat_member(self):
        """Former name of :meth:`ban_chat_member`."""
        return self.ban_chat_member

    async def unban_chat_member(self, chat_id: ChatId, user_id: int, extra: Optional[Extra] = None) -> bool:
        """Unban a previously banned user (``only_if_banned`` in *extra*)."""
        return await self.call_api("unbanChatMember", _payload({"chat_id": chat_id, "user_id": user_id}, extra))

    async def promote_chat_member(self, chat_id: ChatId, user_id: int, extra: Extra) -> bool:
        """Promote or demote a user; *extra* holds the ``can_*`` rights."""
        return await self.call_api("promoteChatMember", _payload({"chat_id": chat_id, "user_id": user_id}, extra))

    async def restrict_chat_member(self, chat_id: ChatId, user_id: int, extra: Extra) -> bool:
        """Restrict a user in a supergroup; *extra* holds ``permissions`` and ``until_date``."""
        return await self.call_api("restrictChatMember", _payload({"chat_id": chat_id, "user_id": user_id}, extra))

    async def set_chat_administrator_custom_title(self, chat_id: ChatId, user_id: int, title: str) -> bool:
        """Set a custom title for an administrator in a supergroup promoted by the bot."""
        return await self.call_api("setChatAdministratorCustomTitle", {
            "chat_id": chat_id,
            "user_id": user_id,
            "custom_title": title,
        })

    async def ban_chat_sender_chat(self, chat_id: ChatId, sender_chat_id: int, extra: Optional[Extra] = None) -> bool:
        """Ban a channel chat in a supergroup or a channel."""
        return await self.call_api("banChatSenderChat", _payload(
            {"chat_id": chat_id, "sender_chat_id": sender_chat_id}, extra
        ))

    async def unban_chat_sender_chat(self, chat_id: ChatId, sender_chat_id: int) -> bool:
        """Unban a previously banned channel chat."""
        return await self.call_api("unbanChatSenderChat", {"chat_id": chat_id, "sender_chat_id": sender_chat_id})

    async def approve_chat_join_request(self, chat_id: ChatId, user_id: int) -> bool:
        return await self.call_api("approveChatJoinRequest", {"chat_id": chat_id, "user_id": user_id})

    async def decline_chat_join_request(self, chat_id: ChatId, user_id: int) -> bool:
        return await self.call_api("declineChatJoinRequest", {"chat_id": chat_id, "user_id": user_id})

    async def export_chat_invite_link(self, chat_id: ChatId) -> str:
        """Generate a new primary invite link for a chat."""
        return await self.call_api("exportChatInviteLink", {"chat_id": chat_id})

    async def create_chat_invite_link(self, chat_id: ChatId, extra: Optional[Extra] = None) -> Dict[str, Any]:
        """Create an additional invite link for a chat."""
        return await self.call_api("createChatInviteLink", _payload({"chat_id": chat_id}, extra))

    async def edit_chat_invite_link(self, chat_id: ChatId, invite_link: str, extra: Optional[Extra] = None) -> Dict[str, Any]:
        """Edit a non-primary invite link created by the bot."""
        return await self.call_api("editChatInviteLink", _payload(
            {"chat_id": chat_id, "invite_link": invite_link}, extra
        ))

    async def create_chat_subscription_invite_link(
        self, chat_id: ChatId, subscription_price: int, extra: Optional[Extra] = None
    ) -> Dict[str, Any]:
        """Create a subscription invite link for a channel chat (30-day period)."""
        return await self.call_api("createChatSubscriptionInviteLink", _payload({
            "chat_id": chat_id,
            "subscription_price": subscription_price,
            "subscription_period": SUBSCRIPTION_PERIOD,
        }, extra))

    async def edit_chat_subscription_invite_link(
        self, chat_id: ChatId, invite_link: str, extra: Optional[Extra] = None
    ) -> Dict[str, Any]:
        """Edit a subscription invite link created by the bot."""
        return await self.call_api("editChatSubscriptionInviteLink", _payload(
            {"chat_id": chat_id, "invite_link": invite_link}, extra
        ))

    async def revoke_chat_invite_link(self, chat_id: ChatId, invite_link: str) -> Dict[str, Any]:
        """Revoke an invite link created by the bot."""
        return await self.call_api("revokeChatInviteLink", {"chat_id": chat_id, "invite_link": invite_link})

    async def set_chat_photo(self, chat_id: ChatId, photo: InputFile) -> bool:
        """Set a new profile photo for the chat."""
        return await self.call_api("setChatPhoto", {"chat_id": chat_id, "photo": photo})

    async def delete_chat_photo(self, chat_id: ChatId) -> bool:
        return await self.call_api("deleteChatPhoto", {"chat_id": chat_id})

    async def set_chat_title(self, chat_id: ChatId, title: str) -> bool:
        """Change the title of a chat (1-128 characters)."""
        return await self.call_api("setChatTitle", {"chat_id": chat_id, "title": title})

    async def set_chat_description(self, chat_id: ChatId, description: Optional[str] = None) -> bool:
        """Change the description of a group, a supergroup or a channel.

        Omitting *description* clears it.
        """
        return await self.call_api("setChatDescription", _payload({"chat_id": chat_id, "description": description}))

    async def pin_chat_message(self, chat_id: ChatId, message_id: int, extra: Optional[Extra] = None) -> bool:
        """Add a message to the list of pinned messages in a chat."""
        return await self.call_api("pinChatMessage", _payload({"chat_id": chat_id, "message_id": message_id}, extra))

    async def unpin_chat_message(self, chat_id: ChatId, message_id: Optional[int] = None) -> bool:
        """Unpin *message_id*, or the most recent pinned message when omitted."""
        return await self.call_api("unpinChatMessage", _payload({"chat_id": chat_id, "message_id": message_id}))

    async def unpin_all_chat_messages(self, chat_id: ChatId) -> bool:
        return await self.call_api("unpinAllChatMessages", {"chat_id": chat_id})

    async def leave_chat(self, chat_id: ChatId) -> bool:
        """Leave a group, supergroup or channel."""
        return await self.call_api("leaveChat", {"chat_id": chat_id})

    async def set_chat_sticker_set(self, chat_id: ChatId, sticker_set_name: str) -> bool:
        """Set a new group sticker set for a supergroup."""
        return await self.call_api("setChatStickerSet", {"chat_id": chat_id, "sticker_set_name": sticker_set_name})

    async def delete_chat_sticker_set(self, chat_id: ChatId) -> bool:
        return await self.call_api("deleteChatStickerSet", {"chat_id": chat_id})

    async def set_chat_menu_button(
        self,
        chat_id: Optional[int] = None,
        menu_button: Optional[Mapping[str, Any]] = None,
    ) -> bool:
        """Change the bot's menu button in a private chat, or the default one."""
        return await self.call_api("setChatMenuButton", _payload({"chat_id": chat_id, "menu_button": menu_button}))

    async def get_chat_menu_button(self, chat_id: Optional[int] = None) -> Dict[str, Any]:
        """Get the current menu button in a private chat, or the default one."""
        return await self.call_api("getChatMenuButton", _payload({"chat_id": chat_id}))

    # ------------------------------------------------------------------
    #  Forum topics
    # ------------------------------------------------------------------

    async def get_forum_topic_icon_stickers(self) -> List[Dict[str, Any]]:
        """Get custom emoji stickers usable as a forum topic icon by any user."""
        return await self.call_api("getForumTopicIconStickers", {})

    async def create_forum_topic(self, chat_id: ChatId, name: str, extra: Optional[Extra] = None) -> Dict[str, Any]:
        """Create a topic in a forum supergroup chat."""
        return await self.call_api("createForumTopic", _payload({"chat_id": chat_id, "name": name}, extra))

    async def edit_forum_topic(self, chat_id: ChatId, message_thread_id: int, extra: Extra) -> bool:
        """Edit name and icon of a topic (``name``, ``icon_custom_emoji_id`` in *extra*)."""
        return await self.call_api("editForumTopic", _payload(
            {"chat_id": chat_id, "message_thread_id": message_thread_id}, extra
        ))

    async def close_forum_topic(self, chat_id: ChatId, message_thread_id: int) -> bool:
        return await self.call_api("closeForumTopic", {"chat_id": chat_id, "message_thread_id": message_thread_id})

    async def reopen_forum_topic(self, chat_id: ChatId, message_thread_id: int) -> bool:
        return await self.call_api("reopenForumTopic", {"chat_id": chat_id, "message_thread_id": message_thread_id})

    async def delete_forum_topic(self, chat_id: ChatId, message_thread_id: int) -> bool:
        """Delete a forum topic along with all its messages."""
        return await self.call_api("deleteForumTopic", {"chat_id": chat_id, "message_thread_id": message_thread_id})

    async def unpin_all_forum_topic_messages(self, chat_id: ChatId, message_thread_id: int) -> bool:
        return await self.call_api("unpinAllForumTopicMessages", {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
        })

    async def edit_general_forum_topic(self, chat_id: ChatId, name: str) -> bool:
        """Edit the name of the 'General' topic."""
        return await self.call_api("editGeneralForumTopic", {"chat_id": chat_id, "name": name})

    async def close_general_forum_topic(self, chat_id: ChatId) -> bool:
        return await self.call_api("closeGeneralForumTopic", {"chat_id": chat_id})

    async def reopen_general_forum_topic(self, chat_id: ChatId) -> bool:
        return await self.call_api("reopenGeneralForumTopic", {"chat_id": chat_id})

    async def hide_general_forum_topic(self, chat_id: ChatId) -> bool:
        return await self.call_api("hideGeneralForumTopic", {"chat_id": chat_id})

    async def unhide_general_forum_topic(self, chat_id: ChatId) -> bool:
        return await self.call_api("unhideGeneralForumTopic", {"chat_id": chat_id})

    async def unpin_all_general_forum_topic_messages(self, chat_id: ChatId) -> bool:
        return await self.call_api("unpinAllGeneralForumTopicMessages", {"chat_id": chat_id})

    # ------------------------------------------------------------------
    #  Queries & payments
    # ------------------------------------------------------------------

    async def answer_inline_query(
        self,
        inline_query_id: str,
        results: Sequence[Mapping[str, Any]],
        extra: Optional[ExtraAnswerInlineQuery] = None,
    ) -> bool:
        """Send answers to an inline query; no more than 50 results are allowed."""
        return await self.call_api("answerInlineQuery", _payload(
            {"inline_query_id": inline_query_id, "results": list(results)}, extra
        ))

    async def answer_cb_query(
        self, callback_query_id: str, text: Optional[str] = None, extra: Optional[ExtraAnswerCbQuery] = None
    ) -> bool:
        """Answer a callback query sent from an inline keyboard."""
        return await self.call_api("answerCallbackQuery", _payload(
            {"text": text, "callback_query_id": callback_query_id}, extra
        ))

    async def answer_game_query(self, callback_query_id: str, url: str) -> bool:
        """Answer a game callback query with the URL that opens the game."""
        return await self.call_api("answerCallbackQuery", {"url": url, "callback_query_id": callback_query_id})

    async def answer_web_app_query(self, web_app_query_id: str, result: Mapping[str, Any]) -> Dict[str, Any]:
        """Set the result of an interaction with a Web App."""
        return await self.call_api("answerWebAppQuery", {"result": result, "web_app_query_id": web_app_query_id})

    async def save_prepared_inline_message(
        self, user_id: int, result: Mapping[str, Any], extra: Optional[Extra] = None
    ) -> Dict[str, Any]:
        """Store a message that can be sent by a user of a Mini App."""
        return await self.call_api("savePreparedInlineMessage", _payload({"result": result, "user_id": user_id}, extra))

    async def answer_shipping_query(
        self,
        shipping_query_id: str,
        ok: bool,
        shipping_options: Optional[Sequence[Union[ShippingOption, Mapping[str, Any]]]] = None,
        error_message: Optional[str] = None,
    ) -> bool:
        """Reply to a shipping query."""
        return await self.call_api("answerShippingQuery", _payload({
            "ok": ok,
            "shipping_query_id": shipping_query_id,
            "shipping_options": list(shipping_options) if shipping_options is not None else None,
            "error_message": error_message,
        }))

    async def answer_pre_checkout_query(
        self, pre_checkout_query_id: str, ok: bool, error_message: Optional[str] = None
    ) -> bool:
        """Respond to a pre-checkout query; must be answered within 10 seconds."""
        return await self.call_api("answerPreCheckoutQuery", _payload({
            "ok": ok,
            "pre_checkout_query_id": pre_checkout_query_id,
            "error_message": error_message,
        }))

    async def create_invoice_link(self, invoice: Mapping[str, Any]) -> str:
        """Create a link for an invoice."""
        return await self.call_api("createInvoiceLink", _payload(dict(invoice)))

    async def get_my_star_balance(self) -> Dict[str, Any]:
        return await self.call_api("getMyStarBalance", {})

    async def get_star_transactions(self, offset: Optional[int] = None, limit: Optional[int] = None) -> Dict[str, Any]:
        """Get the bot's Telegram Star transactions in chronological order."""
        return await self.call_api("getStarTransactions", _payload({"limit": limit, "offset": offset}))

    async def refund_star_payment(self, user_id: int, telegram_payment_charge_id: str) -> bool:
        """Refund a successful payment in Telegram Stars."""
        return await self.call_api("refundStarPayment", {
            "user_id": user_id,
            "telegram_payment_charge_id": telegram_payment_charge_id,
        })

    async def edit_user_star_subscription(self, user_id: int, telegram_payment_charge_id: str, is_canceled: bool) -> bool:
        """Cancel or re-enable extension of a subscription paid in Telegram Stars."""
        return await self.call_api("editUserStarSubscription", {
            "user_id": user_id,
            "telegram_payment_charge_id": telegram_payment_charge_id,
            "is_canceled": is_canceled,
        })

    async def set_passport_data_errors(self, user_id: int, errors: Sequence[Mapping[str, Any]]) -> bool:
        """Inform a user that some Telegram Passport elements contain errors."""
        return await self.call_api("setPassportDataErrors", {"user_id": user_id, "errors": list(errors)})

    # ------------------------------------------------------------------
    #  Games
    # ------------------------------------------------------------------

    async def set_game_score(
        self,
        user_id: int,
        score: int,
        inline_message_id: Optional[str] = None,
        chat_id: Optional[int] = None,
        message_id: Optional[int] = None,
        edit_message: bool = True,
        force: bool = False,
    ) -> Union[Dict[str, Any], bool]:
        """Set the score of the specified user in a game message."""
        return await self.call_api("setGameScore", _payload({
            "force": force,
            "score": score,
            "user_id": user_id,
            "inline_message_id": inline_message_id,
            "chat_id": chat_id,
            "message_id": message_id,
            "disable_edit_message": not edit_message,
        }))

    async def get_game_high_scores(
        self,
        user_id: int,
        inline_message_id: Optional[str] = None,
        chat_id: Optional[int] = None,
        message_id: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Get data for high score tables."""
        return await self.call_api("getGameHighScores", _payload({
            "user_id": user_id,
            "inline_message_id": inline_message_id,
            "chat_id": chat_id,
            "message_id": message_id,
        }))

    # ------------------------------------------------------------------
    #  Stickers
    # ------------------------------------------------------------------

    async def get_sticker_set(self, name: str) -> Dict[str, Any]:
        return await self.call_api("getStickerSet", {"name": name})

    async def get_custom_emoji_stickers(self, custom_emoji_ids: Sequence[str]) -> List[Dict[str, Any]]:
        """Get information about custom emoji stickers by their identifiers."""
        return await self.call_api("getCustomEmojiStickers", {"custom_emoji_ids": list(custom_emoji_ids)})

    async def upload_sticker_file(
        self, user_id: int, sticker: InputFile, sticker_format: Literal["static", "animated", "video"]
    ) -> File:
        """Upload a sticker file for later use in sticker set methods."""
        result = await self.call_api("uploadStickerFile", {
            "user_id": user_id,
            "sticker_format": sticker_format,
            "sticker": sticker,
        })
        return File.model_validate(result)

    async def create_new_sticker_set(self, user_id: int, name: str, title: str, sticker_data: Extra) -> bool:
        """Create a new sticker set owned by a user; *sticker_data* holds ``stickers`` and options."""
        return await self.call_api("createNewStickerSet", _payload({"name": name, "title": title, "user_id": user_id}, sticker_data))

    async def add_sticker_to_set(self, user_id: int, name: str, sticker_data: Extra) -> bool:
        """Add a new sticker (``sticker`` in *sticker_data*) to a set created by the bot."""
        return await self.call_api("addStickerToSet", _payload({"name": name, "user_id": user_id}, sticker_data))

    async def set_sticker_position_in_set(self, sticker: str, position: int) -> bool:
        return await self.call_api("setStickerPositionInSet", {"sticker": sticker, "position": position})

    async def set_sticker_set_thumbnail(
        self,
        name: str,
        user_id: int,
        thumbnail: Optional[FileInput] = None,
        format: Literal["static", "animated", "video"] = "static",
    ) -> bool:
        """Set the thumbnail of a regular or mask sticker set; omit *thumbnail* to drop it."""
        return await self.call_api("setStickerSetThumbnail", _payload({
            "name": name,
            "format": format,
            "thumbnail": thumbnail,
            "user_id": user_id,
        }))

    @property
    def set_sticker_set_thumb(self):
        """Former name of :meth:`set_sticker_set_thumbnail`."""
        return self.set_sticker_set_thumbnail

    async def set_sticker_mask_position(
        self, sticker: str, mask_position: Optional[Union[MaskPosition, Mapping[str, Any]]] = None
    ) -> bool:
        return await self.call_api("setStickerMaskPosition", _payload({"sticker": sticker, "mask_position": mask_position}))

    async def set_sticker_keywords(self, sticker: str, keywords: Optional[Sequence[str]] = None) -> bool:
        return await self.call_api("setStickerKeywords", _payload({
            "sticker": sticker,
            "keywords": list(keywords) if keywords is not None else None,
        }))

    async def set_sticker_emoji_list(self, sticker: str, emoji_list: Sequence[str]) -> bool:
        return await self.call_api("setStickerEmojiList", {"sticker": sticker, "emoji_list": list(emoji_list)})

    async def set_sticker_set_title(self, name: str, title: str) -> bool:
        return await self.call_api("setStickerSetTitle", {"name": name, "title": title})

    async def set_custom_emoji_sticker_set_thumbnail(self, name: str, custom_emoji_id: str) -> bool:
        return await self.call_api("setCustomEmojiStickerSetThumbnail", {"name": name, "custom_emoji_id": custom_emoji_id})

    async def delete_sticker_from_set(self, sticker: str) -> bool:
        return await self.call_api("deleteStickerFromSet", {"sticker": sticker})

    async def delete_sticker_set(self, name: str) -> bool:
        return await self.call_api("deleteStickerSet", {"name": name})

    # ------------------------------------------------------------------
    #  Bot profile & settings
    # ------------------------------------------------------------------

    async def set_my_commands(
        self, commands: Sequence[Union[BotCommand, Mapping[str, Any]]], extra: Optional[Extra] = None
    ) -> bool:
        """Change the list of the bot's commands (``scope``, ``language_code`` in *extra*)."""
        return await self.call_api("setMyCommands", _payload({"commands": list(commands)}, extra))

    async def delete_my_commands(self, extra: Optional[Extra] = None) -> bool:
        return await self.call_api("deleteMyCommands", _payload({}, extra))

    async def get_my_commands(self, extra: Optional[Extra] = None) -> List[BotCommand]:
        """Get the current list of the bot's commands for the given scope and language."""
        result = await self.call_api("getMyCommands", _payload({}, extra))
        return [BotCommand.model_validate(item) for item in result]

    async def set_my_name(self, name: str, language_code: Optional[str] = None) -> bool:
        return await self.call_api("setMyName", _payload({"name": name, "language_code": language_code}))

    async def get_my_name(self, language_code: Optional[str] = None) -> Dict[str, Any]:
        return await self.call_api("getMyName", _payload({"language_code": language_code}))

    async def set_my_description(self, description: str, language_code: Optional[str] = None) -> bool:
        """Change the description shown in an empty chat; an empty string removes it."""
        return await self.call_api("setMyDescription", _payload({"description": description, "language_code": language_code}))

    async def get_my_description(self, language_code: Optional[str] = None) -> Dict[str, Any]:
        return await self.call_api("getMyDescription", _payload({"language_code": language_code}))

    async def set_my_short_description(self, short_description: str, language_code: Optional[str] = None) -> bool:
        """Change the short description shown on the profile page; an empty string removes it."""
        return await self.call_api("setMyShortDescription", _payload({
            "short_description": short_description,
            "language_code": language_code,
        }))

    async def get_my_short_description(self, language_code: Optional[str] = None) -> Dict[str, Any]:
        return await self.call_api("getMyShortDescription", _payload({"language_code": language_code}))

    async def set_my_profile_photo(self, photo: Mapping[str, Any]) -> bool:
        """Set the bot's profile photo (an ``InputProfilePhoto``)."""
        return await self.call_api("setMyProfilePhoto", {"photo": photo})

    async def remove_my_profile_photo(self) -> bool:
        return await self.call_api("removeMyProfilePhoto", {})

    async def set_my_default_administrator_rights(
        self, rights: Optional[Mapping[str, Any]] = None, for_channels: Optional[bool] = None
    ) -> bool:
        """Change the default administrator rights requested when the bot is added to groups or channels."""
        return await self.call_api("setMyDefaultAdministratorRights", _payload({
            "rights": rights,
            "for_channels": for_channels,
        }))

    async def get_my_default_administrator_rights(self, for_channels: Optional[bool] = None) -> Dict[str, Any]:
        return await self.call_api("getMyDefaultAdministratorRights", _payload({"for_channels": for_channels}))

    # ------------------------------------------------------------------
    #  Gifts & verification
    # ------------------------------------------------------------------

    async def get_available_gifts(self) -> Dict[str, Any]:
        """Get the list of gifts that can be sent by the bot to users and channel chats."""
        return await self.call_api("getAvailableGifts", {})

    async def send_gift(self, gift_id: str, extra: Optional[Extra] = None) -> bool:
        """Send a gift; the recipient (``user_id`` or ``chat_id``) goes into *extra*."""
        return await self.call_api("sendGift", _payload({"gift_id": gift_id}, extra))

    async def gift_premium_subscription(
        self,
        user_id: int,
        star_count: Literal[1000, 1500, 2500],
        month_count: Literal[3, 6, 12],
        extra: Optional[Extra] = None,
    ) -> bool:
        """Gift a Telegram Premium subscription to a user."""
        return await self.call_api("giftPremiumSubscription", _payload({
            "user_id": user_id,
            "star_count": star_count,
            "month_count": month_count,
        }, extra))

    async def get_user_gifts(self, user_id: int, extra: Optional[Extra] = None) -> Dict[str, Any]:
        return await self.call_api("getUserGifts", _payload({"user_id": user_id}, extra))

    async def get_chat_gifts(self, chat_id: ChatId, extra: Optional[Extra] = None) -> Dict[str, Any]:
        return await self.call_api("getChatGifts", _payload({"chat_id": chat_id}, extra))

    async def verify_user(self, user_id: int, extra: Optional[Extra] = None) -> bool:
        """Verify a user on behalf of the organization the bot represents."""
        return await self.call_api("verifyUser", _payload({"user_id": user_id}, extra))

    async def verify_chat(self, chat_id: ChatId, extra: Optional[Extra] = None) -> bool:
        """Verify a chat on behalf of the organization the bot represents."""
        return await self.call_api("verifyChat", _payload({"chat_id": chat_id}, extra))

    async def remove_user_verification(self, user_id: int) -> bool:
        return await self.call_api("removeUserVerification", {"user_id": user_id})

    async def remove_chat_verification(self, chat_id: ChatId) -> bool:
        return await self.call_api("removeChatVerification", {"chat_id": chat_id})

    # ------------------------------------------------------------------
    #  Business accounts
    # ------------------------------------------------------------------

    async def read_business_message(self, business_connection_id: str, chat_id: int, message_id: int) -> bool:
        """Mark an incoming message as read on behalf of a business account."""
        return await self.call_api("readBusinessMessage", {
            "chat_id": chat_id,
            "message_id": message_id,
            "business_connection_id": business_connection_id,
        })

    async def delete_business_messages(self, business_connection_id: str, message_ids: Sequence[int]) -> bool:
        """Delete messages on behalf of a business account."""
        return await self.call_api("deleteBusinessMessages", {
            "message_ids": list(message_ids),
            "business_connection_id": business_connection_id,
        })

    async def set_business_account_name(self, business_connection_id: str, first_name: str, last_name: Optional[str] = None) -> bool:
        return await self.call_api("setBusinessAccountName", _payload({
            "first_name": first_name,
            "last_name": last_name,
            "business_connection_id": business_connection_id,
        }))

    async def set_business_account_username(self, business_connection_id: str, username: str) -> bool:
        return await self.call_api("setBusinessAccountUsername", {
            "username": username,
            "business_connection_id": business_connection_id,
        })

    async def set_business_account_bio(self, business_connection_id: str, bio: Optional[str] = None) -> bool:
        return await self.call_api("setBusinessAccountBio", _payload({
            "bio": bio,
            "business_connection_id": business_connection_id,
        }))

    async def set_business_account_profile_photo(
        self, business_connection_id: str, photo: Mapping[str, Any], is_public: Optional[bool] = None
    ) -> bool:
        return await self.call_api("setBusinessAccountProfilePhoto", _payload({
            "photo": photo,
            "is_public": is_public,
            "business_connection_id": business_connection_id,
        }))

    async def remove_business_account_profile_photo(self, business_connection_id: str, is_public: Optional[bool] = None) -> bool:
        return await self.call_api("removeBusinessAccountProfilePhoto", _payload({
            "is_public": is_public,
            "business_connection_id": business_connection_id,
        }))

    async def set_business_account_gift_settings(
        self, business_connection_id: str, show_gift_button: bool, accepted_gift_types: Mapping[str, Any]
    ) -> bool:
        return await self.call_api("setBusinessAccountGiftSettings", {
            "show_gift_button": show_gift_button,
            "accepted_gift_types": accepted_gift_types,
            "business_connection_id": business_connection_id,
        })

    async def get_business_account_star_balance(self, business_connection_id: str) -> Dict[str, Any]:
        return await self.call_api("getBusinessAccountStarBalance", {"business_connection_id": business_connection_id})

    async def transfer_business_account_stars(self, business_connection_id: str, star_count: int) -> bool:
        """Transfer Telegram Stars from the business account balance to the bot's balance."""
        return await self.call_api("transferBusinessAccountStars", {
            "star_count": star_count,
            "business_connection_id": business_connection_id,
        })

    async def get_business_account_gifts(self, business_connection_id: str, extra: Optional[Extra] = None) -> Dict[str, Any]:
        return await self.call_api("getBusinessAccountGifts", _payload({"business_connection_id": business_connection_id}, extra))

    async def convert_gift_to_stars(self, business_connection_id: str, owned_gift_id: str) -> bool:
        """Convert a regular gift to Telegram Stars."""
        return await self.call_api("convertGiftToStars", {
            "owned_gift_id": owned_gift_id,
            "business_connection_id": business_connection_id,
        })

    async def upgrade_gift(self, business_connection_id: str, owned_gift_id: str, extra: Optional[Extra] = None) -> bool:
        """Upgrade a regular gift to a unique gift."""
        return await self.call_api("upgradeGift", _payload({
            "owned_gift_id": owned_gift_id,
            "business_connection_id": business_connection_id,
        }, extra))

    async def transfer_gift(
        self, business_connection_id: str, owned_gift_id: str, new_owner_chat_id: int, extra: Optional[Extra] = None
    ) -> bool:
        """Transfer an owned unique gift to another user."""
        return await self.call_api("transferGift", _payload({
            "owned_gift_id": owned_gift_id,
            "new_owner_chat_id": new_owner_chat_id,
            "business_connection_id": business_connection_id,
        }, extra))

    # ------------------------------------------------------------------
    #  Stories
    # ------------------------------------------------------------------

    async def post_story(
        self,
        business_connection_id: str,
        content: Mapping[str, Any],
        active_period: StoryActivePeriod,
        extra: Optional[Extra] = None,
    ) -> Dict[str, Any]:
        """Post a story on behalf of a managed business account."""
        return await self.call_api("postStory", _payload({
            "content": content,
            "active_period": active_period,
            "business_connection_id": business_connection_id,
        }, fmt_caption(extra)))

    async def repost_story(
        self,
        business_connection_id: str,
        from_chat_id: int,
        from_story_id: int,
        active_period: StoryActivePeriod,
        extra: Optional[Extra] = None,
    ) -> Dict[str, Any]:
        """Repost a story from another business account managed by the bot."""
        return await self.call_api("repostStory", _payload({
            "from_chat_id": from_chat_id,
            "from_story_id": from_story_id,
            "active_period": active_period,
            "business_connection_id": business_connection_id,
        }, extra))

    async def edit_story(
        self, business_connection_id: str, story_id: int, content: Mapping[str, Any], extra: Optional[Extra] = None
    ) -> Dict[str, Any]:
        """Edit a story previously posted by the bot."""
        return await self.call_api("editStory", _payload({
            "content": content,
            "story_id": story_id,
            "business_connection_id": business_connection_id,
        }, fmt_caption(extra)))

    async def delete_story(self, business_connection_id: str, story_id: int) -> bool:
        return await self.call_api("deleteStory", {"story_id": story_id, "business_connection_id": business_connection_id})


# ── Helpers ──────────────────────────────────────────────────────────────────


def _poll_options(options: Sequence[Union[str, Mapping[str, Any]]]) -> List[Any]:
    """Accept bare strings as ``InputPollOption`` texts."""
    return [{"text": option} if isinstance(option, str) else option for option in options]


def _read_bytes(path: str) -> bytes:
    with open(path, "rb") as handle:
        return handle.read()


# ── Module-level default client ──────────────────────────────────────────────
#
# A lazily-initialised :class:`Telegram` instance built from the environment
# via :mod:`config` for scripts that do not manage their own client.
# ─────────────────────────────────────────────────────────────────────────────

_default_client: Telegram | None = None


def get_default_client() -> Telegram:
    """Return (and lazily create) the module-level client singleton."""
    global _default_client
    if _default_client is None:
        context = DeploymentContext.from_config()
        _default_client = Telegram(context.token, context)
    return _default_client
