"""Formatted text: construction helpers and normalisation into wire fields.

A text argument is either a plain ``str`` or a :class:`~botwire.models.FmtString`
carrying entity spans.  :func:`normalise_text` is the only place that looks
at which of the two it got; the calling operation chooses whether the result
lands in ``text``/``entities`` or ``caption``/``caption_entities``.

Usage::

    from botwire import fmt

    msg = fmt.bold("Build failed") + " on " + fmt.code("main")
    await bot.send_message(chat_id, msg)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from pydantic import BaseModel

from botwire.models import FmtString, MessageEntity, User

FormattedText = Union[str, FmtString]


class TextContext(str, Enum):
    """Which pair of wire fields a formatted text fills."""

    MESSAGE = "message"
    CAPTION = "caption"


_WIRE_KEYS: Dict[TextContext, tuple[str, str]] = {
    TextContext.MESSAGE: ("text", "entities"),
    TextContext.CAPTION: ("caption", "caption_entities"),
}

ENTITY_KEYS: frozenset[str] = frozenset(key for _, key in _WIRE_KEYS.values())


# ── Normalisation ────────────────────────────────────────────────────────────


def normalise_text(value: FormattedText, context: Union[TextContext, str]) -> Dict[str, Any]:
    """Turn *value* into the wire fields for *context*.

    A ``str`` yields only the text key.  An :class:`FmtString` yields its text
    and, when it has any, its entities; an entity-free ``FmtString`` that was
    built from pre-marked text yields its own ``parse_mode`` instead.
    """
    text_key, entities_key = _WIRE_KEYS[TextContext(context)]
    if isinstance(value, str):
        return {text_key: value}
    fields: Dict[str, Any] = {text_key: value.text}
    if value.entities:
        fields[entities_key] = [
            entity.model_dump(exclude_none=True) for entity in value.entities
        ]
    elif value.parse_mode is not None:
        fields["parse_mode"] = value.parse_mode
    return fields


def has_entities(fields: Mapping[str, Any]) -> bool:
    """True when normalised *fields* carry an entities list."""
    return any(key in fields for key in ENTITY_KEYS)


def fmt_caption(extra: Union[Mapping[str, Any], BaseModel, None]) -> Dict[str, Any]:
    """Normalise the ``caption`` of *extra* (a mapping or an input media model).

    Returns a new dict: the other fields of *extra* first, then the caption
    fields.  When the caption carries entities, any ``parse_mode`` of *extra*
    is dropped.
    """
    fields = _as_dict(extra)
    caption = fields.pop("caption", None)
    if caption is None:
        return fields
    normalised = normalise_text(caption, TextContext.CAPTION)
    if has_entities(normalised):
        fields.pop("parse_mode", None)
    fields.update(normalised)
    return fields


def _as_dict(value: Union[Mapping[str, Any], BaseModel, None]) -> Dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, BaseModel):
        # Iterating a model keeps nested values (InputFile, FmtString) as objects.
        return {key: item for key, item in value if item is not None}
    return dict(value)


# ── Construction ─────────────────────────────────────────────────────────────


def utf16_len(text: str) -> int:
    """Length of *text* in UTF-16 code units, the unit Telegram measures entities in."""
    return len(text.encode("utf-16-le")) // 2


def join(parts: Iterable[FormattedText], separator: FormattedText = "") -> FmtString:
    """Concatenate texts, shifting every entity to its new offset.

    Text pre-marked with a ``parse_mode`` keeps it when every marked part
    agrees; plain strings are taken as part of that markup.

    Raises:
        ValueError: Marked-up text is mixed with entities or with another
            ``parse_mode``.
    """
    pieces: list[FormattedText] = []
    for part in parts:
        if pieces:
            pieces.append(separator)
        pieces.append(part)

    parse_mode = _common_parse_mode(pieces)
    text = ""
    offset = 0
    entities: list[MessageEntity] = []
    for piece in pieces:
        piece_text = piece if isinstance(piece, str) else piece.text
        if not isinstance(piece, str):
            entities.extend(
                entity.model_copy(update={"offset": entity.offset + offset})
                for entity in piece.entities
            )
        text += piece_text
        offset += utf16_len(piece_text)
    return FmtString(text=text, entities=entities, parse_mode=parse_mode)


def _common_parse_mode(pieces: Iterable[FormattedText]) -> Optional[str]:
    formatted = [piece for piece in pieces if isinstance(piece, FmtString)]
    modes = {piece.parse_mode for piece in formatted if piece.parse_mode is not None}
    if not modes:
        return None
    if len(modes) > 1:
        raise ValueError(f"cannot join texts marked up with different parse modes: {sorted(modes)}")
    if any(piece.entities for piece in formatted):
        raise ValueError("cannot join text marked up with a parse_mode and text carrying entities")
    return modes.pop()


def _wrap(value: FormattedText, entity_type: str, **payload: Any) -> FmtString:
    """Wrap the whole of *value* in one entity, keeping its inner entities."""
    inner = value if isinstance(value, FmtString) else FmtString(text=value)
    if inner.parse_mode is not None:
        raise ValueError(f"cannot add entities to text marked up with parse_mode {inner.parse_mode!r}")
    outer = MessageEntity(type=entity_type, offset=0, length=utf16_len(inner.text), **payload)
    return FmtString(text=inner.text, entities=[outer, *inner.entities])


def bold(value: FormattedText) -> FmtString:
    return _wrap(value, "bold")


def italic(value: FormattedText) -> FmtString:
    return _wrap(value, "italic")


def underline(value: FormattedText) -> FmtString:
    return _wrap(value, "underline")


def strikethrough(value: FormattedText) -> FmtString:
    return _wrap(value, "strikethrough")


def spoiler(value: FormattedText) -> FmtString:
    return _wrap(value, "spoiler")


def blockquote(value: FormattedText) -> FmtString:
    return _wrap(value, "blockquote")


def code(value: str) -> FmtString:
    return _wrap(value, "code")


def pre(value: str, language: Optional[str] = None) -> FmtString:
    return _wrap(value, "pre", language=language)


def link(value: FormattedText, url: str) -> FmtString:
    return _wrap(value, "text_link", url=url)


def mention(value: FormattedText, user: Union[User, int]) -> FmtString:
    """Mention *user*; a bare id is turned into a ``tg://user`` link."""
    if isinstance(user, int):
        return _wrap(value, "text_link", url=f"tg://user?id={user}")
    return _wrap(value, "text_mention", user=user)


def custom_emoji(placeholder: str, custom_emoji_id: str) -> FmtString:
    return _wrap(placeholder, "custom_emoji", custom_emoji_id=custom_emoji_id)


def html(text: str) -> FmtString:
    """Text already marked up with Telegram HTML."""
    return FmtString(text=text, parse_mode="HTML")


def markdown_v2(text: str) -> FmtString:
    """Text already marked up with Telegram MarkdownV2."""
    return FmtString(text=text, parse_mode="MarkdownV2")
