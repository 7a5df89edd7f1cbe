"""Tests for ApiClient dispatch over HTTP."""

import json
import sys
import os
from unittest.mock import patch, MagicMock

import pytest
import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from botwire.exceptions import APIException, TransportError
from botwire.models import InlineKeyboardButton, InlineKeyboardMarkup, InputFile, InputMediaPhoto
from botwire.options import DeploymentContext
from botwire.transport import ApiClient, serialise


def _response(body: object, status_code: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = body
    return resp


# ── Construction ─────────────────────────────────────────────────────────────


class TestClientInit:
    """Validate client initialisation."""

    def test_default_context(self) -> None:
        client = ApiClient("T")
        assert client.options == DeploymentContext(token="T")
        assert client.token == "T"

    def test_token_overrides_context(self) -> None:
        client = ApiClient("NEW", DeploymentContext(token="OLD", test_env=True))
        assert client.token == "NEW"
        assert client.options.test_env is True


# ── call_api ─────────────────────────────────────────────────────────────────


class TestCallApi:
    """Validate the JSON request path and response handling."""

    @pytest.mark.asyncio
    @patch("botwire.transport.requests.post")
    async def test_success_returns_result(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response({"ok": True, "result": {"message_id": 1}})

        client = ApiClient("T")
        result = await client.call_api("sendMessage", {"chat_id": 42, "text": "hello"})

        assert result == {"message_id": 1}
        mock_post.assert_called_once()
        args, kwargs = mock_post.call_args
        assert args[0] == "https://api.telegram.org/botT/sendMessage"
        assert kwargs["json"] == {"chat_id": 42, "text": "hello"}
        assert kwargs["timeout"] == 30.0

    @pytest.mark.asyncio
    @patch("botwire.transport.requests.post")
    async def test_test_environment_url(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response({"ok": True, "result": True})

        client = ApiClient("T", DeploymentContext(token="T", api_root="http://localhost:8081/", test_env=True))
        await client.call_api("getMe")

        assert mock_post.call_args.args[0] == "http://localhost:8081/botT/test/getMe"
        assert mock_post.call_args.kwargs["json"] == {}

    @pytest.mark.asyncio
    @patch("botwire.transport.requests.post")
    async def test_models_are_serialised(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response({"ok": True, "result": True})
        markup = InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton(text="Go", callback_data="go")]])

        await ApiClient("T").call_api("sendMessage", {"chat_id": 1, "text": "x", "reply_markup": markup})

        assert mock_post.call_args.kwargs["json"]["reply_markup"] == {
            "inline_keyboard": [[{"text": "Go", "callback_data": "go"}]]
        }

    @pytest.mark.asyncio
    @patch("botwire.transport.requests.post")
    async def test_api_error_raises(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(
            {
                "ok": False,
                "error_code": 429,
                "description": "Too Many Requests: retry after 5",
                "parameters": {"retry_after": 5},
            },
            status_code=429,
        )

        with pytest.raises(APIException) as exc_info:
            await ApiClient("T").call_api("sendMessage", {"chat_id": 1, "text": "x"})

        exc = exc_info.value
        assert exc.error_code == 429
        assert exc.description == "Too Many Requests: retry after 5"
        assert exc.retry_after == 5
        assert exc.method == "sendMessage"

    @pytest.mark.asyncio
    @patch("botwire.transport.requests.post")
    async def test_json_decode_failure(self, mock_post: MagicMock) -> None:
        resp = MagicMock()
        resp.status_code = 502
        resp.json.side_effect = ValueError("No JSON")
        mock_post.return_value = resp

        with pytest.raises(TransportError) as exc_info:
            await ApiClient("T").call_api("getMe")
        assert "502" in str(exc_info.value)

    @pytest.mark.asyncio
    @patch("botwire.transport.requests.post")
    async def test_network_error_wrapped(self, mock_post: MagicMock) -> None:
        mock_post.side_effect = requests.ConnectionError("offline")

        with pytest.raises(TransportError) as exc_info:
            await ApiClient("T").call_api("getMe")
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
        assert exc_info.value.method == "getMe"


# ── Uploads ──────────────────────────────────────────────────────────────────


class TestUploads:
    """Validate multipart encoding of InputFile values."""

    @pytest.mark.asyncio
    @patch("botwire.transport.requests.post")
    async def test_top_level_file(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response({"ok": True, "result": {}})

        await ApiClient("T").call_api("sendPhoto", {
            "chat_id": 1,
            "photo": InputFile.from_bytes(b"abc", "a.png"),
            "caption_entities": [{"type": "bold", "offset": 0, "length": 1}],
        })

        kwargs = mock_post.call_args.kwargs
        assert "json" not in kwargs
        assert kwargs["files"] == {"photo": ("a.png", b"abc")}
        assert kwargs["data"]["chat_id"] == "1"
        assert json.loads(kwargs["data"]["caption_entities"]) == [{"type": "bold", "offset": 0, "length": 1}]

    @pytest.mark.asyncio
    @patch("botwire.transport.requests.post")
    async def test_nested_file_attached(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response({"ok": True, "result": []})
        media = [InputMediaPhoto(media=InputFile.from_bytes(b"x", "x.jpg"))]

        await ApiClient("T").call_api("sendMediaGroup", {"chat_id": 1, "media": media})

        kwargs = mock_post.call_args.kwargs
        assert kwargs["files"] == {"upload0": ("x.jpg", b"x")}
        assert json.loads(kwargs["data"]["media"]) == [{"media": "attach://upload0", "type": "photo"}]

    @pytest.mark.asyncio
    @patch("botwire.transport.requests.post")
    async def test_path_file_closed_after_send(self, mock_post: MagicMock, tmp_path) -> None:
        target = tmp_path / "doc.txt"
        target.write_bytes(b"hello")
        mock_post.return_value = _response({"ok": True, "result": {}})

        await ApiClient("T").call_api("sendDocument", {"chat_id": 1, "document": InputFile.from_path(str(target))})

        filename, handle = mock_post.call_args.kwargs["files"]["document"]
        assert filename == "doc.txt"
        assert handle.closed

    @pytest.mark.asyncio
    @patch("botwire.transport.requests.post")
    @patch("botwire.transport.requests.get")
    async def test_url_file_downloaded_first(self, mock_get: MagicMock, mock_post: MagicMock) -> None:
        download = MagicMock()
        download.content = b"remote"
        mock_get.return_value = download
        mock_post.return_value = _response({"ok": True, "result": {}})

        await ApiClient("T").call_api("sendVideo", {
            "chat_id": 1,
            "video": InputFile.from_url("https://cdn.example.org/clip.mp4"),
        })

        assert mock_get.call_args.args[0] == "https://cdn.example.org/clip.mp4"
        assert mock_post.call_args.kwargs["files"] == {"video": ("clip.mp4", b"remote")}


# ── fetch ────────────────────────────────────────────────────────────────────


class TestFetch:
    @pytest.mark.asyncio
    @patch("botwire.transport.requests.get")
    async def test_returns_content(self, mock_get: MagicMock) -> None:
        resp = MagicMock()
        resp.content = b"bytes"
        mock_get.return_value = resp
        assert await ApiClient("T").fetch("https://example.org/f") == b"bytes"

    @pytest.mark.asyncio
    @patch("botwire.transport.requests.get")
    async def test_http_error_wrapped(self, mock_get: MagicMock) -> None:
        resp = MagicMock()
        resp.raise_for_status.side_effect = requests.HTTPError("404")
        mock_get.return_value = resp
        with pytest.raises(TransportError):
            await ApiClient("T").fetch("https://example.org/missing")


class TestSerialise:
    def test_drops_none_keeps_sentinels(self) -> None:
        assert serialise({"a": None, "b": "", "c": [{"d": None, "e": 0}]}) == {"b": "", "c": [{"e": 0}]}
