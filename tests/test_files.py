"""Tests for file reference resolution and downloads."""

import sys
import os
from unittest.mock import AsyncMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from botwire.client import Telegram
from botwire.exceptions import APIException, FileResolutionError
from botwire.files import build_download_location, local_path, resolve_download_location
from botwire.models import File
from botwire.options import DeploymentContext

HOSTED = DeploymentContext(token="T", api_root="https://api.example.org")
LOCAL = DeploymentContext(token="T", api_root="http://localhost:8081")


def _file(file_path: object = "photos/file_1.jpg") -> File:
    return File(file_id="fid", file_unique_id="uid", file_path=file_path)


# ── build_download_location ──────────────────────────────────────────────────


class TestBuildDownloadLocation:
    """Validate URL construction per deployment."""

    def test_hosted_relative_path(self) -> None:
        assert build_download_location("photos/file_1.jpg", HOSTED) == (
            "https://api.example.org/file/botT/photos/file_1.jpg"
        )

    def test_test_environment(self) -> None:
        context = HOSTED.model_copy(update={"test_env": True})
        assert build_download_location("photos/file_1.jpg", context) == (
            "https://api.example.org/file/botT/test/photos/file_1.jpg"
        )

    def test_user_mode(self) -> None:
        context = HOSTED.model_copy(update={"api_mode": "user"})
        assert build_download_location("a.jpg", context) == "https://api.example.org/file/userT/a.jpg"

    def test_local_absolute_path(self) -> None:
        location = build_download_location("/var/lib/bot/files/photos/1.jpg", LOCAL)
        assert location == "file://localhost/var/lib/bot/files/photos/1.jpg"
        assert ":8081" not in location

    def test_local_server_relative_path(self) -> None:
        assert build_download_location("photos/1.jpg", LOCAL) == (
            "http://localhost:8081/file/botT/photos/1.jpg"
        )

    def test_root_with_path_prefix(self) -> None:
        context = DeploymentContext(token="T", api_root="https://proxy.example.org/tg/")
        assert build_download_location("photos/1.jpg", context) == (
            "https://proxy.example.org/tg/file/botT/photos/1.jpg"
        )
        assert context.method_url("getFile") == "https://proxy.example.org/tg/botT/getFile"

    def test_local_path_with_reserved_characters(self) -> None:
        location = build_download_location("/srv/files/clip#1?.bin", LOCAL)
        assert local_path(location) == "/srv/files/clip#1?.bin"


# ── resolve_download_location ────────────────────────────────────────────────


class TestResolveDownloadLocation:
    """Validate lookup behaviour."""

    @pytest.mark.asyncio
    async def test_file_id_is_looked_up(self) -> None:
        get_file = AsyncMock(return_value=_file())
        location = await resolve_download_location("fid", HOSTED, get_file)
        get_file.assert_awaited_once_with("fid")
        assert location == "https://api.example.org/file/botT/photos/file_1.jpg"

    @pytest.mark.asyncio
    async def test_file_with_path_skips_lookup(self) -> None:
        get_file = AsyncMock()
        await resolve_download_location(_file(), HOSTED, get_file)
        get_file.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_file_without_path_is_looked_up(self) -> None:
        get_file = AsyncMock(return_value=_file())
        await resolve_download_location(_file(None), HOSTED, get_file)
        get_file.assert_awaited_once_with("fid")

    @pytest.mark.asyncio
    async def test_no_caching_between_resolutions(self) -> None:
        get_file = AsyncMock(return_value=_file())
        first = await resolve_download_location("fid", HOSTED, get_file)
        second = await resolve_download_location("fid", HOSTED, get_file)
        assert first == second
        assert get_file.await_count == 2

    @pytest.mark.asyncio
    async def test_missing_path_raises(self) -> None:
        get_file = AsyncMock(return_value=_file(None))
        with pytest.raises(FileResolutionError) as exc_info:
            await resolve_download_location("fid", HOSTED, get_file)
        assert exc_info.value.file_id == "fid"

    @pytest.mark.asyncio
    async def test_lookup_error_propagates(self) -> None:
        get_file = AsyncMock(side_effect=APIException(400, {"description": "Bad Request: invalid file_id"}))
        with pytest.raises(APIException):
            await resolve_download_location("bad", HOSTED, get_file)


class TestLocalPath:
    def test_file_scheme(self) -> None:
        assert local_path("file://localhost/var/x.jpg") == "/var/x.jpg"

    def test_https_scheme(self) -> None:
        assert local_path("https://api.example.org/file/botT/x.jpg") is None


# ── Telegram.get_file_link / download_file ───────────────────────────────────


class TestClientDownloads:
    """Validate the client-level file helpers."""

    @pytest.mark.asyncio
    async def test_get_file_link_uses_get_file(self) -> None:
        bot = Telegram("T", HOSTED)
        bot.call_api = AsyncMock(return_value={"file_id": "fid", "file_unique_id": "u", "file_path": "d/a.pdf"})
        assert await bot.get_file_link("fid") == "https://api.example.org/file/botT/d/a.pdf"
        bot.call_api.assert_awaited_once_with("getFile", {"file_id": "fid"})

    @pytest.mark.asyncio
    async def test_download_hosted(self) -> None:
        bot = Telegram("T", HOSTED)
        bot.fetch = AsyncMock(return_value=b"data")
        assert await bot.download_file(_file()) == b"data"
        bot.fetch.assert_awaited_once_with("https://api.example.org/file/botT/photos/file_1.jpg")

    @pytest.mark.asyncio
    async def test_download_local(self, tmp_path) -> None:
        target = tmp_path / "doc.bin"
        target.write_bytes(b"local bytes")
        bot = Telegram("T", LOCAL)
        bot.fetch = AsyncMock()
        assert await bot.download_file(_file(str(target))) == b"local bytes"
        bot.fetch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_download_local_path_with_hash(self, tmp_path) -> None:
        target = tmp_path / "clip#1.bin"
        target.write_bytes(b"hashed name")
        bot = Telegram("T", LOCAL)
        assert await bot.download_file(_file(str(target))) == b"hashed name"
