"""Tests for the exception hierarchy."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from botwire.exceptions import APIException, BotwireError, FileResolutionError, TransportError


class TestAPIException:
    """Validate the remote error type."""

    def test_attributes(self) -> None:
        exc = APIException(403, {"ok": False, "error_code": 403, "description": "Forbidden: bot was blocked by the user"})
        assert exc.status_code == 403
        assert exc.error_code == 403
        assert exc.description == "Forbidden: bot was blocked by the user"
        assert "403" in str(exc)
        assert "Forbidden" in str(exc)

    def test_default_body(self) -> None:
        exc = APIException(500)
        assert exc.response_body == {}
        assert exc.error_code == 500
        assert exc.parameters == {}
        assert "Unknown error" in str(exc)

    def test_method_in_message(self) -> None:
        exc = APIException(400, {"description": "Bad Request"}, method="sendMessage")
        assert str(exc).startswith("sendMessage: ")

    def test_migrate_to_chat_id(self) -> None:
        exc = APIException(400, {"description": "migrated", "parameters": {"migrate_to_chat_id": -1001}})
        assert exc.migrate_to_chat_id == -1001
        assert exc.retry_after is None


class TestHierarchy:
    def test_single_root(self) -> None:
        for cls in (APIException, TransportError, FileResolutionError):
            assert issubclass(cls, BotwireError)
        assert issubclass(BotwireError, Exception)

    def test_transport_error(self) -> None:
        exc = TransportError("getMe", "timed out")
        assert exc.reason == "timed out"
        assert "getMe" in str(exc)

    def test_file_resolution_error(self) -> None:
        assert "abc" in str(FileResolutionError("abc"))
