"""Exception hierarchy for the botwire Telegram Bot API client.

Every failure a caller can observe derives from :class:`BotwireError`, so a
single ``except BotwireError`` covers the whole error channel while the
subclasses keep "the API said no", "the network failed" and "the file could
not be located" apart.
"""

from typing import Any, Dict, Optional


class BotwireError(Exception):
    """Root of all errors raised by this package."""


class APIException(BotwireError):
    """Error reported by the Telegram Bot API (``"ok": false``).

    Attributes:
        status_code: HTTP status code of the response.
        response_body: Raw response body as a dict, when available.
        method: Remote method name that failed, e.g. ``"sendMessage"``.
        error_code: ``error_code`` from the body, falling back to *status_code*.
        description: ``description`` from the body, verbatim.
        parameters: ``parameters`` from the body (``retry_after``,
            ``migrate_to_chat_id``) or an empty dict.
    """

    def __init__(
        self,
        status_code: int,
        response_body: Optional[Dict[str, Any]] = None,
        method: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.response_body = response_body or {}
        self.method = method
        self.error_code: int = self.response_body.get("error_code", status_code)
        self.description: str = self.response_body.get("description", "Unknown error")
        self.parameters: Dict[str, Any] = self.response_body.get("parameters") or {}
        prefix = f"{method}: " if method else ""
        super().__init__(f"{prefix}API error {self.error_code}: {self.description}")

    @property
    def retry_after(self) -> Optional[int]:
        return self.parameters.get("retry_after")

    @property
    def migrate_to_chat_id(self) -> Optional[int]:
        return self.parameters.get("migrate_to_chat_id")


class TransportError(BotwireError):
    """The request never produced an API response (connection, timeout, bad body)."""

    def __init__(self, method: str, reason: str) -> None:
        self.method = method
        self.reason = reason
        super().__init__(f"{method}: transport error: {reason}")


class FileResolutionError(BotwireError):
    """A file lookup returned no ``file_path`` to build a download location from."""

    def __init__(self, file_id: str) -> None:
        self.file_id = file_id
        super().__init__(f"Could not resolve a download location for file {file_id!r}")
