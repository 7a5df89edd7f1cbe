"""ApiClient — the single dispatch point every request builder calls through.

:meth:`ApiClient.call_api` performs exactly one HTTP round trip per call.
Requests without uploads are sent as JSON; requests containing
:class:`~botwire.models.InputFile` values are sent as ``multipart/form-data``
with nested files referenced through ``attach://<name>``.  Blocking
``requests`` I/O is offloaded via :func:`asyncio.to_thread` so the event loop
is never blocked.  There are no retries here.
"""

from __future__ import annotations

import asyncio
import json
from typing import IO, Any, Dict, List, Mapping, Optional, Tuple

import requests
from pydantic import BaseModel

from botwire.exceptions import APIException, TransportError
from botwire.models import InputFile, InputFileByURL
from botwire.options import DeploymentContext
from core.logger import BotwireLogger

logger = BotwireLogger.get_child("transport")

_FileParts = Dict[str, Tuple[str, Any]]


async def make_request(method: str, url: str, **kwargs: object) -> requests.Response:
    """Run a :mod:`requests` call inside a thread to keep the event loop free.

    *method* is the HTTP verb (``"get"``, ``"post"``, …).
    """
    func = getattr(requests, method.lower())
    return await asyncio.to_thread(func, url, **kwargs)


class ApiClient:
    """Dispatch facade for the Telegram Bot API.

    Subclassed by :class:`botwire.client.Telegram`; tests substitute
    :meth:`call_api` to observe the exact requests built.
    """

    def __init__(self, token: str, options: Optional[DeploymentContext] = None) -> None:
        if options is None:
            options = DeploymentContext(token=token)
        elif options.token != token:
            options = options.model_copy(update={"token": token})
        self.options = options

    @property
    def token(self) -> str:
        return self.options.token

    # ------------------------------------------------------------------
    #  Dispatch
    # ------------------------------------------------------------------

    async def call_api(self, method: str, payload: Optional[Mapping[str, Any]] = None) -> Any:
        """Send *payload* to the remote *method* and return its ``result``.

        Raises:
            APIException: The API answered with ``"ok": false``.
            TransportError: The request failed before a usable answer arrived.
        """
        serialised = serialise(payload or {})
        files: _FileParts = {}
        opened: List[IO[bytes]] = []
        fields = _extract_files(serialised, files)
        url = self.options.method_url(method)
        logger.debug("Calling API", extra={"api_method": method, "upload": bool(files)})

        try:
            if files:
                await _load_files(files, opened, self.options.timeout)
                response = await make_request(
                    "post", url, data=_form_fields(fields), files=files, timeout=self.options.timeout
                )
            else:
                response = await make_request("post", url, json=fields, timeout=self.options.timeout)
        except requests.RequestException as exc:
            raise TransportError(method, str(exc)) from exc
        finally:
            for handle in opened:
                handle.close()

        try:
            body = response.json()
        except ValueError as exc:
            raise TransportError(method, f"non-JSON response (HTTP {response.status_code})") from exc

        if not isinstance(body, dict) or not body.get("ok"):
            logger.warning(
                "API call failed",
                extra={"api_method": method, "status_code": response.status_code, "api_response": body},
            )
            raise APIException(response.status_code, body if isinstance(body, dict) else None, method)
        return body.get("result")

    async def fetch(self, url: str) -> bytes:
        """Download *url* and return its body.

        Raises:
            TransportError: On transport failures and non-2xx answers.
        """
        try:
            response = await make_request("get", url, timeout=self.options.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise TransportError("download", str(exc)) from exc
        return response.content


# ── Serialisation helpers ────────────────────────────────────────────────────


def serialise(value: Any) -> Any:
    """Convert models to dicts and drop ``None`` values, leaving :class:`InputFile` as is."""
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True, exclude_none=True)
    if isinstance(value, Mapping):
        return {key: serialise(item) for key, item in value.items() if item is not None}
    if isinstance(value, (list, tuple)):
        return [serialise(item) for item in value]
    return value


def _extract_files(payload: Mapping[str, Any], files: _FileParts) -> Dict[str, Any]:
    """Move every :class:`InputFile` in *payload* into *files*.

    A top-level file is uploaded under its own field name; a nested one
    (input media, stickers, profile photos) is replaced with an
    ``attach://`` reference to a generated part name.
    """
    fields: Dict[str, Any] = {}
    for key, value in payload.items():
        if isinstance(value, InputFile):
            files[key] = (value.filename, value)
        else:
            fields[key] = _attach_nested(value, files)
    return fields


def _attach_nested(value: Any, files: _FileParts) -> Any:
    if isinstance(value, InputFile):
        name = f"upload{len(files)}"
        while name in files:
            name += "_"
        files[name] = (value.filename, value)
        return f"attach://{name}"
    if isinstance(value, Mapping):
        return {key: _attach_nested(item, files) for key, item in value.items()}
    if isinstance(value, list):
        return [_attach_nested(item, files) for item in value]
    return value


def _form_fields(fields: Mapping[str, Any]) -> Dict[str, str]:
    """Multipart form values must be strings; everything else is JSON-encoded."""
    return {
        key: value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)
        for key, value in fields.items()
    }


async def _load_files(files: _FileParts, opened: List[IO[bytes]], timeout: float) -> None:
    """Replace each :class:`InputFile` in *files* with uploadable content, in place.

    Local paths are opened (and recorded in *opened* for closing);
    URL-sourced files are downloaded first.
    """
    for name, (filename, source) in list(files.items()):
        if isinstance(source, InputFileByURL):
            response = await make_request("get", source.url, timeout=timeout)
            response.raise_for_status()
            files[name] = (filename, response.content)
        elif source.path is not None:
            handle = open(source.path, "rb")
            opened.append(handle)
            files[name] = (filename, handle)
        elif source.data is not None:
            files[name] = (filename, source.data)
        else:
            files[name] = (filename, source.stream)
