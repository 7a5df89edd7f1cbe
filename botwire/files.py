"""File reference resolution — turn a ``file_id`` or :class:`File` into a download location.

The hosted Bot API serves files over HTTPS under
``{api_root}/file/{api_mode}{token}[/test]/{file_path}``.  A self-hosted
local Bot API server instead returns an absolute filesystem path, which is
exposed as a ``file://`` location on the API host.
"""

from __future__ import annotations

import os
from typing import Awaitable, Callable, Union
from urllib.parse import quote, unquote, urlsplit, urlunsplit

from botwire.exceptions import FileResolutionError
from botwire.models import File
from botwire.options import DeploymentContext

FileRef = Union[str, File]
FileLookup = Callable[[str], Awaitable[File]]


async def resolve_download_location(
    file_ref: FileRef,
    context: DeploymentContext,
    get_file: FileLookup,
) -> str:
    """Return the URI a file can be fetched from.

    A bare ``file_id``, or a :class:`File` without ``file_path``, is looked
    up with *get_file* first; that lookup is not cached, and its errors
    propagate unchanged.

    Raises:
        FileResolutionError: The lookup returned no ``file_path``.
    """
    if isinstance(file_ref, str):
        file = await get_file(file_ref)
    elif file_ref.file_path is None:
        file = await get_file(file_ref.file_id)
    else:
        file = file_ref

    if not file.file_path:
        raise FileResolutionError(file.file_id)
    return build_download_location(file.file_path, context)


def build_download_location(file_path: str, context: DeploymentContext) -> str:
    """Build the location for a known *file_path* without any network call."""
    if os.path.isabs(file_path):
        # Local servers hand out filesystem paths; only the host is kept.
        host = urlsplit(context.api_root).hostname or ""
        return urlunsplit(("file", host, quote(file_path), "", ""))

    test_segment = "/test" if context.test_env else ""
    return f"{context.api_root}/file/{context.api_mode}{context.token}{test_segment}/{file_path}"


def local_path(location: str) -> str | None:
    """Filesystem path of a ``file://`` location, ``None`` for anything else."""
    parts = urlsplit(location)
    if parts.scheme != "file":
        return None
    return unquote(parts.path)
