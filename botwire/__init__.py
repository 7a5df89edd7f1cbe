"""botwire — a typed asyncio client for the Telegram Bot API.

:class:`Telegram` exposes one coroutine per Bot API method.  Formatted text
is built with :mod:`botwire.fmt`, keyboards with :mod:`botwire.markup`, and
every failure derives from :class:`BotwireError`.

Usage::

    from botwire import Telegram, DeploymentContext, fmt
    from botwire.models import InputFile

    bot = Telegram(token, DeploymentContext(token=token, api_root="http://localhost:8081"))
    await bot.send_photo(chat_id, InputFile.from_path("chart.png"), {"caption": fmt.bold("Daily")})
"""

from botwire import fmt, markup
from botwire.client import Telegram, get_default_client
from botwire.exceptions import APIException, BotwireError, FileResolutionError, TransportError
from botwire.options import DeploymentContext

__all__ = [
    "Telegram",
    "DeploymentContext",
    "get_default_client",
    "BotwireError",
    "APIException",
    "TransportError",
    "FileResolutionError",
    "fmt",
    "markup",
]
