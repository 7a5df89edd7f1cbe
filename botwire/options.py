"""Deployment context — where the Bot API lives and how to address it."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, field_validator

DEFAULT_API_ROOT = "https://api.telegram.org"


class DeploymentContext(BaseModel):
    """Immutable per-client configuration.

    Attributes:
        token: Bot (or user) authentication token.
        api_root: Base address of the Bot API, hosted or a self-hosted local server.
        api_mode: ``"bot"`` for bot tokens, ``"user"`` for user-mode tokens.
        test_env: Address the test environment (``/test`` path segment).
        timeout: Transport timeout in seconds for a single request.
    """

    token: str
    api_root: str = DEFAULT_API_ROOT
    api_mode: Literal["bot", "user"] = "bot"
    test_env: bool = False
    timeout: float = 30.0

    model_config = {"frozen": True}

    @field_validator("api_root")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def method_prefix(self) -> str:
        """``{api_mode}{token}`` plus ``/test`` in the test environment."""
        return f"{self.api_mode}{self.token}{'/test' if self.test_env else ''}"

    def method_url(self, method: str) -> str:
        return f"{self.api_root}/{self.method_prefix}/{method}"

    @classmethod
    def from_config(cls) -> "DeploymentContext":
        """Build a context from the environment-backed :mod:`config` module."""
        import config  # deferred to keep the SDK importable without a .env

        return cls(
            token=config.BOT_TOKEN or "",
            api_root=config.API_ROOT,
            api_mode=config.API_MODE,
            test_env=config.TEST_ENV,
            timeout=config.REQUEST_TIMEOUT,
        )
