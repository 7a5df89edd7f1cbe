"""Tests for DeploymentContext and environment configuration."""

import importlib
import sys
from logging.handlers import RotatingFileHandler
import os

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import config
from core.logger import BotwireLogger
from botwire.options import DeploymentContext


class TestDeploymentContext:
    """Validate method addressing."""

    def test_defaults(self) -> None:
        context = DeploymentContext(token="T")
        assert context.api_root == "https://api.telegram.org"
        assert context.api_mode == "bot"
        assert context.test_env is False
        assert context.method_url("getMe") == "https://api.telegram.org/botT/getMe"

    def test_test_env_prefix(self) -> None:
        context = DeploymentContext(token="T", api_mode="user", test_env=True)
        assert context.method_prefix == "userT/test"

    def test_trailing_slash_stripped(self) -> None:
        assert DeploymentContext(token="T", api_root="http://localhost:8081/").api_root == "http://localhost:8081"

    def test_invalid_mode_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DeploymentContext(token="T", api_mode="admin")

    def test_frozen(self) -> None:
        context = DeploymentContext(token="T")
        with pytest.raises(ValidationError):
            context.token = "other"

    def test_from_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config, "BOT_TOKEN", "ENV")
        monkeypatch.setattr(config, "API_ROOT", "http://localhost:8081")
        monkeypatch.setattr(config, "API_MODE", "bot")
        monkeypatch.setattr(config, "TEST_ENV", True)
        monkeypatch.setattr(config, "REQUEST_TIMEOUT", 5.0)
        context = DeploymentContext.from_config()
        assert context.method_url("getMe") == "http://localhost:8081/botENV/test/getMe"
        assert context.timeout == 5.0


class TestConfigParsing:
    """Validate environment value parsing helpers."""

    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_truthy(self, raw: str) -> None:
        assert config._parse_bool(raw) is True

    @pytest.mark.parametrize("raw", [None, "", "0", "false", "nope"])
    def test_falsy(self, raw: object) -> None:
        assert config._parse_bool(raw) is False

    def test_timeout(self) -> None:
        assert config._parse_timeout("12.5") == 12.5
        assert config._parse_timeout(None) == 30.0
        assert config._parse_timeout("soon") == 30.0
        assert config._parse_timeout("-1") == 30.0


class TestConfigLogDir:
    """A log directory from the environment reaches the shared logger."""

    def test_log_dir_attaches_file_handler(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        logger = BotwireLogger.get_logger()
        monkeypatch.setenv("BOTWIRE_LOG_DIR", str(tmp_path))
        try:
            importlib.reload(config)
            assert config.LOG_DIR == str(tmp_path)
            files = [
                handler.baseFilename for handler in logger.handlers
                if isinstance(handler, RotatingFileHandler)
            ]
            assert str(tmp_path / "botwire.log") in files
        finally:
            for handler in list(logger.handlers):
                if isinstance(handler, RotatingFileHandler):
                    handler.close()
                    logger.removeHandler(handler)
            monkeypatch.delenv("BOTWIRE_LOG_DIR")
            importlib.reload(config)
