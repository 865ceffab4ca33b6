"""Tests for liftout_health.settings module."""

import logging
import os
from unittest.mock import patch

import pytest

from liftout_health.settings import EngineSettings, configure_logging, load_settings


class TestLoadSettings:
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        settings = load_settings()
        assert settings.data_dir == "data"
        assert settings.log_level == "INFO"

    @patch.dict(os.environ, {"LIFTOUT_DATA_DIR": "/srv/liftout", "LIFTOUT_LOG_LEVEL": "debug"})
    def test_reads_env(self):
        settings = load_settings()
        assert settings.data_dir == "/srv/liftout"
        assert settings.log_level == "DEBUG"

    @patch.dict(os.environ, {"LIFTOUT_DATA_DIR": "", "LIFTOUT_LOG_LEVEL": ""})
    def test_empty_values_fall_back(self):
        settings = load_settings()
        assert settings.data_dir == "data"
        assert settings.log_level == "INFO"

    @patch.dict(os.environ, {"LIFTOUT_LOG_LEVEL": "LOUD"})
    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid liftout settings"):
            load_settings()


class TestEngineSettings:
    def test_level_is_upper_cased(self):
        assert EngineSettings(log_level="warning").log_level == "WARNING"

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="log_level must be one of"):
            EngineSettings(log_level="verbose")

    def test_configure_logging(self):
        with patch("liftout_health.settings.logging.basicConfig") as basic:
            configure_logging(EngineSettings(log_level="ERROR"))
        basic.assert_called_once_with(level=logging.ERROR)
