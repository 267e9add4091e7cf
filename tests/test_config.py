# /// script
# requires-python = ">=3.12"
# dependencies = ["pytest>=7.0"]
# ///
"""Tests for environment configuration."""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

import config


class TestTeamCount:
    def test_default(self, monkeypatch):
        monkeypatch.delenv(config.TEAM_COUNT_ENV, raising=False)
        assert config.get_team_count() == 2

    @pytest.mark.parametrize("raw,expected", [("1", 1), ("2", 2)])
    def test_valid_values(self, monkeypatch, raw, expected):
        monkeypatch.setenv(config.TEAM_COUNT_ENV, raw)
        assert config.get_team_count() == expected

    @pytest.mark.parametrize("raw", ["0", "3", "two"])
    def test_invalid_values(self, monkeypatch, raw):
        monkeypatch.setenv(config.TEAM_COUNT_ENV, raw)
        with pytest.raises(ValueError, match=config.TEAM_COUNT_ENV):
            config.get_team_count()

    def test_default_names(self):
        assert config.default_team_names(1) == ("HOME",)
        assert config.default_team_names(2) == ("AWAY", "HOME")


class TestLogLevelAndPort:
    def test_log_level_default(self, monkeypatch):
        monkeypatch.delenv(config.LOG_LEVEL_ENV, raising=False)
        assert config.get_log_level() == logging.INFO

    def test_log_level_debug(self, monkeypatch):
        monkeypatch.setenv(config.LOG_LEVEL_ENV, "debug")
        assert config.get_log_level() == logging.DEBUG

    def test_log_level_unknown_falls_back(self, monkeypatch):
        monkeypatch.setenv(config.LOG_LEVEL_ENV, "chatty")
        assert config.get_log_level() == logging.INFO

    def test_port(self, monkeypatch):
        monkeypatch.delenv(config.PORT_ENV, raising=False)
        assert config.get_port() == 5050
        monkeypatch.setenv(config.PORT_ENV, "8080")
        assert config.get_port() == 8080
