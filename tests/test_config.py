#!/usr/bin/env python3
# tests/test_config.py - Unit tests for config.py

import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import config


@pytest.fixture
def config_file(tmp_path):
    return str(tmp_path / "deuseda-hangul" / "config.ini")


def write(path, body):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(body)


class TestLoadConfig:
    """Test suite for load_config()"""

    def test_missing_file_gives_defaults(self, config_file):
        assert config.load_config(config_file) == config.DEFAULTS

    def test_defaults_not_shared(self, config_file):
        settings = config.load_config(config_file)
        settings["Layout"] = "LATIN"
        assert config.DEFAULTS["Layout"] == "JAMO"

    def test_reads_settings(self, config_file):
        write(config_file, "[Settings]\n"
                           "VowelPolicy = literal\n"
                           "EnableMoaJjiki = true\n"
                           "BackspaceMode = CHAR\n"
                           "EraseSequence = BS\n"
                           "Encoding = euc-kr\n"
                           "Layout = DUBEOLSIK\n"
                           "LogLevel = debug\n")
        settings = config.load_config(config_file)
        assert settings == {
            "VowelPolicy": "LITERAL",
            "EnableMoaJjiki": True,
            "BackspaceMode": "CHAR",
            "EraseSequence": "BS",
            "Encoding": "euc-kr",
            "Layout": "DUBEOLSIK",
            "LogLevel": "DEBUG",
        }

    def test_missing_section(self, config_file):
        write(config_file, "[Other]\nKey = value\n")
        assert config.load_config(config_file) == config.DEFAULTS

    def test_invalid_choice_falls_back(self, config_file, caplog):
        write(config_file, "[Settings]\nBackspaceMode = WORD\nLayout = JAMO\n")
        with caplog.at_level(logging.WARNING):
            settings = config.load_config(config_file)
        assert settings["BackspaceMode"] == "JASO"
        assert "BackspaceMode" in caplog.text

    def test_invalid_boolean_falls_back(self, config_file, caplog):
        write(config_file, "[Settings]\nEnableMoaJjiki = maybe\n")
        with caplog.at_level(logging.WARNING):
            settings = config.load_config(config_file)
        assert settings["EnableMoaJjiki"] is False
        assert "EnableMoaJjiki" in caplog.text

    def test_unknown_encoding_falls_back(self, config_file, caplog):
        write(config_file, "[Settings]\nEncoding = klingon-8\n")
        with caplog.at_level(logging.WARNING):
            settings = config.load_config(config_file)
        assert settings["Encoding"] == "utf-8"
        assert "klingon-8" in caplog.text

    def test_encoding_without_hangul_falls_back(self, config_file, caplog):
        write(config_file, "[Settings]\nEncoding = ascii\n")
        with caplog.at_level(logging.WARNING):
            settings = config.load_config(config_file)
        assert settings["Encoding"] == "utf-8"
        assert "cannot encode Hangul" in caplog.text

    def test_undecodable_file(self, config_file, caplog):
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        with open(config_file, "wb") as f:
            f.write(b"[Settings]\nLayout=\xff\xfe\n")
        with caplog.at_level(logging.WARNING):
            settings = config.load_config(config_file)
        assert settings == config.DEFAULTS
        assert "Error loading config" in caplog.text

    def test_malformed_file(self, config_file, caplog):
        write(config_file, "VowelPolicy = LITERAL\n")
        with caplog.at_level(logging.WARNING):
            settings = config.load_config(config_file)
        assert settings == config.DEFAULTS
        assert "Error loading config" in caplog.text


class TestSaveConfig:
    """Test suite for save_config()"""

    def test_creates_directory(self, config_file):
        config.save_config(config.DEFAULTS, config_file)
        assert os.path.exists(config_file)

    def test_round_trip(self, config_file):
        settings = dict(config.DEFAULTS, EnableMoaJjiki=True, BackspaceMode="CHAR")
        config.save_config(settings, config_file)
        assert config.load_config(config_file) == settings

    def test_booleans_written_lowercase(self, config_file):
        config.save_config(dict(config.DEFAULTS, EnableMoaJjiki=True), config_file)
        with open(config_file, encoding="utf-8") as f:
            assert "EnableMoaJjiki = true" in f.read()
