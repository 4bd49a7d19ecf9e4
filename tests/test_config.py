"""
配置取值：每次调用重新读取环境变量；非法值回退默认。
"""
import logging

import pytest

from resumelens.core import config
from resumelens.core.log import setup_logging


def test_api_key_precedence(monkeypatch):
    assert config.get_api_key() is None
    monkeypatch.setenv("GEMINI_API_KEY", "gemini-key")
    assert config.get_api_key() == "gemini-key"
    monkeypatch.setenv("RESUMELENS_API_KEY", "  own-key ")
    assert config.get_api_key() == "own-key"


def test_blank_api_key_is_missing(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "   ")
    assert config.get_api_key() is None


@pytest.mark.parametrize("raw,expected", [(None, 120.0), ("45", 45.0), ("abc", 120.0), ("-1", 120.0)])
def test_oracle_timeout(monkeypatch, raw, expected):
    if raw is not None:
        monkeypatch.setenv("RESUMELENS_ORACLE_TIMEOUT", raw)
    assert config.oracle_timeout() == expected


@pytest.mark.parametrize("raw,expected", [(None, "inline"), ("MARKDOWN", "markdown"), ("pdf2text", "inline")])
def test_document_mode(monkeypatch, raw, expected):
    if raw is not None:
        monkeypatch.setenv("RESUMELENS_DOCUMENT_MODE", raw)
    assert config.document_mode() == expected


@pytest.mark.parametrize("raw,expected", [(None, False), ("1", True), ("yes", True), ("off", False)])
def test_verify_signature(monkeypatch, raw, expected):
    if raw is not None:
        monkeypatch.setenv("RESUMELENS_VERIFY_SIGNATURE", raw)
    assert config.verify_signature() is expected


def test_limits(monkeypatch):
    assert config.max_upload_bytes() == 10 * 1024 * 1024
    assert config.max_input_tokens() == 0
    monkeypatch.setenv("RESUMELENS_MAX_INPUT_TOKENS", "-5")
    assert config.max_input_tokens() == 0


def test_cors_origins(monkeypatch):
    monkeypatch.setenv("RESUMELENS_CORS_ORIGINS", "https://a.example, https://b.example,")
    assert config.cors_origins() == ["https://a.example", "https://b.example"]


def test_setup_logging_ignores_unknown_level():
    setup_logging("LOUD")
    assert logging.getLogger("resumelens").level == logging.INFO
    setup_logging("DEBUG")
    assert logging.getLogger("resumelens").level == logging.DEBUG
    assert len(logging.getLogger("resumelens").handlers) == 1
    setup_logging("INFO")
