"""
GenerationClient：凭证注入、单次调用、超时取消、LiteLLM 异常归类。全部用假 completion，无网络。
"""
import asyncio

import litellm
import pytest

from resumelens.analysis.errors import (
    ConfigurationError,
    MalformedOutput,
    QuotaOrAuthFailure,
    SafetyBlocked,
    TransportFailure,
)
from resumelens.analysis.parts import TextPart
from resumelens.analysis.request import build_request
from resumelens.core.llm import GenerationClient

from conftest import FakeCompletion

REQUEST = build_request([TextPart("analyze")])


def _run(client):
    return asyncio.run(client.generate(REQUEST))


class TestConstruction:
    @pytest.mark.parametrize("key", [None, "", "   "])
    def test_missing_key(self, key):
        with pytest.raises(ConfigurationError) as exc:
            GenerationClient(key)
        assert "API key" in str(exc.value)

    def test_from_env_reads_every_time(self, monkeypatch):
        with pytest.raises(ConfigurationError):
            GenerationClient.from_env()
        monkeypatch.setenv("GEMINI_API_KEY", "k-1")
        assert GenerationClient.from_env() is not None
        monkeypatch.delenv("GEMINI_API_KEY")
        with pytest.raises(ConfigurationError):
            GenerationClient.from_env()

    def test_defaults_from_config(self, monkeypatch):
        monkeypatch.setenv("RESUMELENS_MODEL", "gemini/gemini-1.5-pro")
        monkeypatch.setenv("RESUMELENS_ORACLE_TIMEOUT", "30")
        client = GenerationClient("k")
        assert client.model == "gemini/gemini-1.5-pro"
        assert client.timeout == 30.0

    def test_default_model(self):
        assert GenerationClient("k").model == "gemini/gemini-1.5-flash-latest"


class TestGenerate:
    def test_returns_raw_text_and_passes_request(self):
        fake = FakeCompletion('{"name": "A"}')
        client = GenerationClient("secret", model="gemini/test", timeout=5, completion_fn=fake)
        assert _run(client) == '{"name": "A"}'
        assert fake.call_count == 1
        call = fake.calls[0]
        assert call["model"] == "gemini/test"
        assert call["api_key"] == "secret"
        assert call["timeout"] == 5
        assert call["messages"] == REQUEST.to_messages()
        assert call["safety_settings"] == REQUEST.to_completion_kwargs()["safety_settings"]

    def test_content_filter_is_safety_block(self):
        client = GenerationClient("k", completion_fn=FakeCompletion(None, finish_reason="content_filter"))
        with pytest.raises(SafetyBlocked):
            _run(client)

    @pytest.mark.parametrize("content", [None, ""])
    def test_empty_output_is_malformed(self, content):
        client = GenerationClient("k", completion_fn=FakeCompletion(content))
        with pytest.raises(MalformedOutput):
            _run(client)

    def test_deadline_cancels_call(self):
        fake = FakeCompletion("{}", delay=5)
        client = GenerationClient("k", timeout=0.05, completion_fn=fake)
        with pytest.raises(TransportFailure) as exc:
            _run(client)
        assert "0.05" in str(exc.value)

    def test_unknown_error_propagates_without_retry(self):
        fake = FakeCompletion(error=RuntimeError("connection reset by peer"))
        client = GenerationClient("k", completion_fn=fake)
        with pytest.raises(RuntimeError, match="connection reset"):
            _run(client)
        assert fake.call_count == 1


class TestLiteLLMErrors:
    def test_rate_limit(self):
        err = litellm.RateLimitError(message="Resource has been exhausted", llm_provider="gemini", model="gemini/x")
        client = GenerationClient("k", completion_fn=FakeCompletion(error=err))
        with pytest.raises(QuotaOrAuthFailure) as exc:
            _run(client)
        assert "quota" in str(exc.value)

    def test_authentication(self):
        err = litellm.AuthenticationError(message="API key not valid", llm_provider="gemini", model="gemini/x")
        client = GenerationClient("k", completion_fn=FakeCompletion(error=err))
        with pytest.raises(QuotaOrAuthFailure):
            _run(client)

    def test_content_policy(self):
        err = litellm.ContentPolicyViolationError(
            message="The response was blocked.", model="gemini/x", llm_provider="gemini"
        )
        client = GenerationClient("k", completion_fn=FakeCompletion(error=err))
        with pytest.raises(SafetyBlocked):
            _run(client)
