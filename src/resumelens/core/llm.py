"""
LiteLLM 生成客户端：流水线唯一的网络边界，一次调用只发一次请求、不自动重试。

模型名使用 LiteLLM 格式（默认 gemini/gemini-1.5-flash-latest），换厂商只改 model 字符串。
凭证在构造时注入：缺失即抛 ConfigurationError，不会发出任何请求。
"""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable

from resumelens.analysis.errors import (
    ConfigurationError,
    MalformedOutput,
    QuotaOrAuthFailure,
    SafetyBlocked,
    TransportFailure,
)
from resumelens.analysis.request import GenerationRequest
from resumelens.core.config import get_api_key, get_default_model, oracle_timeout

logger = logging.getLogger(__name__)

CompletionFn = Callable[..., Awaitable[Any]]


def _litellm_acompletion(**kwargs: Any) -> Awaitable[Any]:
    from litellm import acompletion

    return acompletion(**kwargs)


def _translate_litellm_error(exc: Exception) -> Exception:
    """LiteLLM 异常 → 流水线错误种类；无法识别的原样返回，交给错误分类按消息归类。"""
    from litellm import exceptions as llm_errors

    if isinstance(exc, llm_errors.ContentPolicyViolationError):
        return SafetyBlocked(str(exc))
    if isinstance(
        exc,
        (
            llm_errors.AuthenticationError,
            llm_errors.PermissionDeniedError,
            llm_errors.RateLimitError,
            llm_errors.BudgetExceededError,
        ),
    ):
        return QuotaOrAuthFailure(f"Model service rejected the request (API key or quota): {exc}")
    if isinstance(exc, llm_errors.Timeout):
        return TransportFailure(f"Model service timed out: {exc}")
    return exc


class GenerationClient:
    """
    api_key: 必填，空值直接抛 ConfigurationError。
    completion_fn: 可注入的异步 completion（默认 litellm.acompletion），测试时替换为假实现。
    """

    def __init__(
        self,
        api_key: str | None,
        model: str | None = None,
        timeout: float | None = None,
        completion_fn: CompletionFn | None = None,
    ):
        if not api_key or not api_key.strip():
            raise ConfigurationError("Server configuration error: API key not found.")
        self._api_key = api_key.strip()
        self.model = model or get_default_model()
        self.timeout = timeout if timeout and timeout > 0 else oracle_timeout()
        self._completion = completion_fn or _litellm_acompletion

    @classmethod
    def from_env(cls, completion_fn: CompletionFn | None = None) -> "GenerationClient":
        """按当前环境变量构造；每次调用都重新读取凭证。"""
        return cls(get_api_key(), completion_fn=completion_fn)

    async def generate(self, request: GenerationRequest) -> str:
        """发送请求并返回原始文本；超过截止时间即取消在途调用。"""
        logger.info("Sending %d part(s) to %s", len(request.parts), self.model)
        started = time.monotonic()
        try:
            response = await asyncio.wait_for(
                self._completion(
                    model=self.model,
                    api_key=self._api_key,
                    timeout=self.timeout,
                    **request.to_completion_kwargs(),
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise TransportFailure(f"Model service did not respond within {self.timeout:g}s.") from e
        except Exception as e:
            translated = _translate_litellm_error(e)
            if translated is e:
                raise
            raise translated from e

        logger.info("Received response from %s in %.2fs", self.model, time.monotonic() - started)
        return _response_text(response)


def _response_text(response: Any) -> str:
    choices = getattr(response, "choices", None) or []
    if not choices:
        raise MalformedOutput("Model service returned no candidates.", raw_response_preview="")
    choice = choices[0]
    if getattr(choice, "finish_reason", None) == "content_filter":
        raise SafetyBlocked("Response was blocked by the model's safety filter.")
    content = getattr(getattr(choice, "message", None), "content", None)
    if not content:
        raise MalformedOutput("Model service returned an empty response.", raw_response_preview="")
    return content
