# 配置、日志、LiteLLM 生成客户端、tiktoken 预估

from .config import (
    get_api_key,
    get_default_model,
    oracle_timeout,
    document_mode,
    max_upload_bytes,
    verify_signature,
    max_input_tokens,
    cors_origins,
)
from .llm import GenerationClient
from .log import setup_logging
from .tokens import count_tokens

__all__ = [
    "get_api_key",
    "get_default_model",
    "oracle_timeout",
    "document_mode",
    "max_upload_bytes",
    "verify_signature",
    "max_input_tokens",
    "cors_origins",
    "GenerationClient",
    "setup_logging",
    "count_tokens",
]
