"""
请求构造：ContentPart 序列 + 分析 schema + 固定生成参数/安全阈值 → GenerationRequest。

生成参数为固定配置而非用户输入：温度适中以优先遵守 schema，输出上限足够容纳多段 JSON，
输出强制为结构化 JSON；四类内容安全维度均拦截中等及以上风险。纯构造，无副作用。
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .contract import analysis_schema
from .parts import AttachmentPart, ContentPart, TextPart

SCHEMA_NAME = "resume_analysis"

SAFETY_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)
BLOCK_THRESHOLD = "BLOCK_MEDIUM_AND_ABOVE"


@dataclass(frozen=True)
class SamplingConfig:
    temperature: float = 0.7
    top_p: float = 0.95
    top_k: int = 40
    max_output_tokens: int = 8192
    response_mime_type: str = "application/json"


@dataclass(frozen=True)
class SafetySetting:
    category: str
    threshold: str = BLOCK_THRESHOLD

    def to_dict(self) -> dict[str, str]:
        return {"category": self.category, "threshold": self.threshold}


SAFETY_SETTINGS = tuple(SafetySetting(c) for c in SAFETY_CATEGORIES)


@dataclass(frozen=True)
class GenerationRequest:
    """一次调用的完整请求；每个入站请求新建，不跨请求复用。"""
    parts: tuple[ContentPart, ...]
    schema: dict[str, Any] = field(default_factory=analysis_schema)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    safety: tuple[SafetySetting, ...] = SAFETY_SETTINGS

    def to_messages(self) -> list[dict[str, Any]]:
        """单条 user 消息，content 按原顺序列出各部分（附件用 file 内容块）。"""
        content: list[dict[str, Any]] = []
        for part in self.parts:
            if isinstance(part, AttachmentPart):
                file_block: dict[str, Any] = {"file_data": part.to_data_url()}
                if part.filename:
                    file_block["filename"] = part.filename
                content.append({"type": "file", "file": file_block})
            else:
                content.append({"type": "text", "text": part.text})
        return [{"role": "user", "content": content}]

    def to_completion_kwargs(self) -> dict[str, Any]:
        """LiteLLM completion 的参数（不含 model / api_key / timeout）。"""
        return {
            "messages": self.to_messages(),
            "temperature": self.sampling.temperature,
            "top_p": self.sampling.top_p,
            "top_k": self.sampling.top_k,
            "max_tokens": self.sampling.max_output_tokens,
            "response_format": {
                "type": "json_schema",
                "json_schema": {"name": SCHEMA_NAME, "schema": self.schema},
            },
            "safety_settings": [s.to_dict() for s in self.safety],
            # 非 Gemini 模型不支持 top_k 等参数时直接忽略，而非报错
            "drop_params": True,
        }


def build_request(parts: list[ContentPart] | tuple[ContentPart, ...]) -> GenerationRequest:
    """至少一个部分；部分类型只能是 TextPart / AttachmentPart。"""
    parts = tuple(parts or ())
    if not parts:
        raise ValueError("a generation request needs at least one content part")
    for part in parts:
        if not isinstance(part, (TextPart, AttachmentPart)):
            raise TypeError(f"unsupported content part: {type(part).__name__}")
    return GenerationRequest(parts=parts)
