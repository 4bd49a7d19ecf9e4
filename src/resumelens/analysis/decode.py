"""
响应解码：模型原始文本 → JSON → AnalysisResult，这是无类型数据的唯一出口。

解析失败或结构不符时抛 MalformedOutput，只携带前 500 字符的预览，从不返回/记录完整原文。
"""
from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from .errors import MalformedOutput, preview
from .schemas import AnalysisResult

logger = logging.getLogger(__name__)


def decode_json(raw: str) -> dict[str, Any]:
    """只保证 JSON 语法合法且顶层为对象。"""
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError) as e:
        snippet = preview(raw)
        logger.error("Error parsing AI response JSON: %s; preview: %s", e, snippet)
        raise MalformedOutput(
            "Failed to parse AI analysis result into valid JSON.",
            raw_response_preview=snippet,
        ) from e
    if not isinstance(parsed, dict):
        raise MalformedOutput(
            "AI analysis result is not a JSON object.",
            raw_response_preview=preview(raw),
        )
    return parsed


def _first_error_location(err: ValidationError) -> str:
    first = err.errors()[0]
    loc = ".".join(str(p) for p in first.get("loc", ())) or "<root>"
    return f"{loc}: {first.get('msg', 'invalid')}"


def decode_analysis(raw: str) -> AnalysisResult:
    """JSON 合法之外，再按契约校验必填字段、类型、分数范围与 severity 取值。"""
    data = decode_json(raw)
    try:
        result = AnalysisResult.model_validate(data)
    except ValidationError as e:
        where = _first_error_location(e)
        logger.error("AI response does not match the analysis schema (%d error(s)), first: %s", e.error_count(), where)
        raise MalformedOutput(
            f"AI analysis result does not match the expected schema ({where}).",
            raw_response_preview=preview(raw),
        ) from e
    logger.info("Successfully parsed AI response JSON.")
    return result
