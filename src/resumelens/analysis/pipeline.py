"""
分析流水线：构造请求 → 调用模型 → 解码校验。每次调用独立，不保留任何状态。
"""
from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from .decode import decode_analysis
from .parts import ContentPart
from .request import build_request
from .schemas import AnalysisResult

if TYPE_CHECKING:
    from resumelens.core.llm import GenerationClient

logger = logging.getLogger(__name__)


async def analyze_resume(parts: list[ContentPart], client: "GenerationClient") -> AnalysisResult:
    """
    对已规整的 ContentPart 执行一次分析，返回类型化结果。
    失败时抛出 AnalysisError 子类（或未识别的原始异常），由调用方交给 classify()。
    """
    started = time.monotonic()
    request = build_request(parts)
    raw = await client.generate(request)
    result = decode_analysis(raw)
    logger.info(
        "Analysis complete: %d skill(s), %d experience entr(ies) in %.2fs",
        len(result.skills),
        len(result.experience),
        time.monotonic() - started,
    )
    return result
