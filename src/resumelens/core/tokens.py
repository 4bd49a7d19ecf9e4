"""
tiktoken：请求前估算简历文本的 token 数，超长文本在调用模型前即被拒绝。

Gemini 等模型没有公开的 tiktoken 编码，统一用 cl100k_base 近似；只做上限判断，不做计费。
"""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_DEFAULT_ENCODING = "cl100k_base"


def _get_encoding():
    """获取 cl100k_base 编码；加载失败（如无网络拉取编码表）时返回 None。"""
    import tiktoken
    try:
        return tiktoken.get_encoding(_DEFAULT_ENCODING)
    except Exception as e:  # 编码表下载/解析失败
        logger.debug("tiktoken encoding unavailable: %s", e)
        return None


def count_tokens(text: str) -> int:
    """
    计算文本的 token 数量。
    若 tiktoken 不可用，回退为约 len(text)//4 的近似值（英文简历的经验比例）。
    """
    if not text:
        return 0
    enc = _get_encoding()
    if enc is not None:
        return len(enc.encode(text))
    return max(1, len(text) // 4)
