"""
ContentPart：一次生成请求的有序组成单元，文本指令或二进制附件二选一。
"""
from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class AttachmentPart:
    data: bytes
    media_type: str
    filename: str | None = None

    def to_data_url(self) -> str:
        """附件的 base64 data URL，LiteLLM 的 file 内容块使用此格式。"""
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.media_type};base64,{encoded}"

    def __repr__(self) -> str:
        # 不把整段二进制打进日志
        return f"AttachmentPart(media_type={self.media_type!r}, filename={self.filename!r}, size={len(self.data)})"


ContentPart = Union[TextPart, AttachmentPart]
