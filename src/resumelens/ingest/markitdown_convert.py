"""
MarkItDown：上传的 PDF / Word 简历在本地转为 Markdown 文本。

仅在 RESUMELENS_DOCUMENT_MODE=markdown 时使用，面向不接受文件附件的模型；
扫描件或复杂图片表格解析效果会有波动，主要处理文字层。
"""
from __future__ import annotations

import io
import mimetypes
import os

from markitdown import MarkItDown, StreamInfo

_converter_instance: MarkItDown | None = None

# 声明类型 → 扩展名，MarkItDown 依赖扩展名/mimetype 选择转换器
_EXTENSIONS = {
    "application/pdf": ".pdf",
    "application/msword": ".doc",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": ".docx",
}


def _converter() -> MarkItDown:
    """单例式获取转换器，避免重复初始化。"""
    global _converter_instance
    if _converter_instance is None:
        _converter_instance = MarkItDown()
    return _converter_instance


def bytes_to_markdown(
    data: bytes,
    *,
    media_type: str | None = None,
    filename: str | None = None,
) -> str:
    """
    二进制内容 → Markdown 字符串。
    扩展名优先取自声明的 media_type，其次取自 filename。
    """
    ext = _EXTENSIONS.get(media_type or "")
    if not ext and filename:
        ext = os.path.splitext(filename)[1] or None
    if not ext and media_type:
        ext = mimetypes.guess_extension(media_type)
    stream_info = StreamInfo(mimetype=media_type or None, extension=ext or None, filename=filename or None)
    result = _converter().convert_stream(io.BytesIO(data), stream_info=stream_info)
    return result.markdown or ""
