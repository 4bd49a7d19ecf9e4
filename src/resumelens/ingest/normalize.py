"""
输入规整：两种请求形态（内联文本 / 上传文件）统一转为有序的 ContentPart 序列。

- 文本：恰好一个 TextPart（分析指令内嵌简历全文）。
- 文件：恰好两个部分，AttachmentPart 在前、指令 TextPart 在后（模型对顺序敏感）。
除读入内存外无副作用：不落盘、不调用外部服务（markdown 模式的本地转换除外）。
"""
from __future__ import annotations

import logging

from resumelens.analysis.errors import InvalidInput, UnsupportedMediaType
from resumelens.analysis.parts import AttachmentPart, ContentPart, TextPart
from resumelens.analysis.prompts import attachment_prompt, text_prompt
from resumelens.core.config import document_mode, max_input_tokens, max_upload_bytes, verify_signature

logger = logging.getLogger(__name__)

PDF = "application/pdf"
DOC = "application/msword"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# 可直接作为附件交给模型的类型；纯文本由前端读出后走 JSON 文本路径
SUPPORTED_FILE_TYPES = (PDF, DOCX, DOC)

_OLE2_HEADER = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"
_ZIP_HEADER = b"PK\x03\x04"


def base_media_type(declared: str | None) -> str:
    """去掉参数并转小写：'Application/PDF; name=x' -> 'application/pdf'。"""
    return (declared or "").split(";", 1)[0].strip().lower()


def signature_matches(data: bytes, media_type: str) -> bool:
    """按文件头魔数判断内容是否与声明类型一致。"""
    if media_type == PDF:
        # %PDF- 之前允许出现少量前导字节
        return b"%PDF-" in data[:1024]
    if media_type == DOC:
        return data.startswith(_OLE2_HEADER)
    if media_type == DOCX:
        return data.startswith(_ZIP_HEADER)
    return False


def normalize_text(resume_text: object) -> list[ContentPart]:
    """JSON 文本路径：resumeText 必须为非空白字符串。"""
    if not isinstance(resume_text, str) or not resume_text.strip():
        raise InvalidInput('Invalid JSON request: "resumeText" is missing, empty, or not a string.')

    limit = max_input_tokens()
    if limit:
        from resumelens.core.tokens import count_tokens

        n = count_tokens(resume_text)
        if n > limit:
            raise InvalidInput(f"Invalid resumeText: about {n} tokens, the limit is {limit}.")

    logger.info("Normalized text resume (length=%d)", len(resume_text))
    return [TextPart(text_prompt(resume_text))]


def normalize_file(
    data: bytes | None,
    media_type: str | None,
    filename: str | None = None,
) -> list[ContentPart]:
    """
    multipart 文件路径：校验声明类型（允许列表为配置常量，默认信任声明值），
    inline 模式返回 [附件, 指令]；markdown 模式本地转文本后走文本路径。
    """
    if data is None:
        raise InvalidInput('Invalid FormData: "resumeFile" part is missing.')

    declared = base_media_type(media_type)
    if declared not in SUPPORTED_FILE_TYPES:
        logger.warning("Unsupported file type for direct analysis: %s", media_type)
        raise UnsupportedMediaType(
            f"Unsupported file type: {media_type or 'unknown'}. Only PDF, DOCX, DOC are supported for direct analysis."
        )

    limit = max_upload_bytes()
    if limit > 0 and len(data) > limit:
        raise InvalidInput(f"Invalid file: {len(data)} bytes exceeds the {limit} byte upload limit.")
    if not data:
        raise InvalidInput("Invalid file: uploaded file is empty.")

    if verify_signature() and not signature_matches(data, declared):
        raise UnsupportedMediaType(f"Unsupported file content: does not look like {declared}.")

    logger.info("Received file: %s, Type: %s, Size: %d bytes", filename, declared, len(data))

    if document_mode() == "markdown":
        return _document_as_text(data, declared, filename)

    return [
        AttachmentPart(data=data, media_type=declared, filename=filename),
        TextPart(attachment_prompt(filename)),
    ]


def _document_as_text(data: bytes, media_type: str, filename: str | None) -> list[ContentPart]:
    from resumelens.ingest.markitdown_convert import bytes_to_markdown

    try:
        markdown = bytes_to_markdown(data, media_type=media_type, filename=filename)
    except Exception as e:  # MarkItDown 对损坏文件抛出的异常类型不固定
        raise InvalidInput(f"Invalid file: could not extract text ({e}).") from e
    if not markdown.strip():
        raise InvalidInput("Invalid file: no text could be extracted from the document.")
    return normalize_text(markdown)
