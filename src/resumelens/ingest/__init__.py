# 输入规整（文本 / 上传文件 → ContentPart）+ MarkItDown 本地转换

from .normalize import (
    SUPPORTED_FILE_TYPES,
    normalize_file,
    normalize_text,
    signature_matches,
)

__all__ = [
    "SUPPORTED_FILE_TYPES",
    "normalize_file",
    "normalize_text",
    "signature_matches",
]
