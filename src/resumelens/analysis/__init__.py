"""
简历分析核心：结构契约、请求构造、响应解码、错误分类与流水线。
"""
from .contract import SEVERITY_LEVELS, analysis_schema, required_fields
from .errors import (
    AnalysisError,
    ClassifiedError,
    ConfigurationError,
    InvalidInput,
    MalformedOutput,
    QuotaOrAuthFailure,
    SafetyBlocked,
    TransportFailure,
    UnsupportedContentType,
    UnsupportedMediaType,
    classify,
)
from .parts import AttachmentPart, ContentPart, TextPart
from .pipeline import analyze_resume
from .request import GenerationRequest, build_request
from .schemas import AnalysisResult

__all__ = [
    "SEVERITY_LEVELS",
    "analysis_schema",
    "required_fields",
    "AnalysisError",
    "ClassifiedError",
    "ConfigurationError",
    "InvalidInput",
    "MalformedOutput",
    "QuotaOrAuthFailure",
    "SafetyBlocked",
    "TransportFailure",
    "UnsupportedContentType",
    "UnsupportedMediaType",
    "classify",
    "AttachmentPart",
    "ContentPart",
    "TextPart",
    "analyze_resume",
    "GenerationRequest",
    "build_request",
    "AnalysisResult",
]
