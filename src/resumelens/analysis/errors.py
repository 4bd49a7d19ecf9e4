"""
错误分类：流水线各环节抛出的异常统一映射为 (kind, HTTP 状态码, 面向用户的消息)。

已知类型的失败各有专属异常类；第三方库或未预料的异常按消息关键词归类，
兜底为通用 500。安全拦截一律返回固定说明，不透传模型服务的原始报错文本。
"""
from __future__ import annotations

from dataclasses import dataclass

SAFETY_BLOCKED_MESSAGE = "Analysis blocked due to safety settings. The content may violate policies."
GENERIC_ERROR_MESSAGE = "An error occurred during resume processing."

PREVIEW_LIMIT = 500


class AnalysisError(Exception):
    """流水线失败的基类：kind 为稳定的错误种类名，status_code 为对应 HTTP 状态。"""

    kind = "transport_failure"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(AnalysisError):
    kind = "invalid_input"
    status_code = 400


class UnsupportedMediaType(AnalysisError):
    """上传文件的声明类型不在允许列表内（或与文件头不符）。"""

    kind = "unsupported_media_type"
    status_code = 400


class UnsupportedContentType(AnalysisError):
    """请求体既不是 JSON 也不是 multipart。"""

    kind = "unsupported_content_type"
    status_code = 415


class ConfigurationError(AnalysisError):
    kind = "configuration_error"
    status_code = 500


class SafetyBlocked(AnalysisError):
    kind = "safety_blocked"
    status_code = 400


class QuotaOrAuthFailure(AnalysisError):
    kind = "quota_or_auth_failure"
    status_code = 500


class MalformedOutput(AnalysisError):
    """模型输出不是合法 JSON 或不符合分析结构；raw_response_preview 为截断后的原文。"""

    kind = "malformed_output"
    status_code = 500

    def __init__(self, message: str, raw_response_preview: str | None = None):
        super().__init__(message)
        self.raw_response_preview = raw_response_preview


class TransportFailure(AnalysisError):
    kind = "transport_failure"
    status_code = 500


def preview(raw: str | None, limit: int = PREVIEW_LIMIT) -> str:
    """原始输出的有界预览：前 limit 个字符，超长时追加 "..."。"""
    raw = raw or ""
    return raw[:limit] + ("..." if len(raw) > limit else "")


@dataclass(frozen=True)
class ClassifiedError:
    kind: str
    status_code: int
    message: str
    raw_response_preview: str | None = None
    details: str | None = None


def _classify_by_message(message: str) -> ClassifiedError:
    # 关键词优先级：输入问题 > 安全拦截 > 凭证/配额 > 其他
    if "Invalid" in message or "Unsupported" in message or "missing" in message:
        return ClassifiedError(InvalidInput.kind, 400, message)
    if "SAFETY" in message or "blocked" in message:
        return ClassifiedError(SafetyBlocked.kind, 400, SAFETY_BLOCKED_MESSAGE)
    if "API key" in message or "quota" in message:
        return ClassifiedError(QuotaOrAuthFailure.kind, 500, message)
    return ClassifiedError(TransportFailure.kind, 500, GENERIC_ERROR_MESSAGE, details=message or None)


def classify(exc: BaseException) -> ClassifiedError:
    """任意异常 → 唯一的 ClassifiedError；本函数自身不抛异常。"""
    if isinstance(exc, SafetyBlocked):
        return ClassifiedError(exc.kind, exc.status_code, SAFETY_BLOCKED_MESSAGE)
    if isinstance(exc, MalformedOutput):
        return ClassifiedError(
            exc.kind,
            exc.status_code,
            exc.message,
            raw_response_preview=exc.raw_response_preview,
        )
    if isinstance(exc, TransportFailure):
        return ClassifiedError(exc.kind, exc.status_code, GENERIC_ERROR_MESSAGE, details=exc.message)
    if isinstance(exc, AnalysisError):
        return ClassifiedError(exc.kind, exc.status_code, exc.message)
    return _classify_by_message(str(exc))
