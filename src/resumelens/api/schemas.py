"""
HTTP 层的响应模型（成功响应体即 AnalysisResult 本身，见 resumelens.analysis.schemas）。
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class ErrorResponse(BaseModel):
    """失败时的统一响应体。"""
    model_config = ConfigDict(populate_by_name=True)

    error: str = Field(..., description="面向用户的错误说明")
    raw_response_preview: Optional[str] = Field(
        None,
        alias="rawResponsePreview",
        description="模型输出无法解析时的原文预览（最多 500 字符 + ...）",
    )
    details: Optional[str] = Field(None, description="通用服务端错误的诊断信息")


class HealthResponse(BaseModel):
    status: str = "ok"
    service: str = "resumelens"
