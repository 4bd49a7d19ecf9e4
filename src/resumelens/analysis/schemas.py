"""
分析结果的数据边界：Pydantic 模型，模型输出在解码处一次性校验为 AnalysisResult，之后不再传递无类型 dict。

字段名用 snake_case，对外（JSON）一律 camelCase 别名；模型额外返回的字段原样保留。
"""
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, confloat, conint
from pydantic.alias_generators import to_camel

Severity = Literal["high", "medium", "low"]
# 严格类型：不做 "85" -> 85、True -> 1 之类的转换，类型不符即视为输出畸形；
# int | float 保持模型返回的数值原样（85 不会变成 85.0），取值范围 0-100
Score = Union[conint(strict=True, ge=0, le=100), confloat(strict=True, ge=0, le=100)]


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class Experience(_Model):
    title: StrictStr = Field(..., description="职位名称")
    company: StrictStr = Field(..., description="公司名称")
    duration: StrictStr = Field(..., description="任职时间段或时长")
    description: StrictStr = Field(..., description="职责与成果摘要")


class Education(_Model):
    degree: StrictStr = Field(..., description="学位")
    institution: StrictStr = Field(..., description="院校")
    year: StrictStr = Field(..., description="毕业年份或预计毕业年份")


class AtsIssue(_Model):
    issue: StrictStr
    severity: Severity


class AtsAnalysis(_Model):
    ats_score: Score
    keyword_match: Score
    format_score: Score
    content_score: Score
    matched_keywords: list[StrictStr]
    missing_keywords: list[StrictStr]
    format_issues: list[AtsIssue]
    content_issues: Optional[list[AtsIssue]] = None


class AnalysisResult(_Model):
    """简历分析结果：身份字段、技能、经历、教育、优劣势、总分与 ATS 子分析。"""
    name: StrictStr
    email: Optional[StrictStr] = None
    phone: Optional[StrictStr] = None
    skills: list[StrictStr]
    experience: list[Experience]
    education: list[Education]
    strengths: list[StrictStr]
    weaknesses: list[StrictStr]
    overall_score: Score
    ats_analysis: AtsAnalysis

    def to_payload(self) -> dict[str, Any]:
        """对外 JSON：camelCase，且只包含模型实际返回的字段。"""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
