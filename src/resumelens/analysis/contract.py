"""
分析结果的结构契约：随请求发给模型的 JSON schema（response_schema）。

不使用 $ref / $defs，字段逐层内联，Gemini 结构化输出可直接接受。
_SCHEMA 进程内只读，对外一律通过 analysis_schema() 取深拷贝。
"""
from __future__ import annotations

import copy
from typing import Any

SEVERITY_LEVELS = ("high", "medium", "low")


def _issue_list(description: str) -> dict[str, Any]:
    return {
        "type": "array",
        "description": description,
        "items": {
            "type": "object",
            "properties": {
                "issue": {"type": "string", "description": "Short description of the issue"},
                "severity": {"type": "string", "enum": list(SEVERITY_LEVELS)},
            },
            "required": ["issue", "severity"],
        },
    }


def _string_list(description: str) -> dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}, "description": description}


_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": {"type": "string", "description": "Full name of the candidate"},
        "email": {"type": "string", "description": "Contact email address"},
        "phone": {"type": "string", "description": "Contact phone number"},
        "skills": _string_list("List of key technical and soft skills"),
        "experience": {
            "type": "array",
            "description": "Professional work experience",
            "items": {
                "type": "object",
                "properties": {
                    "title": {"type": "string", "description": "Job title or position held"},
                    "company": {"type": "string", "description": "Name of the company"},
                    "duration": {
                        "type": "string",
                        "description": "Employment dates or duration (e.g., 'Jan 2020 - Present', '3 years')",
                    },
                    "description": {
                        "type": "string",
                        "description": "Brief description of responsibilities and achievements",
                    },
                },
                "required": ["title", "company", "duration", "description"],
            },
        },
        "education": {
            "type": "array",
            "description": "Educational background",
            "items": {
                "type": "object",
                "properties": {
                    "degree": {"type": "string", "description": "Degree obtained (e.g., 'B.S. Computer Science')"},
                    "institution": {"type": "string", "description": "Name of the educational institution"},
                    "year": {"type": "string", "description": "Year of graduation or expected graduation"},
                },
                "required": ["degree", "institution", "year"],
            },
        },
        "strengths": _string_list("Key strengths identified in the resume"),
        "weaknesses": _string_list("Potential areas for improvement or gaps"),
        "overallScore": {
            "type": "number",
            "description": (
                "An objective score from 0 to 100 evaluating the resume's quality "
                "and fit for a general software developer role"
            ),
        },
        "atsAnalysis": {
            "type": "object",
            "description": "Applicant Tracking System compatibility breakdown",
            "properties": {
                "atsScore": {"type": "number", "description": "Overall ATS compatibility, 0 to 100"},
                "keywordMatch": {"type": "number", "description": "Keyword match percentage, 0 to 100"},
                "formatScore": {"type": "number", "description": "Format parsability score, 0 to 100"},
                "contentScore": {"type": "number", "description": "Content relevance score, 0 to 100"},
                "matchedKeywords": _string_list("Relevant keywords found in the resume"),
                "missingKeywords": _string_list("Relevant keywords missing from the resume"),
                "formatIssues": _issue_list("Formatting problems that hurt ATS parsing"),
                "contentIssues": _issue_list("Content problems that hurt ATS ranking"),
            },
            # contentIssues 不在必填集合内，与 formatIssues 不对称，沿用既有行为
            "required": [
                "atsScore",
                "keywordMatch",
                "formatScore",
                "contentScore",
                "matchedKeywords",
                "missingKeywords",
                "formatIssues",
            ],
        },
    },
    "required": [
        "name",
        "skills",
        "experience",
        "education",
        "strengths",
        "weaknesses",
        "overallScore",
        "atsAnalysis",
    ],
}


def analysis_schema() -> dict[str, Any]:
    """返回 schema 的深拷贝，调用方可随意序列化或修改而不影响契约本身。"""
    return copy.deepcopy(_SCHEMA)


def _node(path: str) -> dict[str, Any]:
    node = _SCHEMA
    for key in [p for p in path.split(".") if p]:
        try:
            node = node["properties"][key]
        except KeyError:
            raise KeyError(f"unknown schema path: {path}") from None
        if node.get("type") == "array":
            node = node["items"]
    return node


def required_fields(path: str = "") -> frozenset[str]:
    """
    某一层级的必填字段集合。path 为点分路径，数组自动下钻到元素：
    "" 顶层、"experience"、"atsAnalysis"、"atsAnalysis.formatIssues" 等。
    """
    return frozenset(_node(path).get("required", ()))


def field_names(path: str = "") -> frozenset[str]:
    """某一层级声明的全部字段（含非必填）。"""
    return frozenset(_node(path).get("properties", {}))
