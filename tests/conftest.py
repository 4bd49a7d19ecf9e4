"""
公共夹具：清理配置环境变量、假 completion（替代 litellm.acompletion，全程无网络）、示例分析结果。
"""
import asyncio
import copy
import json
from types import SimpleNamespace

import pytest

_CONFIG_ENV = [
    "RESUMELENS_API_KEY",
    "GEMINI_API_KEY",
    "RESUMELENS_MODEL",
    "RESUMELENS_ORACLE_TIMEOUT",
    "RESUMELENS_DOCUMENT_MODE",
    "RESUMELENS_MAX_UPLOAD_BYTES",
    "RESUMELENS_VERIFY_SIGNATURE",
    "RESUMELENS_MAX_INPUT_TOKENS",
]

JANE_TEXT = "Jane Doe, jane@x.com, Python, SQL. Worked as Engineer at Acme 2020-2023."

JANE_ANALYSIS = {
    "name": "Jane Doe",
    "email": "jane@x.com",
    "skills": ["Python", "SQL"],
    "experience": [
        {
            "title": "Engineer",
            "company": "Acme",
            "duration": "2020-2023",
            "description": "Worked as an engineer at Acme.",
        }
    ],
    "education": [],
    "strengths": ["Relevant technical skills"],
    "weaknesses": ["No quantified achievements"],
    "overallScore": 62,
    "atsAnalysis": {
        "atsScore": 70,
        "keywordMatch": 55.5,
        "formatScore": 80,
        "contentScore": 60,
        "matchedKeywords": ["Python", "SQL"],
        "missingKeywords": ["Docker", "CI/CD"],
        "formatIssues": [{"issue": "No section headings", "severity": "medium"}],
        "contentIssues": [{"issue": "Very short experience description", "severity": "high"}],
    },
}


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """每个用例从干净的配置开始，不受本机 .env / 环境变量影响。"""
    for name in _CONFIG_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def jane_analysis():
    return copy.deepcopy(JANE_ANALYSIS)


def make_response(content, finish_reason="stop"):
    """构造与 LiteLLM ModelResponse 同形的最小对象。"""
    message = SimpleNamespace(content=content, role="assistant")
    return SimpleNamespace(choices=[SimpleNamespace(message=message, finish_reason=finish_reason)])


class FakeCompletion:
    """
    假 acompletion：记录每次调用的参数。
    content 可为 str / dict（自动 json.dumps）；error 不为空时抛出该异常；delay 模拟慢响应。
    """

    def __init__(self, content=None, *, finish_reason="stop", error=None, delay=0.0):
        if isinstance(content, dict):
            content = json.dumps(content)
        self.content = content
        self.finish_reason = finish_reason
        self.error = error
        self.delay = delay
        self.calls = []

    async def __call__(self, **kwargs):
        self.calls.append(kwargs)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return make_response(self.content, self.finish_reason)

    @property
    def call_count(self):
        return len(self.calls)
