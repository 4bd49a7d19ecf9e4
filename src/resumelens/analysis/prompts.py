"""分析指令模板：仅按来源（文本 / 附件）区分，附件模板带文件名。"""

TEXT_PROMPT = """Please analyze the following resume text thoroughly. Extract the requested information and provide an objective analysis based on common resume best practices for a software developer role. Structure your response strictly according to the provided JSON schema.

Resume Text:
---
{resume_text}
---

Analyze the text and return the JSON object."""

ATTACHMENT_PROMPT = (
    "Please analyze the attached resume file ({filename}) thoroughly. Extract the requested "
    "information and provide an objective analysis based on common resume best practices for a "
    "software developer role. Structure your response strictly according to the provided JSON "
    "schema. Return only the JSON object."
)

DEFAULT_ATTACHMENT_NAME = "resume"


def text_prompt(resume_text: str) -> str:
    return TEXT_PROMPT.format(resume_text=resume_text)


def attachment_prompt(filename: str | None) -> str:
    return ATTACHMENT_PROMPT.format(filename=(filename or "").strip() or DEFAULT_ATTACHMENT_NAME)
