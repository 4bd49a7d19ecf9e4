"""ResumeLens：简历文本/文件 → 结构化 AI 分析（资料字段、优劣势、总分、ATS 兼容性）。"""

__version__ = "0.1.0"
