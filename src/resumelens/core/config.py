"""
配置：从环境变量读取，供分析流水线与 HTTP 入口使用。

所有取值函数在每次调用时重新读取环境变量，不做进程级缓存：
缺少 API Key 会在每个请求上暴露，而不是只在启动时报一次。
"""
import os
from pathlib import Path

# 可选加载 .env（若存在）：先项目根（与 pyproject.toml 同层），再当前工作目录
_env_paths = [
    Path(__file__).resolve().parents[3] / ".env",  # 从 src/resumelens/core 往上的项目根
    Path.cwd() / ".env",
]
for _p in _env_paths:
    if _p.exists():
        from dotenv import load_dotenv
        load_dotenv(_p)
        break

DEFAULT_MODEL = "gemini/gemini-1.5-flash-latest"
DEFAULT_ORACLE_TIMEOUT = 120.0
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024

DOCUMENT_MODES = ("inline", "markdown")


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("true", "1", "yes", "on")


def _env_number(name: str, default, cast):
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError:
        return default


def get_api_key() -> str | None:
    """模型服务凭证：RESUMELENS_API_KEY 优先，其次 GEMINI_API_KEY；均未配置返回 None。"""
    key = (os.getenv("RESUMELENS_API_KEY") or os.getenv("GEMINI_API_KEY") or "").strip()
    return key or None


def get_default_model() -> str:
    """LiteLLM 格式的模型名，如 gemini/gemini-1.5-flash-latest。"""
    return (os.getenv("RESUMELENS_MODEL") or DEFAULT_MODEL).strip()


def oracle_timeout() -> float:
    """单次模型调用的截止时间（秒），超时即取消。"""
    value = _env_number("RESUMELENS_ORACLE_TIMEOUT", DEFAULT_ORACLE_TIMEOUT, float)
    return value if value > 0 else DEFAULT_ORACLE_TIMEOUT


def document_mode() -> str:
    """
    二进制简历的送审方式。
    inline = 原文件作为附件随请求发送（默认）；
    markdown = 先用 MarkItDown 本地转为文本，再走文本路径（适配不接受文件附件的模型）。
    """
    mode = (os.getenv("RESUMELENS_DOCUMENT_MODE") or "inline").strip().lower()
    return mode if mode in DOCUMENT_MODES else "inline"


def max_upload_bytes() -> int:
    """上传文件大小上限（字节）；<= 0 表示不限制。"""
    return _env_number("RESUMELENS_MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES, int)


def verify_signature() -> bool:
    """是否按文件头魔数校验客户端声明的 Content-Type（默认关闭，保持信任声明类型）。"""
    return _env_bool("RESUMELENS_VERIFY_SIGNATURE", False)


def max_input_tokens() -> int:
    """文本简历的 token 上限（tiktoken 估算）；0 表示不限制。"""
    return max(0, _env_number("RESUMELENS_MAX_INPUT_TOKENS", 0, int))


def cors_origins() -> list[str]:
    raw = os.getenv("RESUMELENS_CORS_ORIGINS") or "http://localhost:3000"
    return [o.strip() for o in raw.split(",") if o.strip()]


def log_level() -> str:
    return (os.getenv("RESUMELENS_LOG_LEVEL") or "INFO").strip().upper()
