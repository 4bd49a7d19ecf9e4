"""日志：标准库 logging，统一格式与级别（RESUMELENS_LOG_LEVEL）。"""
import logging

from resumelens.core.config import log_level

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> None:
    """为 resumelens 命名空间挂一个 StreamHandler；重复调用只更新级别。"""
    level = level or log_level()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    root = logging.getLogger("resumelens")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
