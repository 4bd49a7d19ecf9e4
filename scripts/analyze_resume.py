#!/usr/bin/env python3
"""
本地跑一次完整分析：读取简历文件 → 规整 → 调用模型 → 打印结构化 JSON。
用法: uv run python scripts/analyze_resume.py <简历文件路径> [--model gemini/gemini-1.5-pro]
支持 .txt / .md（文本路径）与 .pdf / .doc / .docx（附件路径）；需在 .env 中配置 GEMINI_API_KEY。
"""
from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

# 确保 src 在 path 中（未 pip install -e 时也可直接运行）
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

_MEDIA_TYPES = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


def _parts_for(path: Path):
    from resumelens.ingest import normalize_file, normalize_text

    suffix = path.suffix.lower()
    if suffix in (".txt", ".md"):
        return normalize_text(path.read_text(encoding="utf-8", errors="replace"))
    return normalize_file(path.read_bytes(), _MEDIA_TYPES.get(suffix), path.name)


async def main() -> int:
    from resumelens.analysis import analyze_resume, classify
    from resumelens.core import GenerationClient, get_api_key, setup_logging

    setup_logging()
    args = sys.argv[1:]
    model = None
    if "--model" in args:
        i = args.index("--model")
        model = args[i + 1] if i + 1 < len(args) else None
        args = args[:i] + args[i + 2:]
    if not args:
        print(__doc__)
        return 2

    path = Path(args[0])
    if not path.exists():
        print(f"文件不存在: {path}")
        return 1

    try:
        client = GenerationClient(get_api_key(), model=model)
        result = await analyze_resume(_parts_for(path), client)
    except Exception as e:
        c = classify(e)
        print(f"[{c.status_code} {c.kind}] {c.message}")
        if c.raw_response_preview:
            print(f"原文预览: {c.raw_response_preview}")
        if c.details:
            print(f"详情: {c.details}")
        return 1

    print(json.dumps(result.to_payload(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
