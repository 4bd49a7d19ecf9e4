"""
ResumeLens HTTP 入口：单一分析端点，按 Content-Type 分派。

- application/json：{"resumeText": "..."}，前端已读出的纯文本简历。
- multipart/form-data：文件字段 resumeFile（PDF / DOCX / DOC），原文件作为附件交给模型。
- 其他类型一律 415。

生成客户端按请求经依赖注入创建：未配置 API Key 时每个请求都返回 500，而不是只在启动时报错一次。
无状态：不保存任何简历或分析结果。
"""
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from resumelens import __version__
from resumelens.analysis.errors import AnalysisError, InvalidInput, UnsupportedContentType, classify
from resumelens.analysis.pipeline import analyze_resume
from resumelens.core.config import cors_origins, max_upload_bytes
from resumelens.core.llm import GenerationClient
from resumelens.core.log import setup_logging
from resumelens.ingest.normalize import normalize_file, normalize_text

from .schemas import ErrorResponse, HealthResponse

setup_logging()
logger = logging.getLogger(__name__)

RESUME_FILE_FIELD = "resumeFile"

app = FastAPI(
    title="ResumeLens API",
    description="简历文本/文件 → 结构化 AI 分析（资料字段、优劣势、总分、ATS 兼容性）",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_generation_client() -> GenerationClient:
    """每个请求新建客户端并重新读取凭证；缺失时抛 ConfigurationError。"""
    return GenerationClient.from_env()


def _error_response(exc: BaseException) -> JSONResponse:
    classified = classify(exc)
    if classified.status_code >= 500:
        logger.error("Request failed [%s]: %s", classified.kind, exc, exc_info=not isinstance(exc, AnalysisError))
    else:
        logger.warning("Request rejected [%s]: %s", classified.kind, exc)
    body = ErrorResponse(
        error=classified.message,
        raw_response_preview=classified.raw_response_preview,
        details=classified.details,
    )
    return JSONResponse(status_code=classified.status_code, content=body.model_dump(by_alias=True, exclude_none=True))


@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError):
    """依赖注入阶段（如缺少 API Key）抛出的错误同样走统一分类。"""
    return _error_response(exc)


@app.get("/health", response_model=HealthResponse)
def health():
    """探活。"""
    return HealthResponse()


async def _parts_from_json(request: Request):
    try:
        body = await request.json()
    except ValueError as e:
        raise InvalidInput("Invalid JSON request: body is not valid JSON.") from e
    resume_text = body.get("resumeText") if isinstance(body, dict) else None
    return normalize_text(resume_text)


async def _parts_from_form(request: Request):
    try:
        form = await request.form()
    except Exception as e:  # python-multipart 对畸形请求体抛出的异常类型不统一
        raise InvalidInput(f"Invalid FormData: {e}") from e
    upload = form.get(RESUME_FILE_FIELD)
    if not isinstance(upload, UploadFile):
        return normalize_file(None, None)
    # 先按 multipart 解析出的大小拒绝超限文件，避免整文件读入内存；size 未知时由 normalize_file 兜底
    limit = max_upload_bytes()
    if limit > 0 and upload.size is not None and upload.size > limit:
        await upload.close()
        raise InvalidInput(f"Invalid file: {upload.size} bytes exceeds the {limit} byte upload limit.")
    try:
        data = await upload.read()
    finally:
        await upload.close()
    return normalize_file(data, upload.content_type, upload.filename)


@app.post(
    "/api/analyze-resume",
    responses={
        400: {"model": ErrorResponse},
        415: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def analyze_resume_endpoint(
    request: Request,
    client: GenerationClient = Depends(get_generation_client),
):
    """
    简历分析：规整输入 → 构造请求 → 调用模型 → 解码校验。
    成功返回 AnalysisResult JSON；失败返回 {"error": ...}（解析失败另含 rawResponsePreview）。
    """
    content_type = request.headers.get("content-type") or ""
    logger.info("Received request with Content-Type: %s", content_type)
    try:
        if "application/json" in content_type:
            parts = await _parts_from_json(request)
        elif "multipart/form-data" in content_type:
            parts = await _parts_from_form(request)
        else:
            raise UnsupportedContentType(
                "Unsupported request format. Use application/json (for text) or multipart/form-data (for files)."
            )
        result = await analyze_resume(parts, client)
    except Exception as e:
        return _error_response(e)
    return JSONResponse(content=result.to_payload())
