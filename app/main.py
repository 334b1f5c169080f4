import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.container import container
from app.exception import BusinessException
from app.openapi.router import router as openapi_router
from app.transcript.router import router as transcript_router

# 로거 설정
logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    # Startup
    logger.info("🚀 YouTube Transcript API 시작 중...")
    # 의존성 주입 컨테이너 설정
    container.wire(modules=[__name__])
    yield
    # Shutdown
    logger.info("🔄 YouTube Transcript API 종료 중...")


# FastAPI 앱 생성 (자체 문서 라우트는 /openapi.json 과 겹치므로 비활성화)
app = FastAPI(
    title="YouTube Transcript API",
    version="1.1.0",
    lifespan=lifespan,
    openapi_url=None,
    docs_url=None,
    redoc_url=None,
)
app.router.redirect_slashes = False


@app.middleware("http")
async def strip_trailing_slash(request: Request, call_next):
    path = request.scope["path"]
    if path != "/" and path.endswith("/"):
        request.scope["path"] = path[:-1]
    return await call_next(request)


@app.exception_handler(BusinessException)
async def business_exception_handler(request: Request, exc: BusinessException):
    logger.info("business_exception", extra={"path": str(request.url), "error_code": exc.error_code})
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return PlainTextResponse("Not Found", status_code=404)
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

# 라우터 등록
app.include_router(transcript_router)
app.include_router(openapi_router)
