"""
BRD(비즈니스 요구사항 문서) 생성 시스템의 메인 진입점 파일입니다.
웹 서버 애플리케이션을 생성하고 설정하는 역할을 담당합니다.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from brd_generator.config import get_settings
from brd_generator.api.router import api_router
from brd_generator.exceptions import (
    BRDGeneratorError,
    EnhancementError,
    GenerationError,
    InputValidationError,
    ProviderError,
    RequirementNotFoundError,
)
from brd_generator.models import ErrorResponse

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def status_code_for(exc: BRDGeneratorError) -> int:
    """예외 종류별 HTTP 상태 코드."""
    if isinstance(exc, InputValidationError):
        return 400
    if isinstance(exc, RequirementNotFoundError):
        return 404
    if isinstance(exc, (ProviderError, EnhancementError, GenerationError)):
        return 502
    return 500


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션의 생명주기(시작과 종료)를 관리하는 함수입니다.
    """
    # 시작 시: 설정 확인
    settings = get_settings()
    logger.info(f"BRD 생성기가 다음 주소에서 시작됩니다: {settings.host}:{settings.port}")
    logger.info(
        f"LLM 공급자: {settings.llm_provider}, 생성 방식: {settings.generation_mode}"
    )

    yield

    # 종료 시: 리소스 정리
    logger.info("BRD 생성기가 종료됩니다")


def create_app() -> FastAPI:
    """
    FastAPI 웹 애플리케이션을 생성하고 설정하는 함수입니다.

    주요 기능:
    1. 기본 앱 정보 설정 (제목, 설명 등)
    2. CORS 설정 (프론트엔드와의 통신 허용 설정)
    3. 예외 핸들러 등록 (구조화된 ErrorResponse)
    4. API 라우터 연결 (기능별 주소 연결)
    """
    settings = get_settings()

    app = FastAPI(
        title="BRD 자동 생성 시스템",
        description="회의 트랜스크립트를 인도 금융권 BRD로 변환하는 LLM 생성/복구 파이프라인",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS 미들웨어 설정: 프론트엔드 웹페이지가 이 서버에 접속할 수 있도록 허용하는 설정입니다.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 글로벌 예외 핸들러: 커스텀 예외를 구조화된 JSON 응답으로 변환
    @app.exception_handler(BRDGeneratorError)
    async def brd_error_handler(request: Request, exc: BRDGeneratorError):
        status_code = status_code_for(exc)
        if status_code >= 500:
            logger.error(f"[API] {request.url.path}: [{exc.error_code}] {exc.message}")
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse.from_exception(exc).model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        error = ErrorResponse(
            error_code="ERR_INPUT_001",
            message="요청 형식이 올바르지 않습니다",
            details=[
                {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
                for err in exc.errors()
            ],
        )
        return JSONResponse(status_code=400, content=error.model_dump(mode="json"))

    @app.exception_handler(Exception)
    async def general_error_handler(request: Request, exc: Exception):
        logger.error(f"처리되지 않은 예외: {exc}", exc_info=True)
        error = ErrorResponse(error_code="ERR_INTERNAL", message="내부 서버 오류가 발생했습니다")
        return JSONResponse(status_code=500, content=error.model_dump(mode="json"))

    # API 라우터 포함: /api/v1 주소 아래에 모든 기능을 연결합니다.
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """
        루트 엔드포인트: 서버의 기본 정보를 반환합니다.
        """
        return {
            "name": "BRD 자동 생성 시스템",
            "version": "1.0.0",
            "description": "회의 트랜스크립트를 BRD로 변환",
            "docs": "/docs",
            "api": "/api/v1",
        }

    return app


# 애플리케이션 인스턴스 생성
app = create_app()


# 이 파일을 직접 실행했을 때 서버를 구동시키는 코드입니다.
if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "brd_generator.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )
