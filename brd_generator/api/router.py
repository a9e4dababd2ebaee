"""
API 라우터 설정 파일입니다.
각 기능별로 나누어진 API 주소들을 하나로 모으는 역할을 합니다.
"""

from fastapi import APIRouter

from brd_generator.api.endpoints import brd, health

# 메인 API 라우터 생성
api_router = APIRouter()

# 헬스 체크 엔드포인트: 서버 및 LLM 공급자 상태 확인용 (/health)
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"]
)

# BRD 엔드포인트: 생성, 상태 조회, 내보내기, 요구사항 개선 (/brd)
api_router.include_router(
    brd.router,
    prefix="/brd",
    tags=["brd"]
)
