"""
헬스 체크(Health Check) 엔드포인트입니다.
서버 상태와 현재 LLM 공급자 설정을 확인하는 용도입니다.
"""

from fastapi import APIRouter

from brd_generator.config import get_settings
from brd_generator.exceptions import ConfigurationError
from brd_generator.services import create_provider

router = APIRouter()


@router.get("")
async def health_check():
    """
    기본 상태 확인 함수.
    서버가 켜져 있으면 {"status": "healthy"}를 반환합니다.
    """
    return {"status": "healthy"}


@router.get("/llm")
async def llm_status():
    """
    LLM 공급자 상태 확인 함수.
    공급자 이름, 엔드포인트, 모델, 자격 증명 설정 여부를 보여줍니다 (네트워크 호출 없음).
    """
    settings = get_settings()
    try:
        provider = create_provider(settings)
    except ConfigurationError as e:
        return {
            "status": "misconfigured",
            "provider": settings.llm_provider,
            "message": e.message,
        }

    info = provider.describe()
    return {
        "status": "ready" if info["configured"] else "missing_credentials",
        "generationMode": settings.generation_mode,
        **info,
    }
