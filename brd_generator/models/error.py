"""에러 응답 모델."""

from datetime import datetime
from typing import Optional, Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """구조화된 API 에러 응답 모델. BRDGeneratorError 계열 예외를 그대로 옮겨 담습니다."""

    error_code: str = Field(description="에러 코드 (예: ERR_PROVIDER_001)")
    message: str = Field(description="에러 메시지")
    details: Optional[Any] = Field(default=None, description="추가 에러 상세 정보")
    timestamp: datetime = Field(default_factory=datetime.now, description="에러 발생 시각")

    @classmethod
    def from_exception(cls, exc) -> "ErrorResponse":
        return cls(error_code=exc.error_code, message=exc.message, details=exc.details)
