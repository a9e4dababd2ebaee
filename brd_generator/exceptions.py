"""
BRD 생성 시스템 커스텀 예외 계층입니다.
각 레이어/서비스별 구조화된 에러 코드와 메시지를 제공합니다.
"""

from typing import Optional, Any


class BRDGeneratorError(Exception):
    """BRD 생성 시스템 기본 예외 클래스."""

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Any] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)


class ConfigurationError(BRDGeneratorError):
    """자격 증명/엔드포인트 누락. 재시도하지 않습니다."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_CONFIG_001", details=details)


class ProviderError(BRDGeneratorError):
    """LLM 공급자 호출 실패 (2xx 이외 응답, 빈 응답, 네트워크 오류)."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        super().__init__(message, error_code="ERR_PROVIDER_001", details=details)


class ExtractionError(BRDGeneratorError):
    """모델 응답에서 JSON 객체를 찾지 못함."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_EXTRACT_001", details=details)


class ResponseParseError(BRDGeneratorError):
    """추출한 JSON 문자열의 파싱 실패."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_PARSE_001", details=details)


class RepairError(BRDGeneratorError):
    """잘린 JSON에서 안전한 절단 지점을 찾지 못함."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_REPAIR_001", details=details)


class DocumentValidationError(BRDGeneratorError):
    """파싱은 되었지만 필수 필드가 없거나 형식이 잘못됨."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_VALID_001", details=details)


class GenerationError(BRDGeneratorError):
    """보조 생성 흐름(구현 활동, 테스트 케이스) 실패."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_GEN_001", details=details)


class EnhancementError(BRDGeneratorError):
    """요구사항 개선 제안 생성 실패."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_ENHANCE_001", details=details)


class RequirementNotFoundError(BRDGeneratorError):
    """BRD에 해당 ID의 기능 요구사항이 없음."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_NOTFOUND_001", details=details)


class StorageError(BRDGeneratorError):
    """레코드 저장소 관련 에러."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_STORE_001", details=details)


class InputValidationError(BRDGeneratorError):
    """입력 유효성 검증 에러 (400 응답)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_INPUT_001", details=details)
