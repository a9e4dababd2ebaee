"""Base generator class for secondary generators.

이 모듈은 요구사항 개선 제안(Layer 5)과 구현 활동/테스트 케이스 생성기(Layer 6)가
공통으로 사용하는 기본 기능을 제공합니다.

주 생성 흐름과 달리 복구/폴백이 없습니다.
공급자, 추출, 파싱, 스키마 검증 중 어느 단계든 실패하면
생성기별 예외(_error_cls)로 감싸서 호출자에게 전달합니다.
"""

import logging
from abc import ABC
from datetime import datetime
from typing import Optional, TypeVar

from pydantic import BaseModel, ValidationError

from brd_generator.exceptions import BRDGeneratorError, GenerationError
from brd_generator.layers.layer1_prompting import BrdPrompt
from brd_generator.services.llm_client import LLMClient

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = logging.getLogger(__name__)


class BaseGenerator(ABC):
    """
    보조 문서 생성기 추상 베이스 클래스.

    Attributes:
        llm: 제한 시간/재시도가 적용된 LLM 클라이언트
        _generator_name: 로깅에 사용되는 생성기 이름
        _error_cls: 실패 시 발생시킬 예외 클래스
    """

    # 서브클래스에서 오버라이드해야 하는 클래스 속성
    _generator_name: str = "BaseGenerator"
    _error_cls: type[BRDGeneratorError] = GenerationError

    def __init__(self, llm: LLMClient):
        self.llm = llm

    def _log_prefix(self, section_name: str = "") -> str:
        if section_name:
            return f"[{self._generator_name}:{section_name}]"
        return f"[{self._generator_name}]"

    async def _call_llm_json(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: Optional[float] = None,
        section_name: str = "",
    ) -> dict:
        """
        JSON 응답을 요청하고 파싱하여 반환합니다.

        Args:
            system_prompt: 시스템 프롬프트
            user_prompt: 사용자 프롬프트
            temperature: 샘플링 온도 (None이면 설정값)
            section_name: 로깅용 섹션 이름

        Returns:
            파싱된 JSON 딕셔너리

        Raises:
            _error_cls: 호출/추출/파싱 실패
        """
        log_prefix = self._log_prefix(section_name)

        try:
            start = datetime.now()
            result = await self.llm.complete_json(
                BrdPrompt(system_prompt, user_prompt),
                temperature=temperature,
                log_prefix=log_prefix,
            )
            elapsed = (datetime.now() - start).total_seconds()
            logger.debug(f"{log_prefix} JSON 호출 완료: {elapsed:.1f}초")
            return result

        except BRDGeneratorError as e:
            logger.warning(f"{log_prefix} JSON 호출 실패: [{e.error_code}] {e.message}")
            raise self._error_cls(
                f"{self._generator_name} 실패: {e.message}",
                details={"cause": e.error_code},
            ) from e

    def _validate(self, model_cls: type[ModelT], data: dict, section_name: str = "") -> ModelT:
        """응답 딕셔너리를 모델로 검증합니다. 실패하면 _error_cls."""
        try:
            return model_cls.model_validate(data)
        except ValidationError as e:
            logger.warning(f"{self._log_prefix(section_name)} 응답 형식 오류: {e.error_count()}건")
            raise self._error_cls(
                f"{self._generator_name} 응답 형식이 올바르지 않습니다",
                details=e.errors(include_url=False, include_context=False, include_input=False),
            ) from e
