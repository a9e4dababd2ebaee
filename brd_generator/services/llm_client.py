"""LLM client service for BRD generation.

공급자 어댑터를 감싸 호출 1회마다 제한 시간과 재시도를 적용합니다.

주요 기능:
- complete(): 원시 텍스트 응답 요청
- complete_json(): JSON 객체 응답 요청 (추출 + 파싱, 복구 없음)

재시도 전략:
- ProviderError만 재시도 (최대 LLM_MAX_RETRIES회)
- ConfigurationError는 즉시 전파 (재시도해도 결과가 같음)
- 지수 백오프: wait_time = LLM_RETRY_DELAY * (2 ** attempt)
- 제한 시간 초과(asyncio.TimeoutError)는 ProviderError로 변환
"""

import asyncio
import logging
from datetime import datetime
from typing import Optional

from brd_generator.config import Settings
from brd_generator.exceptions import ProviderError
from brd_generator.layers.layer1_prompting import BrdPrompt
from brd_generator.layers.layer2_extraction import extract_and_parse

from .providers import ModelProvider

logger = logging.getLogger(__name__)


class LLMClient:
    """
    공급자 호출 래퍼.

    Attributes:
        provider: 실제 HTTP 호출을 담당하는 공급자 어댑터
        _max_retries: ProviderError 재시도 횟수
        _retry_delay: 초기 재시도 대기 시간(초)
        _timeout: 호출 1회 제한 시간(초)
    """

    def __init__(self, provider: ModelProvider, settings: Settings):
        self.provider = provider
        self.settings = settings
        self._max_retries = max(0, settings.llm_max_retries)
        self._retry_delay = settings.llm_retry_delay
        self._timeout = settings.llm_timeout_seconds

    async def complete(
        self,
        prompt: BrdPrompt,
        temperature: Optional[float] = None,
        log_prefix: str = "[LLM]",
    ) -> str:
        """
        프롬프트를 보내고 원시 응답 텍스트를 반환합니다.

        Args:
            prompt: 시스템/사용자 프롬프트
            temperature: 샘플링 온도 (None이면 LLM_TEMPERATURE)
            log_prefix: 로그 태그

        Returns:
            모델 응답 텍스트

        Raises:
            ConfigurationError: 자격 증명 누락 (재시도 없음)
            ProviderError: 모든 시도 실패
        """
        if temperature is None:
            temperature = self.settings.llm_temperature

        attempts = self._max_retries + 1
        last_error: Optional[ProviderError] = None

        for attempt in range(attempts):
            try:
                logger.info(f"{log_prefix} 시도 {attempt + 1}/{attempts}")
                start = datetime.now()
                text = await asyncio.wait_for(
                    self.provider.call_model(prompt.full_prompt, temperature),
                    timeout=self._timeout,
                )
                elapsed = (datetime.now() - start).total_seconds()
                logger.info(f"{log_prefix} 시도 {attempt + 1} 성공: {elapsed:.1f}초")
                return text

            except asyncio.TimeoutError:
                last_error = ProviderError(
                    f"LLM 호출 제한 시간 초과 ({self._timeout:.0f}초)",
                    details={"provider": self.provider.name},
                )
                logger.error(f"{log_prefix} 시도 {attempt + 1} 타임아웃")

            except ProviderError as e:
                last_error = e
                logger.error(f"{log_prefix} 시도 {attempt + 1} 실패: {e.message}")

            # 마지막 시도가 아니면 지수 백오프 대기
            if attempt < attempts - 1:
                wait_time = self._retry_delay * (2 ** attempt)
                logger.info(f"{log_prefix} {wait_time}초 후 재시도...")
                await asyncio.sleep(wait_time)

        logger.error(f"{log_prefix} 모든 시도 실패: {last_error}")
        raise last_error

    async def complete_json(
        self,
        prompt: BrdPrompt,
        temperature: Optional[float] = None,
        log_prefix: str = "[LLM]",
    ) -> dict:
        """
        JSON 객체 응답을 요청하고 파싱된 딕셔너리를 반환합니다.
        복구/폴백은 하지 않으므로 보조 생성 흐름에서만 사용합니다.

        Raises:
            ConfigurationError, ProviderError, ExtractionError, ResponseParseError
        """
        raw = await self.complete(prompt, temperature=temperature, log_prefix=log_prefix)
        return extract_and_parse(raw)
