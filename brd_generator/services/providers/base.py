"""
LLM 공급자 어댑터 추상 베이스 클래스입니다.

모든 공급자는 "프롬프트 문자열 → 응답 텍스트" 하나의 연산만 제공합니다.
HTTP 전송, 상태 코드 확인, JSON 본문 파싱은 이 클래스가 공통으로 처리하고,
서브클래스는 요청 구성(_build_request)과 응답 텍스트 추출(_extract_text)만 구현합니다.

오류 매핑:
- 자격 증명/엔드포인트 누락 → ConfigurationError (네트워크 호출 전)
- 2xx 이외 응답 → ProviderError(status_code=...)
- 네트워크 오류, JSON 아닌 본문, 빈 텍스트 → ProviderError
재시도는 하지 않습니다 (LLMClient 담당).
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from brd_generator.config import Settings
from brd_generator.exceptions import ProviderError

logger = logging.getLogger(__name__)


class ModelProvider(ABC):
    """
    LLM 공급자 어댑터.

    Attributes:
        name: 공급자 식별자 (LLM_PROVIDER 값과 동일)
        settings: 호출 시점에 읽는 설정
    """

    name: str = "base"

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            settings: 애플리케이션 설정
            transport: httpx 전송 계층 (테스트에서 MockTransport 주입)
        """
        self.settings = settings
        self._transport = transport

    @property
    def log_prefix(self) -> str:
        return f"[Provider:{self.name}]"

    @property
    @abstractmethod
    def endpoint(self) -> str:
        """요청을 보낼 URL."""

    @property
    @abstractmethod
    def model(self) -> str:
        """요청 본문에 넣을 모델 이름."""

    @property
    def has_credentials(self) -> bool:
        return True

    @abstractmethod
    def _build_request(self, full_prompt: str, temperature: float) -> tuple[dict, dict]:
        """(headers, body) 구성. 자격 증명이 없으면 ConfigurationError."""

    @abstractmethod
    def _extract_text(self, data: Any) -> Optional[str]:
        """응답 JSON에서 생성 텍스트를 꺼냅니다. 없으면 None."""

    async def call_model(self, full_prompt: str, temperature: float) -> str:
        """
        프롬프트를 보내고 생성된 텍스트를 반환합니다.

        Args:
            full_prompt: 시스템 + 사용자 프롬프트를 합친 문자열
            temperature: 샘플링 온도

        Returns:
            모델이 생성한 원시 텍스트

        Raises:
            ConfigurationError: 자격 증명 누락
            ProviderError: 전송/응답 오류
        """
        headers, body = self._build_request(full_prompt, temperature)
        url = self.endpoint

        logger.info(f"{self.log_prefix} 요청: model={self.model}, 프롬프트 {len(full_prompt)} chars")

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.llm_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(url, headers=headers, json=body)
        except httpx.HTTPError as e:
            logger.error(f"{self.log_prefix} 전송 오류: {type(e).__name__}: {e}")
            raise ProviderError(
                f"{self.name} 공급자 호출 실패: {e}",
                details={"endpoint": url},
            ) from e

        if not response.is_success:
            logger.error(f"{self.log_prefix} HTTP {response.status_code}: {response.text[:200]}")
            raise ProviderError(
                f"{self.name} 공급자 응답 오류: HTTP {response.status_code}",
                status_code=response.status_code,
                details={"endpoint": url, "body": response.text[:500]},
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(
                f"{self.name} 공급자 응답이 JSON이 아닙니다",
                status_code=response.status_code,
            ) from e

        text = self._extract_text(data)
        if not text or not text.strip():
            logger.error(f"{self.log_prefix} 빈 응답")
            raise ProviderError(
                f"{self.name} 공급자가 빈 응답을 반환했습니다",
                status_code=response.status_code,
            )

        logger.info(f"{self.log_prefix} 응답 길이: {len(text)} chars")
        return text

    def describe(self) -> dict:
        """상태 엔드포인트용 공급자 정보 (네트워크 호출 없음, 비밀값 미포함)."""
        return {
            "provider": self.name,
            "endpoint": self.endpoint,
            "model": self.model,
            "configured": self.has_credentials,
        }
